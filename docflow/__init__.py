"""docflow - flow state machines with LLM-backed agents over a document store."""

from docflow.models.documents import (
    AgentDocument,
    DiagramDocument,
    DocRef,
    Document,
    FlowDocument,
    ProjectDocument,
    parse_document,
)
from docflow.models.llm_settings import DEFAULT_LLM_SETTINGS, LLMSettings
from docflow.llm import get_llm_client
from docflow.runner import FlowRunner, FlowRunnerError, StateRunResult
from docflow.sdk.session import FlowRunnerSession
from docflow.store import InMemoryDocumentStore

__all__ = [
    # Documents
    "AgentDocument",
    "DiagramDocument",
    "DocRef",
    "Document",
    "FlowDocument",
    "ProjectDocument",
    "parse_document",
    # Provider configuration
    "DEFAULT_LLM_SETTINGS",
    "LLMSettings",
    "get_llm_client",
    # Execution
    "FlowRunner",
    "FlowRunnerError",
    "StateRunResult",
    "FlowRunnerSession",
    # Storage
    "InMemoryDocumentStore",
]
