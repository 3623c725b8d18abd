"""Core data models for docflow."""

from docflow.models.diagram import (
    DiagramContent,
    DiagramEdge,
    DiagramNode,
    WBANodeType,
)
from docflow.models.documents import (
    AgentContent,
    AgentDocument,
    BaseDocument,
    DiagramDocument,
    DocRef,
    DocType,
    Document,
    FlowDocument,
    ProjectContent,
    ProjectDocument,
    parse_document,
)
from docflow.models.flow import (
    FlowContent,
    FlowState,
    FlowStateType,
    FlowTransition,
)
from docflow.models.llm_settings import DEFAULT_LLM_SETTINGS, LLMSettings
from docflow.models.trace_entry import TraceEntry, TraceLevel

__all__ = [
    # Documents
    "AgentContent",
    "AgentDocument",
    "BaseDocument",
    "DiagramDocument",
    "DocRef",
    "DocType",
    "Document",
    "FlowDocument",
    "ProjectContent",
    "ProjectDocument",
    "parse_document",
    # Flow graph
    "FlowContent",
    "FlowState",
    "FlowStateType",
    "FlowTransition",
    # Diagrams
    "DiagramContent",
    "DiagramEdge",
    "DiagramNode",
    "WBANodeType",
    # Provider configuration
    "DEFAULT_LLM_SETTINGS",
    "LLMSettings",
    # Trace entries
    "TraceEntry",
    "TraceLevel",
]
