"""Generative-text clients and provider selection."""

import logging

from docflow.llm.azure_openai import AzureOpenAIClient
from docflow.llm.base import (
    HttpLLMClient,
    LLMClient,
    LLMConfigurationError,
    LLMRequestError,
)
from docflow.llm.ollama import OllamaClient
from docflow.llm.simulated import SimulatedClient

logger = logging.getLogger(__name__)

OLLAMA = "ollama"
AZURE_OPENAI = "azureOpenAI"


def get_llm_client(provider: str | None) -> LLMClient:
    """Map a provider identifier to a client.

    Supports:
    - "ollama": local Ollama instance
    - "azureOpenAI": Azure OpenAI deployment
    Anything else (including "dummy" and empty values) gets the simulated client.
    """
    if provider == OLLAMA:
        return OllamaClient()
    if provider == AZURE_OPENAI:
        return AzureOpenAIClient()
    logger.warning('No LLM provider found for "%s". Using simulated client.', provider)
    return SimulatedClient()


__all__ = [
    "AZURE_OPENAI",
    "OLLAMA",
    "AzureOpenAIClient",
    "HttpLLMClient",
    "LLMClient",
    "LLMConfigurationError",
    "LLMRequestError",
    "OllamaClient",
    "SimulatedClient",
    "get_llm_client",
]
