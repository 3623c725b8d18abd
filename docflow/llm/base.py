"""Client interface for generative-text backends.

Clients never raise from call_llm: every failure comes back as a readable
string so the caller can show it inline.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from docflow.models.llm_settings import LLMSettings

logger = logging.getLogger(__name__)


class LLMConfigurationError(Exception):
    """Raised when provider settings are missing a required field."""
    pass


class LLMRequestError(Exception):
    """Raised when a backend cannot be reached or answers with an error."""
    pass


class LLMClient(Protocol):
    """Protocol for generative-text clients."""

    async def call_llm(self, prompt: str, settings: LLMSettings) -> str:
        """Return generated text, or an error description."""
        ...


class HttpLLMClient:
    """Shared JSON-over-HTTP plumbing for network backed clients."""

    provider_label = "LLM"

    def __init__(
        self,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            timeout: HTTP timeout in seconds, None waits indefinitely
            transport: Optional transport override (used by tests)
        """
        self.timeout = timeout
        self._transport = transport

    async def _post_json(
        self,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
    ) -> Any:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    url, json=payload, headers=headers, params=params
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise LLMRequestError(str(e) or e.__class__.__name__) from e

        if response.is_error:
            raise LLMRequestError(
                f"{self.provider_label} request failed: "
                f"{response.status_code} {response.reason_phrase}"
            )

        try:
            return response.json()
        except ValueError as e:
            raise LLMRequestError(
                f"{self.provider_label} returned a non-JSON response"
            ) from e

    def _error_text(self, error: Exception) -> str:
        logger.warning("%s LLM call failed: %s", self.provider_label, error)
        return f"Error calling {self.provider_label}: {error}"
