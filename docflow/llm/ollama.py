"""Ollama client (local LLM).

Uses:
  POST {endpoint}/api/generate
"""

from docflow.llm.base import HttpLLMClient, LLMRequestError
from docflow.models.llm_settings import LLMSettings

DEFAULT_OLLAMA_ENDPOINT = "http://localhost:11434"
DEFAULT_OLLAMA_MODEL = "llama2"


class OllamaClient(HttpLLMClient):
    """Calls a local Ollama instance with streaming disabled."""

    provider_label = "Ollama"

    async def call_llm(self, prompt: str, settings: LLMSettings) -> str:
        endpoint = (settings.api_endpoint or DEFAULT_OLLAMA_ENDPOINT).rstrip("/")
        payload = {
            "model": settings.model or DEFAULT_OLLAMA_MODEL,
            "prompt": prompt,
            "temperature": settings.temperature if settings.temperature is not None else 0.7,
            "stream": False,
        }

        try:
            data = await self._post_json(f"{endpoint}/api/generate", payload)
        except LLMRequestError as e:
            return self._error_text(e)

        if isinstance(data, dict) and data.get("response"):
            return str(data["response"])
        return "No response from Ollama"
