"""Azure OpenAI client using the deployment completions endpoint."""

from docflow.llm.base import HttpLLMClient, LLMConfigurationError, LLMRequestError
from docflow.models.llm_settings import LLMSettings

AZURE_API_VERSION = "2023-05-15"
DEFAULT_AZURE_DEPLOYMENT = "gpt-4"


def _check_settings(settings: LLMSettings) -> None:
    if not settings.api_key:
        raise LLMConfigurationError("Azure OpenAI API key is required")
    if not settings.api_endpoint:
        raise LLMConfigurationError("Azure OpenAI endpoint is required")


class AzureOpenAIClient(HttpLLMClient):
    """Calls an Azure OpenAI deployment; the model name is the deployment."""

    provider_label = "Azure OpenAI"

    async def call_llm(self, prompt: str, settings: LLMSettings) -> str:
        # fail fast, before any network traffic
        try:
            _check_settings(settings)
        except LLMConfigurationError as e:
            return self._error_text(e)

        deployment = settings.model or DEFAULT_AZURE_DEPLOYMENT
        url = f"{settings.api_endpoint.rstrip('/')}/openai/deployments/{deployment}/completions"
        # the model is the deployment in the URL, so it is not repeated in the body
        payload = {
            "prompt": prompt,
            "temperature": settings.temperature if settings.temperature is not None else 0.7,
            "max_tokens": settings.max_tokens or 1000,
        }
        headers = {"api-key": settings.api_key}

        try:
            data = await self._post_json(
                url, payload, headers=headers, params={"api-version": AZURE_API_VERSION}
            )
        except LLMRequestError as e:
            return self._error_text(e)

        try:
            text = data["choices"][0]["text"]
        except (KeyError, IndexError, TypeError):
            text = None
        return text or "No response from Azure OpenAI"
