"""Provider configuration for generative-text calls.

Stored on a project so every flow run in that project uses the same backend.
"""

from pydantic import BaseModel, Field


class LLMSettings(BaseModel):
    """
    provider configuration data model
    """

    model_config = {"extra": "forbid", "protected_namespaces": ()}

    provider: str = "dummy"  # "ollama", "azureOpenAI", anything else is simulated
    model: str | None = None  # "llama2", "gpt-4", etc.
    temperature: float | None = Field(default=None, ge=0.0, le=1.0)
    max_tokens: int | None = Field(default=None, gt=0)

    # cloud providers only
    api_key: str | None = None
    api_endpoint: str | None = None  # custom endpoint URL


# used when a project carries no settings of its own
DEFAULT_LLM_SETTINGS = LLMSettings(
    provider="dummy",
    model="default",
    temperature=0.7,
    max_tokens=1000,
)
