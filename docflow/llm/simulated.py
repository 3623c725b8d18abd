"""Simulated client used when no real provider is configured."""

from docflow.models.llm_settings import LLMSettings


class SimulatedClient:
    """Echoes the prompt back inside a canned response."""

    async def call_llm(self, prompt: str, settings: LLMSettings) -> str:
        return (
            "[SIMULATED LLM RESPONSE]\n"
            "I've analyzed your request and here is my response:\n"
            "\n"
            "The prompt you provided was:\n"
            "---\n"
            f"{prompt}\n"
            "---\n"
            "\n"
            "This is a simulated response because no actual LLM provider was "
            "configured or available.\n"
            "If you want real responses, please configure a provider like "
            "'ollama' or 'azureOpenAI'.\n"
        )
