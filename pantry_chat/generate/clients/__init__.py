# Model client selection.
# Backends are imported lazily so only the chosen SDK is loaded.

import logging

from .echo_dev_client import EchoDevClient

logger = logging.getLogger(__name__)


def build_model_client(settings):
    """Pick a backend: MODEL_PROVIDER if set, else by which API key is configured."""
    provider = (settings.MODEL_PROVIDER or "").lower()
    if not provider:
        if settings.GEMINI_API_KEY:
            provider = "gemini"
        elif settings.OPENAI_API_KEY:
            provider = "openai"
        else:
            provider = "echo"

    if provider == "gemini":
        from .gemini_client import GeminiClient
        client = GeminiClient(api_key=settings.GEMINI_API_KEY, model=settings.GEMINI_MODEL)
    elif provider == "openai":
        from .openai_client import OpenAIClient
        client = OpenAIClient(api_key=settings.OPENAI_API_KEY, model=settings.OPENAI_MODEL)
    elif provider == "ollama":
        from .ollama_client import OllamaClient
        client = OllamaClient(model=settings.OLLAMA_MODEL, host=settings.OLLAMA_HOST)
    elif provider == "echo":
        client = EchoDevClient()
    else:
        raise ValueError(f"Unknown MODEL_PROVIDER: {settings.MODEL_PROVIDER}")

    logger.info("Model client: engine=%s model=%s", provider, client.model)
    return client


__all__ = ["EchoDevClient", "build_model_client"]
