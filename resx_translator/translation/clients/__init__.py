"""Translation API clients."""

from ...config import Config
from .base import AUTO_DETECT, TranslationService
from .deepl_client import DeepLClient
from .openai_client import OpenAIClient


def create_service(config: Config) -> TranslationService:
    """Build the translation backend selected by the configuration."""
    if config.provider == "deepl":
        return DeepLClient(api_key=config.deepl_api_key)
    if config.provider == "openai":
        return OpenAIClient(
            api_key=config.openai_api_key,
            model=config.openai_model,
            temperature=config.openai_temperature,
        )
    raise ValueError(f"Unknown translation provider: {config.provider}")


__all__ = ["AUTO_DETECT", "DeepLClient", "OpenAIClient", "TranslationService", "create_service"]
