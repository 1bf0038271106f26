"""DeepL API client for translation."""

import deepl
from typing import Optional

from ...errors import ServiceError
from ...logger import get_logger
from .base import AUTO_DETECT, TranslationService

logger = get_logger(__name__)


class DeepLClient(TranslationService):
    """Client for DeepL translation API."""

    # Culture codes whose DeepL target code is not just the upper-cased language
    TARGET_LANGUAGE_MAP = {
        "en": "EN-US",
        "en-us": "EN-US",
        "en-gb": "EN-GB",
        "pt": "PT-PT",
        "pt-pt": "PT-PT",
        "pt-br": "PT-BR",
        "zh": "ZH-HANS",
        "zh-cn": "ZH-HANS",
        "zh-chs": "ZH-HANS",
        "zh-hans": "ZH-HANS",
        "zh-tw": "ZH-HANT",
        "zh-cht": "ZH-HANT",
        "zh-hant": "ZH-HANT",
    }

    def __init__(self, api_key: str, translator: Optional[deepl.Translator] = None):
        """
        Initialize the DeepL client.

        Args:
            api_key: DeepL API key
            translator: Preconfigured deepl.Translator (built from api_key if omitted)
        """
        if not api_key and translator is None:
            raise ValueError("DeepL API key is required")
        self.translator = translator or deepl.Translator(api_key)

    @classmethod
    def target_code(cls, language: str) -> str:
        """Map a culture code like "de-DE" to a DeepL target language code."""
        lang = language.lower()
        if lang in cls.TARGET_LANGUAGE_MAP:
            return cls.TARGET_LANGUAGE_MAP[lang]
        return lang.split("-")[0].upper()

    @staticmethod
    def source_code(language: str) -> str:
        """DeepL source languages never carry a region."""
        return language.split("-")[0].upper()

    def translate_text(
        self,
        text: str,
        target_language: str,
        source_language: str = AUTO_DETECT,
    ) -> str:
        kwargs = {
            "target_lang": self.target_code(target_language),
            "preserve_formatting": True,
        }

        if source_language and source_language != AUTO_DETECT:
            kwargs["source_lang"] = self.source_code(source_language)

        try:
            result = self.translator.translate_text(text, **kwargs)
        except deepl.DeepLException as e:
            raise self._to_service_error(e) from e

        return result.text

    def get_usage(self) -> dict:
        """Get current API usage statistics."""
        try:
            usage = self.translator.get_usage()
        except deepl.DeepLException as e:
            raise self._to_service_error(e) from e
        return {
            "character_count": usage.character.count if usage.character else 0,
            "character_limit": usage.character.limit if usage.character else 0,
        }

    def _to_service_error(self, error: deepl.DeepLException) -> ServiceError:
        if isinstance(error, deepl.AuthorizationException):
            code, retryable = "authorization", False
        elif isinstance(error, deepl.QuotaExceededException):
            code, retryable = "quota_exceeded", False
        elif isinstance(error, deepl.TooManyRequestsException):
            code, retryable = "rate_limited", True
        elif isinstance(error, deepl.ConnectionException):
            code, retryable = "connection", True
        else:
            code, retryable = "service", False

        logger.debug("DeepL call failed (%s): %s", code, error)
        return ServiceError(
            str(error),
            code=code,
            details={"provider": "deepl", "exception": type(error).__name__},
            retryable=retryable,
        )
