"""Abstract interface of a remote translation backend."""

from abc import ABC, abstractmethod

AUTO_DETECT = "auto"


class TranslationService(ABC):
    """
    A translation backend.

    Implementations translate one string per call and raise ServiceError
    for any failure of the remote service.
    """

    @abstractmethod
    def translate_text(
        self,
        text: str,
        target_language: str,
        source_language: str = AUTO_DETECT,
    ) -> str:
        """
        Translate a single text.

        Args:
            text: Text to translate
            target_language: Target language code (e.g. "de", "fr-FR")
            source_language: Source language code, or "auto" to let the service detect it

        Returns:
            Translated text

        Raises:
            ServiceError: If the service call fails
        """
