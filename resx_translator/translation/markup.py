"""Translation of text that may contain inline HTML markup."""

import re
from typing import List, Tuple

from ..logger import get_logger
from .clients.base import AUTO_DETECT, TranslationService

logger = get_logger(__name__)

# Start, end or self-closing tag; attribute values may use either quote
TAG_PATTERN = (
    r"</?[A-Za-z][^\s/>]*"
    r"(?:\s+[^\s=/>]+(?:\s*=\s*(?:\"[^\"]*\"|'[^']*'|[^\s\"'>]+))?)*"
    r"\s*/?>"
)

# Everything that is not prose. Script and style elements are matched whole.
MARKUP_PATTERN = re.compile(
    r"<(script|style)\b[^>]*>.*?</\1\s*>"
    r"|<!--.*?-->"
    r"|<!\[CDATA\[.*?\]\]>"
    r"|<[!?][^>]*>"
    r"|" + TAG_PATTERN,
    re.IGNORECASE | re.DOTALL,
)


class MarkupTranslator:
    """
    Translates the human-readable text of a marked-up string.

    The string is split into markup and text runs. Tags, attribute values,
    comments, declarations and script/style content are copied through
    byte for byte; every text run is sent to the translation service on
    its own, entities included as written, and spliced back in place.
    A failing run aborts the whole string.
    """

    def __init__(self, service: TranslationService):
        self.service = service

    def translate(
        self,
        markup_text: str,
        target_language: str,
        source_language: str = AUTO_DETECT,
    ) -> str:
        """
        Translate a marked-up string.

        Args:
            markup_text: Plain text or text with inline HTML tags
            target_language: Target language code
            source_language: Source language code or "auto"

        Returns:
            The same markup with translated text runs

        Raises:
            ServiceError: If any run fails to translate
        """
        if not markup_text or not markup_text.strip():
            return markup_text

        segments = self._segments(markup_text)
        runs = [i for i, (chunk, is_text) in enumerate(segments) if is_text and chunk.strip()]
        logger.debug("Translating %d text runs", len(runs))

        # Translate everything before assembling the result
        translated = {
            i: self._translate_run(segments[i][0], target_language, source_language)
            for i in runs
        }

        return "".join(translated.get(i, chunk) for i, (chunk, _) in enumerate(segments))

    def _segments(self, text: str) -> List[Tuple[str, bool]]:
        """Split text into (chunk, is_text) pairs covering it exactly."""
        segments = []
        pos = 0
        for match in MARKUP_PATTERN.finditer(text):
            if match.start() > pos:
                segments.append((text[pos:match.start()], True))
            segments.append((match.group(0), False))
            pos = match.end()
        if pos < len(text):
            segments.append((text[pos:], True))
        return segments

    def _translate_run(self, text: str, target_language: str, source_language: str) -> str:
        """Translate one run, keeping its surrounding whitespace."""
        core = text.strip()
        if not core:
            return text
        leading = text[: len(text) - len(text.lstrip())]
        trailing = text[len(text.rstrip()):]
        result = self.service.translate_text(core, target_language, source_language)
        return f"{leading}{result}{trailing}"
