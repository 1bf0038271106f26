"""Back-translation quality scoring for translated resource sets."""

from typing import Callable, List, Optional

from ..errors import ServiceError
from ..logger import get_logger
from ..models.resource_set import ResourceSet
from ..models.translation_result import QualityFailure, QualityReport, QualityResult
from ..translation.clients.base import TranslationService

logger = get_logger(__name__)

# (minimum similarity, rating), checked top to bottom
RATING_THRESHOLDS = [
    (0.90, 5),
    (0.75, 4),
    (0.50, 3),
    (0.25, 2),
]


def levenshtein_distance(s1: str, s2: str) -> int:
    """Minimum number of single-character inserts, deletes and substitutions."""
    if len(s1) < len(s2):
        return levenshtein_distance(s2, s1)

    if len(s2) == 0:
        return len(s1)

    previous_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def similarity(s1: str, s2: str) -> float:
    """Edit-distance similarity in [0, 1]; two empty strings are identical."""
    max_len = max(len(s1), len(s2))
    if max_len == 0:
        return 1.0
    return 1.0 - levenshtein_distance(s1, s2) / max_len


def similarity_to_rating(score: float) -> int:
    """Map a similarity to a 1-5 rating."""
    for minimum, rating in RATING_THRESHOLDS:
        if score >= minimum:
            return rating
    return 1


class QualityScorer:
    """
    Rates existing translations by round-trip translation.

    Each translated value is translated back into the source language and
    compared with the original source value. Values are sent as opaque
    strings, markup included.
    """

    def __init__(self, service: TranslationService, skip_errors: bool = True):
        """
        Initialize the quality scorer.

        Args:
            service: Translation backend used for back-translation
            skip_errors: Record failed keys and continue instead of raising
        """
        self.service = service
        self.skip_errors = skip_errors

    def score(
        self,
        source: ResourceSet,
        target: ResourceSet,
        source_language: str,
        target_language: str,
        progress_callback: Optional[Callable[[int, int, str], None]] = None,
    ) -> QualityReport:
        """
        Score every key translated in target.

        Args:
            source: Resource set in the reference language
            target: Translated resource set
            source_language: Language of source
            target_language: Language of target
            progress_callback: Optional callback(current, total, key)

        Returns:
            QualityReport with one result per scored key, in source order

        Raises:
            ServiceError: Only when skip_errors is False
        """
        keys = self._keys_to_score(source, target)
        report = QualityReport()

        for current, key in enumerate(keys, start=1):
            try:
                result = self.score_entry(
                    key,
                    source.get(key).value,
                    target.get(key).value,
                    source_language,
                    target_language,
                )
            except ServiceError as e:
                if not self.skip_errors:
                    e.key = key
                    raise
                logger.warning("Back-translation of '%s' failed, skipping: %s", key, e)
                report.failures.append(QualityFailure(key=key, error=str(e)))
            else:
                report.results.append(result)

            if progress_callback:
                progress_callback(current, len(keys), key)

        logger.info(
            "Scored %d entries (%d failed), average rating %.2f",
            len(report.results), len(report.failures), report.average_rating,
        )
        return report

    def score_entry(
        self,
        key: str,
        original: str,
        translated: str,
        source_language: str,
        target_language: str,
    ) -> QualityResult:
        """Back-translate one value and rate it against the original."""
        back_translation = self.service.translate_text(
            translated, target_language=source_language, source_language=target_language
        )
        score = similarity(original, back_translation)
        return QualityResult(
            key=key,
            rating=similarity_to_rating(score),
            similarity=score,
            source_text=original,
            back_translation=back_translation,
        )

    def _keys_to_score(self, source: ResourceSet, target: ResourceSet) -> List[str]:
        keys = []
        for entry in source:
            target_entry = target.get(entry.key)
            if target_entry is None or not target_entry.value.strip():
                continue
            keys.append(entry.key)
        return keys
