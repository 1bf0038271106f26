"""Whole-bundle and missing-entry translation of resource sets."""

from dataclasses import replace
from typing import Callable, Optional, Tuple

from ..errors import EmptySourceError, ServiceError
from ..logger import get_logger
from ..models.resource_set import ResourceEntry, ResourceSet
from ..models.translation_result import TranslationStats
from ..validation.placeholder_validator import PlaceholderValidator
from .clients.base import AUTO_DETECT, TranslationService
from .markup import MarkupTranslator

logger = get_logger(__name__)

ProgressCallback = Callable[[int, int, str], None]


class ResxTranslator:
    """
    Translates resource sets entry by entry through a MarkupTranslator.

    Two modes:
    1. translate_all: every entry of the source, all-or-nothing
    2. reconcile_missing: only keys the target lacks, appended to a copy of the target

    Entries are processed one at a time in source order.
    """

    def __init__(self, service: TranslationService):
        """
        Initialize the translator.

        Args:
            service: Translation backend used for every text run
        """
        self.markup = MarkupTranslator(service)
        self.placeholder_validator = PlaceholderValidator()

    def translate_all(
        self,
        source: ResourceSet,
        target_language: str,
        source_language: str = AUTO_DETECT,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> Tuple[ResourceSet, TranslationStats]:
        """
        Translate every entry of a resource set.

        Args:
            source: Resource set in the reference language
            target_language: Target language code
            source_language: Source language code or "auto"
            progress_callback: Optional callback(current, total, key) after each entry

        Returns:
            Tuple of (translated resource set, statistics)

        Raises:
            EmptySourceError: If the source has no entries
            ServiceError: If any entry fails; nothing is returned in that case
        """
        if len(source) == 0:
            raise EmptySourceError("The source file does not contain any translatable elements")

        # File references and other raw nodes of the source carry over as-is
        result = ResourceSet(headers=source.headers, raw_nodes=source.raw_nodes)
        stats = TranslationStats(total=len(source))
        logger.info("Translating %d entries into %s", stats.total, target_language)

        for current, entry in enumerate(source, start=1):
            if entry.value:
                translated = self._translate_entry(entry, target_language, source_language, stats)
                result.append(replace(entry, value=translated))
            else:
                stats.skipped_count += 1
                result.append(replace(entry))

            if progress_callback:
                progress_callback(current, stats.total, entry.key)

        logger.info(
            "Translated %d entries into %s (%d empty)",
            stats.translated_count, target_language, stats.skipped_count,
        )
        return result, stats

    def reconcile_missing(
        self,
        source: ResourceSet,
        target: Optional[ResourceSet],
        target_language: str,
        source_language: str = AUTO_DETECT,
        progress_callback: Optional[ProgressCallback] = None,
        keep_partial: bool = True,
    ) -> Tuple[ResourceSet, TranslationStats]:
        """
        Translate the entries of source that target lacks and append them.

        Existing target entries are never changed, reordered or removed.
        The target passed in is not mutated; the merge happens on a copy.

        Args:
            source: Resource set in the reference language
            target: Existing target resource set, or None if there is none yet
            target_language: Target language code
            source_language: Source language code or "auto"
            progress_callback: Optional callback(current, total, key) after each missing entry
            keep_partial: On failure, attach the merge done so far to the error
                as ``partial_result``

        Returns:
            Tuple of (merged resource set, statistics). When nothing is
            missing the target itself is returned and stats.up_to_date is True.

        Raises:
            ServiceError: If any missing entry fails to translate
        """
        if target is None:
            target = ResourceSet(headers=source.headers)

        missing = source.missing_keys(target)
        stats = TranslationStats(total=len(missing))

        if not missing:
            logger.info("No missing entries found for %s", target_language)
            return target, stats

        logger.info("Translating %d missing entries into %s", stats.total, target_language)
        merged = target.copy()

        for current, key in enumerate(missing, start=1):
            entry = source.get(key)
            if entry.value:
                try:
                    translated = self._translate_entry(
                        entry, target_language, source_language, stats
                    )
                except ServiceError as e:
                    if keep_partial:
                        e.partial_result = merged
                    raise
                merged.append(
                    ResourceEntry(
                        key=key,
                        value=translated,
                        preserve_whitespace=True,
                        comment=entry.comment,
                    )
                )
            else:
                stats.skipped_count += 1

            if progress_callback:
                progress_callback(current, stats.total, key)

        return merged, stats

    def _translate_entry(
        self,
        entry: ResourceEntry,
        target_language: str,
        source_language: str,
        stats: TranslationStats,
    ) -> str:
        try:
            translated = self.markup.translate(entry.value, target_language, source_language)
        except ServiceError as e:
            e.key = entry.key
            logger.error("Translation of '%s' failed: %s", entry.key, e)
            raise

        is_valid, issues = self.placeholder_validator.validate(entry.value, translated)
        if not is_valid:
            stats.placeholder_warnings.append(entry.key)
            for issue in issues:
                logger.warning("%s: %s", entry.key, issue.message)

        stats.translated_count += 1
        return translated
