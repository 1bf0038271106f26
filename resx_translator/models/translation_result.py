"""Data models for translation runs and quality scoring."""

from dataclasses import dataclass, field
from typing import Iterator, List


@dataclass
class TranslationStats:
    """Statistics for a translation batch."""

    total: int = 0
    translated_count: int = 0
    skipped_count: int = 0  # entries with an empty value
    placeholder_warnings: List[str] = field(default_factory=list)

    @property
    def up_to_date(self) -> bool:
        """True when there was nothing to translate."""
        return self.total == 0


@dataclass
class QualityResult:
    """Back-translation rating of a single translated entry."""

    key: str
    rating: int  # 1-5
    similarity: float  # 0.0-1.0
    source_text: str = ""
    back_translation: str = ""


@dataclass
class QualityFailure:
    """An entry that could not be rated because the service failed."""

    key: str
    error: str


@dataclass
class QualityReport:
    """Results of one quality check run."""

    results: List[QualityResult] = field(default_factory=list)
    failures: List[QualityFailure] = field(default_factory=list)

    def __iter__(self) -> Iterator[QualityResult]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    def sorted_by_rating(self) -> List[QualityResult]:
        """Results ordered worst first; ties keep source order."""
        return sorted(self.results, key=lambda r: r.rating)

    @property
    def average_rating(self) -> float:
        if not self.results:
            return 0.0
        return sum(r.rating for r in self.results) / len(self.results)
