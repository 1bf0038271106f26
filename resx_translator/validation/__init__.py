"""Translation validation and quality scoring."""

from .placeholder_validator import PlaceholderValidator
from .quality_scorer import QualityScorer, levenshtein_distance, similarity, similarity_to_rating

__all__ = [
    "PlaceholderValidator",
    "QualityScorer",
    "levenshtein_distance",
    "similarity",
    "similarity_to_rating",
]
