"""Data models for the resource translator."""

from .resource_set import RawNode, ResourceEntry, ResourceSet
from .translation_result import QualityFailure, QualityReport, QualityResult, TranslationStats

__all__ = [
    "RawNode",
    "ResourceEntry",
    "ResourceSet",
    "QualityFailure",
    "QualityReport",
    "QualityResult",
    "TranslationStats",
]
