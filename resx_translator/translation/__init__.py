"""Markup-aware translation of resource sets."""

from .markup import MarkupTranslator
from .translator import ResxTranslator

__all__ = ["MarkupTranslator", "ResxTranslator"]
