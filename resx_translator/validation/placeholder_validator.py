"""Validator for .NET composite format placeholders."""

import re
from collections import Counter
from typing import List, Tuple
from dataclasses import dataclass


@dataclass
class PlaceholderIssue:
    """Represents a placeholder validation issue."""

    error_type: str  # missing, extra
    message: str
    severity: str  # critical, warning


class PlaceholderValidator:
    """
    Validates that .NET format items are preserved in translations.

    Format items look like:
    - {0}, {1} - Indexed arguments
    - {0:N2}, {1:yyyy-MM-dd} - With a format string
    - {0,-10}, {0,8:C} - With an alignment
    - {{ and }} are escaped braces, not placeholders

    Format items are indexed, so their order may change freely.
    """

    PLACEHOLDER_PATTERN = re.compile(r"\{\d+(?:\s*,\s*-?\d+)?(?::[^{}]*)?\}")

    def validate(self, source: str, translation: str) -> Tuple[bool, List[PlaceholderIssue]]:
        """
        Validate that placeholders in source match those in translation.

        Args:
            source: Original source text
            translation: Translated text

        Returns:
            Tuple of (is_valid, list of issues)
        """
        issues = []

        source_counts = Counter(self._extract_placeholders(source))
        trans_counts = Counter(self._extract_placeholders(translation))

        for placeholder in sorted(source_counts - trans_counts):
            issues.append(
                PlaceholderIssue(
                    error_type="missing",
                    message=f"Missing placeholder in translation: {placeholder}",
                    severity="critical",
                )
            )

        for placeholder in sorted(trans_counts - source_counts):
            issues.append(
                PlaceholderIssue(
                    error_type="extra",
                    message=f"Extra placeholder in translation: {placeholder}",
                    severity="critical",
                )
            )

        is_valid = not any(issue.severity == "critical" for issue in issues)
        return is_valid, issues

    def _extract_placeholders(self, text: str) -> List[str]:
        """Extract all placeholders from text."""
        unescaped = text.replace("{{", "").replace("}}", "")
        return [match.group(0) for match in self.PLACEHOLDER_PATTERN.finditer(unescaped)]

    def has_placeholders(self, text: str) -> bool:
        """Check if text contains any placeholders."""
        return bool(self._extract_placeholders(text))
