"""
Tests for resx_translator/validation/placeholder_validator.py
"""
from resx_translator.validation.placeholder_validator import PlaceholderValidator


class TestPlaceholderValidator:

    def setup_method(self):
        self.validator = PlaceholderValidator()

    def test_preserved_placeholders(self):
        is_valid, issues = self.validator.validate("Hello {0}, you have {1} messages", "Hallo {0}, du hast {1} Nachrichten")
        assert is_valid
        assert issues == []

    def test_reordering_is_fine(self):
        is_valid, _ = self.validator.validate("{0} of {1}", "{1} sur {0}")
        assert is_valid

    def test_missing_placeholder(self):
        is_valid, issues = self.validator.validate("Total: {0:N2}", "Summe:")
        assert not is_valid
        assert issues[0].error_type == "missing"
        assert "{0:N2}" in issues[0].message

    def test_extra_placeholder(self):
        is_valid, issues = self.validator.validate("Hello", "Hallo {0}")
        assert not is_valid
        assert issues[0].error_type == "extra"

    def test_duplicate_count_matters(self):
        is_valid, _ = self.validator.validate("{0} and {0}", "{0} und")
        assert not is_valid

    def test_alignment_and_format(self):
        assert self.validator.has_placeholders("{0,-10}")
        assert self.validator.has_placeholders("{1,8:C}")
        assert self.validator.has_placeholders("{2:yyyy-MM-dd}")

    def test_escaped_braces_ignored(self):
        assert not self.validator.has_placeholders("Use {{0}} literally")
        assert not self.validator.has_placeholders("{name}")
