"""Translate .resx localization bundles while preserving markup."""

__version__ = "0.1.0"
