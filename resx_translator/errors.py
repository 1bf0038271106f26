"""
Error types raised by resx_translator.

ServiceError covers every failure of the remote translation backend.
InputError and its subclasses cover problems with the data handed in,
which are detected before any service call and never worth retrying.
"""

from typing import Optional


class ResxTranslatorError(Exception):
    """Base class for all errors raised by this package."""


class ServiceError(ResxTranslatorError):
    """A call to the translation service failed."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict] = None,
        retryable: bool = False,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.retryable = retryable
        # Filled in by batch operations
        self.key: Optional[str] = None
        self.partial_result = None

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class InputError(ResxTranslatorError):
    """The input data is invalid."""


class DuplicateKeyError(InputError):
    """A key that must be unique already exists."""

    def __init__(self, key: str):
        super().__init__(f"Duplicate resource key: {key}")
        self.key = key


class KeyNotFoundError(InputError, LookupError):
    """A key expected in a resource set is absent."""

    def __init__(self, key: str):
        super().__init__(f"Resource key not found: {key}")
        self.key = key


class MalformedDocumentError(InputError):
    """A resource document could not be parsed."""


class EmptySourceError(InputError):
    """The source resource set has nothing to translate."""
