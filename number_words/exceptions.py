"""
Custom exception hierarchy for number-to-words conversion.

Each exception type maps to a specific category of failure, enabling
precise error handling by callers (the API maps them to HTTP 422 bodies).

Every error is raised BEFORE any words are produced: the converter never
emits partial output and then fails.
"""

from __future__ import annotations


class NumberWordsError(Exception):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class InvalidInputType(NumberWordsError, TypeError):
    """The value is not an int, float, Decimal or numeric string."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_INPUT_TYPE", message, details)


class InvalidNumberFormat(NumberWordsError, ValueError):
    """NaN, Infinity, or a string that is not a plain decimal number."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_NUMBER_FORMAT", message, details)


class UnsupportedOption(NumberWordsError, ValueError):
    """An option value outside the language's recognised set."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNSUPPORTED_OPTION", message, details)


class OrdinalDomainError(NumberWordsError, ValueError):
    """Ordinals exist only for positive whole numbers."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("ORDINAL_DOMAIN_ERROR", message, details)


class MagnitudeOutOfRange(NumberWordsError, ValueError):
    """The integer part exceeds the largest magnitude the language can name."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("MAGNITUDE_OUT_OF_RANGE", message, details)


class UnsupportedLanguage(NumberWordsError, LookupError):
    """No vocabulary is registered for the requested language code."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNSUPPORTED_LANGUAGE", message, details)


class VocabularyError(NumberWordsError):
    """A vocabulary table is malformed. Raised at import time, never per call."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("VOCABULARY_DEFECT", message, details)
