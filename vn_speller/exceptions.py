"""
Custom exception hierarchy for number spelling.

Both concrete errors are raised by the input normalizer only; every other
component lets them propagate untouched.
"""

from __future__ import annotations


class SpellingError(Exception):
    """Base exception for all rejected spelling inputs."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)

    @property
    def message(self) -> str:
        return str(self)


class FormatError(SpellingError):
    """The input is absent, of an unsupported type, or not a finite number."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_FORMAT", message, details)


class NumberFormatError(SpellingError):
    """The input text does not follow the decimal digit grammar."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_NUMBER", message, details)
