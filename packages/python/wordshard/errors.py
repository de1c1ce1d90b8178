"""
Exception hierarchy for wordshard.

All exceptions inherit from WordshardError so callers can catch the whole
family at once. Errors that describe bad caller input also derive from the
matching builtin (ValueError, ZeroDivisionError).
"""

from typing import Optional


class WordshardError(Exception):
    """Base exception for all wordshard errors."""


class DivisionByZero(WordshardError, ZeroDivisionError):
    """Raised when dividing by, or inverting, the zero field element."""


class DimensionMismatch(WordshardError):
    """Raised when matrix shapes do not line up."""


class Singular(WordshardError):
    """Raised when a matrix has no inverse (no pivot found during elimination)."""


class InvalidEncoding(WordshardError, ValueError):
    """Raised when encoding or sharing parameters are out of range."""


class MalformedStream(WordshardError, ValueError):
    """Raised when a stream record's columns do not match its parameters."""


class InsufficientShares(WordshardError):
    """Raised when fewer trusted columns remain than are needed to decode."""

    def __init__(self, message: str, available: Optional[int] = None, required: Optional[int] = None):
        super().__init__(message)
        self.available = available
        self.required = required


class UnknownWord(WordshardError, ValueError):
    """Raised when a phrase word is not in the vocabulary."""

    def __init__(self, word: str):
        super().__init__(f"Unknown word: {word!r}")
        self.word = word


class MalformedShare(WordshardError, ValueError):
    """Raised when a share phrase cannot be placed into a codeword."""
