"""Dateinterval exception hierarchy.

All dateinterval-specific exceptions inherit from IntervalError.
"""

from __future__ import annotations


class IntervalError(Exception):
    """Base exception for all dateinterval errors."""

    pass


class ValidationError(IntervalError, ValueError):
    """Invalid input values.

    Raised when a caller hands the library something it cannot work with.

    Examples:
        - A negative interval component
        - Formatting a missing (None) interval
        - A unit override whose text is not a string
        - An unknown formatting option name
    """

    pass


class ParseError(ValidationError):
    """Failed to parse an interval specification string.

    Examples:
        - Missing the leading "P" designator
        - Designators out of order ("P1D2Y")
        - A "T" with no time component after it
    """

    pass


class TranslationError(IntervalError):
    """A translation provider could not resolve a unit word.

    Raised by the strict catalog provider when a key has no entry for the
    requested language and context.
    """

    pass


__all__ = [
    "IntervalError",
    "ValidationError",
    "ParseError",
    "TranslationError",
]
