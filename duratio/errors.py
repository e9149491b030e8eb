"""Duratio exception hierarchy.

All Duratio-specific exceptions inherit from DuratioError. The invalid-input
errors also inherit from ValueError so callers that only know the builtin
exceptions can still catch them.
"""

from __future__ import annotations


class DuratioError(Exception):
    """Base exception for all Duratio errors."""

    pass


class ValidationError(DuratioError, ValueError):
    """Invalid argument passed to a Duration operation.

    Base class for the errors raised when an operand or flag is unusable.
    """

    pass


class ParseError(DuratioError, ValueError):
    """Failed to parse a string or structured representation.

    Examples:
        - "P1X" is not an ISO 8601 duration
        - "PT" has a time designator but no time components
        - A JSON mapping without "seconds" or "iso8601"
    """

    pass


class NegativeDurationError(ValidationError):
    """A strict operation would produce a negative duration.

    Raised by strict_subtract, the subtract_<unit> family and the strict
    decrement methods. The saturating variants clamp to zero instead.
    """

    pass


class DivisionByZeroError(DuratioError, ZeroDivisionError):
    """A duration was divided by zero."""

    pass


class ComparisonTypeError(ValidationError):
    """A comparison sequence contained something other than a Duration."""

    pass


class ComparisonModeError(ValidationError):
    """The comparison mode flag is neither ALL nor ANY."""

    pass


__all__ = [
    "DuratioError",
    "ValidationError",
    "ParseError",
    "NegativeDurationError",
    "DivisionByZeroError",
    "ComparisonTypeError",
    "ComparisonModeError",
]
