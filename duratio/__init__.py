"""Duratio: an immutable, non-negative duration value type.

Duratio represents a time span as a whole number of seconds and derives
years, months, days, hours, minutes and seconds from it on demand using
fixed average unit lengths (a month is 30.44 days, a year 365.25 days).

Core Types:
    Duration: Non-negative span of time in whole seconds
    Components: Decomposed years/months/days/hours/minutes/seconds view

Units:
    TimeUnit: Fixed-length units (SECOND, MINUTE, ..., YEAR)
    ComparisonMode: ALL/ANY flag for sequence comparisons

Format Functions:
    validate_iso8601: Check an ISO 8601 duration string
    parse_iso8601: Parse an ISO 8601 duration string
    format_iso8601: Format a Duration as ISO 8601

Conversion:
    CalendarInterval: Field-by-field interval record

Exceptions:
    DuratioError: Base exception
    ValidationError: Invalid argument
    ParseError: Failed to parse a string or structure
    NegativeDurationError: Strict operation would go below zero
    DivisionByZeroError: Division by zero
    ComparisonTypeError: Non-Duration element in a comparison sequence
    ComparisonModeError: Unknown comparison mode

Example:
    >>> from duratio import Duration
    >>> timeout = Duration.from_iso8601("PT1H30M")
    >>> timeout.to_human_readable()
    '01:30:00'
    >>> str(timeout.add_minutes(30))
    'PT2H'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from duratio.core.components import Components
from duratio.core.duration import Duration

# Units
from duratio.units.comparison_mode import ComparisonMode
from duratio.units.timeunit import TimeUnit

# Exceptions
from duratio.errors import (
    ComparisonModeError,
    ComparisonTypeError,
    DivisionByZeroError,
    DuratioError,
    NegativeDurationError,
    ParseError,
    ValidationError,
)

# Format functions
from duratio.format import format_iso8601, parse_iso8601, validate_iso8601

# Conversion
from duratio.convert import CalendarInterval

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Components",
    "Duration",
    # Units
    "ComparisonMode",
    "TimeUnit",
    # Exceptions
    "DuratioError",
    "ValidationError",
    "ParseError",
    "NegativeDurationError",
    "DivisionByZeroError",
    "ComparisonTypeError",
    "ComparisonModeError",
    # Format functions
    "validate_iso8601",
    "parse_iso8601",
    "format_iso8601",
    # Conversion
    "CalendarInterval",
]
