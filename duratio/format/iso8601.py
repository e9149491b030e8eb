"""ISO 8601 duration formatting and parsing.

This module provides functions for converting durations to and from the
ISO 8601 duration representation.

Functions:
    validate_iso8601: Check whether a string is an acceptable duration.
    parse_iso8601: Parse an ISO 8601 duration string into a Duration.
    format_iso8601: Format a Duration as an ISO 8601 duration string.

Supported grammar:
    P[n]Y[n]M[n]DT[n]H[n]M[n]S

    - Units appear at most once and in that fixed order.
    - Numbers are unsigned whole numbers; no fractions, no signs.
    - A "T" must be followed by at least one of H, M or S.
    - "P" and "PT" on their own are rejected.
    - Weeks ("P2W") are not part of the grammar.

Examples:
    >>> from duratio.format import parse_iso8601, format_iso8601

    >>> parse_iso8601("PT1H30M").to_seconds()
    5400

    >>> format_iso8601(parse_iso8601("P1DT1H1M1S"))
    'P1DT1H1M1S'
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from duratio._internal.constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_MONTH,
    SECONDS_PER_YEAR,
)
from duratio.errors import ParseError

if TYPE_CHECKING:
    from duratio.core.duration import Duration

logger = logging.getLogger(__name__)

# [0-9] rather than \d so non-ASCII digits are rejected
_DURATION_PATTERN = re.compile(
    r"P"
    r"(?:(?P<years>[0-9]+)Y)?"
    r"(?:(?P<months>[0-9]+)M)?"
    r"(?:(?P<days>[0-9]+)D)?"
    r"(?:T"
    r"(?:(?P<hours>[0-9]+)H)?"
    r"(?:(?P<minutes>[0-9]+)M)?"
    r"(?:(?P<seconds>[0-9]+)S)?"
    r")?"
)

_TIME_PART_PATTERN = re.compile(r"T.*[HMS]")

_EMPTY_DESIGNATORS = frozenset({"P", "PT"})

_UNIT_SECONDS: tuple[tuple[str, int], ...] = (
    ("years", SECONDS_PER_YEAR),
    ("months", SECONDS_PER_MONTH),
    ("days", SECONDS_PER_DAY),
    ("hours", SECONDS_PER_HOUR),
    ("minutes", SECONDS_PER_MINUTE),
    ("seconds", 1),
)


def validate_iso8601(value: str) -> bool:
    """Return True if value is an acceptable ISO 8601 duration string.

    The checks run in order: the whole string must match the grammar, a
    "T" must be followed by a time component, and the empty designators
    "P" and "PT" are rejected. Non-string input is never valid.

    Examples:
        >>> validate_iso8601("P1Y2M3DT4H5M6S")
        True
        >>> validate_iso8601("PT0S")
        True
        >>> validate_iso8601("P1X")
        False
        >>> validate_iso8601("P1Y2MT")
        False
        >>> validate_iso8601("P")
        False
    """
    return _match_duration(value) is not None


def parse_iso8601(value: str) -> "Duration":
    """Parse an ISO 8601 duration string into a Duration.

    Absent units count as zero. Each unit is multiplied by its fixed length
    (a month is 2629746 seconds, a year 31557600) and the results summed.

    Args:
        value: The ISO 8601 duration string.

    Returns:
        The parsed Duration.

    Raises:
        ParseError: If the string is not a valid ISO 8601 duration.

    Examples:
        >>> parse_iso8601("P1Y2M3DT4H5M6S").to_seconds()
        37090998

        >>> parse_iso8601("PT0S").to_seconds()
        0
    """
    from duratio.core.duration import Duration

    match = _match_duration(value)
    if match is None:
        logger.debug("rejected ISO 8601 duration %r", value)
        raise ParseError(f"invalid ISO 8601 duration format: {value!r}")

    total = 0
    for name, unit_seconds in _UNIT_SECONDS:
        amount = match.group(name)
        if amount is not None:
            total += int(amount) * unit_seconds
    return Duration(total)


def _match_duration(value: object) -> re.Match[str] | None:
    """Return the grammar match for an acceptable duration string, else None."""
    if not isinstance(value, str):
        return None

    match = _DURATION_PATTERN.fullmatch(value)
    if match is None:
        return None

    if "T" in value and _TIME_PART_PATTERN.search(value) is None:
        return None

    if value in _EMPTY_DESIGNATORS:
        return None

    return match


def format_iso8601(duration: "Duration") -> str:
    """Format a Duration as an ISO 8601 duration string.

    Only non-zero components are written, unpadded. The time designator
    appears only when hours, minutes or seconds are non-zero. A zero
    duration formats as "PT0S".

    Raises:
        TypeError: If duration is not a Duration.

    Examples:
        >>> from duratio.core.duration import Duration
        >>> format_iso8601(Duration(5400))
        'PT1H30M'
        >>> format_iso8601(Duration(86400))
        'P1D'
        >>> format_iso8601(Duration(0))
        'PT0S'
    """
    from duratio.core.duration import Duration

    if not isinstance(duration, Duration):
        raise TypeError(f"expected Duration, got {type(duration).__name__}")

    parts = duration.components()
    result = ["P"]

    if parts.years:
        result.append(f"{parts.years}Y")
    if parts.months:
        result.append(f"{parts.months}M")
    if parts.days:
        result.append(f"{parts.days}D")

    if parts.has_time:
        result.append("T")
        if parts.hours:
            result.append(f"{parts.hours}H")
        if parts.minutes:
            result.append(f"{parts.minutes}M")
        if parts.seconds:
            result.append(f"{parts.seconds}S")

    if len(result) == 1:
        return "PT0S"

    return "".join(result)


__all__ = ["validate_iso8601", "parse_iso8601", "format_iso8601"]
