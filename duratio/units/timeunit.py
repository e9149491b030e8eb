"""TimeUnit enumeration for the fixed-length duration units.

This module provides the TimeUnit enum used by the generic factory and
the add/subtract-by-unit arithmetic.
"""

from __future__ import annotations

from enum import Enum

from duratio._internal.constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_MONTH,
    SECONDS_PER_WEEK,
    SECONDS_PER_YEAR,
)


class TimeUnit(Enum):
    """Time units with a fixed length in seconds.

    Unlike a calendar, MONTH and YEAR have fixed average lengths here
    (30.44 and 365.25 days), so every unit converts exactly to seconds.

    Examples:
        >>> TimeUnit.HOUR.to_seconds()
        3600

        >>> TimeUnit.YEAR.to_seconds()
        31557600

        >>> TimeUnit("week")
        <TimeUnit.WEEK: 'week'>
    """

    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    def to_seconds(self) -> int:
        """Return the length of one unit in seconds."""
        return _UNIT_SECONDS[self]

    @property
    def plural(self) -> str:
        """Return the plural unit name used in error messages."""
        return f"{self.value}s"


_UNIT_SECONDS: dict[TimeUnit, int] = {
    TimeUnit.SECOND: 1,
    TimeUnit.MINUTE: SECONDS_PER_MINUTE,
    TimeUnit.HOUR: SECONDS_PER_HOUR,
    TimeUnit.DAY: SECONDS_PER_DAY,
    TimeUnit.WEEK: SECONDS_PER_WEEK,
    TimeUnit.MONTH: SECONDS_PER_MONTH,
    TimeUnit.YEAR: SECONDS_PER_YEAR,
}


__all__ = ["TimeUnit"]
