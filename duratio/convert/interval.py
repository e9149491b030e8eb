"""Adapters between Duration and interval-like types.

CalendarInterval is a plain record of years, months, days, hours, minutes
and seconds, the shape calendar libraries use for "date intervals".
datetime.timedelta is the standard library's interval type.

Both adapters use the fixed unit lengths, so a month is always 2629746
seconds and a year 31557600 seconds.

Functions:
    from_calendar_interval: Sum an interval's fields into a Duration.
    to_calendar_interval: Fill an interval from a Duration's components.
    from_timedelta: Convert a timedelta, dropping sub-second precision.
    to_timedelta: Convert a Duration to an exact timedelta.
"""

from __future__ import annotations

import datetime as _datetime
from dataclasses import dataclass
from typing import TYPE_CHECKING

from duratio._internal.constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_MONTH,
    SECONDS_PER_YEAR,
)
from duratio._internal.validation import require_int

if TYPE_CHECKING:
    from duratio.core.duration import Duration


@dataclass(frozen=True)
class CalendarInterval:
    """Field-by-field interval representation.

    Attributes:
        years, months, days, hours, minutes, seconds: Field amounts.
        total_seconds: The whole interval in seconds, when known. It is set
            by to_calendar_interval() and ignored by from_calendar_interval().
    """

    years: int = 0
    months: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    total_seconds: int | None = None


def from_calendar_interval(interval: CalendarInterval) -> "Duration":
    """Create a Duration by summing each field times its unit length.

    Examples:
        >>> iv = CalendarInterval(years=1, months=2, days=3,
        ...                       hours=4, minutes=5, seconds=6)
        >>> from_calendar_interval(iv).to_seconds()
        37090998
    """
    from duratio.core.duration import Duration

    if not isinstance(interval, CalendarInterval):
        raise TypeError(
            f"expected CalendarInterval, got {type(interval).__name__}"
        )

    total = (
        require_int("years", interval.years) * SECONDS_PER_YEAR
        + require_int("months", interval.months) * SECONDS_PER_MONTH
        + require_int("days", interval.days) * SECONDS_PER_DAY
        + require_int("hours", interval.hours) * SECONDS_PER_HOUR
        + require_int("minutes", interval.minutes) * SECONDS_PER_MINUTE
        + require_int("seconds", interval.seconds)
    )
    return Duration(total)


def to_calendar_interval(duration: "Duration") -> CalendarInterval:
    """Fill a CalendarInterval from a Duration's components.

    Examples:
        >>> from duratio.core.duration import Duration
        >>> to_calendar_interval(Duration(90061))
        CalendarInterval(years=0, months=0, days=1, hours=1, minutes=1, seconds=1, total_seconds=90061)
    """
    parts = duration.components()
    return CalendarInterval(
        years=parts.years,
        months=parts.months,
        days=parts.days,
        hours=parts.hours,
        minutes=parts.minutes,
        seconds=parts.seconds,
        total_seconds=duration.to_seconds(),
    )


def from_timedelta(delta: _datetime.timedelta) -> "Duration":
    """Create a Duration from a timedelta.

    Microseconds are dropped; negative timedeltas clamp to zero.

    Examples:
        >>> import datetime
        >>> from_timedelta(datetime.timedelta(hours=1, microseconds=10)).to_seconds()
        3600
    """
    from duratio.core.duration import Duration

    if not isinstance(delta, _datetime.timedelta):
        raise TypeError(f"expected timedelta, got {type(delta).__name__}")
    return Duration(delta.days * SECONDS_PER_DAY + delta.seconds)


def to_timedelta(duration: "Duration") -> _datetime.timedelta:
    """Convert a Duration to an exact timedelta.

    Raises:
        OverflowError: If the duration exceeds timedelta's range.
    """
    return _datetime.timedelta(seconds=duration.to_seconds())


__all__ = [
    "CalendarInterval",
    "from_calendar_interval",
    "to_calendar_interval",
    "from_timedelta",
    "to_timedelta",
]
