"""Calendar-like decomposition of a second count.

The decomposition is a strict cascade of floor divisions using the fixed
unit lengths: years from the total, months from the year remainder, days
from the month remainder, then hours, minutes and the leftover seconds.
It is not calendar-aware; months and years are averages.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from duratio._internal.constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_MONTH,
    SECONDS_PER_YEAR,
)


@dataclass(frozen=True)
class Components:
    """The six decomposed fields of a duration.

    Attributes:
        years: Whole average years.
        months: Whole average months left after the years.
        days: Whole days left after the months.
        hours: Hours within the day [0, 24).
        minutes: Minutes within the hour [0, 60).
        seconds: Seconds within the minute [0, 60).
    """

    years: int = 0
    months: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @property
    def has_time(self) -> bool:
        """True if any of hours, minutes or seconds is non-zero."""
        return bool(self.hours or self.minutes or self.seconds)

    def as_dict(self) -> dict[str, int]:
        """Return all six fields, zeros included, in cascade order."""
        return asdict(self)


def decompose(total_seconds: int) -> Components:
    """Split a non-negative second count into Components.

    Args:
        total_seconds: The count to split. Must be >= 0.

    Returns:
        The decomposed fields.

    Examples:
        >>> decompose(37090998)
        Components(years=1, months=2, days=3, hours=4, minutes=5, seconds=6)

        >>> decompose(5400)
        Components(years=0, months=0, days=0, hours=1, minutes=30, seconds=0)
    """
    years, remaining = divmod(total_seconds, SECONDS_PER_YEAR)
    months, remaining = divmod(remaining, SECONDS_PER_MONTH)
    days, remaining = divmod(remaining, SECONDS_PER_DAY)
    hours, remaining = divmod(remaining, SECONDS_PER_HOUR)
    minutes, seconds = divmod(remaining, SECONDS_PER_MINUTE)
    return Components(
        years=years,
        months=months,
        days=days,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
    )


__all__ = ["Components", "decompose"]
