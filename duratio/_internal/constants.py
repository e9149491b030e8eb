"""Internal constants for Duratio.

Fixed unit lengths in seconds. Months and years are averages (30.44 and
365.25 days) and are not tied to any calendar. This module is not part of
the public API.
"""

from __future__ import annotations

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE  # 3_600
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400
SECONDS_PER_WEEK: int = 7 * SECONDS_PER_DAY  # 604_800
SECONDS_PER_MONTH: int = 2_629_746
SECONDS_PER_YEAR: int = 31_557_600

# Width of the zero-padded fields in format() and to_human_readable()
FIELD_WIDTH: int = 2


__all__ = [
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "SECONDS_PER_WEEK",
    "SECONDS_PER_MONTH",
    "SECONDS_PER_YEAR",
    "FIELD_WIDTH",
]
