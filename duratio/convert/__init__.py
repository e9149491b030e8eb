"""Duration conversion utilities.

This module provides functions for converting durations to and from
other representations:
    - JSON-ready structured export and import
    - CalendarInterval records and datetime.timedelta
    - Elapsed time between two datetimes or Unix timestamps

Examples:
    >>> from duratio import Duration
    >>> from duratio.convert import to_json, from_json

    >>> data = to_json(Duration(90))
    >>> from_json(data) == Duration(90)
    True
"""

from __future__ import annotations

from duratio.convert.json import from_json, to_json
from duratio.convert.interval import (
    CalendarInterval,
    from_calendar_interval,
    from_timedelta,
    to_calendar_interval,
    to_timedelta,
)
from duratio.convert.timestamps import between

__all__ = [
    # JSON
    "to_json",
    "from_json",
    # Intervals
    "CalendarInterval",
    "from_calendar_interval",
    "to_calendar_interval",
    "from_timedelta",
    "to_timedelta",
    # Timestamps
    "between",
]
