"""Durations measured between two points in time.

Functions:
    between: The Duration elapsed from a start to an end point.

Points may be datetime.datetime objects or numeric Unix timestamps (seconds
since 1970-01-01 00:00:00 UTC). Both points are truncated to whole seconds
before subtracting.

An end that lies before its start does not raise: the negative difference
is clamped to zero by the Duration constructor. Callers that need to detect
reversed intervals should compare the points themselves first.
"""

from __future__ import annotations

import datetime as _datetime
import math
from typing import TYPE_CHECKING, Union

from duratio._internal.constants import SECONDS_PER_DAY

if TYPE_CHECKING:
    from duratio.core.duration import Duration

TimestampType = Union[_datetime.datetime, int, float]


def between(start: TimestampType, end: TimestampType) -> "Duration":
    """Return the Duration from start to end.

    Args:
        start: Start point, a datetime or a Unix timestamp.
        end: End point, of the same kind as start.

    Returns:
        end - start in whole seconds, or a zero Duration if end < start.

    Raises:
        TypeError: If the points are of unsupported or mixed kinds, or if
            one datetime is naive and the other aware.

    Examples:
        >>> import datetime
        >>> a = datetime.datetime(2024, 1, 15, 12, 0, 0)
        >>> b = datetime.datetime(2024, 1, 15, 13, 30, 0)
        >>> between(a, b).to_iso8601()
        'PT1H30M'
        >>> between(b, a).to_seconds()
        0
        >>> between(1_700_000_000, 1_700_000_090).to_seconds()
        90
    """
    from duratio.core.duration import Duration

    if isinstance(start, _datetime.datetime) and isinstance(end, _datetime.datetime):
        delta = end.replace(microsecond=0) - start.replace(microsecond=0)
        return Duration(delta.days * SECONDS_PER_DAY + delta.seconds)

    if _is_unix_timestamp(start) and _is_unix_timestamp(end):
        return Duration(math.floor(end) - math.floor(start))

    raise TypeError(
        "expected two datetimes or two Unix timestamps, got "
        f"{type(start).__name__} and {type(end).__name__}"
    )


def _is_unix_timestamp(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


__all__ = ["TimestampType", "between"]
