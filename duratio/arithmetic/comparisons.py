"""Comparison operations for durations.

This module provides explicit comparison functions for Duration. They are
the canonical implementation behind the Duration comparison methods and
add a sequence form the rich comparison operators cannot express.

Comparison Rules:
    - Durations are ordered by their total second count.
    - The right-hand side may be a single Duration or a sequence of them.
    - With a sequence, ComparisonMode.ALL requires the relation to hold
      against every element and ComparisonMode.ANY against at least one.
    - An empty sequence is never a match, in either mode.
    - The mode is validated even when the right-hand side is a single
      Duration.

Supported Operations:
    - equal: Test equality
    - less_than: Test less-than
    - less_equal: Test less-than-or-equal
    - greater_than: Test greater-than
    - greater_equal: Test greater-than-or-equal
    - compare: Return -1, 0 or 1
    - between: Test membership in a range
    - min_value, max_value, clamp: Extremes and range clamping
"""

from __future__ import annotations

import operator as op
from collections.abc import Iterable
from typing import TYPE_CHECKING, Callable

from duratio._internal.validation import require_durations
from duratio.units.comparison_mode import ComparisonMode

if TYPE_CHECKING:
    from duratio.core.duration import Duration, DurationOperand

Relation = Callable[[int, int], bool]


def equal(
    left: "Duration",
    right: "DurationOperand",
    mode: ComparisonMode | str = ComparisonMode.ALL,
) -> bool:
    """Test whether left equals right, or the elements of a sequence.

    Args:
        left: The duration being compared.
        right: A Duration or a sequence of Durations.
        mode: ALL or ANY; only affects the sequence form.

    Returns:
        True if the relation holds.

    Raises:
        ComparisonTypeError: If the sequence contains a non-Duration.
        ComparisonModeError: If mode is not ALL or ANY.

    Examples:
        >>> from duratio.core.duration import Duration
        >>> equal(Duration(60), Duration.from_minutes(1))
        True
        >>> equal(Duration(60), [Duration(60), Duration(60)])
        True
        >>> equal(Duration(60), [Duration(60), Duration(30)], ComparisonMode.ANY)
        True
    """
    return _relate("==", left, right, mode, op.eq)


def less_than(
    left: "Duration",
    right: "DurationOperand",
    mode: ComparisonMode | str = ComparisonMode.ALL,
) -> bool:
    """Test whether left is shorter than right (or the sequence elements).

    Examples:
        >>> from duratio.core.duration import Duration
        >>> less_than(Duration(30), Duration(60))
        True
        >>> less_than(Duration(30), [])
        False
    """
    return _relate("<", left, right, mode, op.lt)


def less_equal(
    left: "Duration",
    right: "DurationOperand",
    mode: ComparisonMode | str = ComparisonMode.ALL,
) -> bool:
    """Test whether left is shorter than or as long as right."""
    return _relate("<=", left, right, mode, op.le)


def greater_than(
    left: "Duration",
    right: "DurationOperand",
    mode: ComparisonMode | str = ComparisonMode.ALL,
) -> bool:
    """Test whether left is longer than right (or the sequence elements)."""
    return _relate(">", left, right, mode, op.gt)


def greater_equal(
    left: "Duration",
    right: "DurationOperand",
    mode: ComparisonMode | str = ComparisonMode.ALL,
) -> bool:
    """Test whether left is longer than or as long as right."""
    return _relate(">=", left, right, mode, op.ge)


def compare(left: "Duration", right: "Duration") -> int:
    """Compare two durations, returning -1, 0, or 1.

    Raises:
        TypeError: If either operand is not a Duration.

    Examples:
        >>> from duratio.core.duration import Duration
        >>> compare(Duration(30), Duration(60))
        -1
        >>> compare(Duration(60), Duration(60))
        0
    """
    _check_duration("compare", left)
    _check_duration("compare", right)
    a, b = left.to_seconds(), right.to_seconds()
    return (a > b) - (a < b)


def between(
    value: "Duration",
    minimum: "Duration",
    maximum: "Duration",
    *,
    inclusive: bool = True,
) -> bool:
    """Test whether value lies between minimum and maximum.

    Args:
        value: The duration to test.
        minimum: Lower bound.
        maximum: Upper bound.
        inclusive: Use >= / <= when True, > / < when False.

    Examples:
        >>> from duratio.core.duration import Duration
        >>> between(Duration(90), Duration(60), Duration(120))
        True
        >>> between(Duration(120), Duration(60), Duration(120), inclusive=False)
        False
    """
    for operand in (value, minimum, maximum):
        _check_duration("between", operand)
    seconds = value.to_seconds()
    if inclusive:
        return minimum.to_seconds() <= seconds <= maximum.to_seconds()
    return minimum.to_seconds() < seconds < maximum.to_seconds()


def min_value(*values: "Duration") -> "Duration":
    """Return the shortest of the given durations.

    Raises:
        ValueError: If no values provided.
        ComparisonTypeError: If any value is not a Duration.
    """
    if not values:
        raise ValueError("min_value requires at least one argument")
    return min(require_durations(values), key=_seconds_of)


def max_value(*values: "Duration") -> "Duration":
    """Return the longest of the given durations.

    Raises:
        ValueError: If no values provided.
        ComparisonTypeError: If any value is not a Duration.
    """
    if not values:
        raise ValueError("max_value requires at least one argument")
    return max(require_durations(values), key=_seconds_of)


def clamp(
    value: "Duration",
    min_val: "Duration",
    max_val: "Duration",
) -> "Duration":
    """Clamp a duration to be within a range.

    Returns:
        value if min_val <= value <= max_val,
        min_val if value < min_val,
        max_val if value > max_val.

    Raises:
        ValueError: If min_val > max_val.

    Examples:
        >>> from duratio.core.duration import Duration
        >>> clamp(Duration(500), Duration(60), Duration(300))
        Duration(seconds=300)
    """
    if greater_than(min_val, max_val):
        raise ValueError("min_val must be less than or equal to max_val")

    if less_than(value, min_val):
        return min_val
    elif greater_than(value, max_val):
        return max_val
    else:
        return value


# ---------------------------------------------------------------------------
# Internal implementation functions
# ---------------------------------------------------------------------------


def _relate(
    symbol: str,
    left: "Duration",
    right: "DurationOperand",
    mode: ComparisonMode | str,
    relation: Relation,
) -> bool:
    """Dispatch to the single-duration or the sequence comparison."""
    from duratio.core.duration import Duration

    mode = ComparisonMode.coerce(mode)
    _check_duration(symbol, left)

    if isinstance(right, Duration):
        return relation(left.to_seconds(), right.to_seconds())

    if isinstance(right, (str, bytes)) or not isinstance(right, Iterable):
        raise TypeError(
            f"'{symbol}' expects a Duration or a sequence of Durations, "
            f"got {type(right).__name__}"
        )
    return _relate_sequence(left, require_durations(right), mode, relation)


def _relate_sequence(
    left: "Duration",
    others: list["Duration"],
    mode: ComparisonMode,
    relation: Relation,
) -> bool:
    """Apply relation against each element according to mode."""
    if not others:
        return False

    seconds = left.to_seconds()
    matches = (relation(seconds, other.to_seconds()) for other in others)
    if mode is ComparisonMode.ANY:
        return any(matches)
    return all(matches)


def _check_duration(symbol: str, value: object) -> None:
    from duratio.core.duration import Duration

    if not isinstance(value, Duration):
        raise TypeError(
            f"'{symbol}' not supported for {type(value).__name__!r}, "
            "expected 'Duration'"
        )


def _seconds_of(duration: "Duration") -> int:
    return duration.to_seconds()


__all__ = [
    "ComparisonMode",
    "equal",
    "less_than",
    "less_equal",
    "greater_than",
    "greater_equal",
    "compare",
    "between",
    "min_value",
    "max_value",
    "clamp",
]
