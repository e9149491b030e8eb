"""Standalone arithmetic operations for durations.

This module provides explicit functions for duration arithmetic that serve
as the canonical implementation. The Duration methods and operators
delegate to these functions.

Supported operations:
    - add: Sum of two durations
    - subtract: Saturating difference (never below zero)
    - strict_subtract: Exact difference, raising if it would be negative
    - add_unit / subtract_unit: Shift by an amount of a fixed-length unit
    - multiply: Scale by an int or float
    - divide: Divide by an int or float
    - floor_divide: Floor division by an int

Saturating vs strict:
    Additions and subtract() clamp to zero. strict_subtract() and
    subtract_unit() raise NegativeDurationError instead.
"""

from __future__ import annotations

from fractions import Fraction
from typing import TYPE_CHECKING

from duratio._internal.validation import require_int, require_number
from duratio.errors import DivisionByZeroError, NegativeDurationError
from duratio.units.timeunit import TimeUnit

if TYPE_CHECKING:
    from duratio.core.duration import Duration


def add(left: "Duration", right: "Duration") -> "Duration":
    """Add two durations.

    Args:
        left: First duration.
        right: Duration to add.

    Returns:
        A new Duration holding the sum.

    Raises:
        TypeError: If either operand is not a Duration.

    Examples:
        >>> from duratio.core.duration import Duration
        >>> add(Duration(30), Duration(45))
        Duration(seconds=75)
    """
    from duratio.core.duration import Duration

    _check_durations("+", left, right)
    return Duration(left.to_seconds() + right.to_seconds())


def subtract(left: "Duration", right: "Duration") -> "Duration":
    """Subtract right from left, clamping at zero.

    Examples:
        >>> from duratio.core.duration import Duration
        >>> subtract(Duration(3600), Duration(7200))
        Duration(seconds=0)
    """
    from duratio.core.duration import Duration

    _check_durations("-", left, right)
    return Duration(max(0, left.to_seconds() - right.to_seconds()))


def strict_subtract(left: "Duration", right: "Duration") -> "Duration":
    """Subtract right from left, refusing to go below zero.

    Raises:
        NegativeDurationError: If right is longer than left.
        TypeError: If either operand is not a Duration.

    Examples:
        >>> from duratio.core.duration import Duration
        >>> strict_subtract(Duration(100), Duration(50))
        Duration(seconds=50)
    """
    from duratio.core.duration import Duration

    _check_durations("-", left, right)
    remaining = left.to_seconds() - right.to_seconds()
    if remaining < 0:
        raise NegativeDurationError(
            f"cannot subtract {right} from {left} "
            "(would result in a negative duration)"
        )
    return Duration(remaining)


def add_unit(duration: "Duration", amount: int, unit: TimeUnit) -> "Duration":
    """Add amount units to a duration.

    The result goes through the Duration constructor, so a negative amount
    that overshoots clamps to zero.

    Examples:
        >>> from duratio.core.duration import Duration
        >>> add_unit(Duration(0), 2, TimeUnit.HOUR)
        Duration(seconds=7200)
    """
    from duratio.core.duration import Duration

    require_int(unit.plural, amount)
    return Duration(duration.to_seconds() + amount * unit.to_seconds())


def subtract_unit(
    duration: "Duration",
    amount: int,
    unit: TimeUnit,
) -> "Duration":
    """Subtract amount units from a duration.

    Raises:
        NegativeDurationError: If the result would be negative.
        TypeError: If amount is not an int.

    Examples:
        >>> from duratio.core.duration import Duration
        >>> subtract_unit(Duration(100000), 1, TimeUnit.HOUR)
        Duration(seconds=96400)
    """
    from duratio.core.duration import Duration

    require_int(unit.plural, amount)
    remaining = duration.to_seconds() - amount * unit.to_seconds()
    if remaining < 0:
        raise NegativeDurationError(
            f"cannot subtract {amount} {unit.plural} from {duration} "
            "(would result in a negative duration)"
        )
    return Duration(remaining)


def multiply(duration: "Duration", factor: int | float) -> "Duration":
    """Multiply a duration by a scalar, truncating toward zero.

    The product is computed exactly, so very large durations and float
    factors keep full precision. A negative factor produces a negative
    product, which clamps to zero.

    Raises:
        TypeError: If factor is not an int or float.
        ValidationError: If factor is NaN or infinite.

    Examples:
        >>> from duratio.core.duration import Duration
        >>> multiply(Duration(100), 2)
        Duration(seconds=200)
        >>> multiply(Duration(10), 0.25)
        Duration(seconds=2)
    """
    from duratio.core.duration import Duration

    require_number("factor", factor)
    return Duration(int(Fraction(duration.to_seconds()) * Fraction(factor)))


def divide(duration: "Duration", divisor: int | float) -> "Duration":
    """Divide a duration by a scalar, truncating toward zero.

    The quotient is computed exactly, so very large durations and tiny
    divisors keep full precision.

    Raises:
        DivisionByZeroError: If divisor is zero.
        TypeError: If divisor is not an int or float.
        ValidationError: If divisor is NaN or infinite.

    Examples:
        >>> from duratio.core.duration import Duration
        >>> divide(Duration(100), 2)
        Duration(seconds=50)
        >>> divide(Duration(100), 3)
        Duration(seconds=33)
    """
    from duratio.core.duration import Duration

    require_number("divisor", divisor)
    if divisor == 0:
        raise DivisionByZeroError(f"cannot divide {duration} by zero")

    return Duration(int(Fraction(duration.to_seconds()) / Fraction(divisor)))


def floor_divide(duration: "Duration", divisor: int) -> "Duration":
    """Floor-divide a duration by an integer.

    Raises:
        DivisionByZeroError: If divisor is zero.
        TypeError: If divisor is not an int.
    """
    from duratio.core.duration import Duration

    require_int("divisor", divisor)
    if divisor == 0:
        raise DivisionByZeroError(f"cannot divide {duration} by zero")
    return Duration(duration.to_seconds() // divisor)


def _check_durations(operator: str, left: object, right: object) -> None:
    """Raise TypeError unless both operands are Durations."""
    from duratio.core.duration import Duration

    if not isinstance(left, Duration) or not isinstance(right, Duration):
        raise TypeError(
            f"unsupported operand type(s) for {operator}: "
            f"{type(left).__name__!r} and {type(right).__name__!r}"
        )


__all__ = [
    "add",
    "subtract",
    "strict_subtract",
    "add_unit",
    "subtract_unit",
    "multiply",
    "divide",
    "floor_divide",
]
