"""Validation utilities for Duratio.

Shared argument checks used by the Duration methods and the standalone
arithmetic and comparison functions.

This module is not part of the public API.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import TYPE_CHECKING

from duratio.errors import ComparisonTypeError, ValidationError

if TYPE_CHECKING:
    from duratio.core.duration import Duration


def require_int(name: str, value: object) -> int:
    """Check that value is a plain integer.

    bool is rejected even though it subclasses int.

    Args:
        name: Parameter name used in the error message.
        value: The value to check.

    Returns:
        The value, unchanged.

    Raises:
        TypeError: If value is not an int.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def require_number(name: str, value: object) -> int | float:
    """Check that value is a finite int or float scalar (not bool).

    Raises:
        TypeError: If value is not a real scalar.
        ValidationError: If value is NaN or infinite.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(
            f"{name} must be an int or float, got {type(value).__name__}"
        )
    if isinstance(value, float) and not math.isfinite(value):
        raise ValidationError(f"{name} must be finite, got {value!r}")
    return value


def require_durations(values: Iterable[object]) -> list["Duration"]:
    """Materialize a comparison sequence, checking every element.

    Args:
        values: An iterable that should contain only Duration instances.

    Returns:
        The elements as a list, in order.

    Raises:
        ComparisonTypeError: If any element is not a Duration.
    """
    from duratio.core.duration import Duration

    items = list(values)
    for index, item in enumerate(items):
        if not isinstance(item, Duration):
            raise ComparisonTypeError(
                "sequence must contain only Duration values, "
                f"got {type(item).__name__} at index {index}"
            )
    return items


__all__ = [
    "require_int",
    "require_number",
    "require_durations",
]
