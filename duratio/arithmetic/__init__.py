"""Duration arithmetic and comparison operations.

The functions in this module serve as the canonical implementations
for duration arithmetic. They provide explicit function-based APIs
that complement the method- and operator-based APIs on Duration.

Arithmetic Operations (from duratio.arithmetic.ops):
    - add: Sum of two durations
    - subtract: Saturating difference
    - strict_subtract: Difference that refuses to go negative
    - add_unit, subtract_unit: Shift by a fixed-length unit
    - multiply, divide, floor_divide: Scale by numeric scalars

Comparison Operations (from duratio.arithmetic.comparisons):
    - equal, less_than, less_equal, greater_than, greater_equal:
      Pairwise or sequence (ALL/ANY) comparisons
    - compare: Return -1, 0, or 1 for comparison
    - between: Range membership, inclusive or exclusive
    - min_value, max_value: Find extremes
    - clamp: Constrain value to range
"""

from __future__ import annotations

from duratio.arithmetic.ops import (
    add,
    subtract,
    strict_subtract,
    add_unit,
    subtract_unit,
    multiply,
    divide,
    floor_divide,
)
from duratio.arithmetic.comparisons import (
    ComparisonMode,
    equal,
    less_than,
    less_equal,
    greater_than,
    greater_equal,
    compare,
    between,
    min_value,
    max_value,
    clamp,
)

__all__ = [
    # Arithmetic operations
    "add",
    "subtract",
    "strict_subtract",
    "add_unit",
    "subtract_unit",
    "multiply",
    "divide",
    "floor_divide",
    # Comparison operations
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
