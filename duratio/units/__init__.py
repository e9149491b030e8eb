"""Unit and flag enumerations for Duratio.

This module provides:
    - TimeUnit: Fixed-length units from SECOND to YEAR
    - ComparisonMode: ALL/ANY flag for sequence comparisons
"""

from __future__ import annotations

from duratio.units.comparison_mode import ComparisonMode
from duratio.units.timeunit import TimeUnit

__all__: list[str] = [
    "ComparisonMode",
    "TimeUnit",
]
