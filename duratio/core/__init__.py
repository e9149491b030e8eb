"""Core types.

This module provides the fundamental types:
    - Duration: Non-negative time span stored as whole seconds
    - Components: Years/months/days/hours/minutes/seconds view of a Duration
"""

from __future__ import annotations

from duratio.core.components import Components, decompose
from duratio.core.duration import Duration

__all__: list[str] = [
    "Components",
    "Duration",
    "decompose",
]
