"""Internal utilities for Duratio.

This module contains private implementation details:
    - Unit-length constants
    - Argument validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from duratio._internal.validation import (
    require_durations,
    require_int,
    require_number,
)

__all__: list[str] = [
    "require_durations",
    "require_int",
    "require_number",
]
