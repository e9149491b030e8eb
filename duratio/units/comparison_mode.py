"""ComparisonMode enumeration for sequence comparisons.

When a comparison method receives a sequence of durations, the mode says
whether the relation must hold against every element or at least one.
"""

from __future__ import annotations

from enum import Enum

from duratio.errors import ComparisonModeError


class ComparisonMode(Enum):
    """How a relation is applied to a sequence of durations.

    Examples:
        >>> ComparisonMode.coerce("any")
        <ComparisonMode.ANY: 'any'>

        >>> ComparisonMode.coerce(ComparisonMode.ALL)
        <ComparisonMode.ALL: 'all'>
    """

    ALL = "all"
    ANY = "any"

    @classmethod
    def coerce(cls, mode: ComparisonMode | str) -> ComparisonMode:
        """Return mode as a ComparisonMode.

        Args:
            mode: A ComparisonMode or one of the strings "all" / "any".

        Raises:
            ComparisonModeError: If mode is not a recognized mode.
        """
        if isinstance(mode, cls):
            return mode
        if isinstance(mode, str):
            try:
                return cls(mode.lower())
            except ValueError:
                pass
        raise ComparisonModeError(
            f"invalid comparison mode {mode!r}, expected 'all' or 'any'"
        )


__all__ = ["ComparisonMode"]
