"""JSON-ready export and import for durations.

The structured form carries the exact second count, the ISO 8601 string and
every decomposed component (zeros included):

    {
        "seconds": 37090998,
        "iso8601": "P1Y2M3DT4H5M6S",
        "components": {"years": 1, "months": 2, "days": 3,
                       "hours": 4, "minutes": 5, "seconds": 6},
    }

Functions:
    to_json: Convert a Duration to the structured form.
    from_json: Create a Duration from the structured form.

Examples:
    >>> import json
    >>> from duratio.core.duration import Duration
    >>> from duratio.convert import to_json, from_json

    >>> data = to_json(Duration(5400))
    >>> json.dumps(data["iso8601"])
    '"PT1H30M"'

    >>> from_json(data) == Duration(5400)
    True
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from duratio.errors import ParseError

if TYPE_CHECKING:
    from duratio.core.duration import Duration


def to_json(value: "Duration") -> dict[str, Any]:
    """Convert a Duration to a JSON-serializable dictionary.

    Unlike Duration.to_dict(), all six components are always present.

    Raises:
        TypeError: If value is not a Duration.

    Examples:
        >>> from duratio.core.duration import Duration
        >>> to_json(Duration(0))["components"]["hours"]
        0
        >>> to_json(Duration(0))["iso8601"]
        'PT0S'
    """
    from duratio.core.duration import Duration

    if not isinstance(value, Duration):
        raise TypeError(f"expected Duration, got {type(value).__name__}")

    return {
        "seconds": value.to_seconds(),
        "iso8601": value.to_iso8601(),
        "components": value.components().as_dict(),
    }


def from_json(data: Mapping[str, Any]) -> "Duration":
    """Create a Duration from a structured dictionary.

    The exact "seconds" field is preferred; when it is absent the "iso8601"
    field is parsed instead. The "components" field is informational and
    ignored on input.

    Raises:
        ParseError: If data is not a mapping, has neither field, or a field
            has the wrong type or format.

    Examples:
        >>> from_json({"seconds": 90}).to_seconds()
        90
        >>> from_json({"iso8601": "PT1M30S"}).to_seconds()
        90
    """
    from duratio.core.duration import Duration
    from duratio.format.iso8601 import parse_iso8601

    if not isinstance(data, Mapping):
        raise ParseError(f"expected dict, got {type(data).__name__}")

    seconds = data.get("seconds")
    if seconds is not None:
        if isinstance(seconds, bool) or not isinstance(seconds, int):
            raise ParseError(
                f"'seconds' must be an int, got {type(seconds).__name__}"
            )
        return Duration(seconds)

    iso = data.get("iso8601")
    if iso is None:
        raise ParseError("missing 'seconds' or 'iso8601' field for Duration")
    if not isinstance(iso, str):
        raise ParseError(f"'iso8601' must be a str, got {type(iso).__name__}")
    return parse_iso8601(iso)


__all__ = ["to_json", "from_json"]
