"""Template and human-readable formatting for durations.

Supported Placeholders:
    %Y - Years, 2-digit zero-padded
    %M - Months, 2-digit zero-padded
    %D - Days, 2-digit zero-padded
    %H - Hours, 2-digit zero-padded
    %I - Minutes, 2-digit zero-padded
    %S - Seconds within the minute, 2-digit zero-padded
    %T - Total seconds, unpadded

Everything else in the template is copied as is; there is no escape
sequence, so "%%" is not a literal percent sign. Substitution is a single
left-to-right pass and replaced text is never scanned again.

Functions:
    format_duration: Substitute placeholders in a template.
    format_human_readable: Render as colon-separated 2-digit fields.

Examples:
    >>> from duratio.core.duration import Duration
    >>> d = Duration.from_iso8601("P1Y2M3DT4H5M6S")
    >>> format_duration(d, "%H:%I:%S")
    '04:05:06'
    >>> format_human_readable(d)
    '01:02:03:04:05:06'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from duratio._internal.constants import FIELD_WIDTH
from duratio.core.components import Components

if TYPE_CHECKING:
    from duratio.core.duration import Duration


def _pad(value: int) -> str:
    return str(value).zfill(FIELD_WIDTH)


# Placeholder -> rendering of (components, total seconds)
_PLACEHOLDERS: dict[str, Callable[[Components, int], str]] = {
    "%Y": lambda parts, total: _pad(parts.years),
    "%M": lambda parts, total: _pad(parts.months),
    "%D": lambda parts, total: _pad(parts.days),
    "%H": lambda parts, total: _pad(parts.hours),
    "%I": lambda parts, total: _pad(parts.minutes),
    "%S": lambda parts, total: _pad(parts.seconds),
    "%T": lambda parts, total: str(total),
}


def format_duration(duration: "Duration", template: str) -> str:
    """Format a duration using a %-placeholder template.

    Args:
        duration: The Duration to render.
        template: Text containing any of %Y %M %D %H %I %S %T.

    Returns:
        The template with every placeholder replaced.

    Raises:
        TypeError: If template is not a string.

    Examples:
        >>> from duratio.core.duration import Duration
        >>> d = Duration(37090998)
        >>> format_duration(d, "Year: %Y, Month: %M, Day: %D")
        'Year: 01, Month: 02, Day: 03'
        >>> format_duration(d, "%T")
        '37090998'
        >>> format_duration(Duration(5), "%X %S")
        '%X 05'
    """
    if not isinstance(template, str):
        raise TypeError(f"template must be a str, got {type(template).__name__}")

    parts = duration.components()
    total = duration.to_seconds()

    result = []
    i = 0
    while i < len(template):
        token = template[i : i + 2]
        render = _PLACEHOLDERS.get(token)
        if render is not None:
            result.append(render(parts, total))
            i += 2
        else:
            result.append(template[i])
            i += 1

    return "".join(result)


def format_human_readable(duration: "Duration") -> str:
    """Render a duration as colon-separated 2-digit fields.

    Minutes and seconds are always shown. Each higher unit is added only
    when it, or a unit above it, is non-zero, so the output has 2 to 6
    fields:

        MM:SS, HH:MM:SS, DD:HH:MM:SS, MO:DD:HH:MM:SS, YY:MO:DD:HH:MM:SS

    Examples:
        >>> from duratio.core.duration import Duration
        >>> format_human_readable(Duration(90))
        '01:30'
        >>> format_human_readable(Duration(7200))
        '02:00:00'
        >>> format_human_readable(Duration(86400))
        '01:00:00:00'
    """
    parts = duration.components()
    fields = [parts.years, parts.months, parts.days, parts.hours]

    # Drop leading zero units above hours; minutes and seconds always stay
    while fields and fields[0] == 0:
        fields.pop(0)

    fields.extend([parts.minutes, parts.seconds])
    return ":".join(_pad(value) for value in fields)


__all__ = ["format_duration", "format_human_readable"]
