"""Duration formatting and parsing.

This module provides functions for converting durations to and from
string representations:
    - ISO 8601 duration validation, parsing and formatting
    - %-placeholder templates
    - Colon-separated human-readable output

Functions:
    validate_iso8601: Check an ISO 8601 duration string.
    parse_iso8601: Parse an ISO 8601 duration string.
    format_iso8601: Format a Duration as ISO 8601.
    format_duration: Format a Duration using a %-placeholder template.
    format_human_readable: Format a Duration as "HH:MM:SS"-style text.

Examples:
    >>> from duratio.format import parse_iso8601, format_human_readable
    >>> format_human_readable(parse_iso8601("PT1H30M"))
    '01:30:00'
"""

from __future__ import annotations

from duratio.format.iso8601 import format_iso8601, parse_iso8601, validate_iso8601
from duratio.format.template import format_duration, format_human_readable

__all__: list[str] = [
    # ISO 8601
    "validate_iso8601",
    "parse_iso8601",
    "format_iso8601",
    # Templates
    "format_duration",
    "format_human_readable",
]
