"""Tests for ISO 8601 duration validation, parsing and formatting."""

from __future__ import annotations

import logging

import pytest

from duratio import Duration
from duratio.errors import ParseError
from duratio.format import format_iso8601, parse_iso8601, validate_iso8601


class TestValidate:
    """Tests for validate_iso8601() and Duration.validate()."""

    @pytest.mark.parametrize(
        "value",
        [
            "P1Y",
            "P1M",
            "P1D",
            "PT1H",
            "PT1M",
            "PT1S",
            "P1Y2M3DT4H5M6S",
            "PT0S",
            "P0D",
            "P10Y",
            "P1DT12H",
            "PT36H",
            "P0Y0M0DT0H0M0S",
        ],
    )
    def test_valid(self, value: str) -> None:
        assert validate_iso8601(value) is True
        assert Duration.validate(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            "P",
            "PT",
            "P1X",
            "1Y2M",
            "P1Y2MT",
            "PT1H2",
            "P1W",
            "P1.5Y",
            "PT1.5S",
            "P-1D",
            "-P1D",
            "P1D1Y",
            "PT1S1M",
            "P1Y1Y",
            "pt1h",
            "",
            " PT1H",
            "PT1H ",
            "PT1H\n",
            "P١D",
        ],
    )
    def test_invalid(self, value: str) -> None:
        assert validate_iso8601(value) is False

    @pytest.mark.parametrize("value", [None, 5, b"PT1H"])
    def test_non_string_is_invalid(self, value: object) -> None:
        assert validate_iso8601(value) is False  # type: ignore[arg-type]


class TestParse:
    """Tests for parse_iso8601() and Duration.from_iso8601()."""

    def test_full_duration(self) -> None:
        d = parse_iso8601("P1Y2M3DT4H5M6S")
        # 1*31557600 + 2*2629746 + 3*86400 + 4*3600 + 5*60 + 6
        assert d.to_seconds() == 37090998

    def test_classmethod_delegates(self) -> None:
        assert Duration.from_iso8601("PT1H30M") == Duration(5400)

    def test_zero(self) -> None:
        assert parse_iso8601("PT0S").to_seconds() == 0

    def test_time_only_minutes_are_minutes(self) -> None:
        """M after T means minutes, before T means months."""
        assert parse_iso8601("PT1M").to_seconds() == 60
        assert parse_iso8601("P1M").to_seconds() == 2629746

    def test_overflowing_units_are_summed(self) -> None:
        assert parse_iso8601("PT90M").to_seconds() == 5400
        assert parse_iso8601("PT36H").to_seconds() == 129600

    def test_large_numbers(self) -> None:
        assert parse_iso8601("PT100000000000000000000S").to_seconds() == 10**20

    @pytest.mark.parametrize("value", ["P", "PT", "P1X", "P1Y2MT", "PT1H2"])
    def test_invalid_raises_parse_error(self, value: str) -> None:
        with pytest.raises(ParseError, match="invalid ISO 8601 duration"):
            parse_iso8601(value)

    @pytest.mark.parametrize("value", [None, 5, b"PT1H"])
    def test_non_string_raises_parse_error(self, value: object) -> None:
        with pytest.raises(ParseError):
            parse_iso8601(value)  # type: ignore[arg-type]

    def test_error_names_offending_string(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_iso8601("P1X")
        assert "P1X" in str(exc_info.value)

    def test_parse_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Duration.from_iso8601("nonsense")

    def test_rejection_is_logged_at_debug(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="duratio.format.iso8601"):
            with pytest.raises(ParseError):
                parse_iso8601("P1X")
        assert "P1X" in caplog.text


class TestFormat:
    """Tests for format_iso8601() and Duration.to_iso8601()."""

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (0, "PT0S"),
            (1, "PT1S"),
            (60, "PT1M"),
            (3600, "PT1H"),
            (5400, "PT1H30M"),
            (86400, "P1D"),
            (90061, "P1DT1H1M1S"),
            (2629746, "P1M"),
            (31557600, "P1Y"),
            (37090998, "P1Y2M3DT4H5M6S"),
            (86400 + 1, "P1DT1S"),
        ],
    )
    def test_format(self, seconds: int, expected: str) -> None:
        assert format_iso8601(Duration(seconds)) == expected
        assert Duration(seconds).to_iso8601() == expected

    def test_numbers_are_not_padded(self) -> None:
        assert Duration(5).to_iso8601() == "PT5S"

    def test_format_rejects_non_duration(self) -> None:
        with pytest.raises(TypeError):
            format_iso8601(5400)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "seconds",
        [0, 1, 59, 61, 3599, 86399, 86401, 2629745, 2629747, 31557599, 10**12],
    )
    def test_round_trip(self, seconds: int) -> None:
        """Formatting then parsing returns the same second count."""
        assert parse_iso8601(format_iso8601(Duration(seconds))).to_seconds() == seconds
