"""Tests for the Duratio public API.

This module verifies:
- All expected exports are available from the top-level package
- __all__ lists match actual exports in all modules
- End-to-end usage through the top-level names only
"""

from __future__ import annotations

import pytest


class TestPublicAPIExports:
    """Test that all expected exports are available from duratio."""

    def test_core_types_exported(self) -> None:
        from duratio import CalendarInterval, Components, Duration

        assert isinstance(Duration, type)
        assert isinstance(Components, type)
        assert isinstance(CalendarInterval, type)

    def test_unit_types_exported(self) -> None:
        from duratio import ComparisonMode, TimeUnit

        assert isinstance(ComparisonMode, type)
        assert isinstance(TimeUnit, type)

    def test_exception_types_exported(self) -> None:
        """All exception types should be importable from duratio."""
        from duratio import (
            ComparisonModeError,
            ComparisonTypeError,
            DivisionByZeroError,
            DuratioError,
            NegativeDurationError,
            ParseError,
            ValidationError,
        )

        for exc in (
            ValidationError,
            ParseError,
            NegativeDurationError,
            DivisionByZeroError,
            ComparisonTypeError,
            ComparisonModeError,
        ):
            assert issubclass(exc, DuratioError)

    def test_format_functions_exported(self) -> None:
        from duratio import format_iso8601, parse_iso8601, validate_iso8601

        assert callable(validate_iso8601)
        assert callable(parse_iso8601)
        assert callable(format_iso8601)


class TestAllListsMatchExports:
    """Test that __all__ lists accurately reflect module contents."""

    @pytest.mark.parametrize(
        "module_name",
        [
            "duratio",
            "duratio.core",
            "duratio.units",
            "duratio.format",
            "duratio.convert",
            "duratio.arithmetic",
            "duratio.errors",
        ],
    )
    def test_all_matches_actual(self, module_name: str) -> None:
        import importlib

        module = importlib.import_module(module_name)
        for name in module.__all__:
            assert hasattr(
                module, name
            ), f"{name!r} is in {module_name}.__all__ but not accessible"

    def test_top_level_no_private_exports(self) -> None:
        import duratio

        for name in duratio.__all__:
            if name == "__version__":
                continue
            assert not name.startswith("_"), name
        assert "_internal" not in duratio.__all__


class TestUsageScenarios:
    """End-to-end checks through the top-level package."""

    def test_ninety_minutes(self) -> None:
        from duratio import Duration

        d = Duration(5400)
        assert d.to_iso8601() == "PT1H30M"
        assert d.to_human_readable() == "01:30:00"

    def test_parse_full_iso_string(self) -> None:
        from duratio import Duration

        assert Duration.from_iso8601("P1Y2M3DT4H5M6S").to_seconds() == 37090998

    def test_validation(self) -> None:
        from duratio import Duration

        assert Duration.validate("P1X") is False
        assert Duration.validate("P") is False
        assert Duration.validate("PT0S") is True

    def test_zero_and_short_durations(self) -> None:
        from duratio import Duration

        assert Duration(0).to_dict() == {"seconds": 0}
        assert Duration(90).to_human_readable() == "01:30"

    def test_strict_and_saturating_subtraction(self) -> None:
        from duratio import Duration, NegativeDurationError

        with pytest.raises(NegativeDurationError):
            Duration(3600).subtract_hours(2)
        assert Duration(3600).subtract(Duration(7200)).to_seconds() == 0

    def test_budget_tracking(self) -> None:
        """A remaining-time budget built from the public API."""
        from duratio import ComparisonMode, Duration

        budget = Duration.from_iso8601("PT8H")
        spent = [Duration.from_minutes(95), Duration.from_minutes(150)]
        remaining = budget - sum(spent)
        assert str(remaining) == "PT3H55M"
        assert remaining.greater_than(spent, ComparisonMode.ALL) is True
        assert remaining.less_than(spent, "any") is False
        assert remaining.format("%H:%I") == "03:55"

    def test_error_kinds_are_catchable_as_base(self) -> None:
        from duratio import Duration, DuratioError

        for call in (
            lambda: Duration(1).divide(0),
            lambda: Duration(0).decrement(),
            lambda: Duration.from_iso8601("P1X"),
            lambda: Duration(1).equals([1]),
            lambda: Duration(1).equals(Duration(1), "some"),
        ):
            with pytest.raises(DuratioError):
                call()
