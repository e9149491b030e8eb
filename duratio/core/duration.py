"""Duration class representing a non-negative span of time.

This module provides the Duration value type. A Duration stores a single
whole number of seconds that is never negative; every other view (years,
months, days, hours, minutes, seconds) is derived from it on demand.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Union

from duratio._internal.constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_MONTH,
    SECONDS_PER_WEEK,
    SECONDS_PER_YEAR,
)
from duratio._internal.validation import require_int
from duratio.core.components import Components, decompose
from duratio.units.comparison_mode import ComparisonMode
from duratio.units.timeunit import TimeUnit

if TYPE_CHECKING:
    import datetime as _datetime

    from duratio.convert.interval import CalendarInterval
    from duratio.convert.timestamps import TimestampType

# A single Duration or an ordered collection of them
DurationOperand = Union["Duration", Iterable["Duration"]]


class Duration:
    """An immutable, non-negative span of time in whole seconds.

    Negative input is clamped to zero instead of raising. Every operation
    returns a new instance; the receiver is never modified.

    Months and years use fixed average lengths (30.44 and 365.25 days), so
    the component view is an approximation and not tied to any calendar.

    Attributes:
        years: Whole average years.
        months: Average months left after the years.
        days: Days left after the months.
        hours: Hours within the day.
        minutes: Minutes within the hour.
        remaining_seconds: Seconds within the minute.

    Examples:
        >>> d = Duration(5400)
        >>> d.to_iso8601()
        'PT1H30M'
        >>> d.to_human_readable()
        '01:30:00'

        >>> Duration(-10).to_seconds()
        0

        >>> Duration.from_iso8601("P1Y2M3DT4H5M6S").to_seconds()
        37090998

        >>> (Duration.from_minutes(1) + Duration(30)).to_seconds()
        90
    """

    __slots__ = ("_seconds",)

    def __init__(self, seconds: int = 0) -> None:
        """Create a Duration from a total number of seconds.

        Args:
            seconds: Total seconds. Negative values are clamped to 0.

        Raises:
            TypeError: If seconds is not an int.
        """
        require_int("seconds", seconds)
        self._seconds = max(0, seconds)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def zero(cls) -> Duration:
        """Create a zero-length duration."""
        return cls(0)

    @classmethod
    def of(cls, amount: int, unit: TimeUnit | str) -> Duration:
        """Create a Duration from an amount of a fixed-length unit.

        Args:
            amount: Number of units. A negative result clamps to zero.
            unit: A TimeUnit or its value string (e.g. "hour").

        Returns:
            A Duration of amount * unit-length seconds.

        Raises:
            TypeError: If amount is not an int.
            ValueError: If unit is not a known unit name.

        Examples:
            >>> Duration.of(2, TimeUnit.HOUR).to_seconds()
            7200
            >>> Duration.of(1, "week").to_seconds()
            604800
        """
        require_int("amount", amount)
        unit = TimeUnit(unit)
        return cls(amount * unit.to_seconds())

    @classmethod
    def from_seconds(cls, seconds: int) -> Duration:
        """Create a Duration from a number of seconds."""
        return cls.of(seconds, TimeUnit.SECOND)

    @classmethod
    def from_minutes(cls, minutes: int) -> Duration:
        """Create a Duration from a number of minutes.

        Examples:
            >>> Duration.from_minutes(2).to_seconds()
            120
        """
        return cls.of(minutes, TimeUnit.MINUTE)

    @classmethod
    def from_hours(cls, hours: int) -> Duration:
        """Create a Duration from a number of hours."""
        return cls.of(hours, TimeUnit.HOUR)

    @classmethod
    def from_days(cls, days: int) -> Duration:
        """Create a Duration from a number of days."""
        return cls.of(days, TimeUnit.DAY)

    @classmethod
    def from_weeks(cls, weeks: int) -> Duration:
        """Create a Duration from a number of weeks."""
        return cls.of(weeks, TimeUnit.WEEK)

    @classmethod
    def from_months(cls, months: int) -> Duration:
        """Create a Duration from a number of average (30.44 day) months.

        Examples:
            >>> Duration.from_months(1).to_seconds()
            2629746
        """
        return cls.of(months, TimeUnit.MONTH)

    @classmethod
    def from_years(cls, years: int) -> Duration:
        """Create a Duration from a number of average (365.25 day) years.

        Examples:
            >>> Duration.from_years(1).to_seconds()
            31557600
        """
        return cls.of(years, TimeUnit.YEAR)

    @classmethod
    def from_components(
        cls,
        years: int = 0,
        months: int = 0,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
    ) -> Duration:
        """Create a Duration from explicit unit amounts.

        Each amount is multiplied by its fixed unit length and the results
        are summed.

        Examples:
            >>> Duration.from_components(hours=1, minutes=30).to_seconds()
            5400
        """
        total = 0
        for name, amount, unit_seconds in (
            ("years", years, SECONDS_PER_YEAR),
            ("months", months, SECONDS_PER_MONTH),
            ("days", days, SECONDS_PER_DAY),
            ("hours", hours, SECONDS_PER_HOUR),
            ("minutes", minutes, SECONDS_PER_MINUTE),
            ("seconds", seconds, 1),
        ):
            total += require_int(name, amount) * unit_seconds
        return cls(total)

    @staticmethod
    def validate(value: str) -> bool:
        """Return True if value is an acceptable ISO 8601 duration string.

        Examples:
            >>> Duration.validate("PT0S")
            True
            >>> Duration.validate("P")
            False
        """
        from duratio.format.iso8601 import validate_iso8601

        return validate_iso8601(value)

    @classmethod
    def from_iso8601(cls, value: str) -> Duration:
        """Parse an ISO 8601 duration string such as "P1DT2H".

        Raises:
            ParseError: If the string is not a valid duration.
        """
        from duratio.format.iso8601 import parse_iso8601

        return parse_iso8601(value)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Duration:
        """Create a Duration from the structure produced by to_json()."""
        from duratio.convert.json import from_json

        return from_json(data)

    @classmethod
    def from_calendar_interval(cls, interval: CalendarInterval) -> Duration:
        """Create a Duration from a CalendarInterval's fields."""
        from duratio.convert.interval import from_calendar_interval

        return from_calendar_interval(interval)

    @classmethod
    def from_timedelta(cls, delta: _datetime.timedelta) -> Duration:
        """Create a Duration from a datetime.timedelta, truncating fractions."""
        from duratio.convert.interval import from_timedelta

        return from_timedelta(delta)

    @classmethod
    def between_timestamps(
        cls,
        start: TimestampType,
        end: TimestampType,
    ) -> Duration:
        """Create the Duration elapsed from start to end.

        An end before start yields a zero duration rather than an error.
        """
        from duratio.convert.timestamps import between

        return between(start, end)

    # ------------------------------------------------------------------
    # Unit conversions and components
    # ------------------------------------------------------------------

    @property
    def total_seconds(self) -> int:
        """Return the stored number of seconds."""
        return self._seconds

    @property
    def is_zero(self) -> bool:
        """Return True if this is a zero-length duration."""
        return self._seconds == 0

    def to_seconds(self) -> int:
        """Return the total duration in seconds."""
        return self._seconds

    def to_minutes(self) -> int:
        """Return the number of whole minutes (floor)."""
        return self._seconds // SECONDS_PER_MINUTE

    def to_hours(self) -> int:
        """Return the number of whole hours (floor)."""
        return self._seconds // SECONDS_PER_HOUR

    def to_days(self) -> int:
        """Return the number of whole days (floor)."""
        return self._seconds // SECONDS_PER_DAY

    def to_weeks(self) -> int:
        """Return the number of whole weeks (floor)."""
        return self._seconds // SECONDS_PER_WEEK

    def to_months(self) -> int:
        """Return the number of whole average months (floor)."""
        return self._seconds // SECONDS_PER_MONTH

    def to_years(self) -> int:
        """Return the number of whole average years (floor)."""
        return self._seconds // SECONDS_PER_YEAR

    def components(self) -> Components:
        """Return the cascaded years/months/days/hours/minutes/seconds view.

        Examples:
            >>> Duration(90061).components()
            Components(years=0, months=0, days=1, hours=1, minutes=1, seconds=1)
        """
        return decompose(self._seconds)

    @property
    def years(self) -> int:
        return self.components().years

    @property
    def months(self) -> int:
        return self.components().months

    @property
    def days(self) -> int:
        return self.components().days

    @property
    def hours(self) -> int:
        return self.components().hours

    @property
    def minutes(self) -> int:
        return self.components().minutes

    @property
    def remaining_seconds(self) -> int:
        return self.components().seconds

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: Duration) -> Duration:
        """Return the sum of this duration and other."""
        from duratio.arithmetic.ops import add

        return add(self, other)

    def subtract(self, other: Duration) -> Duration:
        """Return the difference, clamped to zero if other is longer."""
        from duratio.arithmetic.ops import subtract

        return subtract(self, other)

    def strict_subtract(self, other: Duration) -> Duration:
        """Return the exact difference.

        Raises:
            NegativeDurationError: If other is longer than this duration.
        """
        from duratio.arithmetic.ops import strict_subtract

        return strict_subtract(self, other)

    def add_unit(self, amount: int, unit: TimeUnit | str) -> Duration:
        """Add amount units of a fixed-length unit."""
        from duratio.arithmetic.ops import add_unit

        return add_unit(self, amount, TimeUnit(unit))

    def subtract_unit(self, amount: int, unit: TimeUnit | str) -> Duration:
        """Subtract amount units of a fixed-length unit.

        Raises:
            NegativeDurationError: If the result would be negative.
        """
        from duratio.arithmetic.ops import subtract_unit

        return subtract_unit(self, amount, TimeUnit(unit))

    def add_years(self, years: int) -> Duration:
        return self.add_unit(years, TimeUnit.YEAR)

    def add_months(self, months: int) -> Duration:
        return self.add_unit(months, TimeUnit.MONTH)

    def add_weeks(self, weeks: int) -> Duration:
        return self.add_unit(weeks, TimeUnit.WEEK)

    def add_days(self, days: int) -> Duration:
        return self.add_unit(days, TimeUnit.DAY)

    def add_hours(self, hours: int) -> Duration:
        return self.add_unit(hours, TimeUnit.HOUR)

    def add_minutes(self, minutes: int) -> Duration:
        return self.add_unit(minutes, TimeUnit.MINUTE)

    def add_seconds(self, seconds: int) -> Duration:
        return self.add_unit(seconds, TimeUnit.SECOND)

    def subtract_years(self, years: int) -> Duration:
        return self.subtract_unit(years, TimeUnit.YEAR)

    def subtract_months(self, months: int) -> Duration:
        return self.subtract_unit(months, TimeUnit.MONTH)

    def subtract_weeks(self, weeks: int) -> Duration:
        return self.subtract_unit(weeks, TimeUnit.WEEK)

    def subtract_days(self, days: int) -> Duration:
        return self.subtract_unit(days, TimeUnit.DAY)

    def subtract_hours(self, hours: int) -> Duration:
        """Subtract hours, raising NegativeDurationError on underflow.

        Examples:
            >>> Duration(7200).subtract_hours(1).to_seconds()
            3600
        """
        return self.subtract_unit(hours, TimeUnit.HOUR)

    def subtract_minutes(self, minutes: int) -> Duration:
        return self.subtract_unit(minutes, TimeUnit.MINUTE)

    def subtract_seconds(self, seconds: int) -> Duration:
        return self.subtract_unit(seconds, TimeUnit.SECOND)

    def multiply(self, factor: int | float) -> Duration:
        """Scale by factor, truncating the result to whole seconds.

        Examples:
            >>> Duration(100).multiply(1.5).to_seconds()
            150
        """
        from duratio.arithmetic.ops import multiply

        return multiply(self, factor)

    def divide(self, divisor: int | float) -> Duration:
        """Divide by divisor, truncating the result to whole seconds.

        Raises:
            DivisionByZeroError: If divisor is zero.
        """
        from duratio.arithmetic.ops import divide

        return divide(self, divisor)

    def increment(self) -> Duration:
        """Return this duration plus one second."""
        return self.increment_by(1)

    def increment_by(self, seconds: int = 1) -> Duration:
        """Return this duration plus the given number of seconds."""
        return self.add_seconds(seconds)

    def increment_by_duration(self, other: Duration) -> Duration:
        """Same as add()."""
        return self.add(other)

    def decrement(self) -> Duration:
        """Return this duration minus one second.

        Raises:
            NegativeDurationError: If this duration is zero.
        """
        return self.decrement_by(1)

    def decrement_by(self, seconds: int = 1) -> Duration:
        """Return this duration minus the given number of seconds.

        Raises:
            NegativeDurationError: If the result would be negative.
        """
        return self.subtract_seconds(seconds)

    def decrement_by_duration(self, other: Duration) -> Duration:
        """Same as strict_subtract()."""
        return self.strict_subtract(other)

    def safe_decrement(self) -> Duration:
        """Return this duration minus one second, never below zero."""
        return self.safe_decrement_by(1)

    def safe_decrement_by(self, seconds: int = 1) -> Duration:
        """Return this duration minus seconds, clamped to zero.

        Examples:
            >>> Duration(100).safe_decrement_by(200).to_seconds()
            0
        """
        require_int("seconds", seconds)
        return Duration(self._seconds - seconds)

    def safe_decrement_by_duration(self, other: Duration) -> Duration:
        """Same as subtract()."""
        return self.subtract(other)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def compare_to(self, other: Duration) -> int:
        """Return -1, 0 or 1 as this duration is shorter, equal or longer."""
        from duratio.arithmetic.comparisons import compare

        return compare(self, other)

    def equals(
        self,
        other: DurationOperand,
        mode: ComparisonMode | str = ComparisonMode.ALL,
    ) -> bool:
        """Test equality against a Duration or a sequence of Durations.

        Args:
            other: A Duration, or an iterable of Durations.
            mode: ComparisonMode.ALL (default) or ComparisonMode.ANY; only
                used for sequences.

        Raises:
            ComparisonTypeError: If the sequence holds a non-Duration.
            ComparisonModeError: If mode is not ALL or ANY.
        """
        from duratio.arithmetic.comparisons import equal

        return equal(self, other, mode)

    def less_than(
        self,
        other: DurationOperand,
        mode: ComparisonMode | str = ComparisonMode.ALL,
    ) -> bool:
        """Test self < other, or against each element of a sequence.

        An empty sequence yields False in both modes.

        Examples:
            >>> Duration(10).less_than([Duration(20), Duration(30)])
            True
            >>> Duration(25).less_than([Duration(20), Duration(30)], "any")
            True
            >>> Duration(10).less_than([])
            False
        """
        from duratio.arithmetic.comparisons import less_than

        return less_than(self, other, mode)

    def less_than_or_equal(
        self,
        other: DurationOperand,
        mode: ComparisonMode | str = ComparisonMode.ALL,
    ) -> bool:
        from duratio.arithmetic.comparisons import less_equal

        return less_equal(self, other, mode)

    def greater_than(
        self,
        other: DurationOperand,
        mode: ComparisonMode | str = ComparisonMode.ALL,
    ) -> bool:
        from duratio.arithmetic.comparisons import greater_than

        return greater_than(self, other, mode)

    def greater_than_or_equal(
        self,
        other: DurationOperand,
        mode: ComparisonMode | str = ComparisonMode.ALL,
    ) -> bool:
        from duratio.arithmetic.comparisons import greater_equal

        return greater_equal(self, other, mode)

    def between(
        self,
        minimum: Duration,
        maximum: Duration,
        inclusive: bool = True,
    ) -> bool:
        """Test whether this duration lies between minimum and maximum.

        Examples:
            >>> Duration(60).between(Duration(60), Duration(120))
            True
            >>> Duration(60).between(Duration(60), Duration(120), inclusive=False)
            False
        """
        from duratio.arithmetic.comparisons import between

        return between(self, minimum, maximum, inclusive=inclusive)

    # ------------------------------------------------------------------
    # Formatting and export
    # ------------------------------------------------------------------

    def to_iso8601(self) -> str:
        """Return the ISO 8601 form, e.g. "P1DT2H"; zero is "PT0S"."""
        from duratio.format.iso8601 import format_iso8601

        return format_iso8601(self)

    def to_dict(self) -> dict[str, int]:
        """Return the non-zero components only.

        A zero duration returns {"seconds": 0}.

        Examples:
            >>> Duration(3661).to_dict()
            {'hours': 1, 'minutes': 1, 'seconds': 1}
            >>> Duration(0).to_dict()
            {'seconds': 0}
        """
        filtered = {
            name: value
            for name, value in self.components().as_dict().items()
            if value > 0
        }
        if not filtered:
            return {"seconds": 0}
        return filtered

    def format(self, template: str) -> str:
        """Substitute %Y %M %D %H %I %S %T placeholders in template."""
        from duratio.format.template import format_duration

        return format_duration(self, template)

    def to_human_readable(self) -> str:
        """Return a colon-separated clock-like form such as "01:30:00"."""
        from duratio.format.template import format_human_readable

        return format_human_readable(self)

    def to_json(self) -> dict[str, Any]:
        """Return the structured export: seconds, iso8601 and components."""
        from duratio.convert.json import to_json

        return to_json(self)

    def to_calendar_interval(self) -> CalendarInterval:
        """Return a CalendarInterval filled from the components."""
        from duratio.convert.interval import to_calendar_interval

        return to_calendar_interval(self)

    def to_timedelta(self) -> _datetime.timedelta:
        """Return an exact datetime.timedelta."""
        from duratio.convert.interval import to_timedelta

        return to_timedelta(self)

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: object) -> Duration:
        """Support sum() by handling 0 + Duration."""
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Duration:
        """Saturating subtraction, same as subtract()."""
        if not isinstance(other, Duration):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> Duration:
        if isinstance(other, bool) or not isinstance(other, (int, float)):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: object) -> Duration:
        """Support scalar * Duration."""
        return self.__mul__(other)

    def __truediv__(self, other: object) -> Duration:
        if isinstance(other, bool) or not isinstance(other, (int, float)):
            return NotImplemented
        return self.divide(other)

    def __floordiv__(self, other: object) -> Duration:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        from duratio.arithmetic.ops import floor_divide

        return floor_divide(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds == other._seconds

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds < other._seconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds <= other._seconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds > other._seconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds >= other._seconds

    def __hash__(self) -> int:
        return hash(self._seconds)

    def __bool__(self) -> bool:
        """Return True if this is a non-zero duration."""
        return self._seconds != 0

    def __repr__(self) -> str:
        return f"Duration(seconds={self._seconds})"

    def __str__(self) -> str:
        """Return the ISO 8601 representation."""
        return self.to_iso8601()


__all__ = ["Duration", "DurationOperand"]
