"""Tests for the interval and timestamp adapters."""

from __future__ import annotations

import datetime

import pytest

from duratio import CalendarInterval, Duration
from duratio.convert import (
    between,
    from_calendar_interval,
    from_timedelta,
    to_calendar_interval,
    to_timedelta,
)


class TestCalendarInterval:
    """Tests for CalendarInterval conversions."""

    def test_from_calendar_interval(self) -> None:
        interval = CalendarInterval(
            years=1, months=2, days=3, hours=4, minutes=5, seconds=6
        )
        assert Duration.from_calendar_interval(interval).to_seconds() == 37090998

    def test_total_seconds_ignored_on_input(self) -> None:
        interval = CalendarInterval(minutes=1, total_seconds=999)
        assert from_calendar_interval(interval).to_seconds() == 60

    def test_to_calendar_interval(self, full_duration) -> None:
        interval = full_duration.to_calendar_interval()
        assert interval == CalendarInterval(
            years=1,
            months=2,
            days=3,
            hours=4,
            minutes=5,
            seconds=6,
            total_seconds=37090998,
        )

    def test_round_trip(self) -> None:
        d = Duration(123456789)
        assert from_calendar_interval(to_calendar_interval(d)) == d

    def test_field_types_checked(self) -> None:
        with pytest.raises(TypeError, match="days"):
            from_calendar_interval(CalendarInterval(days=1.5))  # type: ignore[arg-type]

    def test_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            from_calendar_interval({"days": 1})  # type: ignore[arg-type]


class TestTimedelta:
    """Tests for datetime.timedelta conversions."""

    def test_from_timedelta(self) -> None:
        delta = datetime.timedelta(days=1, hours=1, minutes=1, seconds=1)
        assert Duration.from_timedelta(delta).to_seconds() == 90061

    def test_from_timedelta_drops_microseconds(self) -> None:
        delta = datetime.timedelta(seconds=5, microseconds=999_999)
        assert from_timedelta(delta).to_seconds() == 5

    def test_negative_timedelta_clamps(self) -> None:
        assert from_timedelta(datetime.timedelta(seconds=-30)).to_seconds() == 0

    def test_to_timedelta(self) -> None:
        assert Duration(90061).to_timedelta() == datetime.timedelta(seconds=90061)
        assert to_timedelta(Duration(0)) == datetime.timedelta(0)

    def test_from_timedelta_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            from_timedelta(60)  # type: ignore[arg-type]


class TestBetweenTimestamps:
    """Tests for the elapsed-time constructor."""

    def test_datetimes(self) -> None:
        start = datetime.datetime(2024, 1, 15, 12, 0, 0)
        end = datetime.datetime(2024, 1, 16, 13, 30, 15)
        d = Duration.between_timestamps(start, end)
        assert d.to_seconds() == 86400 + 5400 + 15

    def test_aware_datetimes_across_offsets(self) -> None:
        utc = datetime.timezone.utc
        plus_two = datetime.timezone(datetime.timedelta(hours=2))
        start = datetime.datetime(2024, 1, 15, 12, 0, tzinfo=utc)
        end = datetime.datetime(2024, 1, 15, 15, 0, tzinfo=plus_two)
        assert between(start, end).to_seconds() == 3600

    def test_sub_second_parts_truncated(self) -> None:
        start = datetime.datetime(2024, 1, 1, 0, 0, 0, 900_000)
        end = datetime.datetime(2024, 1, 1, 0, 0, 1, 100_000)
        assert between(start, end).to_seconds() == 1

    def test_reversed_interval_clamps_to_zero(self) -> None:
        start = datetime.datetime(2024, 1, 16)
        end = datetime.datetime(2024, 1, 15)
        assert between(start, end).to_seconds() == 0

    def test_unix_timestamps(self) -> None:
        assert between(1_700_000_000, 1_700_003_600).to_seconds() == 3600
        assert between(0.9, 2.1).to_seconds() == 2
        assert between(100, 50).to_seconds() == 0

    def test_naive_and_aware_mix_raises(self) -> None:
        naive = datetime.datetime(2024, 1, 15)
        aware = datetime.datetime(2024, 1, 15, tzinfo=datetime.timezone.utc)
        with pytest.raises(TypeError):
            between(naive, aware)

    @pytest.mark.parametrize(
        ("start", "end"),
        [
            (datetime.datetime(2024, 1, 1), 0),
            ("2024-01-01", "2024-01-02"),
            (True, 5),
            (datetime.date(2024, 1, 1), datetime.date(2024, 1, 2)),
        ],
    )
    def test_unsupported_points(self, start, end) -> None:
        with pytest.raises(TypeError):
            between(start, end)
