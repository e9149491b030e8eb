"""Tests for JSON-ready export and import."""

import json

import pytest

from duratio import Duration
from duratio.convert import from_json, to_json
from duratio.errors import ParseError


class TestToJson:
    """Tests for Duration.to_json() and to_json(Duration)."""

    def test_structure(self, full_duration):
        """Export carries seconds, iso8601 and all six components."""
        result = full_duration.to_json()
        assert result == {
            "seconds": 37090998,
            "iso8601": "P1Y2M3DT4H5M6S",
            "components": {
                "years": 1,
                "months": 2,
                "days": 3,
                "hours": 4,
                "minutes": 5,
                "seconds": 6,
            },
        }

    def test_zero_components_present(self):
        """Unlike to_dict(), zero components are kept."""
        result = to_json(Duration(60))
        assert result["components"] == {
            "years": 0,
            "months": 0,
            "days": 0,
            "hours": 0,
            "minutes": 1,
            "seconds": 0,
        }
        assert result["iso8601"] == "PT1M"

    def test_is_serializable(self, full_duration):
        decoded = json.loads(json.dumps(full_duration.to_json()))
        assert decoded["seconds"] == 37090998
        assert decoded["iso8601"] == "P1Y2M3DT4H5M6S"
        assert decoded["components"]["seconds"] == 6

    def test_rejects_non_duration(self):
        with pytest.raises(TypeError):
            to_json(3600)


class TestFromJson:
    """Tests for Duration.from_json() and from_json()."""

    def test_round_trip(self, full_duration):
        assert from_json(to_json(full_duration)) == full_duration
        assert Duration.from_json(full_duration.to_json()) == full_duration

    def test_seconds_preferred_over_iso8601(self):
        data = {"seconds": 10, "iso8601": "PT1H"}
        assert from_json(data).to_seconds() == 10

    def test_iso8601_fallback(self):
        assert from_json({"iso8601": "PT1H"}).to_seconds() == 3600

    def test_negative_seconds_clamp(self):
        assert from_json({"seconds": -5}).to_seconds() == 0

    @pytest.mark.parametrize(
        "data",
        [
            {},
            {"components": {"seconds": 5}},
            {"seconds": "10"},
            {"seconds": 1.5},
            {"seconds": True},
            {"iso8601": 3600},
            {"iso8601": "P1X"},
        ],
    )
    def test_invalid_data(self, data):
        with pytest.raises(ParseError):
            from_json(data)

    def test_non_mapping(self):
        with pytest.raises(ParseError, match="expected dict"):
            from_json(["seconds", 5])
