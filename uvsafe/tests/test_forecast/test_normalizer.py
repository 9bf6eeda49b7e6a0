"""Tests for forecast record normalization."""

import pytest

from uvsafe.forecast.normalizer import normalize, resolve_timestamp
from uvsafe.models.forecast import SunPosition


class TestNumericTimestamps:
    def test_unix_seconds(self):
        assert resolve_timestamp(1700000000) == "2023-11-14T22:13:20.000Z"

    def test_unix_milliseconds(self):
        assert resolve_timestamp(1700000000000) == "2023-11-14T22:13:20.000Z"

    def test_milliseconds_keep_precision(self):
        assert resolve_timestamp(1700000000123) == "2023-11-14T22:13:20.123Z"

    def test_fractional_seconds(self):
        assert resolve_timestamp(1700000000.5) == "2023-11-14T22:13:20.500Z"

    def test_seconds_lower_bound_inclusive(self):
        assert resolve_timestamp(1_000_000_000) == "2001-09-09T01:46:40.000Z"

    def test_milliseconds_lower_bound_inclusive(self):
        # 1e12 ms and 1e9 s are the same instant.
        assert resolve_timestamp(1_000_000_000_000) == "2001-09-09T01:46:40.000Z"
        assert resolve_timestamp(1e12) == "2001-09-09T01:46:40.000Z"

    def test_below_seconds_bucket(self):
        assert resolve_timestamp(999_999_999) is None
        assert resolve_timestamp(0) is None
        assert resolve_timestamp(-1700000000) is None

    def test_seconds_past_calendar_range(self):
        # Just under 1e12 is "seconds", which lands beyond year 9999.
        assert resolve_timestamp(999_999_999_999) is None

    def test_non_finite(self):
        assert resolve_timestamp(float("nan")) is None
        assert resolve_timestamp(float("inf")) is None

    def test_bool_is_not_a_timestamp(self):
        assert resolve_timestamp(True) is None


class TestStringTimestamps:
    def test_naive_string_is_utc(self):
        assert resolve_timestamp("2023-11-15T01:00:00") == "2023-11-15T01:00:00.000Z"

    def test_offset_converted_to_utc(self):
        assert resolve_timestamp("2023-11-15T12:00:00+11:00") == "2023-11-15T01:00:00.000Z"

    def test_z_suffix(self):
        assert resolve_timestamp("2026-02-11T03:00:00.000Z") == "2026-02-11T03:00:00.000Z"

    def test_surrounding_whitespace(self):
        assert resolve_timestamp("  2023-11-15T01:00:00Z ") == "2023-11-15T01:00:00.000Z"

    def test_unparsable(self):
        assert resolve_timestamp("not a date") is None
        assert resolve_timestamp("") is None

    def test_other_types(self):
        assert resolve_timestamp(None) is None
        assert resolve_timestamp(["2023-11-15T01:00:00Z"]) is None

    @pytest.mark.parametrize(
        "value",
        [
            "2023-11-15T01:00:00",
            "2023-11-15T12:00:00+11:00",
            "2026-02-11T03:00:00.250Z",
            1700000000,
            1700000000123,
        ],
    )
    def test_idempotent(self, value):
        first = normalize({"uv": 1, "time": value})
        assert first is not None
        second = normalize({"uv": 1, "time": first.timestamp})
        assert second is not None
        assert second.timestamp == first.timestamp


class TestNormalize:
    def test_openuv_record(self):
        point = normalize({
            "uv": 10.4,
            "uv_time": "2026-02-11T03:00:00.000Z",
            "sun_position": {"azimuth": 0.62, "altitude": 1.16},
        })
        assert point is not None
        assert point.uv_index == 10.4
        assert point.timestamp == "2026-02-11T03:00:00.000Z"
        assert point.sun_position == SunPosition(azimuth=0.62, altitude=1.16)

    def test_alternate_keys(self):
        point = normalize({"value": 3, "timestamp": 1700000000})
        assert point is not None
        assert point.uv_index == 3.0
        assert point.timestamp == "2023-11-14T22:13:20.000Z"

        point = normalize({"UV": "4.5", "time": "2023-11-15T01:00:00"})
        assert point is not None
        assert point.uv_index == 4.5

    def test_time_key_priority(self):
        point = normalize({"uv": 1, "uv_time": "2023-11-15T01:00:00Z", "time": 1700000000})
        assert point is not None
        assert point.timestamp == "2023-11-15T01:00:00.000Z"

    def test_null_falls_through_to_next_key(self):
        point = normalize({"uv": None, "value": 2, "uv_time": None, "time": 1700000000})
        assert point is not None
        assert point.uv_index == 2.0
        assert point.timestamp == "2023-11-14T22:13:20.000Z"

    def test_first_present_wins_even_if_unparsable(self):
        assert normalize({"uv": 1, "uv_time": "garbage", "time": 1700000000}) is None

    def test_missing_time(self):
        assert normalize({"uv": 5}) is None

    def test_missing_uv(self):
        assert normalize({"time": 1700000000}) is None

    def test_non_numeric_uv(self):
        assert normalize({"uv": "bad", "time": "2023-11-15T02:00:00"}) is None
        assert normalize({"uv": "", "time": "2023-11-15T02:00:00"}) is None
        assert normalize({"uv": {"v": 1}, "time": "2023-11-15T02:00:00"}) is None

    def test_invalid_uv_values(self):
        assert normalize({"uv": -0.5, "time": 1700000000}) is None
        assert normalize({"uv": float("nan"), "time": 1700000000}) is None
        assert normalize({"uv": "inf", "time": 1700000000}) is None
        assert normalize({"uv": True, "time": 1700000000}) is None

    def test_uv_not_clamped(self):
        point = normalize({"uv": 14.7, "time": 1700000000})
        assert point is not None
        assert point.uv_index == 14.7

    def test_zero_uv_is_valid(self):
        point = normalize({"uv": 0, "time": 1700000000})
        assert point is not None
        assert point.uv_index == 0.0

    def test_non_object_record(self):
        assert normalize(None) is None
        assert normalize([1, 2]) is None
        assert normalize("uv=3") is None


class TestSunPosition:
    def test_alternate_names(self):
        point = normalize({"uv": 1, "time": 1700000000, "sun": {"az": "1.5", "elevation": -0.2}})
        assert point is not None
        assert point.sun_position == SunPosition(azimuth=1.5, altitude=-0.2)

    def test_partial_sun_position_is_dropped(self):
        point = normalize({"uv": 1, "time": 1700000000, "sun_position": {"azimuth": 1.5}})
        assert point is not None
        assert point.sun_position is None

    def test_malformed_sun_position_keeps_record(self):
        point = normalize({
            "uv": 1,
            "time": 1700000000,
            "sunPosition": {"azimuth": "east", "altitude": 0.3},
        })
        assert point is not None
        assert point.sun_position is None

    def test_non_object_sun_position(self):
        point = normalize({"uv": 1, "time": 1700000000, "sun_position": [0.1, 0.2]})
        assert point is not None
        assert point.sun_position is None
