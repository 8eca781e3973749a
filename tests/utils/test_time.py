"""Tests for day-boundary time helpers."""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from daily_fortune.utils.time import (
    calendar_day,
    format_iso,
    make_calendar_day,
    now_utc,
    parse_iso,
    resolve_timezone,
)


class TestCalendarDay:
    """Test calendar day computation."""

    def test_utc(self):
        """Test the day of a UTC timestamp in UTC."""
        ts = datetime(2024, 3, 15, 23, 59, 59, tzinfo=timezone.utc)

        assert calendar_day(ts, timezone.utc) == "2024-03-15"

    def test_zone_ahead_of_utc(self):
        """Test late UTC evening is already tomorrow in Tokyo."""
        ts = datetime(2024, 3, 15, 20, 0, tzinfo=timezone.utc)

        assert calendar_day(ts, ZoneInfo("Asia/Tokyo")) == "2024-03-16"

    def test_zone_behind_utc(self):
        """Test early UTC morning is still yesterday in New York."""
        ts = datetime(2024, 3, 15, 2, 0, tzinfo=timezone.utc)

        assert calendar_day(ts, ZoneInfo("America/New_York")) == "2024-03-14"

    def test_naive_treated_as_utc(self):
        """Test naive datetimes are interpreted as UTC."""
        assert calendar_day(datetime(2024, 3, 15, 23, 0), timezone.utc) == "2024-03-15"

    def test_iso_string_input(self):
        """Test ISO strings including a Z suffix are accepted."""
        assert calendar_day("2024-03-15T09:30:00.000Z", timezone.utc) == "2024-03-15"

    def test_local_zone_default(self):
        """Test omitting tz uses the local zone."""
        ts = now_utc()

        assert calendar_day(ts) == ts.astimezone().date().isoformat()

    def test_make_calendar_day_pins_zone(self):
        """Test the factory fixes the zone."""
        tokyo_day = make_calendar_day("Asia/Tokyo")

        assert tokyo_day(datetime(2024, 3, 15, 20, 0, tzinfo=timezone.utc)) == "2024-03-16"

    def test_midnight_boundary(self):
        """Test one microsecond before midnight is still the same day."""
        midnight = datetime(2024, 3, 16, tzinfo=timezone.utc)
        day = make_calendar_day("UTC")

        assert day(midnight - timedelta(microseconds=1)) == "2024-03-15"
        assert day(midnight) == "2024-03-16"


class TestIsoHelpers:
    """Test ISO formatting and parsing."""

    def test_format_iso_millis(self):
        """Test millisecond precision in UTC."""
        ts = datetime(2024, 3, 15, 9, 30, 0, 123456, tzinfo=timezone.utc)

        assert format_iso(ts) == "2024-03-15T09:30:00.123+00:00"

    def test_format_iso_converts_to_utc(self):
        """Test non-UTC timestamps are normalized."""
        ts = datetime(2024, 3, 15, 18, 30, tzinfo=ZoneInfo("Asia/Tokyo"))

        assert format_iso(ts) == "2024-03-15T09:30:00.000+00:00"

    def test_parse_iso_z_suffix(self):
        """Test JavaScript-style timestamps parse."""
        assert parse_iso("2024-03-15T09:30:00.000Z") == datetime(2024, 3, 15, 9, 30, tzinfo=timezone.utc)

    def test_parse_iso_invalid(self):
        """Test garbage raises ValueError."""
        with pytest.raises(ValueError):
            parse_iso("yesterday")

    def test_resolve_timezone(self):
        """Test empty names mean local time."""
        assert resolve_timezone(None) is None
        assert resolve_timezone("") is None
        assert resolve_timezone("UTC") == ZoneInfo("UTC")
