"""
Tests for company-timezone helpers.
"""

import pytest

from bookingkit.domain.exceptions import InvalidTimezoneError, ParseError
from bookingkit.domain.timezones import (
    COMMON_TIMEZONES,
    combine_local_to_utc,
    format_local_datetime,
    is_same_local_day,
    local_date_string,
    local_time_string,
    resolve_timezone,
    utc_offset_label,
)


class TestCombineLocalToUtc:
    """Tests for combine_local_to_utc."""

    def test_24_hour_time(self):
        """Test a 24h local time is shifted by the zone offset."""
        assert combine_local_to_utc("2025-12-24", "15:22", "Asia/Kolkata") == "2025-12-24T09:52:00.000Z"

    def test_12_hour_time_crosses_midnight(self):
        """Test a morning time lands on the previous UTC day."""
        assert combine_local_to_utc("2025-12-24", "03:22 AM", "Asia/Kolkata") == "2025-12-23T21:52:00.000Z"

    def test_pm_time(self):
        """Test PM adds twelve hours."""
        assert combine_local_to_utc("2025-12-24", "03:22 PM", "Asia/Kolkata") == "2025-12-24T09:52:00.000Z"

    def test_other_date_delimiters(self):
        """Test the date delimiter does not matter."""
        assert combine_local_to_utc("2025/12/24", "15:22", "Asia/Kolkata") == "2025-12-24T09:52:00.000Z"

    def test_utc_zone_keeps_wall_clock(self):
        """Test UTC local times are unchanged."""
        assert combine_local_to_utc("2025-12-24", "15:22", "UTC") == "2025-12-24T15:22:00.000Z"

    def test_standard_and_daylight_time(self):
        """Test New York uses -5:00 in winter and -4:00 in summer."""
        assert combine_local_to_utc("2025-01-20", "15:33", "America/New_York") == "2025-01-20T20:33:00.000Z"
        assert combine_local_to_utc("2025-07-20", "15:33", "America/New_York") == "2025-07-20T19:33:00.000Z"

    @pytest.mark.parametrize(
        "time_str,expected",
        [
            ("12:00 AM", "2025-06-01T00:00:00.000Z"),
            ("12:15 PM", "2025-06-01T12:15:00.000Z"),
            ("11:30am", "2025-06-01T11:30:00.000Z"),
            ("09:05 pm", "2025-06-01T21:05:00.000Z"),
        ],
    )
    def test_meridiem_edge_cases(self, time_str, expected):
        """Test midnight, noon and lowercase markers."""
        assert combine_local_to_utc("2025-06-01", time_str, "UTC") == expected

    def test_incomplete_date_raises(self):
        """Test a date without a day is rejected."""
        with pytest.raises(ParseError):
            combine_local_to_utc("2025-12", "15:22", "UTC")

    def test_out_of_range_time_raises(self):
        """Test impossible times are rejected instead of rolled over."""
        with pytest.raises(ParseError):
            combine_local_to_utc("2025-12-24", "25:00", "UTC")

    def test_unknown_timezone_raises(self):
        """Test unknown zone names are rejected."""
        with pytest.raises(InvalidTimezoneError):
            combine_local_to_utc("2025-12-24", "15:22", "Mars/Olympus")


class TestLocalDisplay:
    """Tests for rendering instants in a timezone."""

    def test_local_date_string(self):
        """Test the local calendar date."""
        assert local_date_string("2025-12-24T15:22:00.000Z", "Asia/Kolkata") == "2025-12-24"

    def test_local_date_string_next_day(self):
        """Test a late UTC evening is the next day in India."""
        assert local_date_string("2025-12-24T20:00:00.000Z", "Asia/Kolkata") == "2025-12-25"

    def test_local_time_string(self):
        """Test the local 24h time of day."""
        assert local_time_string("2025-12-24T15:22:00.000Z", "Asia/Kolkata") == "20:52"

    def test_format_local_datetime(self):
        """Test the human readable local format."""
        assert format_local_datetime("2025-12-24T09:52:00.000Z", "Asia/Kolkata") == "Dec 24, 2025 at 03:22 PM"

    def test_unset_timestamp_cannot_be_localized(self):
        """Test the unset sentinel has no local representation."""
        with pytest.raises(ValueError):
            local_date_string("", "UTC")

    def test_same_local_day_depends_on_zone(self):
        """Test two instants on different UTC days can share a local day."""
        first = "2025-12-25T02:00:00.000Z"
        second = "2025-12-24T20:00:00.000Z"

        assert is_same_local_day(first, second, "America/New_York")
        assert not is_same_local_day(first, second, "UTC")


class TestOffsets:
    """Tests for timezone resolution and offset labels."""

    def test_half_hour_offset(self):
        """Test offsets with minutes."""
        assert utc_offset_label("Asia/Kolkata", at="2025-12-24T00:00:00.000Z") == "UTC+5:30"

    def test_daylight_saving_offsets(self):
        """Test the offset follows daylight saving time."""
        assert utc_offset_label("America/New_York", at="2025-01-15T12:00:00.000Z") == "UTC-5:00"
        assert utc_offset_label("America/New_York", at="2025-07-15T12:00:00.000Z") == "UTC-4:00"

    def test_utc_offset(self):
        """Test UTC itself."""
        assert utc_offset_label("UTC") == "UTC+0:00"

    def test_unknown_timezone(self):
        """Test resolve_timezone raises for unknown names."""
        with pytest.raises(InvalidTimezoneError) as exc_info:
            resolve_timezone("Not/AZone")

        assert exc_info.value.name == "Not/AZone"

    def test_common_timezones_resolve(self):
        """Test every listed zone is a real IANA name."""
        for name in COMMON_TIMEZONES:
            resolve_timezone(name)
