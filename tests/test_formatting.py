"""Tests for display formatting."""

from datetime import date, datetime

import pytest

from ram.services.formatting import (
    format_clock,
    format_countdown,
    format_date,
    format_minutes,
    format_time,
    sunday_weekday,
)


class TestFormatDate:
    def test_english(self):
        assert format_date(datetime(2026, 10, 19, 15, 0)) == "Mon, Oct 19"

    def test_spanish(self):
        assert format_date(date(2026, 10, 19), "es-ES") == "lun, 19 oct"

    def test_none(self):
        assert format_date(None) == ""

    def test_sunday_first_index(self):
        assert sunday_weekday(date(2026, 10, 18)) == 0
        assert sunday_weekday(date(2026, 10, 24)) == 6


class TestFormatTime:
    @pytest.mark.parametrize(
        "label,language,expected",
        [
            ("15:30", "en-US", "3:30 PM"),
            ("15:30", "es-ES", "15:30"),
            ("09:05", "en-US", "9:05 AM"),
            ("00:00", "en-US", "12:00 AM"),
            ("3pm-5pm", "en-US", "3pm-5pm"),
            ("9am to 11am", "en-US", "9am to 11am"),
            ("All Day", "en-US", "All Day"),
            ("3pm", "en-US", "3pm"),
            ("a las 5", "es-ES", "a las 5"),
            ("", "en-US", ""),
        ],
    )
    def test_labels(self, label, language, expected):
        assert format_time(label, language) == expected


class TestFormatClock:
    def test_two_digit_hour(self):
        assert format_clock(9, 5, "en-US", two_digit=True) == "09:05 AM"

    def test_noon_and_midnight(self):
        assert format_clock(12, 0) == "12:00 PM"
        assert format_clock(0, 0) == "12:00 AM"

    def test_spanish_is_24_hour(self):
        assert format_clock(15, 30, "es-ES", two_digit=True) == "15:30"


class TestDurations:
    @pytest.mark.parametrize(
        "minutes,expected",
        [(0, "0m"), (25, "25m"), (60, "1h 0m"), (65, "1h 5m"), (150, "2h 30m")],
    )
    def test_format_minutes(self, minutes, expected):
        assert format_minutes(minutes) == expected

    @pytest.mark.parametrize(
        "seconds,expected",
        [(1500, "25:00"), (299, "04:59"), (59, "00:59"), (0, "00:00"), (-3, "00:00")],
    )
    def test_format_countdown(self, seconds, expected):
        assert format_countdown(seconds) == expected
