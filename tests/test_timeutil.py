"""
Tests for src/pullout/timeutil.py

Tests 12/24-hour normalization and wall-clock helpers.
"""

import unittest
from datetime import datetime

from src.pullout.models import ScheduleEntry
from src.pullout.timeutil import (
    clock,
    day_name,
    format_time_range,
    normalize_time,
    to_meridiem,
    to_minutes,
)


class TestNormalizeTime(unittest.TestCase):
    """Tests for normalize_time."""

    def test_midnight_and_noon(self):
        self.assertEqual(normalize_time("12", "00", "AM"), "00:00")
        self.assertEqual(normalize_time("12", "00", "PM"), "12:00")

    def test_pm_adds_twelve(self):
        self.assertEqual(normalize_time("1", "30", "PM"), "13:30")

    def test_am_is_zero_padded(self):
        self.assertEqual(normalize_time("9", "05", "AM"), "09:05")

    def test_meridiem_is_case_insensitive(self):
        self.assertEqual(normalize_time("2", "15", "pm"), "14:15")

    def test_no_meridiem_uses_hour_as_is(self):
        self.assertEqual(normalize_time("14", "00"), "14:00")
        self.assertEqual(normalize_time("2", "30"), "02:30")

    def test_missing_minutes_default_to_zero(self):
        self.assertEqual(normalize_time("10", None, "AM"), "10:00")

    def test_out_of_range_is_not_validated(self):
        """Nonsense input still produces an HH:MM string."""
        self.assertEqual(normalize_time("13", "00", "PM"), "25:00")


class TestClockHelpers(unittest.TestCase):
    """Tests for day/clock conversion helpers."""

    def test_day_name(self):
        # 2026-10-20 is a Tuesday
        self.assertEqual(day_name(datetime(2026, 10, 20, 8, 0)), "Tuesday")
        self.assertEqual(day_name(datetime(2026, 10, 18, 8, 0)), "Sunday")

    def test_clock_zero_pads(self):
        self.assertEqual(clock(datetime(2026, 10, 20, 9, 5, 59)), "09:05")

    def test_to_minutes(self):
        self.assertEqual(to_minutes("00:00"), 0)
        self.assertEqual(to_minutes("10:45"), 645)

    def test_to_meridiem(self):
        self.assertEqual(to_meridiem("00:15"), "12:15 AM")
        self.assertEqual(to_meridiem("09:00"), "9:00 AM")
        self.assertEqual(to_meridiem("12:30"), "12:30 PM")
        self.assertEqual(to_meridiem("13:45"), "1:45 PM")

    def test_format_time_range(self):
        entry = ScheduleEntry(
            day="Monday",
            start_time="09:00",
            end_time="09:30",
            service_type="ESL",
            provider="Mr. Diaz",
        )
        self.assertEqual(format_time_range(entry), "09:00-09:30")
