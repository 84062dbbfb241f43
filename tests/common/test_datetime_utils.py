from datetime import date, datetime, time

from src.attendance_payroll.attendance_payroll.common.datetime_utils import (
    format_local_date,
    format_local_time,
    hours_worked,
    month_bounds,
    time_to_minutes,
)


def test_day_shift_hours():
    assert hours_worked("09:00", "17:00") == 8.0


def test_night_shift_crosses_midnight():
    assert hours_worked("19:00", "08:00") == 13.0


def test_missing_time_is_zero():
    assert hours_worked("", "17:00") == 0
    assert hours_worked("09:00", None) == 0


def test_same_time_is_zero():
    assert hours_worked("17:00", "17:00") == 0


def test_seconds_format_and_partial_hours():
    assert hours_worked("08:00:00", "16:30:59") == 8.5
    assert hours_worked("08:00", "08:20") == 0.33


def test_accepts_time_objects():
    assert hours_worked(time(22, 0), time(6, 0)) == 8.0
    assert time_to_minutes(time(1, 30)) == 90


def test_local_formatting_uses_wall_clock_fields():
    ts = datetime(2025, 3, 1, 0, 5, 9)
    assert format_local_date(ts) == "2025-03-01"
    assert format_local_time(ts) == "00:05:09"


def test_month_bounds_handles_leap_year():
    assert month_bounds(2, 2024) == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_bounds(12, 2025) == (date(2025, 12, 1), date(2025, 12, 31))
