from __future__ import annotations

import calendar
from datetime import date, datetime, time
from typing import Optional, Union

from ..core.constants import MINUTES_PER_DAY

TimeLike = Union[str, time, None]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()


def format_local_date(value: Union[date, datetime]) -> str:
    """Format as YYYY-MM-DD from the local calendar fields (no tz shift)."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def format_local_time(value: Union[datetime, time]) -> str:
    """Format as HH:MM:SS from the local clock fields."""
    return f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"


def time_to_minutes(value: TimeLike) -> Optional[int]:
    """Minutes since midnight for 'HH:MM', 'HH:MM:SS' or a time object.

    Seconds are ignored. Returns None for a missing value.
    """
    if value is None:
        return None
    if isinstance(value, time):
        return value.hour * 60 + value.minute

    text = value.strip()
    if not text:
        return None
    parts = text.split(":")
    hours = int(parts[0])
    minutes = int(parts[1]) if len(parts) > 1 and parts[1] else 0
    return hours * 60 + minutes


def hours_worked(check_in: TimeLike, check_out: TimeLike) -> float:
    """Shift duration in hours, rounded to 2 decimals.

    A check-out earlier than the check-in means the shift crossed midnight,
    e.g. 19:00 -> 08:00 is 13 hours.

    >>> hours_worked("09:00", "17:00")
    8.0
    >>> hours_worked("19:00", "08:00")
    13.0
    """
    start = time_to_minutes(check_in)
    end = time_to_minutes(check_out)
    if start is None or end is None:
        return 0.0

    if end < start:
        total = end + MINUTES_PER_DAY - start
    else:
        total = end - start
    return max(0.0, round(total / 60, 2))


def calendar_days_in_month(month: int, year: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_bounds(month: int, year: int) -> tuple[date, date]:
    """First and last calendar date of the month."""
    return date(year, month, 1), date(year, month, calendar_days_in_month(month, year))
