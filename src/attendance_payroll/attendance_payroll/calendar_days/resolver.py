from __future__ import annotations

import logging
from typing import Dict, Tuple

from ..common.datetime_utils import calendar_days_in_month
from .repository import BusinessCalendar

logger = logging.getLogger(__name__)


class CalendarDaysResolver:
    """Days-in-month used for per-day salary math, memoized per (year, month)."""

    def __init__(self, calendar: BusinessCalendar):
        self._calendar = calendar
        self._cache: Dict[Tuple[int, int], int] = {}

    def days_in_month(self, month: int, year: int) -> int:
        key = (int(year), int(month))
        if key in self._cache:
            logger.debug("Days-in-month cache hit for %s-%02d: %s", key[0], key[1], self._cache[key])
            return self._cache[key]

        try:
            days = self._calendar.actual_days_in_month(month=key[1], year=key[0])
        except Exception:
            logger.warning("Business calendar unavailable for %s/%s; using calendar days", month, year, exc_info=True)
            return calendar_days_in_month(key[1], key[0])

        # No override stored: the plain calendar count is authoritative.
        days = days or calendar_days_in_month(key[1], key[0])
        self._cache[key] = days
        return days

    def clear(self) -> None:
        self._cache.clear()
