from __future__ import annotations

from typing import Optional, Protocol


class BusinessCalendar(Protocol):
    """Authoritative salary day count per month (policy may differ from the calendar)."""

    def actual_days_in_month(self, *, month: int, year: int) -> Optional[int]:
        raise NotImplementedError
