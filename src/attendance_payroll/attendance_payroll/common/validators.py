from __future__ import annotations

import re
from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError


def require_month(month: int, year: int) -> tuple[int, int]:
    month, year = int(month), int(year)
    if not 1 <= month <= 12:
        raise ValidationError(f"Invalid month: {month}")
    if year < 1900:
        raise ValidationError(f"Invalid year: {year}")
    return month, year


def require_not_future(value: date, today: date, what: str) -> date:
    if value > today:
        raise ValidationError(f"Cannot record {what} for future dates")
    return value


_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")


def require_time(value: Optional[str], field_name: str) -> Optional[str]:
    """Accept 'HH:MM' or 'HH:MM:SS' (24h); None/blank passes through as None."""
    if value is None or not str(value).strip():
        return None
    value = str(value).strip()
    m = _TIME_RE.match(value)
    if not m or int(m.group(1)) > 23 or int(m.group(2)) > 59 or int(m.group(3) or 0) > 59:
        raise ValidationError(f"Invalid {field_name}: {value!r} (expected HH:MM or HH:MM:SS)")
    return value
