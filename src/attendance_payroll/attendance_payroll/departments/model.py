from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional


def _num(row: Mapping[str, Any], key: str, default: Optional[float]) -> Optional[float]:
    value = row.get(key)
    if value is None:
        return default
    return float(value)


@dataclass(frozen=True)
class DepartmentRules:
    """Chính sách tính lương theo phòng ban (read-only reference data)."""

    is_exempt_from_deductions: bool = False
    is_exempt_from_overtime: bool = False
    max_overtime_hours_per_day: float = 4
    max_advance_percentage: float = 50
    working_days_per_month: int = 30
    standard_hours_per_day: float = 8
    overtime_multiplier: float = 1.5
    min_hours_full_day: Optional[float] = 8
    half_day_hours: Optional[float] = 4
    day_shift_hours: Optional[float] = None
    night_shift_hours: Optional[float] = None
    night_shift_multiplier: Optional[float] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "DepartmentRules":
        """Parse a stored rules row; NULL columns take the default values."""
        d = cls()
        return cls(
            is_exempt_from_deductions=bool(row.get("is_exempt_from_deductions") or False),
            is_exempt_from_overtime=bool(row.get("is_exempt_from_overtime") or False),
            max_overtime_hours_per_day=_num(row, "max_overtime_hours_per_day", d.max_overtime_hours_per_day),
            max_advance_percentage=_num(row, "max_advance_percentage", d.max_advance_percentage),
            working_days_per_month=int(_num(row, "working_days_per_month", d.working_days_per_month)),
            standard_hours_per_day=_num(row, "standard_hours_per_day", d.standard_hours_per_day),
            overtime_multiplier=_num(row, "overtime_multiplier", d.overtime_multiplier),
            min_hours_full_day=_num(row, "min_hours_full_day", d.min_hours_full_day),
            half_day_hours=_num(row, "half_day_hours", d.half_day_hours),
            day_shift_hours=_num(row, "day_shift_hours", None),
            night_shift_hours=_num(row, "night_shift_hours", None),
            night_shift_multiplier=_num(row, "night_shift_multiplier", None),
        )

    def as_dict(self) -> dict:
        return asdict(self)


DEFAULT_DEPARTMENT_RULES = DepartmentRules()
