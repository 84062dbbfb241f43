from __future__ import annotations

from typing import Optional

from ...departments.model import DepartmentRules
from .base import ShiftHoursStrategy


class NightShiftStrategy(ShiftHoursStrategy):
    """Configured night-shift length, else the regular standard."""

    def standard_hours(self, *, department: Optional[str], rules: DepartmentRules) -> float:
        if rules.night_shift_hours:
            return float(rules.night_shift_hours)
        return self.regular_hours(department=department, rules=rules)
