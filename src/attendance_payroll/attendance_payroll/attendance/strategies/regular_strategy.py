from __future__ import annotations

from typing import Optional

from ...departments.model import DepartmentRules
from .base import ShiftHoursStrategy


class RegularShiftStrategy(ShiftHoursStrategy):
    """Department standard (Workshop runs 8.5h)."""

    def standard_hours(self, *, department: Optional[str], rules: DepartmentRules) -> float:
        return self.regular_hours(department=department, rules=rules)
