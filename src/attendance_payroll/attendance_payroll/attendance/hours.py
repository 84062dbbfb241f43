from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from ..common.datetime_utils import TimeLike, hours_worked
from ..core.constants import DEFAULT_MAX_OVERTIME_PER_DAY, OVERTIME_DEPARTMENTS
from ..core.enums import ShiftType
from ..departments.model import DepartmentRules
from .factory import ShiftHoursStrategyFactory
from .model import DailyHours


@dataclass
class DailyHoursCalculator:
    """Derive hours worked / overtime / undertime for one attendance day.

    Only overtime departments get overtime or undertime; everyone else keeps
    the worked hours with both set to zero.
    """

    overtime_departments: Iterable[str] = OVERTIME_DEPARTMENTS
    factory: ShiftHoursStrategyFactory = field(default_factory=ShiftHoursStrategyFactory)

    def tracks_overtime(self, department: Optional[str]) -> bool:
        return bool(department) and department in set(self.overtime_departments)

    def derive(
        self,
        *,
        check_in: TimeLike,
        check_out: TimeLike,
        department: Optional[str],
        rules: DepartmentRules,
        shift_type: Optional[ShiftType] = None,
    ) -> DailyHours:
        worked = hours_worked(check_in, check_out)
        if not self.tracks_overtime(department):
            return DailyHours(hours_worked=worked)

        standard = self.factory.for_shift(shift_type).standard_hours(department=department, rules=rules)
        max_overtime = float(rules.max_overtime_hours_per_day or DEFAULT_MAX_OVERTIME_PER_DAY)

        overtime = 0.0
        undertime = 0.0
        if worked > standard:
            overtime = min(worked - standard, max_overtime)
        elif worked < standard:
            undertime = standard - worked

        return DailyHours(
            hours_worked=worked,
            overtime_hours=round(overtime, 2),
            undertime_hours=round(undertime, 2),
        )
