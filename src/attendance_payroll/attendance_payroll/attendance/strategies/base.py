from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ...core.constants import DEFAULT_STANDARD_HOURS, WORKSHOP_STANDARD_HOURS
from ...core.enums import Department
from ...departments.model import DepartmentRules


class ShiftHoursStrategy(ABC):
    """Strategy Pattern: decide the standard shift length for a day."""

    @abstractmethod
    def standard_hours(self, *, department: Optional[str], rules: DepartmentRules) -> float:
        raise NotImplementedError

    @staticmethod
    def regular_hours(*, department: Optional[str], rules: DepartmentRules) -> float:
        if department == Department.WORKSHOP.value:
            return WORKSHOP_STANDARD_HOURS
        return float(rules.standard_hours_per_day or DEFAULT_STANDARD_HOURS)
