from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...attendance.model import AttendanceRow
from ...departments.model import DepartmentRules
from ...employees.model import Employee
from ..model import SalaryCalculationResult


class SalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(
        self,
        *,
        employee: Employee,
        base_salary: float,
        overtime_rate: float,
        attendance: Sequence[AttendanceRow],
        advance_total: float,
        rules: DepartmentRules,
        days_in_month: int,
        tracks_overtime: bool,
    ) -> SalaryCalculationResult:
        raise NotImplementedError
