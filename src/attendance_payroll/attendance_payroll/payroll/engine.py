from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRow
from ..calendar_days.resolver import CalendarDaysResolver
from ..core.constants import OVERTIME_DEPARTMENTS
from ..core.exceptions import BusinessRuleViolationError, EmployeeNotFoundError
from ..departments.provider import DepartmentRulesProvider
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .calculator.base import SalaryCalculator
from .calculator.standard_calculator import StandardSalaryCalculator
from .model import SalaryCalculationResult
from .validation import BusinessRuleValidator

logger = logging.getLogger(__name__)


class SalaryCalculationEngine:
    """Monthly salary for one employee from already-fetched attendance/advances.

    Reference data (department rules, days in month) is cached by the
    providers for the current run; call `reset_caches()` when a new run starts.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        rules: DepartmentRulesProvider,
        days: CalendarDaysResolver,
        *,
        validator: Optional[BusinessRuleValidator] = None,
        calculator: Optional[SalaryCalculator] = None,
        overtime_departments: Iterable[str] = OVERTIME_DEPARTMENTS,
    ):
        self._employees = employees
        self._rules = rules
        self._days = days
        self._validator = validator or BusinessRuleValidator()
        self._calculator = calculator or StandardSalaryCalculator()
        self._overtime_departments = frozenset(overtime_departments)

    def reset_caches(self) -> None:
        self._rules.clear()
        self._days.clear()

    def calculate_salary(
        self,
        employee_id: str,
        base_salary: float,
        overtime_rate: float,
        month: int,
        year: int,
        attendance_rows: Sequence[AttendanceRow],
        advance_total: float,
        *,
        employee: Optional[Employee] = None,
    ) -> SalaryCalculationResult:
        """Compute and validate; raises BusinessRuleViolationError if any rule fails."""
        if employee is None:
            employee = self._employees.get_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)

        rules = self._rules.get_rules(employee.department)
        days_in_month = self._days.days_in_month(month, year)

        result = self._calculator.calculate(
            employee=employee,
            base_salary=float(base_salary),
            overtime_rate=float(overtime_rate or 0),
            attendance=attendance_rows,
            advance_total=float(advance_total or 0),
            rules=rules,
            days_in_month=days_in_month,
            tracks_overtime=employee.department in self._overtime_departments,
        )
        logger.debug(
            "Salary for %s %s/%s: days=%s per_day=%.2f hourly=%.2f final=%.2f",
            employee_id,
            month,
            year,
            days_in_month,
            result.details.per_day_salary,
            result.details.hourly_rate,
            result.final_salary,
        )

        outcome = self._validator.evaluate(
            base_salary=result.base_salary,
            overtime_hours=result.overtime_hours,
            overtime_rate=float(employee.overtime_wage or overtime_rate or 0),
            advance_amount=result.advance_amount,
            final_salary=result.final_salary,
            max_advance_percentage=float(rules.max_advance_percentage),
        )
        if outcome.violations:
            raise BusinessRuleViolationError(outcome.violations)

        return replace(
            result,
            details=replace(
                result.details,
                business_rules_validation=outcome.checks,
                rules_evaluated=outcome.evaluated,
            ),
        )
