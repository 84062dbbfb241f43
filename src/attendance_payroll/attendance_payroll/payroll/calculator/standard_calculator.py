from __future__ import annotations

from collections import Counter
from typing import Sequence

from ...attendance.model import AttendanceRow
from ...core.constants import DEFAULT_STANDARD_HOURS
from ...core.enums import AttendanceStatus
from ...departments.model import DepartmentRules
from ...employees.model import Employee
from ..model import CalculationDetails, SalaryCalculationResult
from .base import SalaryCalculator


def effective_overtime_wage(*, employee: Employee, overtime_rate: float, hourly_rate: float, rules: DepartmentRules) -> float:
    """Explicit overtime wage > explicit overtime rate > hourly rate * multiplier."""
    if employee.overtime_wage and employee.overtime_wage > 0:
        return float(employee.overtime_wage)
    if overtime_rate and overtime_rate > 0:
        return float(overtime_rate)
    return hourly_rate * float(rules.overtime_multiplier)


class StandardSalaryCalculator(SalaryCalculator):
    """Standard rule: paid days * per-day salary + overtime - undertime - advances.

    Leave and holiday days are paid like present days. Absent (or unmarked)
    days only reduce pay by not being counted; they are never deducted as a
    separate amount. Exempt departments always earn the full base salary.
    """

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
        counts = Counter(AttendanceStatus(a.status) for a in attendance)
        present = counts[AttendanceStatus.PRESENT]
        absent = counts[AttendanceStatus.ABSENT]
        leave = counts[AttendanceStatus.LEAVE]
        holiday = counts[AttendanceStatus.HOLIDAY]

        if tracks_overtime:
            overtime_hours = sum(float(a.overtime_hours or 0) for a in attendance)
            undertime_hours = sum(float(a.undertime_hours or 0) for a in attendance)
        else:
            overtime_hours = 0.0
            undertime_hours = 0.0

        standard_hours = float(rules.standard_hours_per_day or DEFAULT_STANDARD_HOURS)
        per_day_salary = base_salary / days_in_month
        hourly_rate = base_salary / (days_in_month * standard_hours)
        wage = effective_overtime_wage(
            employee=employee,
            overtime_rate=overtime_rate,
            hourly_rate=hourly_rate,
            rules=rules,
        )

        if rules.is_exempt_from_deductions:
            earned_salary = float(base_salary)
        else:
            earned_salary = (present + leave + holiday) * per_day_salary

        overtime_pay = 0.0
        if not rules.is_exempt_from_overtime and overtime_hours > 0:
            overtime_pay = overtime_hours * wage

        # Applies to exempt departments too.
        undertime_deduction = undertime_hours * hourly_rate if undertime_hours > 0 else 0.0

        final_salary = earned_salary + overtime_pay - undertime_deduction - advance_total

        return SalaryCalculationResult(
            base_salary=float(base_salary),
            total_days=int(days_in_month),
            present_days=present,
            absent_days=absent,
            leave_days=leave,
            holiday_days=holiday,
            overtime_hours=overtime_hours,
            undertime_hours=undertime_hours,
            overtime_pay=overtime_pay,
            undertime_deduction=undertime_deduction,
            advance_amount=float(advance_total),
            earned_salary=earned_salary,
            final_salary=max(0.0, round(final_salary, 2)),
            details=CalculationDetails(
                per_day_salary=per_day_salary,
                hourly_rate=hourly_rate,
                overtime_rate_used=wage,
                department_rules=rules,
            ),
        )
