from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from ..core.enums import PayrollStatus
from ..departments.model import DepartmentRules


@dataclass(frozen=True)
class RuleCheck:
    """One evaluated business rule; `is_valid=False` marks a violation."""

    rule_name: str
    is_valid: bool
    error_message: Optional[str] = None

    def as_dict(self) -> dict:
        return {"rule_name": self.rule_name, "is_valid": self.is_valid, "error_message": self.error_message}


@dataclass(frozen=True)
class CalculationDetails:
    per_day_salary: float
    hourly_rate: float
    overtime_rate_used: float
    department_rules: DepartmentRules
    business_rules_validation: list[RuleCheck] = field(default_factory=list)
    # False when the rule evaluator was unavailable and the result went unchecked.
    rules_evaluated: bool = True


@dataclass(frozen=True)
class SalaryCalculationResult:
    base_salary: float
    total_days: int
    present_days: int
    absent_days: int
    leave_days: int
    holiday_days: int
    overtime_hours: float
    undertime_hours: float
    overtime_pay: float
    undertime_deduction: float
    advance_amount: float
    earned_salary: float
    final_salary: float
    details: CalculationDetails

    @property
    def absence_deduction(self) -> float:
        """Stored `absence_deduction` column: carries the undertime deduction.

        Absences are never charged as a line item; unpaid days are simply
        left out of the earned salary.
        """
        return self.undertime_deduction

    def as_dict(self) -> dict[str, Any]:
        return {
            "base_salary": self.base_salary,
            "total_days": self.total_days,
            "present_days": self.present_days,
            "absent_days": self.absent_days,
            "leave_days": self.leave_days,
            "holiday_days": self.holiday_days,
            "overtime_hours": self.overtime_hours,
            "undertime_hours": self.undertime_hours,
            "overtime_pay": self.overtime_pay,
            "undertime_deduction": self.undertime_deduction,
            "absence_deduction": self.absence_deduction,
            "advance_amount": self.advance_amount,
            "earned_salary": self.earned_salary,
            "final_salary": self.final_salary,
            "calculation_details": {
                "per_day_salary": self.details.per_day_salary,
                "hourly_rate": self.details.hourly_rate,
                "overtime_rate_used": self.details.overtime_rate_used,
                "department_rules": self.details.department_rules.as_dict(),
                "business_rules_validation": [c.as_dict() for c in self.details.business_rules_validation],
                "rules_evaluated": self.details.rules_evaluated,
            },
        }


@dataclass(frozen=True)
class PayrollRecord:
    """Bảng lương tháng: one per (employee_id, month, year), derived only."""

    employee_id: str
    month: int
    year: int
    base_salary: float
    total_days: int
    present_days: int
    absent_days: int
    leave_days: int
    holiday_days: int
    absence_deduction: float
    overtime_hours: float
    undertime_hours: float
    overtime_rate: float
    overtime_pay: float
    undertime_deduction: float
    advance_amount: float
    earned_salary: float
    final_salary: float
    status: PayrollStatus = PayrollStatus.PENDING
    id: Optional[int] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_result(
        cls,
        *,
        employee_id: str,
        month: int,
        year: int,
        result: SalaryCalculationResult,
        status: PayrollStatus = PayrollStatus.PENDING,
        id: Optional[int] = None,
        updated_at: Optional[datetime] = None,
    ) -> "PayrollRecord":
        return cls(
            employee_id=employee_id,
            month=int(month),
            year=int(year),
            base_salary=result.base_salary,
            total_days=result.total_days,
            present_days=result.present_days,
            absent_days=result.absent_days,
            leave_days=result.leave_days,
            holiday_days=result.holiday_days,
            absence_deduction=result.absence_deduction,
            overtime_hours=result.overtime_hours,
            undertime_hours=result.undertime_hours,
            overtime_rate=result.details.overtime_rate_used,
            overtime_pay=result.overtime_pay,
            undertime_deduction=result.undertime_deduction,
            advance_amount=result.advance_amount,
            earned_salary=result.earned_salary,
            final_salary=result.final_salary,
            status=status,
            id=id,
            updated_at=updated_at,
        )


@dataclass(frozen=True)
class BatchError:
    employee_id: str
    employee_name: str
    message: str

    def __str__(self) -> str:
        return f"Failed for {self.employee_name}: {self.message}"


@dataclass
class BatchResult:
    succeeded: int = 0
    failed: int = 0
    skipped: int = 0
    errors: list[BatchError] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return self.succeeded + self.failed

    def first_errors(self, n: int = 3) -> list[str]:
        return [str(e) for e in self.errors[:n]]
