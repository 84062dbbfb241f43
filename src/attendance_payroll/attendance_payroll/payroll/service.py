from __future__ import annotations

import logging
import math
from collections import defaultdict
from datetime import date
from typing import Optional

from ..advances.model import total_amount
from ..advances.repository import AdvanceRepository
from ..attendance.model import AttendanceRow
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_bounds, now_local, today_local
from ..common.validators import require_month
from ..core.enums import GenerationMode, PayrollStatus
from ..core.exceptions import EmployeeNotFoundError, PayrollGenerationError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .engine import SalaryCalculationEngine
from .model import BatchError, BatchResult, PayrollRecord, SalaryCalculationResult
from .repository import PayrollRepository

logger = logging.getLogger(__name__)


class PayrollService:
    def __init__(
        self,
        engine: SalaryCalculationEngine,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        advances: AdvanceRepository,
        payroll: PayrollRepository,
    ):
        self._engine = engine
        self._employees = employees
        self._attendance = attendance
        self._advances = advances
        self._payroll = payroll

    def calculate_for_employee(self, employee_id: str, month: int, year: int) -> SalaryCalculationResult:
        """Fresh read of the employee's month, then the engine. Writes nothing."""
        month, year = require_month(month, year)
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise EmployeeNotFoundError(employee_id)

        start, end = month_bounds(month, year)
        rows = [
            AttendanceRow.from_record(r)
            for r in self._attendance.list_for_employee(employee.id, start_date=start, end_date=end)
        ]
        advance_total = total_amount(self._advances.list_for_employee(employee.id, start_date=start, end_date=end))

        return self._engine.calculate_salary(
            employee.id,
            employee.base_salary,
            employee.overtime_rate,
            month,
            year,
            rows,
            advance_total,
            employee=employee,
        )

    def recalculate(self, employee_id: str, month: int, year: int) -> Optional[PayrollRecord]:
        """Re-derive an already generated payroll record in place.

        No record means payroll was never generated for that month: nothing is
        written. Errors propagate; the recalculation queue decides what to do.
        """
        existing = self._payroll.get_for(employee_id, month, year)
        if not existing:
            logger.info("No payroll for %s %s/%s; skipping recalculation", employee_id, month, year)
            return None

        result = self.calculate_for_employee(employee_id, month, year)
        updated = PayrollRecord.from_result(
            employee_id=existing.employee_id,
            month=existing.month,
            year=existing.year,
            result=result,
            status=existing.status,
            id=existing.id,
            updated_at=now_local(),
        )
        self._payroll.update_derived(updated)
        logger.info("Recalculated payroll for %s %s/%s: final_salary=%.2f", employee_id, month, year, updated.final_salary)
        return updated

    def generate_payroll(
        self,
        month: int,
        year: int,
        *,
        mode: GenerationMode = GenerationMode.ALL,
        department: Optional[str] = None,
        employee_id: Optional[str] = None,
        today: Optional[date] = None,
    ) -> BatchResult:
        month, year = require_month(month, year)
        today = today or today_local()
        if (year, month) > (today.year, today.month):
            raise ValidationError("Cannot generate payroll for future months")

        targets = self._select_targets(GenerationMode(mode), department=department, employee_id=employee_id)
        if not targets:
            raise PayrollGenerationError("No active employees found to process")

        # Rules may have changed since the last run.
        self._engine.reset_caches()

        start, end = month_bounds(month, year)
        ids = [e.id for e in targets]
        attendance_by_employee: dict[str, list[AttendanceRow]] = defaultdict(list)
        for r in self._attendance.list_for_employees(ids, start_date=start, end_date=end):
            attendance_by_employee[r.employee_id].append(AttendanceRow.from_record(r))
        advances_by_employee: dict[str, list] = defaultdict(list)
        for a in self._advances.list_for_employees(ids, start_date=start, end_date=end):
            advances_by_employee[a.employee_id].append(a)

        result = BatchResult()
        for i, employee in enumerate(targets, start=1):
            if not self._is_payable(employee):
                result.skipped += 1
                continue

            logger.info("[Batch Payroll] %s/%s: %s", i, len(targets), employee.name)
            try:
                calculation = self._engine.calculate_salary(
                    employee.id,
                    employee.base_salary,
                    employee.overtime_rate,
                    month,
                    year,
                    attendance_by_employee.get(employee.id, []),
                    total_amount(advances_by_employee.get(employee.id, [])),
                    employee=employee,
                )
                self._payroll.upsert(
                    PayrollRecord.from_result(
                        employee_id=employee.id,
                        month=month,
                        year=year,
                        result=calculation,
                        status=PayrollStatus.PENDING,
                    )
                )
                result.succeeded += 1
            except Exception as exc:
                logger.error("Payroll generation failed for %s (%s)", employee.name, employee.id, exc_info=True)
                result.failed += 1
                result.errors.append(BatchError(employee_id=employee.id, employee_name=employee.name, message=str(exc)))

        logger.info(
            "Payroll %s/%s done: %s succeeded, %s failed, %s skipped",
            month,
            year,
            result.succeeded,
            result.failed,
            result.skipped,
        )
        return result

    def _select_targets(
        self,
        mode: GenerationMode,
        *,
        department: Optional[str],
        employee_id: Optional[str],
    ) -> list[Employee]:
        if mode == GenerationMode.DEPARTMENT:
            if not department:
                raise ValidationError("Department is required for department mode")
            return list(self._employees.list_active(department=department))
        if mode == GenerationMode.SINGLE:
            if not employee_id:
                raise ValidationError("Employee is required for single mode")
            return [e for e in self._employees.list_active() if e.id == employee_id]
        return list(self._employees.list_active())

    @staticmethod
    def _is_payable(employee: Employee) -> bool:
        if not employee.department:
            logger.warning("Skipping %s: missing department", employee.name or employee.id)
            return False
        base = float(employee.base_salary or 0)
        if not math.isfinite(base) or base <= 0:
            logger.warning("Skipping %s: invalid base_salary %r", employee.name or employee.id, employee.base_salary)
            return False
        return True
