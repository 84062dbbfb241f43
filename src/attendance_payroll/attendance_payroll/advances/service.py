from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.datetime_utils import month_bounds, today_local
from ..common.validators import require_not_future
from ..core.exceptions import EmployeeNotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..payroll.recalculation import RecalculationScheduler
from .model import AdvanceRecord, total_amount
from .repository import AdvanceRepository


class AdvanceService:
    def __init__(
        self,
        advances: AdvanceRepository,
        employees: EmployeeRepository,
        recalculation: RecalculationScheduler,
    ):
        self._advances = advances
        self._employees = employees
        self._recalculation = recalculation

    def add_advance(
        self,
        employee_id: str,
        amount: float,
        *,
        advance_date: Optional[date] = None,
        notes: Optional[str] = None,
        today: Optional[date] = None,
    ) -> int:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise EmployeeNotFoundError(employee_id)
        if not employee.is_active:
            raise ValidationError("Cannot record advance for inactive employees")

        today = today or today_local()
        advance_date = advance_date or today
        require_not_future(advance_date, today, "advance")

        amount = round(float(amount))
        if amount <= 0:
            raise ValidationError("Advance amount must be positive")

        advance_id = self._advances.add(
            employee_id=employee_id,
            advance_date=advance_date,
            amount=amount,
            notes=notes or "Advance for employee",
        )
        self._recalculation.schedule(employee_id, advance_date.month, advance_date.year)
        return advance_id

    def delete_advance(self, advance_id: int) -> AdvanceRecord:
        record = self._advances.get(advance_id)
        if not record:
            raise ValidationError("Advance not found")

        self._advances.delete(advance_id)
        self._recalculation.schedule(record.employee_id, record.advance_date.month, record.advance_date.year)
        return record

    def total_for_month(self, employee_id: str, month: int, year: int) -> float:
        start, end = month_bounds(month, year)
        return total_amount(self._advances.list_for_employee(employee_id, start_date=start, end_date=end))
