from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AdvanceRecord


class AdvanceRepository(Protocol):
    def get(self, advance_id: int) -> Optional[AdvanceRecord]:
        raise NotImplementedError

    def add(self, *, employee_id: str, advance_date: date, amount: float, notes: Optional[str] = None) -> int:
        raise NotImplementedError

    def delete(self, advance_id: int) -> bool:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str, *, start_date: date, end_date: date) -> Sequence[AdvanceRecord]:
        raise NotImplementedError

    def list_for_employees(
        self,
        employee_ids: Sequence[str],
        *,
        start_date: date,
        end_date: date,
    ) -> Sequence[AdvanceRecord]:
        raise NotImplementedError
