from __future__ import annotations

from typing import Optional, Protocol

from .model import PayrollRecord


class PayrollRepository(Protocol):
    def get_for(self, employee_id: str, month: int, year: int) -> Optional[PayrollRecord]:
        raise NotImplementedError

    def upsert(self, record: PayrollRecord) -> int:
        """Insert or replace on (employee_id, month, year) (payroll generation)."""

        raise NotImplementedError

    def update_derived(self, record: PayrollRecord) -> bool:
        """Overwrite derived figures of an existing record (keeps id and status)."""

        raise NotImplementedError
