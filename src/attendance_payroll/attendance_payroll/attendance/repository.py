from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, DailyHours


class AttendanceRepository(Protocol):
    def get(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: str, attendance_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def upsert(self, record: AttendanceRecord) -> AttendanceRecord:
        """Insert or replace on (employee_id, attendance_date)."""

        raise NotImplementedError

    def upsert_many(self, records: Sequence[AttendanceRecord]) -> int:
        raise NotImplementedError

    def update_hours(self, *, employee_id: str, attendance_date: date, hours: DailyHours) -> bool:
        raise NotImplementedError

    def fill_times(
        self,
        *,
        attendance_id: int,
        check_in_time: Optional[str] = None,
        check_out_time: Optional[str] = None,
    ) -> bool:
        raise NotImplementedError

    def delete(self, attendance_id: int) -> bool:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_employees(
        self,
        employee_ids: Sequence[str],
        *,
        start_date: date,
        end_date: date,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
