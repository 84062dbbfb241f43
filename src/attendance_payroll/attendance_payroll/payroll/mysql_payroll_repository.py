from __future__ import annotations

from typing import Any, Dict, Optional

from ..core.enums import PayrollStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchone
from .model import PayrollRecord
from .repository import PayrollRepository

_DERIVED = (
    "total_days",
    "present_days",
    "absent_days",
    "leave_days",
    "holiday_days",
    "absence_deduction",
    "overtime_hours",
    "undertime_hours",
    "overtime_rate",
    "overtime_pay",
    "undertime_deduction",
    "advance_amount",
    "earned_salary",
    "final_salary",
)
_INT_FIELDS = {"total_days", "present_days", "absent_days", "leave_days", "holiday_days"}


def _to_record(r: Dict[str, Any]) -> PayrollRecord:
    derived = {k: int(r[k] or 0) if k in _INT_FIELDS else as_float(r.get(k)) for k in _DERIVED}
    return PayrollRecord(
        id=int(r["id"]),
        employee_id=str(r["employee_id"]),
        month=int(r["month"]),
        year=int(r["year"]),
        base_salary=as_float(r["base_salary"]),
        status=PayrollStatus(r["status"]),
        updated_at=r.get("updated_at"),
        **derived,
    )


class MySQLPayrollRepository(PayrollRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for(self, employee_id: str, month: int, year: int) -> Optional[PayrollRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT id, employee_id, month, year, base_salary, status, updated_at, {", ".join(_DERIVED)}
                FROM payroll
                WHERE employee_id=%s AND month=%s AND year=%s
                """,
                (employee_id, int(month), int(year)),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def upsert(self, record: PayrollRecord) -> int:
        columns = ("employee_id", "month", "year", "base_salary", *_DERIVED, "status")
        values = [getattr(record, c) for c in columns]
        values[-1] = PayrollStatus(record.status).value
        updates = ", ".join(f"{c}=VALUES({c})" for c in ("base_salary", *_DERIVED, "status"))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO payroll({", ".join(columns)})
                VALUES({", ".join(["%s"] * len(columns))})
                ON DUPLICATE KEY UPDATE {updates}, updated_at=CURRENT_TIMESTAMP,
                    id=LAST_INSERT_ID(id)
                """,
                tuple(values),
            )
            return int(cur.lastrowid)

    def update_derived(self, record: PayrollRecord) -> bool:
        if record.id is None:
            raise ValueError("update_derived needs an existing payroll id")
        assignments = ", ".join(f"{c}=%s" for c in _DERIVED)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE payroll SET {assignments}, updated_at=%s WHERE id=%s",
                (*[getattr(record, c) for c in _DERIVED], record.updated_at, int(record.id)),
            )
            return cur.rowcount > 0
