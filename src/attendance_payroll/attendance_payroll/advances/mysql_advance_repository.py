from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone, in_clause
from .model import AdvanceRecord
from .repository import AdvanceRepository


def _to_advance(r: Dict[str, Any]) -> AdvanceRecord:
    return AdvanceRecord(
        id=int(r["id"]),
        employee_id=str(r["employee_id"]),
        advance_date=r["advance_date"],
        amount=as_float(r["amount"]),
        notes=r.get("notes"),
    )


class MySQLAdvanceRepository(AdvanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, advance_id: int) -> Optional[AdvanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, employee_id, advance_date, amount, notes FROM advances WHERE id=%s",
                (int(advance_id),),
            )
            r = fetchone(cur)
            return _to_advance(r) if r else None

    def add(self, *, employee_id: str, advance_date: date, amount: float, notes: Optional[str] = None) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO advances(employee_id, advance_date, amount, notes) VALUES(%s,%s,%s,%s)",
                (employee_id, advance_date, amount, notes),
            )
            return int(cur.lastrowid)

    def delete(self, advance_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM advances WHERE id=%s", (int(advance_id),))
            return cur.rowcount > 0

    def list_for_employee(self, employee_id: str, *, start_date: date, end_date: date) -> Sequence[AdvanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, employee_id, advance_date, amount, notes FROM advances
                WHERE employee_id=%s AND advance_date BETWEEN %s AND %s
                ORDER BY advance_date
                """,
                (employee_id, start_date, end_date),
            )
            return [_to_advance(r) for r in fetchall(cur)]

    def list_for_employees(
        self,
        employee_ids: Sequence[str],
        *,
        start_date: date,
        end_date: date,
    ) -> Sequence[AdvanceRecord]:
        if not employee_ids:
            return []
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT id, employee_id, advance_date, amount, notes FROM advances
                WHERE employee_id IN ({in_clause(employee_ids)})
                  AND advance_date BETWEEN %s AND %s
                """,
                (*employee_ids, start_date, end_date),
            )
            return [_to_advance(r) for r in fetchall(cur)]
