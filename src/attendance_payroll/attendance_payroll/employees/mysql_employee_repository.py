from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone, in_clause
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = """
    id, name, department, base_salary, overtime_rate, overtime_wage,
    is_active, joining_date, biometric_device_user_id
"""


def _to_employee(r: Dict[str, Any]) -> Employee:
    device_user_id = r.get("biometric_device_user_id")
    return Employee(
        id=str(r["id"]),
        name=r["name"],
        department=r.get("department"),
        base_salary=as_float(r.get("base_salary")),
        overtime_rate=as_float(r.get("overtime_rate")),
        overtime_wage=as_float(r.get("overtime_wage")),
        is_active=bool(r.get("is_active", 1)),
        joining_date=r.get("joining_date"),
        biometric_device_user_id=int(device_user_id) if device_user_id is not None else None,
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (employee_id,))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def get_many(self, employee_ids: Sequence[str]) -> Sequence[Employee]:
        if not employee_ids:
            return []
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE id IN ({in_clause(employee_ids)})",
                tuple(employee_ids),
            )
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_device_user_id(self, device_user_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE biometric_device_user_id=%s", (int(device_user_id),))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def list_active(self, *, department: Optional[str] = None) -> Sequence[Employee]:
        sql = f"SELECT {_COLUMNS} FROM employees WHERE is_active=1"
        params: list[Any] = []
        if department:
            sql += " AND department=%s"
            params.append(department)
        sql += " ORDER BY name"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [_to_employee(r) for r in fetchall(cur)]
