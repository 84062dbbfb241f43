from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..core.enums import AttendanceStatus, ShiftType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone, in_clause, normalize_mysql_time
from .model import AttendanceRecord, DailyHours
from .repository import AttendanceRepository

_COLUMNS = """
    id, employee_id, attendance_date, status, check_in_time, check_out_time,
    hours_worked, overtime_hours, undertime_hours, late_hours, shift_type,
    notes, biometric_verified, biometric_credential_id
"""

_UPSERT = """
    INSERT INTO attendance(
        employee_id, attendance_date, status, check_in_time, check_out_time,
        hours_worked, overtime_hours, undertime_hours, late_hours, shift_type,
        notes, biometric_verified, biometric_credential_id
    )
    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
    ON DUPLICATE KEY UPDATE
        status=VALUES(status),
        check_in_time=VALUES(check_in_time),
        check_out_time=VALUES(check_out_time),
        hours_worked=VALUES(hours_worked),
        overtime_hours=VALUES(overtime_hours),
        undertime_hours=VALUES(undertime_hours),
        late_hours=VALUES(late_hours),
        shift_type=VALUES(shift_type),
        notes=VALUES(notes),
        biometric_verified=VALUES(biometric_verified),
        biometric_credential_id=VALUES(biometric_credential_id)
"""


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        id=int(r["id"]),
        employee_id=str(r["employee_id"]),
        attendance_date=r["attendance_date"],
        status=AttendanceStatus(r["status"]),
        check_in_time=normalize_mysql_time(r.get("check_in_time")),
        check_out_time=normalize_mysql_time(r.get("check_out_time")),
        hours_worked=as_float(r.get("hours_worked")),
        overtime_hours=as_float(r.get("overtime_hours")),
        undertime_hours=as_float(r.get("undertime_hours")),
        late_hours=as_float(r.get("late_hours")),
        shift_type=ShiftType(r.get("shift_type") or ShiftType.REGULAR.value),
        notes=r.get("notes"),
        biometric_verified=bool(r.get("biometric_verified")),
        biometric_credential_id=r.get("biometric_credential_id"),
    )


def _params(rec: AttendanceRecord) -> tuple:
    return (
        rec.employee_id,
        rec.attendance_date,
        AttendanceStatus(rec.status).value,
        rec.check_in_time,
        rec.check_out_time,
        rec.hours_worked,
        rec.overtime_hours,
        rec.undertime_hours,
        rec.late_hours,
        ShiftType(rec.shift_type).value,
        rec.notes,
        int(bool(rec.biometric_verified)),
        rec.biometric_credential_id,
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance WHERE id=%s", (int(attendance_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def get_for_employee_and_date(self, employee_id: str, attendance_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance WHERE employee_id=%s AND attendance_date=%s",
                (employee_id, attendance_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def upsert(self, record: AttendanceRecord) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_UPSERT, _params(record))
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance WHERE employee_id=%s AND attendance_date=%s",
                (record.employee_id, record.attendance_date),
            )
            return _to_record(fetchone(cur))

    def upsert_many(self, records: Sequence[AttendanceRecord]) -> int:
        if not records:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(_UPSERT, [_params(r) for r in records])
            return len(records)

    def update_hours(self, *, employee_id: str, attendance_date: date, hours: DailyHours) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance
                SET hours_worked=%s, overtime_hours=%s, undertime_hours=%s, late_hours=0
                WHERE employee_id=%s AND attendance_date=%s
                """,
                (hours.hours_worked, hours.overtime_hours, hours.undertime_hours, employee_id, attendance_date),
            )
            return cur.rowcount > 0

    def fill_times(
        self,
        *,
        attendance_id: int,
        check_in_time: Optional[str] = None,
        check_out_time: Optional[str] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance
                SET check_in_time=COALESCE(check_in_time, %s),
                    check_out_time=COALESCE(check_out_time, %s)
                WHERE id=%s
                """,
                (check_in_time, check_out_time, int(attendance_id)),
            )
            return cur.rowcount > 0

    def delete(self, attendance_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE id=%s", (int(attendance_id),))
            return cur.rowcount > 0

    def list_for_employee(self, employee_id: str, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS} FROM attendance
                WHERE employee_id=%s AND attendance_date BETWEEN %s AND %s
                ORDER BY attendance_date
                """,
                (employee_id, start_date, end_date),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_employees(
        self,
        employee_ids: Sequence[str],
        *,
        start_date: date,
        end_date: date,
    ) -> Sequence[AttendanceRecord]:
        if not employee_ids:
            return []
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS} FROM attendance
                WHERE employee_id IN ({in_clause(employee_ids)})
                  AND attendance_date BETWEEN %s AND %s
                ORDER BY employee_id, attendance_date
                """,
                (*employee_ids, start_date, end_date),
            )
            return [_to_record(r) for r in fetchall(cur)]
