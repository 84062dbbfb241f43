"""In-memory collaborators for service tests (no MySQL needed)."""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

from src.attendance_payroll.attendance_payroll.advances.model import AdvanceRecord
from src.attendance_payroll.attendance_payroll.attendance.model import AttendanceRecord, DailyHours
from src.attendance_payroll.attendance_payroll.departments.model import DepartmentRules
from src.attendance_payroll.attendance_payroll.employees.model import Employee
from src.attendance_payroll.attendance_payroll.payroll.model import PayrollRecord


class InMemoryEmployees:
    def __init__(self, *employees: Employee):
        self.by_id = {e.id: e for e in employees}
        self.get_calls = 0

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        self.get_calls += 1
        return self.by_id.get(employee_id)

    def get_many(self, employee_ids):
        return [self.by_id[i] for i in employee_ids if i in self.by_id]

    def get_by_device_user_id(self, device_user_id: int) -> Optional[Employee]:
        for e in self.by_id.values():
            if e.biometric_device_user_id == device_user_id:
                return e
        return None

    def list_active(self, *, department=None):
        return [e for e in self.by_id.values() if e.is_active and (department is None or e.department == department)]


class InMemoryAttendance:
    def __init__(self, *records: AttendanceRecord):
        self._by_key: dict[tuple[str, date], AttendanceRecord] = {}
        self._id = 0
        self.list_calls = 0
        for r in records:
            self.upsert(r)

    def _next_id(self) -> int:
        self._id += 1
        return self._id

    def get(self, attendance_id: int):
        for r in self._by_key.values():
            if r.id == attendance_id:
                return r
        return None

    def get_for_employee_and_date(self, employee_id, attendance_date):
        return self._by_key.get((employee_id, attendance_date))

    def upsert(self, record: AttendanceRecord) -> AttendanceRecord:
        key = (record.employee_id, record.attendance_date)
        existing = self._by_key.get(key)
        saved = replace(record, id=existing.id if existing else self._next_id())
        self._by_key[key] = saved
        return saved

    def upsert_many(self, records) -> int:
        for r in records:
            self.upsert(r)
        return len(records)

    def update_hours(self, *, employee_id, attendance_date, hours: DailyHours) -> bool:
        key = (employee_id, attendance_date)
        if key not in self._by_key:
            return False
        self._by_key[key] = replace(
            self._by_key[key],
            hours_worked=hours.hours_worked,
            overtime_hours=hours.overtime_hours,
            undertime_hours=hours.undertime_hours,
            late_hours=0.0,
        )
        return True

    def fill_times(self, *, attendance_id, check_in_time=None, check_out_time=None) -> bool:
        for key, r in self._by_key.items():
            if r.id == attendance_id:
                self._by_key[key] = replace(
                    r,
                    check_in_time=r.check_in_time or check_in_time,
                    check_out_time=r.check_out_time or check_out_time,
                )
                return True
        return False

    def delete(self, attendance_id: int) -> bool:
        for key, r in list(self._by_key.items()):
            if r.id == attendance_id:
                del self._by_key[key]
                return True
        return False

    def list_for_employee(self, employee_id, *, start_date, end_date):
        self.list_calls += 1
        return sorted(
            (r for r in self._by_key.values() if r.employee_id == employee_id and start_date <= r.attendance_date <= end_date),
            key=lambda r: r.attendance_date,
        )

    def list_for_employees(self, employee_ids, *, start_date, end_date):
        self.list_calls += 1
        ids = set(employee_ids)
        return [r for r in self._by_key.values() if r.employee_id in ids and start_date <= r.attendance_date <= end_date]

    def all(self):
        return list(self._by_key.values())


class InMemoryAdvances:
    def __init__(self, *advances: AdvanceRecord):
        self._rows: dict[int, AdvanceRecord] = {}
        self._id = 0
        self.list_calls = 0
        for a in advances:
            self.add(employee_id=a.employee_id, advance_date=a.advance_date, amount=a.amount, notes=a.notes)

    def get(self, advance_id):
        return self._rows.get(advance_id)

    def add(self, *, employee_id, advance_date, amount, notes=None) -> int:
        self._id += 1
        self._rows[self._id] = AdvanceRecord(
            id=self._id, employee_id=employee_id, advance_date=advance_date, amount=amount, notes=notes
        )
        return self._id

    def delete(self, advance_id) -> bool:
        return self._rows.pop(advance_id, None) is not None

    def list_for_employee(self, employee_id, *, start_date, end_date):
        self.list_calls += 1
        return [a for a in self._rows.values() if a.employee_id == employee_id and start_date <= a.advance_date <= end_date]

    def list_for_employees(self, employee_ids, *, start_date, end_date):
        self.list_calls += 1
        ids = set(employee_ids)
        return [a for a in self._rows.values() if a.employee_id in ids and start_date <= a.advance_date <= end_date]


class InMemoryPayroll:
    def __init__(self, *records: PayrollRecord):
        self.by_key: dict[tuple[str, int, int], PayrollRecord] = {}
        self.writes = 0
        self._id = 0
        for r in records:
            self._id += 1
            self.by_key[(r.employee_id, r.month, r.year)] = replace(r, id=r.id or self._id)

    def get_for(self, employee_id, month, year):
        return self.by_key.get((employee_id, month, year))

    def upsert(self, record: PayrollRecord) -> int:
        self.writes += 1
        key = (record.employee_id, record.month, record.year)
        existing = self.by_key.get(key)
        if existing:
            record_id = existing.id
        else:
            self._id += 1
            record_id = self._id
        self.by_key[key] = replace(record, id=record_id)
        return record_id

    def update_derived(self, record: PayrollRecord) -> bool:
        self.writes += 1
        key = (record.employee_id, record.month, record.year)
        if key not in self.by_key:
            return False
        self.by_key[key] = record
        return True


class FakeRulesRepo:
    def __init__(self, rules: Optional[dict[str, DepartmentRules]] = None, *, fail: bool = False):
        self.rules = dict(rules or {})
        self.fail = fail
        self.calls = 0

    def get_for_department(self, department: str) -> Optional[DepartmentRules]:
        self.calls += 1
        if self.fail:
            raise ConnectionError("rules store down")
        return self.rules.get(department)


class FakeCalendar:
    def __init__(self, overrides: Optional[dict[tuple[int, int], int]] = None, *, fail: bool = False):
        self.overrides = dict(overrides or {})
        self.fail = fail
        self.calls = 0

    def actual_days_in_month(self, *, month: int, year: int) -> Optional[int]:
        self.calls += 1
        if self.fail:
            raise ConnectionError("calendar down")
        return self.overrides.get((year, month))


class RecordingScheduler:
    def __init__(self):
        self.scheduled: list[tuple[str, int, int]] = []

    def schedule(self, employee_id: str, month: int, year: int) -> None:
        self.scheduled.append((employee_id, month, year))
