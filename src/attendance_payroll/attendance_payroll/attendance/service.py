from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import format_local_time, now_local, today_local
from ..common.validators import require_not_future, require_time
from ..core.enums import AttendanceStatus, PunchKind, ShiftType
from ..core.exceptions import EmployeeNotFoundError, ValidationError
from ..departments.provider import DepartmentRulesProvider
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..payroll.recalculation import RecalculationScheduler
from .hours import DailyHoursCalculator
from .model import AttendanceRecord, DevicePunch, SyncResult
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Attendance writes. Every successful write schedules a payroll recalculation
    for the affected employee/month; the write never waits on its outcome."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        rules: DepartmentRulesProvider,
        recalculation: RecalculationScheduler,
        *,
        hours_calculator: DailyHoursCalculator | None = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._rules = rules
        self._recalculation = recalculation
        self._hours = hours_calculator or DailyHoursCalculator()

    def mark_attendance(self, record: AttendanceRecord, *, today: date | None = None) -> AttendanceRecord:
        today = today or today_local()
        require_not_future(record.attendance_date, today, "attendance")
        record = replace(
            record,
            check_in_time=require_time(record.check_in_time, "check_in_time"),
            check_out_time=require_time(record.check_out_time, "check_out_time"),
        )

        employee = self._employees.get_by_id(record.employee_id)
        if not employee:
            raise EmployeeNotFoundError(record.employee_id)
        if not employee.is_active:
            raise ValidationError("Cannot mark attendance for inactive employees")
        if employee.joining_date and record.attendance_date < employee.joining_date:
            raise ValidationError("Cannot mark attendance before employee's joining date")

        if not self._hours.tracks_overtime(employee.department):
            record = replace(record, overtime_hours=0.0, undertime_hours=0.0)

        saved = self._attendance.upsert(replace(record, late_hours=0.0))
        if saved.check_in_time and saved.check_out_time:
            saved = self._refresh_hours(employee, saved)

        self._schedule(saved.employee_id, saved.attendance_date)
        return saved

    def bulk_mark(
        self,
        employee_ids: Sequence[str],
        *,
        attendance_date: date,
        status: AttendanceStatus,
        check_in_time: Optional[str] = None,
        notes: Optional[str] = None,
        shift_type: ShiftType = ShiftType.REGULAR,
        now: datetime | None = None,
    ) -> int:
        now = now or now_local()
        require_not_future(attendance_date, now.date(), "attendance")
        check_in_time = require_time(check_in_time, "check_in_time")
        if not employee_ids:
            return 0

        employees = self._employees.get_many(list(employee_ids))
        too_early = [e for e in employees if e.joining_date and attendance_date < e.joining_date]
        if too_early:
            raise ValidationError("Cannot mark attendance before joining date for some employees")

        status = AttendanceStatus(status)
        if not check_in_time and status == AttendanceStatus.PRESENT:
            check_in_time = format_local_time(now)

        records = [
            AttendanceRecord(
                employee_id=employee_id,
                attendance_date=attendance_date,
                status=status,
                check_in_time=check_in_time,
                check_out_time=None,
                shift_type=ShiftType(shift_type),
                notes=notes,
            )
            for employee_id in employee_ids
        ]
        count = self._attendance.upsert_many(records)

        for employee_id in dict.fromkeys(employee_ids):
            self._schedule(employee_id, attendance_date)
        return count

    def delete_attendance(self, attendance_id: int) -> AttendanceRecord:
        # Read first: the month to recalculate comes from the deleted row.
        record = self._attendance.get(attendance_id)
        if not record:
            raise ValidationError("Attendance record not found")

        self._attendance.delete(attendance_id)
        self._schedule(record.employee_id, record.attendance_date)
        return record

    def import_device_punches(self, punches: Iterable[DevicePunch]) -> SyncResult:
        """Merge fingerprint-terminal logs into attendance.

        Existing rows only get a missing check-in/check-out filled in; a punch
        for a day without a row creates a biometric-verified present record.
        """
        result = SyncResult()
        punches = list(punches)
        if not punches:
            result.errors.append("No attendance logs found on device")
            return result

        for punch in punches:
            try:
                self._import_punch(punch, result)
            except Exception as exc:
                logger.exception("Failed to import punch for device user %s", punch.device_user_id)
                result.failed += 1
                result.errors.append(f"Error processing log: {exc}")
        return result

    def _import_punch(self, punch: DevicePunch, result: SyncResult) -> None:
        employee = self._employees.get_by_device_user_id(punch.device_user_id)
        if not employee:
            result.failed += 1
            result.errors.append(f"No employee found for device user ID {punch.device_user_id}")
            return

        attendance_date = punch.timestamp.date()
        punch_time = format_local_time(punch.timestamp)
        is_check_in = PunchKind(punch.kind) == PunchKind.CHECK_IN

        existing = self._attendance.get_for_employee_and_date(employee.id, attendance_date)
        if existing:
            check_in = punch_time if is_check_in and not existing.check_in_time else None
            check_out = punch_time if not is_check_in and not existing.check_out_time else None
            if not check_in and not check_out:
                return
            self._attendance.fill_times(
                attendance_id=int(existing.id),
                check_in_time=check_in,
                check_out_time=check_out,
            )
            saved = replace(
                existing,
                check_in_time=check_in or existing.check_in_time,
                check_out_time=check_out or existing.check_out_time,
            )
        else:
            saved = self._attendance.upsert(
                AttendanceRecord(
                    employee_id=employee.id,
                    attendance_date=attendance_date,
                    status=AttendanceStatus.PRESENT,
                    check_in_time=punch_time if is_check_in else None,
                    check_out_time=None if is_check_in else punch_time,
                    biometric_verified=True,
                )
            )

        if saved.check_in_time and saved.check_out_time:
            self._refresh_hours(employee, saved)
        result.success += 1
        self._schedule(employee.id, attendance_date)

    def _refresh_hours(self, employee: Employee, record: AttendanceRecord) -> AttendanceRecord:
        """Store derived hours; a failure is logged and the saved row returned unchanged."""
        try:
            rules = self._rules.get_rules(employee.department)
            hours = self._hours.derive(
                check_in=record.check_in_time,
                check_out=record.check_out_time,
                department=employee.department,
                rules=rules,
                shift_type=record.shift_type,
            )
            self._attendance.update_hours(
                employee_id=record.employee_id,
                attendance_date=record.attendance_date,
                hours=hours,
            )
        except Exception:
            logger.exception(
                "Hour derivation failed for %s on %s; keeping saved attendance",
                record.employee_id,
                record.attendance_date,
            )
            return record
        return replace(
            record,
            hours_worked=hours.hours_worked,
            overtime_hours=hours.overtime_hours,
            undertime_hours=hours.undertime_hours,
            late_hours=0.0,
        )

    def _schedule(self, employee_id: str, attendance_date: date) -> None:
        self._recalculation.schedule(employee_id, attendance_date.month, attendance_date.year)
