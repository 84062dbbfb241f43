from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus, PunchKind, ShiftType


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Bản ghi chấm công.

    Unique per (employee_id, attendance_date). Times are 'HH:MM[:SS]' strings
    in local wall-clock time.
    """

    employee_id: str
    attendance_date: date
    status: AttendanceStatus
    check_in_time: Optional[str] = None
    check_out_time: Optional[str] = None
    hours_worked: float = 0.0
    overtime_hours: float = 0.0
    undertime_hours: float = 0.0
    late_hours: float = 0.0
    shift_type: ShiftType = ShiftType.REGULAR
    notes: Optional[str] = None
    biometric_verified: bool = False
    biometric_credential_id: Optional[str] = None
    id: Optional[int] = None


@dataclass(frozen=True)
class AttendanceRow:
    """Read-model feeding the salary engine (one row per attendance day)."""

    attendance_date: date
    status: AttendanceStatus
    overtime_hours: float = 0.0
    undertime_hours: float = 0.0
    hours_worked: float = 0.0
    late_hours: float = 0.0

    @classmethod
    def from_record(cls, record: AttendanceRecord) -> "AttendanceRow":
        return cls(
            attendance_date=record.attendance_date,
            status=AttendanceStatus(record.status),
            overtime_hours=float(record.overtime_hours or 0),
            undertime_hours=float(record.undertime_hours or 0),
            hours_worked=float(record.hours_worked or 0),
            late_hours=float(record.late_hours or 0),
        )


@dataclass(frozen=True)
class DailyHours:
    hours_worked: float
    overtime_hours: float = 0.0
    undertime_hours: float = 0.0


@dataclass(frozen=True)
class DevicePunch:
    """One log entry pulled from a fingerprint terminal."""

    device_user_id: int
    timestamp: datetime
    kind: PunchKind


@dataclass
class SyncResult:
    success: int = 0
    failed: int = 0
    errors: list[str] = field(default_factory=list)
