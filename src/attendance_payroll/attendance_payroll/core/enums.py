from __future__ import annotations

from enum import Enum


class Department(str, Enum):
    """Phòng ban cố định của nhân viên."""

    ENAMEL = "Enamel"
    WORKSHOP = "Workshop"
    GUARDS = "Guards"
    COOKS = "Cooks"
    ADMINS = "Admins"
    DIRECTORS = "Directors"
    ACCOUNTS = "Accounts"


class AttendanceStatus(str, Enum):
    """Trạng thái chấm công lưu trong CSDL."""

    PRESENT = "present"
    ABSENT = "absent"
    LEAVE = "leave"
    HOLIDAY = "holiday"


class ShiftType(str, Enum):
    DAY = "day"
    NIGHT = "night"
    REGULAR = "regular"


class PunchKind(str, Enum):
    """Loại bản ghi từ máy chấm công vân tay."""

    CHECK_IN = "check_in"
    CHECK_OUT = "check_out"


class PayrollStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    LOCKED = "locked"


class GenerationMode(str, Enum):
    ALL = "all"
    DEPARTMENT = "department"
    SINGLE = "single"
