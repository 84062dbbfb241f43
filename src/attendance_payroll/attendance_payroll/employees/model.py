from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Thực thể miền (domain): Nhân viên.

    Owned by the HR module; payroll code only reads it.
    """

    id: str
    name: str
    department: Optional[str]
    base_salary: float
    overtime_rate: float = 0.0
    overtime_wage: float = 0.0
    is_active: bool = True
    joining_date: Optional[date] = None
    biometric_device_user_id: Optional[int] = None
