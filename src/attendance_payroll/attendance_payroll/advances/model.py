from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional


@dataclass(frozen=True)
class AdvanceRecord:
    """Khoản tạm ứng lương (ledger entry)."""

    employee_id: str
    advance_date: date
    amount: float
    notes: Optional[str] = None
    id: Optional[int] = None


def total_amount(advances: Iterable[AdvanceRecord]) -> float:
    return float(sum(float(a.amount) for a in advances))
