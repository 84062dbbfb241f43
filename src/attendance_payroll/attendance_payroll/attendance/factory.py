from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import ShiftType
from .strategies.base import ShiftHoursStrategy
from .strategies.day_strategy import DayShiftStrategy
from .strategies.night_strategy import NightShiftStrategy
from .strategies.regular_strategy import RegularShiftStrategy


@dataclass
class ShiftHoursStrategyFactory:
    """Factory Pattern: choose the standard-hours strategy by shift type."""

    def for_shift(self, shift_type: Optional[ShiftType | str]) -> ShiftHoursStrategy:
        try:
            kind = ShiftType(shift_type) if shift_type else ShiftType.REGULAR
        except ValueError:
            kind = ShiftType.REGULAR

        if kind == ShiftType.DAY:
            return DayShiftStrategy()
        if kind == ShiftType.NIGHT:
            return NightShiftStrategy()
        return RegularShiftStrategy()
