from datetime import date

import pytest

from src.attendance_payroll.attendance_payroll.common.validators import require_month, require_not_future, require_time
from src.attendance_payroll.attendance_payroll.core.exceptions import ValidationError


@pytest.mark.parametrize("value", ["08:00", "8:05", "23:59:59", " 07:30:00 "])
def test_accepts_clock_times(value):
    assert require_time(value, "check_in_time") == value.strip()


@pytest.mark.parametrize("value", [None, "", "   "])
def test_blank_time_is_none(value):
    assert require_time(value, "check_in_time") is None


@pytest.mark.parametrize("value", ["5pm", "24:00", "12:60", "12:00:61", "1200"])
def test_rejects_malformed_times(value):
    with pytest.raises(ValidationError, match="Invalid check_out_time"):
        require_time(value, "check_out_time")


def test_month_and_future_guards():
    assert require_month("4", "2025") == (4, 2025)
    with pytest.raises(ValidationError, match="Invalid month: 0"):
        require_month(0, 2025)
    with pytest.raises(ValidationError, match="Cannot record advance for future dates"):
        require_not_future(date(2025, 1, 2), date(2025, 1, 1), "advance")
