from datetime import date

import pytest

from src.attendance_payroll.attendance_payroll.advances.model import AdvanceRecord
from src.attendance_payroll.attendance_payroll.advances.service import AdvanceService
from src.attendance_payroll.attendance_payroll.core.exceptions import EmployeeNotFoundError, ValidationError
from src.attendance_payroll.attendance_payroll.employees.model import Employee
from tests.fakes import InMemoryAdvances, InMemoryEmployees, RecordingScheduler

TODAY = date(2025, 3, 20)


def _service(*advances):
    employees = InMemoryEmployees(
        Employee(id="e1", name="An", department="Workshop", base_salary=30000),
        Employee(id="e2", name="Binh", department="Cooks", base_salary=15000, is_active=False),
    )
    store = InMemoryAdvances(*advances)
    scheduler = RecordingScheduler()
    return AdvanceService(store, employees, scheduler), store, scheduler


def test_add_advance_rounds_amount_and_schedules():
    service, store, scheduler = _service()

    advance_id = service.add_advance("e1", 1249.6, advance_date=date(2025, 3, 2), today=TODAY)

    saved = store.get(advance_id)
    assert saved.amount == 1250
    assert saved.notes == "Advance for employee"
    assert scheduler.scheduled == [("e1", 3, 2025)]


def test_add_advance_defaults_to_today():
    service, store, _ = _service()

    advance_id = service.add_advance("e1", 500, notes="rent", today=TODAY)

    assert store.get(advance_id).advance_date == TODAY
    assert store.get(advance_id).notes == "rent"


@pytest.mark.parametrize(
    "employee_id, amount, day, error, message",
    [
        ("nobody", 100, None, EmployeeNotFoundError, "Employee not found"),
        ("e2", 100, None, ValidationError, "inactive employees"),
        ("e1", 100, date(2025, 3, 21), ValidationError, "Cannot record advance for future dates"),
        ("e1", 0.2, None, ValidationError, "must be positive"),
    ],
)
def test_add_advance_rejections(employee_id, amount, day, error, message):
    service, store, scheduler = _service()

    with pytest.raises(error, match=message):
        service.add_advance(employee_id, amount, advance_date=day, today=TODAY)

    assert scheduler.scheduled == []


def test_delete_advance_schedules_its_month():
    service, store, scheduler = _service(AdvanceRecord(employee_id="e1", advance_date=date(2025, 1, 31), amount=700))

    removed = service.delete_advance(1)

    assert removed.amount == 700
    assert store.get(1) is None
    assert scheduler.scheduled == [("e1", 1, 2025)]


def test_delete_unknown_advance():
    service, _, _ = _service()

    with pytest.raises(ValidationError, match="Advance not found"):
        service.delete_advance(5)


def test_total_for_month_only_counts_that_month():
    service, _, _ = _service(
        AdvanceRecord(employee_id="e1", advance_date=date(2025, 3, 1), amount=300),
        AdvanceRecord(employee_id="e1", advance_date=date(2025, 3, 31), amount=200),
        AdvanceRecord(employee_id="e1", advance_date=date(2025, 4, 1), amount=999),
    )

    assert service.total_for_month("e1", 3, 2025) == 500
