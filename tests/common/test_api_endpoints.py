from datetime import date
from types import SimpleNamespace

import pytest
from flask import Flask

from src.attendance_payroll.attendance_payroll.advances.controller import register as register_advances
from src.attendance_payroll.attendance_payroll.advances.service import AdvanceService
from src.attendance_payroll.attendance_payroll.attendance.model import AttendanceRecord
from src.attendance_payroll.attendance_payroll.calendar_days.resolver import CalendarDaysResolver
from src.attendance_payroll.attendance_payroll.core.enums import AttendanceStatus
from src.attendance_payroll.attendance_payroll.departments.provider import DepartmentRulesProvider
from src.attendance_payroll.attendance_payroll.employees.model import Employee
from src.attendance_payroll.attendance_payroll.payroll.controller import register as register_payroll
from src.attendance_payroll.attendance_payroll.payroll.engine import SalaryCalculationEngine
from src.attendance_payroll.attendance_payroll.payroll.recalculation import RecalculationQueue
from src.attendance_payroll.attendance_payroll.payroll.service import PayrollService
from tests.fakes import FakeCalendar, FakeRulesRepo, InMemoryAdvances, InMemoryAttendance, InMemoryEmployees, InMemoryPayroll


@pytest.fixture()
def client():
    employees = InMemoryEmployees(Employee(id="w1", name="An", department="Workshop", base_salary=30000))
    attendance = InMemoryAttendance(
        *[
            AttendanceRecord(employee_id="w1", attendance_date=date(2025, 4, d), status=AttendanceStatus.PRESENT)
            for d in range(1, 11)
        ]
    )
    engine = SalaryCalculationEngine(
        employees, DepartmentRulesProvider(FakeRulesRepo()), CalendarDaysResolver(FakeCalendar())
    )
    payroll_service = PayrollService(engine, employees, attendance, InMemoryAdvances(), InMemoryPayroll())
    recalculation = RecalculationQueue(payroll_service.recalculate)
    container = SimpleNamespace(
        payroll_service=payroll_service,
        recalculation=recalculation,
        advance_service=AdvanceService(InMemoryAdvances(), employees, recalculation),
    )

    app = Flask(__name__)
    register_advances(app, container)
    register_payroll(app, container)
    return app.test_client()


def test_add_advance_returns_created(client):
    resp = client.post("/api/advances", json={"employee_id": "w1", "amount": 250, "advance_date": "2025-04-02"})

    assert resp.status_code == 201
    assert resp.get_json() == {"success": True, "id": 1}


def test_unknown_employee_maps_to_404(client):
    resp = client.post("/api/advances", json={"employee_id": "nope", "amount": 250})

    assert resp.status_code == 404
    assert resp.get_json()["success"] is False


def test_missing_fields_map_to_400(client):
    assert client.post("/api/advances", json={"amount": 10}).status_code == 400
    assert client.post("/api/advances", data="not json").status_code == 400


def test_generate_then_preview(client):
    resp = client.post("/api/payroll/generate", json={"month": 4, "year": 2025})

    assert resp.status_code == 200
    body = resp.get_json()
    assert (body["succeeded"], body["failed"], body["skipped"], body["errors"]) == (1, 0, 0, [])

    preview = client.get("/api/payroll/preview?employee_id=w1&month=4&year=2025").get_json()
    assert preview["calculation"]["earned_salary"] == 10000
    assert preview["calculation"]["calculation_details"]["rules_evaluated"] is True


def test_generation_with_no_targets_is_a_conflict(client):
    resp = client.post("/api/payroll/generate", json={"month": 4, "year": 2025, "mode": "department", "department": "Cooks"})

    assert resp.status_code == 409
    assert resp.get_json()["message"] == "No active employees found to process"


def test_recalculate_is_accepted(client):
    resp = client.post("/api/payroll/recalculate", json={"employee_id": "w1", "month": 4, "year": 2025})

    assert resp.status_code == 202
    assert resp.get_json()["pending"] == 0
