from datetime import date, timedelta

import pytest

from src.attendance_payroll.attendance_payroll.attendance.model import AttendanceRow
from src.attendance_payroll.attendance_payroll.calendar_days.resolver import CalendarDaysResolver
from src.attendance_payroll.attendance_payroll.core.enums import AttendanceStatus
from src.attendance_payroll.attendance_payroll.core.exceptions import BusinessRuleViolationError, EmployeeNotFoundError
from src.attendance_payroll.attendance_payroll.departments.model import DepartmentRules
from src.attendance_payroll.attendance_payroll.departments.provider import DepartmentRulesProvider
from src.attendance_payroll.attendance_payroll.employees.model import Employee
from src.attendance_payroll.attendance_payroll.payroll.engine import SalaryCalculationEngine
from src.attendance_payroll.attendance_payroll.payroll.validation import BusinessRuleValidator
from tests.fakes import FakeCalendar, FakeRulesRepo, InMemoryEmployees

WORKSHOP = Employee(id="w1", name="Workshop A", department="Workshop", base_salary=30000)
GUARD = Employee(id="g1", name="Guard B", department="Guards", base_salary=24000)


class BrokenEvaluator:
    def evaluate(self, figures):
        raise RuntimeError("rules engine offline")


def _engine(*, rules=None, calendar=None, validator=None):
    rules_repo = FakeRulesRepo(rules or {})
    calendar = calendar or FakeCalendar()
    engine = SalaryCalculationEngine(
        InMemoryEmployees(WORKSHOP, GUARD),
        DepartmentRulesProvider(rules_repo),
        CalendarDaysResolver(calendar),
        validator=validator,
    )
    return engine, rules_repo, calendar


def _present(count, *, month=4, overtime=0.0):
    start = date(2025, month, 1)
    return [
        AttendanceRow(attendance_date=start + timedelta(days=i), status=AttendanceStatus.PRESENT, overtime_hours=overtime)
        for i in range(count)
    ]


def test_round_trip_month_uses_calendar_days():
    engine, _, _ = _engine()
    rows = (
        _present(25, overtime=2)
        + [AttendanceRow(attendance_date=date(2025, 4, 26 + i), status=AttendanceStatus.ABSENT) for i in range(2)]
        + [AttendanceRow(attendance_date=date(2025, 4, 28 + i), status=AttendanceStatus.LEAVE) for i in range(3)]
    )

    result = engine.calculate_salary("w1", 30000, 0, 4, 2025, rows, 1000)

    assert result.total_days == 30
    assert result.earned_salary == 28000
    assert result.overtime_pay == 9375
    assert result.final_salary == 36375
    checks = result.details.business_rules_validation
    assert {c.rule_name for c in checks} == {
        "finite_values",
        "non_negative_base_salary",
        "non_negative_overtime_hours",
        "non_negative_overtime_rate",
        "non_negative_advance_amount",
        "non_negative_final_salary",
        "advance_limit",
    }
    assert all(c.is_valid for c in checks)
    assert result.details.rules_evaluated is True


def test_business_calendar_override_changes_per_day_salary():
    engine, _, _ = _engine(calendar=FakeCalendar({(2025, 2): 30}))

    result = engine.calculate_salary("w1", 30000, 0, 2, 2025, _present(10, month=2), 0)

    assert result.total_days == 30
    assert result.details.per_day_salary == 1000
    assert result.earned_salary == 10000


def test_overtime_counted_only_for_overtime_departments():
    engine, _, _ = _engine(rules={"Guards": DepartmentRules(is_exempt_from_deductions=True)})

    result = engine.calculate_salary("g1", 24000, 0, 4, 2025, _present(30, overtime=3), 0)

    assert result.overtime_hours == 0
    assert result.overtime_pay == 0
    assert result.final_salary == 24000


def test_unknown_employee():
    engine, _, _ = _engine()

    with pytest.raises(EmployeeNotFoundError):
        engine.calculate_salary("ghost", 30000, 0, 4, 2025, [], 0)


def test_advance_over_limit_is_rejected():
    engine, _, _ = _engine()

    with pytest.raises(BusinessRuleViolationError, match="Advance amount 20000 exceeds 50% of base salary") as exc:
        engine.calculate_salary("w1", 30000, 0, 4, 2025, _present(30), 20000)

    assert [v.rule_name for v in exc.value.violations] == ["advance_limit"]


def test_floored_salary_passes_validation():
    engine, _, _ = _engine(rules={"Workshop": DepartmentRules(max_advance_percentage=100)})

    result = engine.calculate_salary("w1", 30000, 0, 4, 2025, _present(5), 20000)

    assert result.final_salary == 0


def test_validator_failure_leaves_result_unchecked():
    engine, _, _ = _engine(validator=BusinessRuleValidator(BrokenEvaluator()))

    result = engine.calculate_salary("w1", 30000, 0, 4, 2025, _present(30), 99999)

    assert result.final_salary == 0
    assert result.details.rules_evaluated is False
    assert result.details.business_rules_validation == []


def test_reference_data_cached_until_reset():
    engine, rules_repo, calendar = _engine(rules={"Workshop": DepartmentRules()})

    engine.calculate_salary("w1", 30000, 0, 4, 2025, _present(1), 0)
    engine.calculate_salary("w1", 30000, 0, 4, 2025, _present(2), 0)
    assert rules_repo.calls == 1
    assert calendar.calls == 1

    engine.reset_caches()
    engine.calculate_salary("w1", 30000, 0, 4, 2025, _present(1), 0)
    assert rules_repo.calls == 2
    assert calendar.calls == 2


def test_rule_checks_reported_in_calculation_details():
    engine, _, _ = _engine()

    details = engine.calculate_salary("w1", 30000, 0, 4, 2025, _present(1), 0).as_dict()["calculation_details"]

    advance = [c for c in details["business_rules_validation"] if c["rule_name"] == "advance_limit"]
    assert advance == [{"rule_name": "advance_limit", "is_valid": True, "error_message": None}]
