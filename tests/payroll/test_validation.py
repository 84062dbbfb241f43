import math

from src.attendance_payroll.attendance_payroll.payroll.validation import BusinessRuleValidator, LocalRuleEvaluator, SalaryFigures

FIGURES = dict(
    base_salary=30000,
    overtime_hours=10,
    overtime_rate=187.5,
    advance_amount=1000,
    final_salary=30875,
    max_advance_percentage=50,
)


def test_valid_salary_has_no_violations():
    outcome = BusinessRuleValidator().evaluate(**FIGURES)

    assert outcome.is_valid
    assert outcome.evaluated


def test_negative_values_are_reported():
    violations = BusinessRuleValidator().validate(**{**FIGURES, "overtime_hours": -1, "final_salary": -5})

    assert {v.rule_name for v in violations} == {"non_negative_overtime_hours", "non_negative_final_salary"}
    assert "Overtime hours cannot be negative" in [v.error_message for v in violations]


def test_advance_limit_uses_department_percentage():
    checks = LocalRuleEvaluator().evaluate(SalaryFigures(**{**FIGURES, "advance_amount": 9001, "max_advance_percentage": 30}))

    limit = [c for c in checks if c.rule_name == "advance_limit"][0]
    assert not limit.is_valid
    assert limit.error_message == "Advance amount 9001 exceeds 30% of base salary"


def test_non_finite_values_fail():
    violations = BusinessRuleValidator().validate(**{**FIGURES, "final_salary": math.nan})

    assert "finite_values" in {v.rule_name for v in violations}


def test_evaluator_errors_fail_open():
    class Exploding:
        def evaluate(self, figures):
            raise TimeoutError

    outcome = BusinessRuleValidator(Exploding()).evaluate(**FIGURES)

    assert outcome.violations == []
    assert outcome.evaluated is False
