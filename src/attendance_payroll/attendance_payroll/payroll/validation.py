from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Protocol

from .model import RuleCheck

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SalaryFigures:
    base_salary: float
    overtime_hours: float
    overtime_rate: float
    advance_amount: float
    final_salary: float
    max_advance_percentage: float


class RuleEvaluator(Protocol):
    def evaluate(self, figures: SalaryFigures) -> List[RuleCheck]:
        raise NotImplementedError


class LocalRuleEvaluator(RuleEvaluator):
    """Salary sanity rules evaluated in-process."""

    def evaluate(self, figures: SalaryFigures) -> List[RuleCheck]:
        values = {
            "base_salary": figures.base_salary,
            "overtime_hours": figures.overtime_hours,
            "overtime_rate": figures.overtime_rate,
            "advance_amount": figures.advance_amount,
            "final_salary": figures.final_salary,
        }

        non_finite = [name for name, v in values.items() if not math.isfinite(float(v))]
        checks = [
            RuleCheck(
                rule_name="finite_values",
                is_valid=not non_finite,
                error_message=f"Non-numeric values: {', '.join(non_finite)}" if non_finite else None,
            )
        ]

        for name, value in values.items():
            ok = float(value) >= 0
            checks.append(
                RuleCheck(
                    rule_name=f"non_negative_{name}",
                    is_valid=ok,
                    error_message=None if ok else f"{name.replace('_', ' ').capitalize()} cannot be negative",
                )
            )

        limit = float(figures.base_salary) * float(figures.max_advance_percentage) / 100
        within = float(figures.advance_amount) <= limit
        checks.append(
            RuleCheck(
                rule_name="advance_limit",
                is_valid=within,
                error_message=None
                if within
                else (
                    f"Advance amount {figures.advance_amount:g} exceeds "
                    f"{figures.max_advance_percentage:g}% of base salary"
                ),
            )
        )
        return checks


@dataclass(frozen=True)
class ValidationOutcome:
    checks: List[RuleCheck]
    evaluated: bool = True

    @property
    def violations(self) -> List[RuleCheck]:
        return [c for c in self.checks if not c.is_valid]

    @property
    def is_valid(self) -> bool:
        return not self.violations


class BusinessRuleValidator:
    """Post-hoc checks on a computed salary.

    If the evaluator itself fails, the result is treated as valid (fail open)
    and `ValidationOutcome.evaluated` is False so callers can tell "unchecked"
    apart from "passed".
    """

    def __init__(self, evaluator: Optional[RuleEvaluator] = None):
        self._evaluator = evaluator or LocalRuleEvaluator()

    def evaluate(
        self,
        *,
        base_salary: float,
        overtime_hours: float,
        overtime_rate: float,
        advance_amount: float,
        final_salary: float,
        max_advance_percentage: float,
    ) -> ValidationOutcome:
        figures = SalaryFigures(
            base_salary=base_salary,
            overtime_hours=overtime_hours,
            overtime_rate=overtime_rate,
            advance_amount=advance_amount,
            final_salary=final_salary,
            max_advance_percentage=max_advance_percentage,
        )
        try:
            checks = self._evaluator.evaluate(figures)
        except Exception:
            logger.warning("Business rule evaluation unavailable; salary left unvalidated", exc_info=True)
            return ValidationOutcome(checks=[], evaluated=False)
        return ValidationOutcome(checks=list(checks))

    def validate(self, **figures: float) -> List[RuleCheck]:
        """Violations only; an empty list means valid (or not evaluable)."""
        return self.evaluate(**figures).violations
