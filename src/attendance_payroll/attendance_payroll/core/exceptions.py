from __future__ import annotations

from typing import Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class EmployeeNotFoundError(DomainError):
    """Raised when a calculation references an unknown employee."""

    def __init__(self, employee_id: str):
        super().__init__(f"Employee not found: {employee_id}")
        self.employee_id = employee_id


class BusinessRuleViolationError(DomainError):
    """Raised when a computed salary fails one or more business rules."""

    def __init__(self, violations: Sequence):
        self.violations = list(violations)
        joined = ", ".join(v.error_message or v.rule_name for v in self.violations)
        super().__init__(f"Business rule validation failed: {joined}")


class PayrollGenerationError(DomainError):
    """Raised when a payroll batch cannot start."""
