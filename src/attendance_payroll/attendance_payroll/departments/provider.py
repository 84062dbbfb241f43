from __future__ import annotations

import logging
from typing import Dict, Optional

from .model import DEFAULT_DEPARTMENT_RULES, DepartmentRules
from .repository import DepartmentRulesRepository

logger = logging.getLogger(__name__)


class DepartmentRulesProvider:
    """Resolve calculation rules per department, memoized for one run.

    A department without stored rules (or a failed lookup) gets the default
    rules so payroll is never blocked by missing configuration. Fallbacks are
    not cached; the next lookup tries the store again.
    """

    def __init__(self, repository: DepartmentRulesRepository):
        self._repository = repository
        self._cache: Dict[str, DepartmentRules] = {}

    def get_rules(self, department: Optional[str]) -> DepartmentRules:
        if not department:
            return DEFAULT_DEPARTMENT_RULES

        cached = self._cache.get(department)
        if cached is not None:
            return cached

        try:
            rules = self._repository.get_for_department(department)
        except Exception:
            logger.warning("Department rules lookup failed for %s; using defaults", department, exc_info=True)
            return DEFAULT_DEPARTMENT_RULES

        if rules is None:
            logger.warning("No calculation rules configured for %s; using defaults", department)
            return DEFAULT_DEPARTMENT_RULES

        self._cache[department] = rules
        return rules

    def clear(self) -> None:
        self._cache.clear()
