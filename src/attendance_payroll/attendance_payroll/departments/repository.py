from __future__ import annotations

from typing import Optional, Protocol

from .model import DepartmentRules


class DepartmentRulesRepository(Protocol):
    def get_for_department(self, department: str) -> Optional[DepartmentRules]:
        raise NotImplementedError
