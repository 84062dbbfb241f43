from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import DepartmentRules
from .repository import DepartmentRulesRepository


class MySQLDepartmentRulesRepository(DepartmentRulesRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_department(self, department: str) -> Optional[DepartmentRules]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT is_exempt_from_deductions, is_exempt_from_overtime,
                       max_overtime_hours_per_day, max_advance_percentage,
                       working_days_per_month, standard_hours_per_day,
                       overtime_multiplier, min_hours_full_day, half_day_hours,
                       day_shift_hours, night_shift_hours, night_shift_multiplier
                FROM department_calculation_rules
                WHERE department=%s
                """,
                (department,),
            )
            r = fetchone(cur)
            return DepartmentRules.from_row(r) if r else None
