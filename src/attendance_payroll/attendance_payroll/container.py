from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .advances.mysql_advance_repository import MySQLAdvanceRepository
from .advances.service import AdvanceService
from .attendance.hours import DailyHoursCalculator
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .calendar_days.mysql_business_calendar import MySQLBusinessCalendar
from .calendar_days.resolver import CalendarDaysResolver
from .core.constants import DEFAULT_RECALC_MAX_ATTEMPTS, OVERTIME_DEPARTMENTS
from .database.connection import DatabaseConnection, DBConfig
from .departments.mysql_department_rules_repository import MySQLDepartmentRulesRepository
from .departments.provider import DepartmentRulesProvider
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .payroll.engine import SalaryCalculationEngine
from .payroll.mysql_payroll_repository import MySQLPayrollRepository
from .payroll.recalculation import RecalculationQueue
from .payroll.service import PayrollService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    attendance_repo: MySQLAttendanceRepository
    advances_repo: MySQLAdvanceRepository
    payroll_repo: MySQLPayrollRepository

    engine: SalaryCalculationEngine
    recalculation: RecalculationQueue
    attendance_service: AttendanceService
    advance_service: AdvanceService
    payroll_service: PayrollService


def build_container(
    *,
    db_config: dict,
    overtime_departments: Iterable[str] = OVERTIME_DEPARTMENTS,
    recalc_max_attempts: int = DEFAULT_RECALC_MAX_ATTEMPTS,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config))
    overtime_departments = frozenset(overtime_departments)

    employees_repo = MySQLEmployeeRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    advances_repo = MySQLAdvanceRepository(conn)
    payroll_repo = MySQLPayrollRepository(conn)

    rules = DepartmentRulesProvider(MySQLDepartmentRulesRepository(conn))
    days = CalendarDaysResolver(MySQLBusinessCalendar(conn))
    engine = SalaryCalculationEngine(
        employees_repo,
        rules,
        days,
        overtime_departments=overtime_departments,
    )

    payroll_service = PayrollService(engine, employees_repo, attendance_repo, advances_repo, payroll_repo)
    recalculation = RecalculationQueue(
        payroll_service.recalculate,
        max_attempts=recalc_max_attempts,
        on_drain_start=engine.reset_caches,
    )
    attendance_service = AttendanceService(
        attendance_repo,
        employees_repo,
        rules,
        recalculation,
        hours_calculator=DailyHoursCalculator(overtime_departments=overtime_departments),
    )
    advance_service = AdvanceService(advances_repo, employees_repo, recalculation)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        advances_repo=advances_repo,
        payroll_repo=payroll_repo,
        engine=engine,
        recalculation=recalculation,
        attendance_service=attendance_service,
        advance_service=advance_service,
        payroll_service=payroll_service,
    )
