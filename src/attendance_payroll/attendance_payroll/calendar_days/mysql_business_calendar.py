from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import BusinessCalendar


class MySQLBusinessCalendar(BusinessCalendar):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def actual_days_in_month(self, *, month: int, year: int) -> Optional[int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT days FROM business_calendar_days WHERE year=%s AND month=%s",
                (int(year), int(month)),
            )
            r = fetchone(cur)
            return int(r["days"]) if r else None
