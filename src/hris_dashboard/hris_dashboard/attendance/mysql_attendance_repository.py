from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import (
    db_cursor,
    fetch_count,
    fetchone,
    from_db_datetime,
    organization_filter,
    to_db_datetime,
)
from ..scope.model import OrganizationScope
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, employee_id: int, work_date: datetime) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, employee_id, work_date, status, check_in, check_out
                FROM attendance_records
                WHERE employee_id=%s AND work_date=%s
                """,
                (int(employee_id), to_db_datetime(work_date)),
            )
            r = fetchone(cur)
            if not r:
                return None
            return AttendanceRecord(
                attendance_id=int(r["attendance_id"]),
                employee_id=int(r["employee_id"]),
                work_date=from_db_datetime(r["work_date"]),
                status=AttendanceStatus(r["status"]),
                check_in=from_db_datetime(r.get("check_in")),
                check_out=from_db_datetime(r.get("check_out")),
            )

    def count_for_employee(
        self,
        employee_id: int,
        *,
        start: datetime,
        end: datetime,
        status: Optional[AttendanceStatus] = None,
    ) -> int:
        clauses = ["employee_id=%s", "work_date >= %s", "work_date < %s"]
        params: list[object] = [int(employee_id), to_db_datetime(start), to_db_datetime(end)]
        if status is not None:
            clauses.append("status=%s")
            params.append(status.value)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT COUNT(*) AS count FROM attendance_records WHERE {' AND '.join(clauses)}",
                tuple(params),
            )
            return fetch_count(cur)

    def count_distinct_employees(
        self,
        scope: OrganizationScope,
        *,
        start: datetime,
        end: datetime,
        status: AttendanceStatus,
    ) -> int:
        where, params = organization_filter(scope.tenant_id, exclude_superadmin=scope.exclude_superadmin)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT COUNT(DISTINCT a.employee_id) AS count
                FROM attendance_records a
                JOIN employees e ON e.employee_id = a.employee_id
                JOIN users u ON u.user_id = e.user_id
                WHERE {where} AND a.work_date >= %s AND a.work_date < %s AND a.status=%s
                """,
                tuple(params) + (to_db_datetime(start), to_db_datetime(end), status.value),
            )
            return fetch_count(cur)
