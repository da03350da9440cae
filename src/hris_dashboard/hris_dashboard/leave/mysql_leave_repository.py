from __future__ import annotations

from datetime import date, datetime
from typing import Sequence

from ..core.enums import LeaveType, RequestStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import (
    db_cursor,
    fetch_count,
    fetchall,
    from_db_date,
    from_db_datetime,
    organization_filter,
    to_db_datetime,
)
from ..scope.model import OrganizationScope
from .model import LeaveEvent, LeaveRequest
from .repository import LeaveRepository

_SCOPED_FROM = """
    FROM leave_requests lr
    JOIN employees e ON e.employee_id = lr.employee_id
    JOIN users u ON u.user_id = e.user_id
"""


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(
        self,
        employee_id: int,
        *,
        status: RequestStatus,
        leave_type: LeaveType,
    ) -> Sequence[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT leave_id, employee_id, leave_type, start_date, end_date, status, updated_at
                FROM leave_requests
                WHERE employee_id=%s AND status=%s AND leave_type=%s
                ORDER BY start_date ASC, leave_id ASC
                """,
                (int(employee_id), status.value, leave_type.value),
            )
            return [
                LeaveRequest(
                    leave_id=int(r["leave_id"]),
                    employee_id=int(r["employee_id"]),
                    leave_type=LeaveType(r["leave_type"]),
                    start_date=from_db_date(r["start_date"]),
                    end_date=from_db_date(r["end_date"]),
                    status=RequestStatus(r["status"]),
                    updated_at=from_db_datetime(r.get("updated_at")),
                )
                for r in fetchall(cur)
            ]

    def _count(self, scope: OrganizationScope, extra: str, extra_params: tuple) -> int:
        where, params = organization_filter(scope.tenant_id, exclude_superadmin=scope.exclude_superadmin)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT COUNT(*) AS count {_SCOPED_FROM} WHERE {where} AND {extra}",
                tuple(params) + extra_params,
            )
            return fetch_count(cur)

    def count_by_status(self, scope: OrganizationScope, *, status: RequestStatus) -> int:
        return self._count(scope, "lr.status=%s", (status.value,))

    def count_starting_between(
        self,
        scope: OrganizationScope,
        *,
        status: RequestStatus,
        start: date,
        end: date,
    ) -> int:
        return self._count(
            scope,
            "lr.status=%s AND lr.start_date >= %s AND lr.start_date < %s",
            (status.value, start, end),
        )

    def count_updated_between(
        self,
        scope: OrganizationScope,
        *,
        status: RequestStatus,
        start: datetime,
        end: datetime,
    ) -> int:
        return self._count(
            scope,
            "lr.status=%s AND lr.updated_at >= %s AND lr.updated_at < %s",
            (status.value, to_db_datetime(start), to_db_datetime(end)),
        )

    def list_approved_overlapping(self, scope: OrganizationScope, *, start: date, end: date) -> Sequence[LeaveEvent]:
        where, params = organization_filter(scope.tenant_id, exclude_superadmin=scope.exclude_superadmin)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT lr.leave_id, u.name, lr.start_date, lr.end_date
                {_SCOPED_FROM}
                WHERE {where} AND lr.status=%s AND lr.start_date < %s AND lr.end_date >= %s
                ORDER BY lr.start_date ASC, lr.leave_id ASC
                """,
                tuple(params) + (RequestStatus.APPROVED.value, end, start),
            )
            return [
                LeaveEvent(
                    leave_id=int(r["leave_id"]),
                    employee_name=r["name"],
                    start_date=from_db_date(r["start_date"]),
                    end_date=from_db_date(r["end_date"]),
                )
                for r in fetchall(cur)
            ]
