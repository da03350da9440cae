from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import (
    db_cursor,
    fetch_count,
    fetchall,
    fetchone,
    from_db_datetime,
    organization_filter,
    to_db_datetime,
    to_float,
)
from ..scope.model import OrganizationScope
from .model import Employee, RecentHire
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_user_id(self, user_id: int, *, tenant_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT e.employee_id, e.user_id, e.company_id, u.name, u.role,
                       e.base_salary, e.join_date, e.annual_leave_quota, e.dept_id, e.position_id
                FROM employees e
                JOIN users u ON u.user_id = e.user_id
                WHERE e.user_id=%s AND e.company_id=%s
                """,
                (int(user_id), int(tenant_id)),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Employee(
                employee_id=int(r["employee_id"]),
                user_id=int(r["user_id"]),
                tenant_id=int(r["company_id"]),
                name=r["name"],
                role=Role(r["role"]),
                base_salary=to_float(r.get("base_salary")),
                join_date=from_db_datetime(r["join_date"]),
                annual_leave_quota=r.get("annual_leave_quota"),
                dept_id=r.get("dept_id"),
                position_id=r.get("position_id"),
            )

    def count_in_scope(self, scope: OrganizationScope) -> int:
        where, params = organization_filter(scope.tenant_id, exclude_superadmin=scope.exclude_superadmin)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT COUNT(*) AS count
                FROM employees e
                JOIN users u ON u.user_id = e.user_id
                WHERE {where}
                """,
                tuple(params),
            )
            return fetch_count(cur)

    def sum_base_salary(self, scope: OrganizationScope) -> float:
        where, params = organization_filter(scope.tenant_id, exclude_superadmin=scope.exclude_superadmin)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT SUM(e.base_salary) AS total
                FROM employees e
                JOIN users u ON u.user_id = e.user_id
                WHERE {where}
                """,
                tuple(params),
            )
            row = fetchone(cur)
            return to_float(row.get("total") if row else None)

    def list_recent_hires(self, scope: OrganizationScope, *, limit: int) -> Sequence[RecentHire]:
        where, params = organization_filter(scope.tenant_id, exclude_superadmin=scope.exclude_superadmin)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT e.employee_id, u.name, p.title AS position, e.join_date
                FROM employees e
                JOIN users u ON u.user_id = e.user_id
                LEFT JOIN positions p ON p.position_id = e.position_id
                WHERE {where}
                ORDER BY e.join_date DESC, e.employee_id DESC
                LIMIT %s
                """,
                tuple(params) + (int(limit),),
            )
            return [
                RecentHire(
                    employee_id=int(r["employee_id"]),
                    name=r["name"],
                    position=r.get("position"),
                    join_date=from_db_datetime(r["join_date"]),
                )
                for r in fetchall(cur)
            ]

    def count_joined_between(self, scope: OrganizationScope, *, start: datetime, end: datetime) -> int:
        where, params = organization_filter(scope.tenant_id, exclude_superadmin=scope.exclude_superadmin)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT COUNT(*) AS count
                FROM employees e
                JOIN users u ON u.user_id = e.user_id
                WHERE {where} AND e.join_date >= %s AND e.join_date < %s
                """,
                tuple(params) + (to_db_datetime(start), to_db_datetime(end)),
            )
            return fetch_count(cur)
