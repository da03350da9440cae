from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import StructureCounts
from .repository import OrganizationRepository


class MySQLOrganizationRepository(OrganizationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_structure_counts(self, tenant_id: int) -> StructureCounts:
        tenant_id = int(tenant_id)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    (SELECT COUNT(*) FROM departments WHERE company_id=%s) AS departments_total,
                    (SELECT COUNT(DISTINCT dept_id) FROM employees
                     WHERE company_id=%s AND dept_id IS NOT NULL) AS departments_active,
                    (SELECT COUNT(*) FROM positions WHERE company_id=%s) AS positions_total,
                    (SELECT COUNT(DISTINCT position_id) FROM employees
                     WHERE company_id=%s AND position_id IS NOT NULL) AS positions_active
                """,
                (tenant_id, tenant_id, tenant_id, tenant_id),
            )
            r = fetchone(cur) or {}
            return StructureCounts(
                departments_total=int(r.get("departments_total") or 0),
                departments_active=int(r.get("departments_active") or 0),
                positions_total=int(r.get("positions_total") or 0),
                positions_active=int(r.get("positions_active") or 0),
            )
