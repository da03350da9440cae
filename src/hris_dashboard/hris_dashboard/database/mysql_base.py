from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

import mysql.connector

from ..core.enums import Role
from ..core.exceptions import StorageError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Read-only cursor on a short-lived connection.

    Driver errors are re-raised as StorageError so callers only deal with
    domain exceptions.
    """

    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise StorageError(f"Database unavailable: {e}") from e
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
        finally:
            cur.close()
    except mysql.connector.Error as e:
        raise StorageError(f"Query failed: {e}") from e
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def fetch_count(cur, key: str = "count") -> int:
    row = fetchone(cur)
    if not row or row.get(key) is None:
        return 0
    return int(row[key])


def to_db_datetime(value: datetime) -> datetime:
    """Aware datetime -> naive UTC, the form DATETIME columns are stored in."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def from_db_datetime(value: Any) -> Optional[datetime]:
    """Normalize DATETIME values from the connector into aware UTC datetimes.

    mysql-connector can return DATETIME as:
    - datetime.datetime (naive, stored as UTC)
    - string (e.g. '2026-01-31 17:00:00')
    """

    if value is None:
        return None
    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip())
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    raise TypeError(f"Unsupported MySQL DATETIME value type: {type(value)!r}")


def from_db_date(value: Any) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip()[:10])
    raise TypeError(f"Unsupported MySQL DATE value type: {type(value)!r}")


def to_float(value: Any) -> float:
    # SUM() comes back as Decimal, or None on an empty set.
    return float(value) if value is not None else 0.0


def organization_filter(tenant_id: int, *, exclude_superadmin: bool, employee_alias: str = "e", user_alias: str = "u") -> Tuple[str, list]:
    """WHERE fragment restricting employees to a tenant.

    Expects ``employees`` joined as ``employee_alias`` and ``users`` as ``user_alias``.
    """

    clauses = [f"{employee_alias}.company_id=%s"]
    params: list[object] = [int(tenant_id)]
    if exclude_superadmin:
        clauses.append(f"{user_alias}.role<>%s")
        params.append(Role.SUPERADMIN.value)
    return " AND ".join(clauses), params
