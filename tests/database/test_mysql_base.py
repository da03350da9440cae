from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

from src.hris_dashboard.hris_dashboard.database.mysql_base import (
    from_db_date,
    from_db_datetime,
    organization_filter,
    to_db_datetime,
    to_float,
)


def test_organization_filter_for_tenant_admin():
    where, params = organization_filter(5, exclude_superadmin=True)

    assert where == "e.company_id=%s AND u.role<>%s"
    assert params == [5, "SUPERADMIN"]


def test_organization_filter_for_superadmin():
    where, params = organization_filter(5, exclude_superadmin=False)

    assert where == "e.company_id=%s"
    assert params == [5]


def test_datetimes_are_stored_as_naive_utc():
    local = datetime(2026, 1, 31, 0, 0, tzinfo=timezone(timedelta(hours=7)))

    assert to_db_datetime(local) == datetime(2026, 1, 30, 17, 0)
    assert from_db_datetime(datetime(2026, 1, 30, 17, 0)) == local
    assert from_db_datetime("2026-01-30 17:00:00") == local
    assert from_db_datetime(None) is None


def test_from_db_date_accepts_driver_types():
    assert from_db_date(date(2026, 1, 2)) == date(2026, 1, 2)
    assert from_db_date(datetime(2026, 1, 2, 5, 0)) == date(2026, 1, 2)
    assert from_db_date("2026-01-02") == date(2026, 1, 2)


def test_to_float_handles_sum_results():
    assert to_float(Decimal("1500.50")) == 1500.5
    assert to_float(None) == 0.0
