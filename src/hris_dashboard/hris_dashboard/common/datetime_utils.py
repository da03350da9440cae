from __future__ import annotations

import calendar
from datetime import date, datetime, timezone


def utc_now() -> datetime:
    """Current instant as an aware UTC datetime.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def first_of_month(day: date) -> date:
    return day.replace(day=1)


def first_of_next_month(day: date) -> date:
    if day.month == 12:
        return date(day.year + 1, 1, 1)
    return date(day.year, day.month + 1, 1)


def inclusive_days(start: date, end: date) -> int:
    """Number of calendar days in [start, end], both ends counted."""
    return (end - start).days + 1
