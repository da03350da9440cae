from __future__ import annotations

from datetime import date, timedelta
from typing import List, Optional

from ..common.clock import LocalClock
from ..common.datetime_utils import days_in_month, first_of_next_month
from ..core.constants import MAX_MONTH_BUCKETS, MONTH_BUCKET_DAYS, MONTH_LABELS, WEEKDAY_LABELS
from ..core.enums import RangeMode
from ..core.exceptions import ValidationError
from .model import TimeBucket


class TimeBucketer:
    """Split a chart range into contiguous local-calendar buckets.

    Boundaries are picked as local dates and only then converted to UTC, so
    every bucket covers a whole number of local days.
    """

    def __init__(self, clock: LocalClock):
        self._clock = clock

    def buckets(self, mode: RangeMode, reference: Optional[date] = None) -> List[TimeBucket]:
        today = reference or self._clock.today()
        if mode == RangeMode.WEEK:
            return self._week(today)
        if mode == RangeMode.MONTH:
            return self._month(today)
        if mode == RangeMode.YEAR:
            return self._year(today)
        raise ValidationError(f"Unsupported range: {mode!r}")

    def _bucket(self, label: str, first: date, stop: date) -> TimeBucket:
        return TimeBucket(label=label, start=self._clock.local_midnight(first), end=self._clock.local_midnight(stop))

    def _week(self, today: date) -> List[TimeBucket]:
        out: list[TimeBucket] = []
        for offset in range(6, -1, -1):
            day = today - timedelta(days=offset)
            out.append(self._bucket(WEEKDAY_LABELS[day.weekday()], day, day + timedelta(days=1)))
        return out

    def _month(self, today: date) -> List[TimeBucket]:
        month_days = days_in_month(today.year, today.month)
        next_month = first_of_next_month(today)

        out: list[TimeBucket] = []
        for week in range(MAX_MONTH_BUCKETS):
            start_day = week * MONTH_BUCKET_DAYS + 1
            if start_day > month_days:
                break
            first = today.replace(day=start_day)
            stop = min(first + timedelta(days=MONTH_BUCKET_DAYS), next_month)
            out.append(self._bucket(f"M{week + 1}", first, stop))
        return out

    def _year(self, today: date) -> List[TimeBucket]:
        out: list[TimeBucket] = []
        for month in range(1, 13):
            first = date(today.year, month, 1)
            out.append(self._bucket(MONTH_LABELS[month - 1], first, first_of_next_month(first)))
        return out
