from __future__ import annotations

import calendar
import math
from datetime import date, time, timedelta

import pytest

from src.hris_dashboard.hris_dashboard.core.enums import RangeMode
from src.hris_dashboard.hris_dashboard.core.exceptions import ValidationError
from src.hris_dashboard.hris_dashboard.stats.bucketer import TimeBucketer


def _assert_contiguous(buckets):
    for prev, nxt in zip(buckets, buckets[1:]):
        assert prev.end == nxt.start


def test_week_has_seven_daily_buckets_oldest_first(clock):
    buckets = TimeBucketer(clock).buckets(RangeMode.WEEK)

    assert len(buckets) == 7
    assert [b.label for b in buckets] == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    assert all(b.end - b.start == timedelta(hours=24) for b in buckets)
    assert buckets[0].start == clock.local_day_start(6)
    assert buckets[-1].start == clock.local_day_start(0)
    _assert_contiguous(buckets)


@pytest.mark.parametrize(
    "reference",
    [date(2024, 2, 29), date(2026, 1, 1), date(2026, 3, 1), date(2026, 12, 31), date(2027, 7, 15)],
)
def test_week_shape_is_independent_of_reference(clock, reference):
    buckets = TimeBucketer(clock).buckets(RangeMode.WEEK, reference)

    assert len(buckets) == 7
    assert all(b.days == 1 for b in buckets)
    assert clock.to_local(buckets[-1].start).date() == reference
    _assert_contiguous(buckets)


@pytest.mark.parametrize("year", [2024, 2026])
@pytest.mark.parametrize("month", range(1, 13))
def test_month_bucket_count_and_width(clock, year, month):
    days = calendar.monthrange(year, month)[1]
    buckets = TimeBucketer(clock).buckets(RangeMode.MONTH, date(year, month, 10))

    assert len(buckets) == math.ceil(days / 7)
    assert sum(b.days for b in buckets) == days
    assert [b.label for b in buckets] == [f"M{i + 1}" for i in range(len(buckets))]
    assert clock.to_local(buckets[0].start).date() == date(year, month, 1)
    _assert_contiguous(buckets)


def test_last_day_of_31_day_month_gives_short_fifth_bucket(clock):
    buckets = TimeBucketer(clock).buckets(RangeMode.MONTH)

    assert len(buckets) == 5
    last = buckets[-1]
    assert last.label == "M5"
    assert last.days == 3
    assert last.start == clock.local_midnight(date(2026, 1, 29))
    assert last.end == clock.local_midnight(date(2026, 2, 1))


def test_28_day_month_gives_four_buckets(clock):
    buckets = TimeBucketer(clock).buckets(RangeMode.MONTH, date(2026, 2, 14))

    assert len(buckets) == 4
    assert all(b.days == 7 for b in buckets)


@pytest.mark.parametrize("year, days", [(2026, 365), (2024, 366)])
def test_year_has_twelve_month_buckets(clock, year, days):
    buckets = TimeBucketer(clock).buckets(RangeMode.YEAR, date(year, 6, 1))

    assert len(buckets) == 12
    assert [b.label for b in buckets][:3] == ["Jan", "Feb", "Mar"]
    assert buckets[-1].label == "Dec"
    assert sum(b.days for b in buckets) == days
    _assert_contiguous(buckets)


@pytest.mark.parametrize("mode", list(RangeMode))
def test_all_boundaries_are_local_midnights(clock, mode):
    for b in TimeBucketer(clock).buckets(mode):
        assert clock.to_local(b.start).time() == time(0, 0)
        assert clock.to_local(b.end).time() == time(0, 0)


def test_unknown_mode_is_rejected(clock):
    with pytest.raises(ValidationError):
        TimeBucketer(clock).buckets("quarter")
