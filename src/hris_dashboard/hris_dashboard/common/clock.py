from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from typing import Callable, Optional, Tuple

from ..core.constants import DEFAULT_UTC_OFFSET_HOURS
from .datetime_utils import first_of_month, first_of_next_month, utc_now


class LocalClock:
    """Business-day clock on a fixed UTC offset.

    Records are stored as UTC instants; every "today"/"this month" boundary is
    local midnight converted back to UTC. The offset is a deployment constant
    and there is no DST.
    """

    def __init__(self, offset_hours: int = DEFAULT_UTC_OFFSET_HOURS, *, now: Callable[[], datetime] = utc_now):
        self._tz = timezone(timedelta(hours=int(offset_hours)))
        self._now = now

    @property
    def tz(self) -> timezone:
        return self._tz

    def now_utc(self) -> datetime:
        return self._now().astimezone(timezone.utc)

    def now_local(self) -> datetime:
        return self._now().astimezone(self._tz)

    def today(self) -> date:
        return self.now_local().date()

    def to_local(self, instant: datetime) -> datetime:
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        return instant.astimezone(self._tz)

    def local_midnight(self, day: date) -> datetime:
        """UTC instant of 00:00 local time on ``day``."""
        return datetime.combine(day, time.min, tzinfo=self._tz).astimezone(timezone.utc)

    def local_day_start(self, offset_days: int = 0) -> datetime:
        """UTC instant of local midnight of (local today - offset_days)."""
        return self.local_midnight(self.today() - timedelta(days=offset_days))

    def month_bounds(self, day: Optional[date] = None) -> Tuple[datetime, datetime]:
        """[start, end) UTC instants of the local calendar month containing ``day``."""
        day = day or self.today()
        return self.local_midnight(first_of_month(day)), self.local_midnight(first_of_next_month(day))
