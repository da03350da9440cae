from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta


@dataclass(frozen=True)
class TimeBucket:
    """Half-open [start, end) interval of UTC instants with a chart label."""

    label: str
    start: datetime
    end: datetime

    @property
    def days(self) -> int:
        return (self.end - self.start) // timedelta(days=1)


@dataclass(frozen=True)
class ChartPoint:
    label: str
    present: int
    late: int

    def to_dict(self) -> dict:
        return {"date": self.label, "present": self.present, "late": self.late}


@dataclass(frozen=True)
class TodayAttendance:
    on_time: int
    late: int
    absent: int
    total: int

    @property
    def present(self) -> int:
        return self.on_time + self.late

    def to_dict(self) -> dict:
        return {"onTime": self.on_time, "late": self.late, "absent": self.absent, "total": self.total}


@dataclass(frozen=True)
class LeaveStats:
    pending: int = 0
    approved: int = 0
    rejected: int = 0

    def to_dict(self) -> dict:
        return {"pending": self.pending, "approved": self.approved, "rejected": self.rejected}


@dataclass(frozen=True)
class CalendarEvent:
    title: str
    start: date
    end: date
    type: str = "leave"

    def to_dict(self) -> dict:
        return {"title": self.title, "start": self.start.isoformat(), "end": self.end.isoformat(), "type": self.type}
