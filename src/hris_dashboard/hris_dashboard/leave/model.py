from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import inclusive_days
from ..core.enums import LeaveType, RequestStatus


@dataclass(frozen=True)
class LeaveRequest:
    leave_id: int
    employee_id: int
    leave_type: LeaveType
    start_date: date
    end_date: date
    status: RequestStatus
    updated_at: Optional[datetime] = None

    @property
    def days(self) -> int:
        """Inclusive day count; overlapping requests are not merged."""
        return inclusive_days(self.start_date, self.end_date)


@dataclass(frozen=True)
class LeaveEvent:
    """Approved leave joined with the employee's name, for the calendar."""

    leave_id: int
    employee_name: str
    start_date: date
    end_date: date
