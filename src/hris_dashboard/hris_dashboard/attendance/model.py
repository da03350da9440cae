from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one local calendar day.

    ``work_date`` is the UTC instant of that day's local midnight; there is at
    most one record per (employee_id, work_date).
    """

    attendance_id: int
    employee_id: int
    work_date: datetime
    status: AttendanceStatus
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
