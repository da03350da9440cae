from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from ..core.enums import AttendanceStatus
from ..scope.model import OrganizationScope
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: int, work_date: datetime) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def count_for_employee(
        self,
        employee_id: int,
        *,
        start: datetime,
        end: datetime,
        status: Optional[AttendanceStatus] = None,
    ) -> int:
        """Rows for one employee with start <= work_date < end (any status when None)."""

        raise NotImplementedError

    def count_distinct_employees(
        self,
        scope: OrganizationScope,
        *,
        start: datetime,
        end: datetime,
        status: AttendanceStatus,
    ) -> int:
        """Distinct employees in scope with at least one matching row in [start, end)."""

        raise NotImplementedError
