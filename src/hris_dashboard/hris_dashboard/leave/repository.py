from __future__ import annotations

from datetime import date, datetime
from typing import Protocol, Sequence

from ..core.enums import LeaveType, RequestStatus
from ..scope.model import OrganizationScope
from .model import LeaveEvent, LeaveRequest


class LeaveRepository(Protocol):
    def list_for_employee(
        self,
        employee_id: int,
        *,
        status: RequestStatus,
        leave_type: LeaveType,
    ) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def count_by_status(self, scope: OrganizationScope, *, status: RequestStatus) -> int:
        raise NotImplementedError

    def count_starting_between(
        self,
        scope: OrganizationScope,
        *,
        status: RequestStatus,
        start: date,
        end: date,
    ) -> int:
        """Requests whose start_date falls in [start, end)."""

        raise NotImplementedError

    def count_updated_between(
        self,
        scope: OrganizationScope,
        *,
        status: RequestStatus,
        start: datetime,
        end: datetime,
    ) -> int:
        """Requests whose updated_at instant falls in [start, end)."""

        raise NotImplementedError

    def list_approved_overlapping(self, scope: OrganizationScope, *, start: date, end: date) -> Sequence[LeaveEvent]:
        """Approved leave intersecting [start, end), ordered by start_date."""

        raise NotImplementedError
