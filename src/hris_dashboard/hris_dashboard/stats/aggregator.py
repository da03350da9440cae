from __future__ import annotations

from typing import List, Sequence

from ..attendance.repository import AttendanceRepository
from ..core.enums import AttendanceStatus
from ..scope.model import OrganizationScope, PersonalScope, Scope
from .model import ChartPoint, TimeBucket


class MetricAggregator:
    """Bucketed attendance counts for a resolved scope.

    Personal scope counts the employee's own rows (one per day, so also the
    day count). Organization scope counts distinct employees, so several rows
    for one person inside a bucket still count once per status.
    """

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def count_by_status(self, scope: Scope, bucket: TimeBucket, status: AttendanceStatus) -> int:
        if isinstance(scope, PersonalScope):
            return self._attendance.count_for_employee(
                scope.employee_id, start=bucket.start, end=bucket.end, status=status
            )
        if isinstance(scope, OrganizationScope):
            return self._attendance.count_distinct_employees(
                scope, start=bucket.start, end=bucket.end, status=status
            )
        raise TypeError(f"Unsupported scope: {scope!r}")

    def chart(self, scope: Scope, buckets: Sequence[TimeBucket]) -> List[ChartPoint]:
        # One query per bucket and status; at most 12 buckets per chart.
        return [
            ChartPoint(
                label=b.label,
                present=self.count_by_status(scope, b, AttendanceStatus.PRESENT),
                late=self.count_by_status(scope, b, AttendanceStatus.LATE),
            )
            for b in buckets
        ]
