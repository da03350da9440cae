from __future__ import annotations

from datetime import timedelta
from typing import List, Optional

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.clock import LocalClock
from ..common.datetime_utils import first_of_month, first_of_next_month
from ..core.constants import RECENT_HIRES_LIMIT
from ..core.enums import AttendanceStatus, LeaveType, RequestStatus, TodayStatus
from ..employees.model import Employee, RecentHire
from ..employees.repository import EmployeeRepository
from ..leave.repository import LeaveRepository
from ..organization.model import StructureCounts
from ..organization.repository import OrganizationRepository
from ..scope.model import OrganizationScope
from .model import CalendarEvent, LeaveStats, TodayAttendance


def absent_count(total: int, on_time: int, late: int) -> int:
    """Employees without a record today, floored at zero."""
    return max(0, int(total) - (int(on_time) + int(late)))


def classify_today(record: Optional[AttendanceRecord]) -> TodayStatus:
    if record is None:
        return TodayStatus.NOT_CHECKED_IN
    if record.check_out is not None:
        return TodayStatus.CHECKED_OUT
    if record.status == AttendanceStatus.LATE:
        return TodayStatus.LATE
    return TodayStatus.PRESENT


class DerivedMetricsCalculator:
    """Dashboard values that are not plain bucketed counts.

    Each method stands on its own and returns zero/empty results when nothing
    matches.
    """

    def __init__(
        self,
        clock: LocalClock,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        leaves: LeaveRepository,
        organization: OrganizationRepository,
    ):
        self._clock = clock
        self._employees = employees
        self._attendance = attendance
        self._leaves = leaves
        self._organization = organization

    # --- personal scope -------------------------------------------------

    def today_status(self, employee_id: int) -> TodayStatus:
        record = self._attendance.get_for_employee_and_date(employee_id, self._clock.local_day_start(0))
        return classify_today(record)

    def leave_balance(self, employee: Employee) -> int:
        approved = self._leaves.list_for_employee(
            employee.employee_id,
            status=RequestStatus.APPROVED,
            leave_type=LeaveType.ANNUAL,
        )
        used_days = sum(leave.days for leave in approved)
        return employee.leave_quota - used_days

    def attendance_count_this_month(self, employee_id: int) -> int:
        start, end = self._clock.month_bounds()
        return self._attendance.count_for_employee(employee_id, start=start, end=end)

    def lateness_this_month(self, employee_id: int) -> int:
        start, end = self._clock.month_bounds()
        return self._attendance.count_for_employee(employee_id, start=start, end=end, status=AttendanceStatus.LATE)

    # --- organization scope ---------------------------------------------

    def today_attendance(self, scope: OrganizationScope) -> TodayAttendance:
        start = self._clock.local_day_start(0)
        end = start + timedelta(days=1)
        on_time = self._attendance.count_distinct_employees(scope, start=start, end=end, status=AttendanceStatus.PRESENT)
        late = self._attendance.count_distinct_employees(scope, start=start, end=end, status=AttendanceStatus.LATE)
        total = self._employees.count_in_scope(scope)
        return TodayAttendance(on_time=on_time, late=late, absent=absent_count(total, on_time, late), total=total)

    def payroll_total(self, scope: OrganizationScope) -> float:
        return self._employees.sum_base_salary(scope)

    def recent_hires(self, scope: OrganizationScope, *, limit: int = RECENT_HIRES_LIMIT) -> List[RecentHire]:
        return list(self._employees.list_recent_hires(scope, limit=limit))

    def new_hires_this_month(self, scope: OrganizationScope) -> int:
        start, end = self._clock.month_bounds()
        return self._employees.count_joined_between(scope, start=start, end=end)

    def leave_pipeline(self, scope: OrganizationScope) -> LeaveStats:
        today = self._clock.today()
        month_start, month_end = self._clock.month_bounds(today)
        return LeaveStats(
            pending=self._leaves.count_by_status(scope, status=RequestStatus.PENDING),
            approved=self._leaves.count_starting_between(
                scope,
                status=RequestStatus.APPROVED,
                start=first_of_month(today),
                end=first_of_next_month(today),
            ),
            rejected=self._leaves.count_updated_between(
                scope,
                status=RequestStatus.REJECTED,
                start=month_start,
                end=month_end,
            ),
        )

    def calendar_events(self, scope: OrganizationScope) -> List[CalendarEvent]:
        today = self._clock.today()
        events = self._leaves.list_approved_overlapping(
            scope,
            start=first_of_month(today),
            end=first_of_next_month(today),
        )
        return [CalendarEvent(title=f"Leave: {ev.employee_name}", start=ev.start_date, end=ev.end_date) for ev in events]

    def structure(self, tenant_id: int) -> StructureCounts:
        return self._organization.get_structure_counts(tenant_id)
