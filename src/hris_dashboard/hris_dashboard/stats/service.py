from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import parse_range_mode
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..scope.model import CallerIdentity, OrganizationScope, PersonalScope
from ..scope.resolver import ScopeResolver, requires_employee
from .aggregator import MetricAggregator
from .bucketer import TimeBucketer
from .derived import DerivedMetricsCalculator

logger = logging.getLogger(__name__)


class DashboardStatsService:
    """Use case: build the dashboard stats report for the calling user.

    The report is read-only and recomputed on every call; the response shape
    depends on whether the caller resolves to a personal or organization scope.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        *,
        resolver: ScopeResolver,
        bucketer: TimeBucketer,
        aggregator: MetricAggregator,
        derived: DerivedMetricsCalculator,
    ):
        self._employees = employees
        self._resolver = resolver
        self._bucketer = bucketer
        self._aggregator = aggregator
        self._derived = derived

    def build(self, caller: CallerIdentity, range_value: Optional[str] = None) -> dict:
        mode = parse_range_mode(range_value)

        employee: Optional[Employee] = None
        if requires_employee(caller.role):
            employee = self._employees.get_by_user_id(caller.user_id, tenant_id=caller.tenant_id)

        scope = self._resolver.resolve(caller, employee_id=employee.employee_id if employee else None)
        logger.debug("Building dashboard stats user=%s scope=%s range=%s", caller.user_id, scope, mode.value)

        chart = [p.to_dict() for p in self._aggregator.chart(scope, self._bucketer.buckets(mode))]

        if isinstance(scope, PersonalScope):
            return self._personal_report(employee, chart)
        return self._organization_report(scope, chart)

    def _personal_report(self, employee: Employee, chart: list) -> dict:
        employee_id = employee.employee_id
        return {
            "personalStats": {
                "attendanceCount": self._derived.attendance_count_this_month(employee_id),
                "leaveBalance": self._derived.leave_balance(employee),
                "todayStatus": self._derived.today_status(employee_id).value,
                "latenessCount": self._derived.lateness_this_month(employee_id),
                "baseSalary": employee.base_salary or 0,
            },
            "attendanceChart": chart,
        }

    def _organization_report(self, scope: OrganizationScope, chart: list) -> dict:
        today = self._derived.today_attendance(scope)
        structure = self._derived.structure(scope.tenant_id)
        recent = self._derived.recent_hires(scope)

        return {
            "totalEmployees": today.total,
            "departments": {"total": structure.departments_total, "active": structure.departments_active},
            "positions": {"total": structure.positions_total, "active": structure.positions_active},
            "presentToday": today.present,
            "todayAttendance": today.to_dict(),
            "totalPayroll": self._derived.payroll_total(scope),
            "recentEmployees": [
                {
                    "id": r.employee_id,
                    "name": r.name,
                    "position": r.position,
                    "joinDate": r.join_date.isoformat(),
                }
                for r in recent
            ],
            "attendanceChart": chart,
            "leaveStats": self._derived.leave_pipeline(scope).to_dict(),
            "employeeStats": {
                "total": today.total,
                "newThisMonth": self._derived.new_hires_this_month(scope),
            },
            "calendarEvents": [ev.to_dict() for ev in self._derived.calendar_events(scope)],
        }
