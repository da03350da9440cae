from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .common.clock import LocalClock
from .core.constants import DEFAULT_UTC_OFFSET_HOURS
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .leave.mysql_leave_repository import MySQLLeaveRepository
from .organization.mysql_organization_repository import MySQLOrganizationRepository
from .scope.resolver import ScopeResolver
from .stats.aggregator import MetricAggregator
from .stats.bucketer import TimeBucketer
from .stats.derived import DerivedMetricsCalculator
from .stats.service import DashboardStatsService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    clock: LocalClock

    employees_repo: MySQLEmployeeRepository
    attendance_repo: MySQLAttendanceRepository
    leave_repo: MySQLLeaveRepository
    organization_repo: MySQLOrganizationRepository

    stats_service: DashboardStatsService


def build_container(*, db_config: dict, utc_offset_hours: int = DEFAULT_UTC_OFFSET_HOURS) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    clock = LocalClock(utc_offset_hours)

    employees_repo = MySQLEmployeeRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    leave_repo = MySQLLeaveRepository(conn)
    organization_repo = MySQLOrganizationRepository(conn)

    stats_service = DashboardStatsService(
        employees_repo,
        resolver=ScopeResolver(),
        bucketer=TimeBucketer(clock),
        aggregator=MetricAggregator(attendance_repo),
        derived=DerivedMetricsCalculator(clock, employees_repo, attendance_repo, leave_repo, organization_repo),
    )

    return Container(
        conn=conn,
        clock=clock,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        leave_repo=leave_repo,
        organization_repo=organization_repo,
        stats_service=stats_service,
    )
