from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional

import pytest

from src.hris_dashboard.hris_dashboard.attendance.model import AttendanceRecord
from src.hris_dashboard.hris_dashboard.common.clock import LocalClock
from src.hris_dashboard.hris_dashboard.core.enums import AttendanceStatus, LeaveType, RequestStatus, Role
from src.hris_dashboard.hris_dashboard.employees.model import Employee, RecentHire
from src.hris_dashboard.hris_dashboard.leave.model import LeaveEvent, LeaveRequest
from src.hris_dashboard.hris_dashboard.organization.model import StructureCounts
from src.hris_dashboard.hris_dashboard.scope.model import OrganizationScope
from src.hris_dashboard.hris_dashboard.scope.resolver import ScopeResolver
from src.hris_dashboard.hris_dashboard.stats.aggregator import MetricAggregator
from src.hris_dashboard.hris_dashboard.stats.bucketer import TimeBucketer
from src.hris_dashboard.hris_dashboard.stats.derived import DerivedMetricsCalculator
from src.hris_dashboard.hris_dashboard.stats.service import DashboardStatsService


class InMemoryStore:
    """Tables shared by the in-memory repositories below."""

    def __init__(self):
        self.employees: dict[int, Employee] = {}
        self.attendance: list[AttendanceRecord] = []
        self.leaves: list[LeaveRequest] = []
        self.departments: dict[int, int] = {}
        self.positions: dict[int, tuple[int, str]] = {}
        self._next_id = 1

    def _id(self) -> int:
        nid = self._next_id
        self._next_id += 1
        return nid

    def add_employee(
        self,
        employee_id: int,
        *,
        tenant_id: int = 1,
        role: Role = Role.EMPLOYEE,
        base_salary: float = 0.0,
        join_date: Optional[datetime] = None,
        annual_leave_quota: Optional[int] = None,
        dept_id: Optional[int] = None,
        position_id: Optional[int] = None,
        user_id: Optional[int] = None,
        name: Optional[str] = None,
    ) -> Employee:
        emp = Employee(
            employee_id=employee_id,
            user_id=user_id if user_id is not None else 100 + employee_id,
            tenant_id=tenant_id,
            name=name or f"Employee {employee_id}",
            role=role,
            base_salary=base_salary,
            join_date=join_date or datetime(2025, 1, 1, tzinfo=timezone.utc),
            annual_leave_quota=annual_leave_quota,
            dept_id=dept_id,
            position_id=position_id,
        )
        self.employees[employee_id] = emp
        return emp

    def add_attendance(
        self,
        employee_id: int,
        work_date: datetime,
        status: AttendanceStatus = AttendanceStatus.PRESENT,
        *,
        check_out: Optional[datetime] = None,
    ) -> AttendanceRecord:
        rec = AttendanceRecord(
            attendance_id=self._id(),
            employee_id=employee_id,
            work_date=work_date,
            status=status,
            check_in=work_date,
            check_out=check_out,
        )
        self.attendance.append(rec)
        return rec

    def add_leave(
        self,
        employee_id: int,
        start_date: date,
        end_date: date,
        status: RequestStatus = RequestStatus.APPROVED,
        *,
        leave_type: LeaveType = LeaveType.ANNUAL,
        updated_at: Optional[datetime] = None,
    ) -> LeaveRequest:
        leave = LeaveRequest(
            leave_id=self._id(),
            employee_id=employee_id,
            leave_type=leave_type,
            start_date=start_date,
            end_date=end_date,
            status=status,
            updated_at=updated_at,
        )
        self.leaves.append(leave)
        return leave

    def in_scope(self, employee_id: int, scope: OrganizationScope) -> bool:
        emp = self.employees.get(employee_id)
        if not emp or emp.tenant_id != scope.tenant_id:
            return False
        return not (scope.exclude_superadmin and emp.role == Role.SUPERADMIN)


class InMemoryEmployees:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def _scoped(self, scope):
        return [e for e in self._store.employees.values() if self._store.in_scope(e.employee_id, scope)]

    def get_by_user_id(self, user_id: int, *, tenant_id: int) -> Optional[Employee]:
        for e in self._store.employees.values():
            if e.user_id == user_id and e.tenant_id == tenant_id:
                return e
        return None

    def count_in_scope(self, scope) -> int:
        return len(self._scoped(scope))

    def sum_base_salary(self, scope) -> float:
        return float(sum(e.base_salary for e in self._scoped(scope)))

    def list_recent_hires(self, scope, *, limit: int):
        items = sorted(self._scoped(scope), key=lambda e: (e.join_date, e.employee_id), reverse=True)
        return [
            RecentHire(
                employee_id=e.employee_id,
                name=e.name,
                position=self._store.positions.get(e.position_id, (None, None))[1],
                join_date=e.join_date,
            )
            for e in items[:limit]
        ]

    def count_joined_between(self, scope, *, start, end) -> int:
        return sum(1 for e in self._scoped(scope) if start <= e.join_date < end)


class InMemoryAttendance:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def get_for_employee_and_date(self, employee_id: int, work_date: datetime):
        for r in self._store.attendance:
            if r.employee_id == employee_id and r.work_date == work_date:
                return r
        return None

    def count_for_employee(self, employee_id: int, *, start, end, status=None) -> int:
        return sum(
            1
            for r in self._store.attendance
            if r.employee_id == employee_id
            and start <= r.work_date < end
            and (status is None or r.status == status)
        )

    def count_distinct_employees(self, scope, *, start, end, status) -> int:
        return len(
            {
                r.employee_id
                for r in self._store.attendance
                if self._store.in_scope(r.employee_id, scope) and start <= r.work_date < end and r.status == status
            }
        )


class InMemoryLeaves:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def _scoped(self, scope):
        return [lr for lr in self._store.leaves if self._store.in_scope(lr.employee_id, scope)]

    def list_for_employee(self, employee_id: int, *, status, leave_type):
        return [
            lr
            for lr in self._store.leaves
            if lr.employee_id == employee_id and lr.status == status and lr.leave_type == leave_type
        ]

    def count_by_status(self, scope, *, status) -> int:
        return sum(1 for lr in self._scoped(scope) if lr.status == status)

    def count_starting_between(self, scope, *, status, start, end) -> int:
        return sum(1 for lr in self._scoped(scope) if lr.status == status and start <= lr.start_date < end)

    def count_updated_between(self, scope, *, status, start, end) -> int:
        return sum(
            1
            for lr in self._scoped(scope)
            if lr.status == status and lr.updated_at is not None and start <= lr.updated_at < end
        )

    def list_approved_overlapping(self, scope, *, start, end):
        items = [
            lr
            for lr in self._scoped(scope)
            if lr.status == RequestStatus.APPROVED and lr.start_date < end and lr.end_date >= start
        ]
        items.sort(key=lambda lr: (lr.start_date, lr.leave_id))
        return [
            LeaveEvent(
                leave_id=lr.leave_id,
                employee_name=self._store.employees[lr.employee_id].name,
                start_date=lr.start_date,
                end_date=lr.end_date,
            )
            for lr in items
        ]


class InMemoryOrganization:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def get_structure_counts(self, tenant_id: int) -> StructureCounts:
        emps = [e for e in self._store.employees.values() if e.tenant_id == tenant_id]
        return StructureCounts(
            departments_total=sum(1 for t in self._store.departments.values() if t == tenant_id),
            departments_active=len({e.dept_id for e in emps if e.dept_id is not None}),
            positions_total=sum(1 for t, _ in self._store.positions.values() if t == tenant_id),
            positions_active=len({e.position_id for e in emps if e.position_id is not None}),
        )


@pytest.fixture
def fixed_now() -> datetime:
    # 2026-01-31 10:00 local time at UTC+7 (a Saturday, last day of a 31-day month).
    return datetime(2026, 1, 31, 3, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock(fixed_now) -> LocalClock:
    return LocalClock(7, now=lambda: fixed_now)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def repos(store):
    return {
        "employees": InMemoryEmployees(store),
        "attendance": InMemoryAttendance(store),
        "leaves": InMemoryLeaves(store),
        "organization": InMemoryOrganization(store),
    }


@pytest.fixture
def derived(clock, repos) -> DerivedMetricsCalculator:
    return DerivedMetricsCalculator(
        clock, repos["employees"], repos["attendance"], repos["leaves"], repos["organization"]
    )


@pytest.fixture
def stats_service(clock, repos, derived) -> DashboardStatsService:
    return DashboardStatsService(
        repos["employees"],
        resolver=ScopeResolver(),
        bucketer=TimeBucketer(clock),
        aggregator=MetricAggregator(repos["attendance"]),
        derived=derived,
    )
