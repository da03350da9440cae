from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.constants import DEFAULT_ANNUAL_LEAVE_QUOTA
from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee of a tenant, joined with its user account."""

    employee_id: int
    user_id: int
    tenant_id: int
    name: str
    role: Role
    base_salary: float
    join_date: datetime
    annual_leave_quota: Optional[int] = None
    dept_id: Optional[int] = None
    position_id: Optional[int] = None

    @property
    def leave_quota(self) -> int:
        return self.annual_leave_quota if self.annual_leave_quota is not None else DEFAULT_ANNUAL_LEAVE_QUOTA


@dataclass(frozen=True)
class RecentHire:
    """Read-model for the "recent employees" dashboard widget."""

    employee_id: int
    name: str
    position: Optional[str]
    join_date: datetime
