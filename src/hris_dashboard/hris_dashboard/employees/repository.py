from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..scope.model import OrganizationScope
from .model import Employee, RecentHire


class EmployeeRepository(Protocol):
    """Read access to employees.

    Note (DIP): stats services depend on this interface, not on a concrete DB.
    """

    def get_by_user_id(self, user_id: int, *, tenant_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def count_in_scope(self, scope: OrganizationScope) -> int:
        raise NotImplementedError

    def sum_base_salary(self, scope: OrganizationScope) -> float:
        raise NotImplementedError

    def list_recent_hires(self, scope: OrganizationScope, *, limit: int) -> Sequence[RecentHire]:
        raise NotImplementedError

    def count_joined_between(self, scope: OrganizationScope, *, start: datetime, end: datetime) -> int:
        raise NotImplementedError
