from __future__ import annotations

from typing import Optional

from ..core.enums import Role
from ..core.exceptions import NotFoundError
from .model import CallerIdentity, OrganizationScope, PersonalScope, Scope

PERSONAL_ROLES = frozenset({Role.EMPLOYEE, Role.STAFF})
TENANT_ADMIN_ROLES = frozenset({Role.ADMIN, Role.COMPANY_OWNER})


def requires_employee(role: Role) -> bool:
    return role in PERSONAL_ROLES


class ScopeResolver:
    """Single place where caller roles turn into a report scope."""

    def resolve(self, caller: CallerIdentity, *, employee_id: Optional[int] = None) -> Scope:
        if caller.role in PERSONAL_ROLES:
            if employee_id is None:
                raise NotFoundError("Employee record not found")
            return PersonalScope(employee_id=int(employee_id))

        return OrganizationScope(
            tenant_id=int(caller.tenant_id),
            exclude_superadmin=caller.role in TENANT_ADMIN_ROLES,
        )
