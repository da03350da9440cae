from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..core.enums import Role


@dataclass(frozen=True)
class CallerIdentity:
    """Who is asking, as resolved from the session by the auth layer."""

    user_id: int
    role: Role
    tenant_id: int


@dataclass(frozen=True)
class PersonalScope:
    """Report restricted to a single employee (the caller)."""

    employee_id: int


@dataclass(frozen=True)
class OrganizationScope:
    """Report aggregated across one tenant.

    ``exclude_superadmin`` hides platform accounts from tenant-facing numbers.
    """

    tenant_id: int
    exclude_superadmin: bool


Scope = Union[PersonalScope, OrganizationScope]
