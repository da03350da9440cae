from __future__ import annotations

from typing import Protocol

from .model import StructureCounts


class OrganizationRepository(Protocol):
    def get_structure_counts(self, tenant_id: int) -> StructureCounts:
        raise NotImplementedError
