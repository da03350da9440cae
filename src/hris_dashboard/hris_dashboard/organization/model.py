from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StructureCounts:
    """Department/position totals; "active" means referenced by an employee."""

    departments_total: int = 0
    departments_active: int = 0
    positions_total: int = 0
    positions_active: int = 0
