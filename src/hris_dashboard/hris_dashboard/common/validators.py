from __future__ import annotations

from typing import Optional

from ..core.constants import DEFAULT_RANGE
from ..core.enums import RangeMode
from ..core.exceptions import ValidationError


def parse_range_mode(value: Optional[str]) -> RangeMode:
    """Map the ``range`` query parameter to a RangeMode.

    A missing or blank value means the default range; anything else must be
    one of week/month/year.
    """

    if value is None or not value.strip():
        return RangeMode(DEFAULT_RANGE)
    try:
        return RangeMode(value.strip().lower())
    except ValueError:
        allowed = ", ".join(m.value for m in RangeMode)
        raise ValidationError(f"Invalid range {value!r}; expected one of: {allowed}") from None
