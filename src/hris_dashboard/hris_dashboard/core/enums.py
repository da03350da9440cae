from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account roles as stored on the user record."""

    SUPERADMIN = "SUPERADMIN"
    COMPANY_OWNER = "COMPANY_OWNER"
    ADMIN = "ADMIN"
    EMPLOYEE = "EMPLOYEE"
    STAFF = "STAFF"


class AttendanceStatus(str, Enum):
    PRESENT = "PRESENT"
    LATE = "LATE"


class LeaveType(str, Enum):
    ANNUAL = "ANNUAL"
    SICK = "SICK"
    MATERNITY = "MATERNITY"
    UNPAID = "UNPAID"
    OTHER = "OTHER"


class RequestStatus(str, Enum):
    """Approval workflow state of a leave request."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class RangeMode(str, Enum):
    """Chart range accepted by the stats endpoint."""

    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class TodayStatus(str, Enum):
    """Display state of the caller's own attendance for today."""

    NOT_CHECKED_IN = "Not Checked In"
    CHECKED_OUT = "Checked Out"
    LATE = "Late"
    PRESENT = "Present"
