from __future__ import annotations

from enum import Enum


class EmployeeStatus(str, Enum):
    """Employment status shown on the staff page."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    ON_LEAVE = "on-leave"


class AttendanceStatus(str, Enum):
    """Status of one attendance observation."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    HALF_DAY = "half-day"


class SalaryStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"


class ExportPeriod(str, Enum):
    """Reporting period selector for attendance exports."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    CUSTOM = "custom"


class ErrorKind(str, Enum):
    """Failure kinds carried by a failed Result."""

    NOT_FOUND = "NOT_FOUND"
    VALIDATION = "VALIDATION"
