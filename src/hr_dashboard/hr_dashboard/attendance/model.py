from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class Attendance:
    """Domain entity: one attendance observation for an employee on a date.

    ``date`` is kept as an ISO ``YYYY-MM-DD`` string; the fixed width makes
    plain string comparison equivalent to date comparison.
    """

    id: str
    employee_id: str
    date: str
    check_in: str
    check_out: str
    status: AttendanceStatus
    hours_worked: float
    notes: Optional[str] = None


@dataclass(frozen=True)
class AttendanceCounts:
    present: int = 0
    absent: int = 0
    late: int = 0
    half_day: int = 0
    total: int = 0
