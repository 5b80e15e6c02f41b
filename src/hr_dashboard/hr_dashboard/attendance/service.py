from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import Clock, to_iso, today_local
from ..common.validators import require_choice, require_iso_date, require_non_empty, require_non_negative
from ..core.enums import AttendanceStatus, EmployeeStatus
from ..core.exceptions import ValidationError
from ..core.result import Result
from ..employees.repository import EmployeeRepository
from .model import Attendance, AttendanceCounts
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def count_by_status(records: Iterable[Attendance]) -> AttendanceCounts:
    present = absent = late = half_day = total = 0
    for r in records:
        total += 1
        if r.status == AttendanceStatus.PRESENT:
            present += 1
        elif r.status == AttendanceStatus.ABSENT:
            absent += 1
        elif r.status == AttendanceStatus.LATE:
            late += 1
        elif r.status == AttendanceStatus.HALF_DAY:
            half_day += 1
    return AttendanceCounts(present=present, absent=absent, late=late, half_day=half_day, total=total)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        clock: Clock = today_local,
    ):
        self._attendance = attendance
        self._employees = employees
        self._clock = clock

    def list_attendance(self):
        return self._attendance.list_all()

    def get_employee_attendance(self, employee_id: str) -> list[Attendance]:
        return list(self._attendance.list_for_employee(employee_id))

    def get_attendance_by_date(self, work_date: str) -> list[Attendance]:
        return list(self._attendance.list_for_date(work_date))

    def record_attendance(
        self,
        *,
        employee_id: str,
        work_date: str,
        status: str,
        hours_worked: float = 0.0,
        check_in: str = "",
        check_out: str = "",
        notes: Optional[str] = None,
    ) -> Result[Attendance]:
        try:
            employee_id = require_non_empty(employee_id, "Employee id")
            work_date = require_iso_date(work_date, "Date")
            status_value = require_choice(status, AttendanceStatus, "Status")
            hours = require_non_negative(hours_worked, "Hours worked")
            if status_value == AttendanceStatus.ABSENT and hours != 0:
                raise ValidationError("Hours worked must be 0 for an absent record")
        except ValidationError as e:
            return Result.invalid(str(e))

        record = Attendance(
            id=uuid.uuid4().hex[:8],
            employee_id=employee_id,
            date=work_date,
            check_in="" if status_value == AttendanceStatus.ABSENT else check_in,
            check_out="" if status_value == AttendanceStatus.ABSENT else check_out,
            status=status_value,
            hours_worked=hours,
            notes=notes,
        )
        self._attendance.add(record)
        logger.info("Attendance %s recorded for %s on %s", record.id, employee_id, work_date)
        return Result.success(record)

    def today_summary(self, today: Optional[date] = None) -> dict:
        """Present/absent/late counts for today against the active headcount."""
        today = today or self._clock()
        counts = count_by_status(self._attendance.list_for_date(to_iso(today)))
        active = sum(1 for e in self._employees.list_all() if e.status == EmployeeStatus.ACTIVE)
        return {
            "present": counts.present,
            "absent": counts.absent,
            "late": counts.late,
            "total": active,
        }

    def daily_breakdown(
        self,
        work_date: str,
        *,
        employee_id: Optional[str] = None,
        status: Optional[str] = None,
        search: str = "",
    ) -> tuple[list[Attendance], AttendanceCounts]:
        """Attendance page: records of one date with optional filters, plus counts."""
        names = {e.id: e.name.lower() for e in self._employees.list_all()}
        q = (search or "").strip().lower()

        rows = []
        for r in self._attendance.list_for_date(work_date):
            if employee_id and r.employee_id != employee_id:
                continue
            if status and r.status.value != status:
                continue
            if q and q not in r.employee_id.lower() and q not in names.get(r.employee_id, ""):
                continue
            rows.append(r)
        return rows, count_by_status(rows)
