from __future__ import annotations

import math
from datetime import date
from typing import Iterable, Optional

from ..attendance.model import Attendance
from ..attendance.repository import AttendanceRepository
from ..attendance.service import count_by_status
from ..common.datetime_utils import Clock, days_back, to_iso, today_local
from ..core.constants import DASHBOARD_TREND_DAYS, DEPARTMENT_HOURS_DAYS, RECENT_EMPLOYEES_LIMIT
from ..core.enums import EmployeeStatus, SalaryStatus
from ..employees.repository import DepartmentRepository, EmployeeRepository
from ..salary.repository import SalaryRepository
from .aggregator import format_2dp


class ReportStatisticsService:
    """Numbers behind the report page charts."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        departments: DepartmentRepository,
        *,
        clock: Clock = today_local,
    ):
        self._employees = employees
        self._attendance = attendance
        self._departments = departments
        self._clock = clock

    def department_attendance(self, today: Optional[date] = None) -> list[dict]:
        today = today or self._clock()
        todays = self._attendance.list_for_date(to_iso(today))
        employees = self._employees.list_all()

        out = []
        for dept in self._departments.list_all():
            ids = {e.id for e in employees if e.department == dept.name and e.status == EmployeeStatus.ACTIVE}
            counts = count_by_status(a for a in todays if a.employee_id in ids)
            total = len(ids)
            out.append(
                {
                    "name": dept.name,
                    "present": counts.present,
                    "absent": counts.absent,
                    "late": counts.late,
                    "on_time": counts.present - counts.late,
                    "total": total,
                    "attendance_rate": (counts.present / total) * 100 if total > 0 else 0.0,
                }
            )
        return out

    def department_working_hours(self, today: Optional[date] = None, *, days: int = DEPARTMENT_HOURS_DAYS) -> list[dict]:
        """Total and average hours per department over the last ``days`` calendar days."""
        today = today or self._clock()
        window = {to_iso(days_back(today, i)) for i in range(days)}
        records = [a for a in self._attendance.list_all() if a.date in window]
        employees = self._employees.list_all()

        out = []
        for dept in self._departments.list_all():
            ids = {e.id for e in employees if e.department == dept.name}
            hours = [a.hours_worked for a in records if a.employee_id in ids]
            total = sum(hours)
            out.append(
                {
                    "name": dept.name,
                    "average_hours": format_2dp(total / len(hours) if hours else 0),
                    "total_hours": format_2dp(total),
                    "employees": len(ids),
                }
            )
        return out

    def _on_leave_count(self) -> int:
        return sum(1 for e in self._employees.list_all() if e.status == EmployeeStatus.ON_LEAVE)

    def status_distribution(self, records: Iterable[Attendance]) -> dict:
        """Counts per status; on-leave is the on-leave headcount once per day covered."""
        records = list(records)
        counts = count_by_status(records)
        return {
            "present": counts.present,
            "absent": counts.absent,
            "late": counts.late,
            "half_day": counts.half_day,
            "on_leave": self._on_leave_count() * len({r.date for r in records}),
        }

    def attendance_trend(self, today: Optional[date] = None, *, days: int = DASHBOARD_TREND_DAYS) -> list[dict]:
        """Per-day status counts for the last ``days`` days, oldest first.

        Leave is not tracked per day, so every day carries the current
        on-leave headcount.
        """
        today = today or self._clock()
        by_date: dict[str, list[Attendance]] = {}
        for a in self._attendance.list_all():
            by_date.setdefault(a.date, []).append(a)
        on_leave = self._on_leave_count()

        out = []
        for i in reversed(range(days)):
            day = to_iso(days_back(today, i))
            counts = count_by_status(by_date.get(day, ()))
            out.append(
                {
                    "date": day,
                    "present": counts.present,
                    "absent": counts.absent,
                    "late": counts.late,
                    "on_leave": on_leave,
                    "total": counts.present + counts.absent + counts.late + on_leave,
                }
            )
        return out

    @staticmethod
    def trend_totals(trend: Iterable[dict]) -> dict:
        keys = ("present", "absent", "late", "on_leave")
        totals = dict.fromkeys(keys, 0)
        for day in trend:
            for k in keys:
                totals[k] += day[k]
        return totals


class DashboardService:
    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        salaries: SalaryRepository,
        statistics: ReportStatisticsService,
        *,
        clock: Clock = today_local,
    ):
        self._employees = employees
        self._attendance = attendance
        self._salaries = salaries
        self._statistics = statistics
        self._clock = clock

    def overview(self, today: Optional[date] = None) -> dict:
        today = today or self._clock()
        employees = self._employees.list_all()
        active = sum(1 for e in employees if e.status == EmployeeStatus.ACTIVE)
        on_leave = sum(1 for e in employees if e.status == EmployeeStatus.ON_LEAVE)
        counts = count_by_status(self._attendance.list_for_date(to_iso(today)))

        pending = sum(s.total_salary for s in self._salaries.list_all() if s.status == SalaryStatus.PENDING)
        recent = sorted(employees, key=lambda e: e.joining_date, reverse=True)[:RECENT_EMPLOYEES_LIMIT]

        return {
            "active_employees": active,
            "on_leave_employees": on_leave,
            "total_employees": len(employees),
            "today": {
                "present": counts.present,
                "absent": counts.absent,
                "late": counts.late,
                "total": active,
            },
            "attendance_percentage": math.floor(counts.present / active * 100) if active else 0,
            "pending_salary_total": round(pending, 2),
            "recent_employees": recent,
            "attendance_trend": self._statistics.attendance_trend(today, days=DASHBOARD_TREND_DAYS),
        }
