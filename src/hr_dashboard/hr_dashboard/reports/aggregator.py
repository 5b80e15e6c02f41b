"""Report Aggregator: turn filtered attendance into export rows and filenames."""

from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Mapping, Sequence

from ..attendance.model import Attendance
from ..common.datetime_utils import days_back, months_back, to_iso
from ..core.constants import (
    EXPORT_EXTENSION,
    EXPORT_FILENAME_PREFIX,
    MONTH_LABEL_FORMAT,
    MONTHLY_PERIOD_MONTHS,
    UNKNOWN_LABEL,
    WEEKLY_PERIOD_DAYS,
)
from ..core.enums import AttendanceStatus, ExportPeriod
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from .model import ExportOptions

DETAILED_COLUMNS = [
    "Date",
    "Employee ID",
    "Employee Name",
    "Department",
    "Position",
    "Status",
    "Check In",
    "Check Out",
    "Hours Worked",
    "Notes",
]

SUMMARY_COLUMNS = [
    "Employee ID",
    "Employee Name",
    "Department",
    "Position",
    "Total Days",
    "Present",
    "Absent",
    "Late",
    "Half Day",
    "Total Hours",
    "Average Hours/Day",
]

_STATUS_COLUMN = {
    AttendanceStatus.PRESENT: "Present",
    AttendanceStatus.ABSENT: "Absent",
    AttendanceStatus.LATE: "Late",
    AttendanceStatus.HALF_DAY: "Half Day",
}


def format_2dp(value: float) -> str:
    """Two decimals, half-up (12.5 / 3 -> "4.17", 0.125 -> "0.13")."""
    return str(Decimal(repr(float(value))).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def _index(employees: Iterable[Employee]) -> Mapping[str, Employee]:
    return {e.id: e for e in employees}


def build_detailed_rows(records: Sequence[Attendance], employees: Iterable[Employee]) -> list[dict]:
    """One row per record, same order."""
    by_id = _index(employees)
    rows = []
    for r in records:
        e = by_id.get(r.employee_id)
        rows.append(
            {
                "Date": r.date,
                "Employee ID": r.employee_id,
                "Employee Name": (e.name if e else "") or UNKNOWN_LABEL,
                "Department": (e.department if e else "") or UNKNOWN_LABEL,
                "Position": (e.position if e else "") or UNKNOWN_LABEL,
                "Status": r.status.value,
                "Check In": r.check_in,
                "Check Out": r.check_out,
                "Hours Worked": r.hours_worked,
                "Notes": r.notes or "",
            }
        )
    return rows


def build_summary_rows(records: Sequence[Attendance], employees: Iterable[Employee]) -> list[dict]:
    """One row per known employee (first-seen order); unknown ids are dropped."""
    by_id = _index(employees)
    groups: dict[str, dict] = {}

    for r in records:
        e = by_id.get(r.employee_id)
        if not e:
            continue

        s = groups.get(r.employee_id)
        if not s:
            s = {
                "Employee ID": e.id,
                "Employee Name": e.name,
                "Department": e.department,
                "Position": e.position,
                "Total Days": 0,
                "Present": 0,
                "Absent": 0,
                "Late": 0,
                "Half Day": 0,
                "_hours": 0.0,
            }
            groups[r.employee_id] = s

        s["Total Days"] += 1
        s[_STATUS_COLUMN[r.status]] += 1
        s["_hours"] += float(r.hours_worked)

    rows = []
    for s in groups.values():
        total_hours = s.pop("_hours")
        s["Total Hours"] = format_2dp(total_hours)
        s["Average Hours/Day"] = format_2dp(total_hours / (s["Total Days"] or 1))
        rows.append(s)
    return rows


def period_label(options: ExportOptions, today: date) -> str:
    period = ExportPeriod(options.period)
    if period == ExportPeriod.DAILY:
        return to_iso(today)
    if period == ExportPeriod.WEEKLY:
        return f"{to_iso(days_back(today, WEEKLY_PERIOD_DAYS))}_to_{to_iso(today)}"
    if period == ExportPeriod.MONTHLY:
        start = months_back(today, MONTHLY_PERIOD_MONTHS)
        return f"{start.strftime(MONTH_LABEL_FORMAT)}_to_{today.strftime(MONTH_LABEL_FORMAT)}"

    if options.start_date is None or options.end_date is None:
        raise ValidationError("Custom period requires both start_date and end_date")
    return f"{to_iso(options.start_date)}_to_{to_iso(options.end_date)}"


def build_filename(options: ExportOptions, today: date) -> str:
    kind = "Detailed" if options.include_details else "Summary"
    return f"{EXPORT_FILENAME_PREFIX}_{kind}_{period_label(options, today)}{EXPORT_EXTENSION}"
