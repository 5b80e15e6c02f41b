"""Record Filter: narrow attendance records to a reporting period and employee scope."""

from __future__ import annotations

from datetime import date
from typing import Iterable

from ..attendance.model import Attendance
from ..common.datetime_utils import days_back, months_back, to_iso
from ..core.constants import MONTHLY_PERIOD_MONTHS, WEEKLY_PERIOD_DAYS
from ..core.enums import ExportPeriod
from ..core.exceptions import ValidationError
from .model import DateRange, ExportOptions


def resolve_range(options: ExportOptions, today: date) -> DateRange:
    """Date range covered by ``options`` relative to ``today``.

    Raises ValidationError for a custom period without both dates.
    """
    period = ExportPeriod(options.period)
    if period == ExportPeriod.DAILY:
        return DateRange(start=to_iso(today), end=to_iso(today))
    if period == ExportPeriod.WEEKLY:
        return DateRange(start=to_iso(days_back(today, WEEKLY_PERIOD_DAYS)), end=to_iso(today))
    if period == ExportPeriod.MONTHLY:
        return DateRange(start=to_iso(months_back(today, MONTHLY_PERIOD_MONTHS)), end=to_iso(today))

    if options.start_date is None or options.end_date is None:
        raise ValidationError("Custom period requires both start_date and end_date")
    # start > end is allowed and simply matches nothing
    return DateRange(start=to_iso(options.start_date), end=to_iso(options.end_date))


def filter_attendance(records: Iterable[Attendance], options: ExportOptions, *, today: date) -> list[Attendance]:
    """Records inside the period (and employee subset), in input order.

    Pure function of its arguments; filtering an already filtered list with
    the same options returns an equal list.
    """
    window = resolve_range(options, today)
    wanted = set(options.employee_ids or ())

    out = []
    for r in records:
        if not window.contains(r.date):
            continue
        if wanted and r.employee_id not in wanted:
            continue
        out.append(r)
    return out
