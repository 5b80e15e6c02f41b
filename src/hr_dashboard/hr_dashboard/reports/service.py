from __future__ import annotations

import io
import logging
from datetime import date
from typing import Optional, Sequence

from ..attendance.model import Attendance
from ..common.datetime_utils import Clock, today_local
from ..core.constants import EXPORT_SHEET_NAME
from ..core.enums import ExportPeriod
from ..employees.model import Employee
from ..notifications.sink import LoggingNotificationSink, NotificationSink
from .aggregator import DETAILED_COLUMNS, SUMMARY_COLUMNS, build_detailed_rows, build_filename, build_summary_rows
from .exporter import SpreadsheetWriter, to_excel_bytes
from .filter import filter_attendance
from .model import ExportOptions, ExportResult

logger = logging.getLogger(__name__)


class AttendanceExportService:
    """Use case: export attendance as a detailed or summary spreadsheet.

    Pipeline: filter -> aggregate -> write -> notify. Errors raised by the
    writer are not caught here; the caller reports them.
    """

    def __init__(
        self,
        writer: SpreadsheetWriter,
        *,
        clock: Clock = today_local,
        notifier: Optional[NotificationSink] = None,
    ):
        self._writer = writer
        self._clock = clock
        self._notifier = notifier or LoggingNotificationSink()

    def build_rows(
        self,
        employees: Sequence[Employee],
        attendance: Sequence[Attendance],
        options: ExportOptions,
        *,
        today: date,
    ) -> tuple[list[dict], list[str]]:
        records = filter_attendance(attendance, options, today=today)
        if options.include_details:
            return build_detailed_rows(records, employees), DETAILED_COLUMNS
        return build_summary_rows(records, employees), SUMMARY_COLUMNS

    def export_attendance(
        self,
        employees: Sequence[Employee],
        attendance: Sequence[Attendance],
        options: ExportOptions,
        *,
        today: Optional[date] = None,
    ) -> ExportResult:
        today = today or self._clock()
        filename = build_filename(options, today)
        rows, columns = self.build_rows(employees, attendance, options, today=today)

        path = self._writer.write(rows, sheet_name=EXPORT_SHEET_NAME, filename=filename, columns=columns)

        logger.info("Attendance export %s (%s, %d rows)", filename, ExportPeriod(options.period).value, len(rows))
        self._notifier.success(f"Exported attendance to {filename}")
        return ExportResult(success=True, filename=filename, row_count=len(rows), path=path)

    def render_attendance(
        self,
        employees: Sequence[Employee],
        attendance: Sequence[Attendance],
        options: ExportOptions,
        *,
        today: Optional[date] = None,
    ) -> tuple[str, io.BytesIO]:
        """Same pipeline, but the workbook is returned in memory instead of written to disk."""
        today = today or self._clock()
        filename = build_filename(options, today)
        rows, columns = self.build_rows(employees, attendance, options, today=today)

        output = to_excel_bytes(rows, sheet_name=EXPORT_SHEET_NAME, columns=columns)

        logger.info("Attendance download %s (%s, %d rows)", filename, ExportPeriod(options.period).value, len(rows))
        self._notifier.success(f"Exported attendance to {filename}")
        return filename, output
