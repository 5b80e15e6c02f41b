from __future__ import annotations

from datetime import date
from pathlib import Path

import pandas as pd
import pytest

from conftest import make_attendance, make_employee
from src.hr_dashboard.hr_dashboard.core.enums import AttendanceStatus, ExportPeriod
from src.hr_dashboard.hr_dashboard.core.exceptions import ValidationError
from src.hr_dashboard.hr_dashboard.notifications.sink import CollectingNotificationSink
from src.hr_dashboard.hr_dashboard.reports.exporter import ExcelSpreadsheetWriter, to_excel_bytes
from src.hr_dashboard.hr_dashboard.reports.model import ExportOptions
from src.hr_dashboard.hr_dashboard.reports.service import AttendanceExportService

TODAY = date(2024, 3, 15)


class FakeWriter:
    def __init__(self):
        self.calls = []

    def write(self, rows, *, sheet_name, filename, columns=None):
        self.calls.append({"rows": rows, "sheet_name": sheet_name, "filename": filename, "columns": columns})
        return Path("/tmp") / filename


class BrokenWriter:
    def write(self, rows, *, sheet_name, filename, columns=None):
        raise OSError("disk full")


def _data():
    employees = [make_employee("E1", name="Alice"), make_employee("E2", name="Bob")]
    attendance = [
        make_attendance("a", "E1", "2024-03-15", AttendanceStatus.PRESENT, 8.0),
        make_attendance("b", "E2", "2024-03-15", AttendanceStatus.ABSENT),
        make_attendance("c", "E1", "2024-03-10", AttendanceStatus.LATE, 6.0),
    ]
    return employees, attendance


def test_export_detailed_daily_hands_rows_to_writer():
    writer = FakeWriter()
    notifier = CollectingNotificationSink()
    svc = AttendanceExportService(writer, clock=lambda: TODAY, notifier=notifier)
    employees, attendance = _data()

    result = svc.export_attendance(employees, attendance, ExportOptions(period=ExportPeriod.DAILY))

    assert result.success is True
    assert result.filename == "Attendance_Detailed_2024-03-15.xlsx"
    assert result.row_count == 2
    call = writer.calls[0]
    assert call["sheet_name"] == "Attendance"
    assert call["filename"] == result.filename
    assert [r["Employee ID"] for r in call["rows"]] == ["E1", "E2"]
    assert notifier.messages == [("success", "Exported attendance to Attendance_Detailed_2024-03-15.xlsx")]


def test_export_summary_weekly_groups_by_employee():
    writer = FakeWriter()
    svc = AttendanceExportService(writer, clock=lambda: TODAY)
    employees, attendance = _data()

    result = svc.export_attendance(employees, attendance, ExportOptions(period=ExportPeriod.WEEKLY, include_details=False))

    rows = writer.calls[0]["rows"]
    assert result.filename == "Attendance_Summary_2024-03-08_to_2024-03-15.xlsx"
    assert [(r["Employee ID"], r["Total Days"], r["Total Hours"]) for r in rows] == [("E1", 2, "14.00"), ("E2", 1, "0.00")]


def test_explicit_today_overrides_clock():
    writer = FakeWriter()
    svc = AttendanceExportService(writer, clock=lambda: date(1999, 1, 1))
    employees, attendance = _data()

    result = svc.export_attendance(employees, attendance, ExportOptions(period=ExportPeriod.DAILY), today=TODAY)

    assert result.row_count == 2


def test_writer_failure_propagates():
    svc = AttendanceExportService(BrokenWriter(), clock=lambda: TODAY, notifier=CollectingNotificationSink())
    employees, attendance = _data()

    with pytest.raises(OSError):
        svc.export_attendance(employees, attendance, ExportOptions(period=ExportPeriod.DAILY))


def test_custom_without_end_date_is_rejected():
    svc = AttendanceExportService(FakeWriter(), clock=lambda: TODAY)
    employees, attendance = _data()

    with pytest.raises(ValidationError):
        svc.export_attendance(employees, attendance, ExportOptions(period=ExportPeriod.CUSTOM, start_date=TODAY))


def test_excel_writer_produces_readable_workbook(tmp_path):
    svc = AttendanceExportService(ExcelSpreadsheetWriter(tmp_path), clock=lambda: TODAY)
    employees, attendance = _data()

    result = svc.export_attendance(employees, attendance, ExportOptions(period=ExportPeriod.WEEKLY, include_details=False))

    assert result.path == tmp_path / result.filename
    df = pd.read_excel(result.path, sheet_name="Attendance", dtype=str)
    assert list(df.columns)[:2] == ["Employee ID", "Employee Name"]
    assert df["Total Hours"].tolist() == ["14.00", "0.00"]


def test_excel_writer_keeps_header_for_empty_export(tmp_path):
    svc = AttendanceExportService(ExcelSpreadsheetWriter(tmp_path), clock=lambda: TODAY)

    result = svc.export_attendance([], [], ExportOptions(period=ExportPeriod.DAILY))

    df = pd.read_excel(result.path, sheet_name="Attendance")
    assert result.row_count == 0
    assert df.empty
    assert "Hours Worked" in df.columns


def test_to_excel_bytes_returns_rewound_buffer():
    buf = to_excel_bytes([{"A": 1}], sheet_name="Attendance")

    assert buf.tell() == 0
    assert buf.read(2) == b"PK"
