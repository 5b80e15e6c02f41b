from __future__ import annotations

from datetime import date

from conftest import make_attendance, make_employee
from src.hr_dashboard.hr_dashboard.core.enums import AttendanceStatus, ExportPeriod
from src.hr_dashboard.hr_dashboard.reports.aggregator import (
    DETAILED_COLUMNS,
    SUMMARY_COLUMNS,
    build_detailed_rows,
    build_filename,
    build_summary_rows,
    format_2dp,
    period_label,
)
from src.hr_dashboard.hr_dashboard.reports.model import ExportOptions

TODAY = date(2024, 3, 15)


def test_summary_totals_and_average():
    employees = [make_employee("E1", name="Alice", department="HR", position="Manager")]
    records = [
        make_attendance("a", "E1", "2024-03-13", AttendanceStatus.PRESENT, 8.0),
        make_attendance("b", "E1", "2024-03-14", AttendanceStatus.ABSENT),
        make_attendance("c", "E1", "2024-03-15", AttendanceStatus.HALF_DAY, 4.5),
    ]

    rows = build_summary_rows(records, employees)

    assert rows == [
        {
            "Employee ID": "E1",
            "Employee Name": "Alice",
            "Department": "HR",
            "Position": "Manager",
            "Total Days": 3,
            "Present": 1,
            "Absent": 1,
            "Late": 0,
            "Half Day": 1,
            "Total Hours": "12.50",
            "Average Hours/Day": "4.17",
        }
    ]
    assert list(rows[0]) == SUMMARY_COLUMNS


def test_detailed_rows_follow_record_order():
    employees = [make_employee("E1"), make_employee("E2")]
    records = [
        make_attendance("a", "E2", "2024-03-15"),
        make_attendance("b", "E1", "2024-03-14", AttendanceStatus.LATE, 6.0, notes="Arrived late"),
        make_attendance("c", "E2", "2024-03-13"),
    ]

    rows = build_detailed_rows(records, employees)

    assert len(rows) == len(records)
    assert [r["Date"] for r in rows] == ["2024-03-15", "2024-03-14", "2024-03-13"]
    assert rows[1]["Notes"] == "Arrived late"
    assert rows[0]["Notes"] == ""
    assert rows[1]["Status"] == "late"
    assert list(rows[0]) == DETAILED_COLUMNS


def test_unknown_employee_is_labelled_in_detail_and_dropped_in_summary():
    employees = [make_employee("E1")]
    records = [make_attendance("a", "GHOST", "2024-03-15"), make_attendance("b", "E1", "2024-03-15")]

    detailed = build_detailed_rows(records, employees)
    summary = build_summary_rows(records, employees)

    assert detailed[0]["Employee Name"] == "Unknown"
    assert detailed[0]["Department"] == "Unknown"
    assert detailed[0]["Position"] == "Unknown"
    assert [r["Employee ID"] for r in summary] == ["E1"]


def test_blank_employee_fields_fall_back_to_unknown():
    employees = [make_employee("E1", name="", department="", position="")]

    row = build_detailed_rows([make_attendance("a", "E1", "2024-03-15")], employees)[0]

    assert (row["Employee Name"], row["Department"], row["Position"]) == ("Unknown", "Unknown", "Unknown")


def test_summary_keeps_first_seen_employee_order():
    employees = [make_employee("E1"), make_employee("E2")]
    records = [
        make_attendance("a", "E2", "2024-03-15"),
        make_attendance("b", "E1", "2024-03-15"),
        make_attendance("c", "E2", "2024-03-14"),
    ]

    summary = build_summary_rows(records, employees)

    assert [r["Employee ID"] for r in summary] == ["E2", "E1"]
    assert summary[0]["Total Days"] == 2


def test_aggregation_does_not_touch_inputs():
    employees = [make_employee("E1")]
    records = [make_attendance("a", "E1", "2024-03-15")]
    before = (list(employees), list(records))

    build_summary_rows(records, employees)
    build_detailed_rows(records, employees)

    assert (employees, records) == before


def test_custom_filename():
    options = ExportOptions(
        period=ExportPeriod.CUSTOM,
        start_date=date(2024, 2, 1),
        end_date=date(2024, 2, 5),
        include_details=True,
    )

    assert build_filename(options, TODAY) == "Attendance_Detailed_2024-02-01_to_2024-02-05.xlsx"


def test_period_labels():
    assert period_label(ExportOptions(period=ExportPeriod.DAILY), TODAY) == "2024-03-15"
    assert period_label(ExportOptions(period=ExportPeriod.WEEKLY), TODAY) == "2024-03-08_to_2024-03-15"
    assert period_label(ExportOptions(period=ExportPeriod.MONTHLY), TODAY) == "2024-02_to_2024-03"
    assert period_label(ExportOptions(period=ExportPeriod.MONTHLY), date(2024, 1, 31)) == "2023-12_to_2024-01"


def test_summary_filename_prefix():
    options = ExportOptions(period=ExportPeriod.DAILY, include_details=False)

    assert build_filename(options, TODAY) == "Attendance_Summary_2024-03-15.xlsx"


def test_format_2dp_rounds_half_up():
    assert format_2dp(12.5) == "12.50"
    assert format_2dp(12.5 / 3) == "4.17"
    assert format_2dp(0) == "0.00"
