from __future__ import annotations

from src.hr_dashboard.hr_dashboard.core.enums import AttendanceStatus, ErrorKind


def test_record_absent_with_hours_is_rejected(container):
    result = container.attendance_service.record_attendance(
        employee_id="EMP-1000", work_date="2024-03-16", status="absent", hours_worked=3
    )

    assert result.error_kind == ErrorKind.VALIDATION
    assert len(container.attendance_repo.list_all()) == 4


def test_record_absent_clears_times(container):
    result = container.attendance_service.record_attendance(
        employee_id="EMP-1000", work_date="2024-03-16", status="absent", check_in="09:00"
    )

    assert result.ok
    assert result.value.check_in == ""
    assert result.value.hours_worked == 0


def test_record_rejects_bad_date(container):
    result = container.attendance_service.record_attendance(
        employee_id="EMP-1000", work_date="16/03/2024", status="present", hours_worked=8
    )

    assert result.error_kind == ErrorKind.VALIDATION


def test_queries_by_employee_and_date(container):
    svc = container.attendance_service

    assert [a.id for a in svc.get_employee_attendance("EMP-1000")] == ["a1", "a3"]
    assert [a.id for a in svc.get_attendance_by_date("2024-03-15")] == ["a1", "a2"]


def test_today_summary_counts_against_active_headcount(container):
    summary = container.attendance_service.today_summary()

    assert summary == {"present": 1, "absent": 1, "late": 0, "total": 1}


def test_daily_breakdown_filters(container):
    svc = container.attendance_service

    rows, counts = svc.daily_breakdown("2024-03-15")
    assert [r.id for r in rows] == ["a1", "a2"]
    assert (counts.present, counts.absent, counts.total) == (1, 1, 2)

    rows, counts = svc.daily_breakdown("2024-03-15", search="jane")
    assert [r.id for r in rows] == ["a2"]

    rows, _ = svc.daily_breakdown("2024-03-15", status=AttendanceStatus.PRESENT.value)
    assert [r.id for r in rows] == ["a1"]
