from __future__ import annotations


def test_department_attendance(container):
    stats = container.report_statistics_service.department_attendance()

    by_name = {d["name"]: d for d in stats}
    # only EMP-1000 is active in Engineering; nobody active in HR
    assert by_name["Engineering"]["present"] == 1
    assert by_name["Engineering"]["total"] == 1
    assert by_name["Engineering"]["attendance_rate"] == 100.0
    assert by_name["HR"]["total"] == 0
    assert by_name["HR"]["attendance_rate"] == 0.0


def test_department_working_hours_last_week(container):
    stats = container.report_statistics_service.department_working_hours()

    by_name = {d["name"]: d for d in stats}
    assert by_name["Engineering"]["total_hours"] == "14.50"
    assert by_name["Engineering"]["average_hours"] == "7.25"
    assert by_name["Engineering"]["employees"] == 2
    # a4 (2024-03-01) is outside the seven day window
    assert by_name["HR"]["total_hours"] == "0.00"


def test_status_distribution(container):
    dist = container.report_statistics_service.status_distribution(container.attendance_repo.list_all())

    # one on-leave employee, three distinct dates
    assert dist == {"present": 1, "absent": 1, "late": 1, "half_day": 1, "on_leave": 3}


def test_dashboard_overview(container):
    overview = container.dashboard_service.overview()

    assert overview["active_employees"] == 1
    assert overview["on_leave_employees"] == 1
    assert overview["today"] == {"present": 1, "absent": 1, "late": 0, "total": 1}
    assert overview["attendance_percentage"] == 100
    assert overview["pending_salary_total"] == 4900.0
    assert overview["recent_employees"][0].id == "EMP-1002"
    assert len(overview["attendance_trend"]) == 7
    assert overview["attendance_trend"][-1]["date"] == "2024-03-15"


def test_attendance_trend_counts_each_day_oldest_first(container):
    trend = container.report_statistics_service.attendance_trend(days=7)

    assert [d["date"] for d in trend] == [f"2024-03-{day:02d}" for day in range(9, 16)]
    assert trend[-1] == {"date": "2024-03-15", "present": 1, "absent": 1, "late": 0, "on_leave": 1, "total": 3}
    assert trend[-2] == {"date": "2024-03-14", "present": 0, "absent": 0, "late": 1, "on_leave": 1, "total": 2}
    assert trend[0]["total"] == 1


def test_attendance_trend_reaches_back_thirty_days(container):
    trend = container.report_statistics_service.attendance_trend(days=30)

    assert trend[0]["date"] == "2024-02-15"
    half_day = next(d for d in trend if d["date"] == "2024-03-01")
    # half-day records are not part of the trend lines
    assert half_day["present"] + half_day["absent"] + half_day["late"] == 0


def test_trend_totals_sum_every_day(container):
    stats = container.report_statistics_service
    totals = stats.trend_totals(stats.attendance_trend(days=7))

    assert totals == {"present": 1, "absent": 1, "late": 1, "on_leave": 7}
