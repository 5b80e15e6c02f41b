from __future__ import annotations

from datetime import date

import pytest

from src.hr_dashboard.hr_dashboard.attendance.model import Attendance
from src.hr_dashboard.hr_dashboard.container import build_container
from src.hr_dashboard.hr_dashboard.core.enums import AttendanceStatus, EmployeeStatus, SalaryStatus
from src.hr_dashboard.hr_dashboard.employees.model import Department, Employee
from src.hr_dashboard.hr_dashboard.notifications.sink import CollectingNotificationSink
from src.hr_dashboard.hr_dashboard.salary.model import SalaryRecord
from src.hr_dashboard.hr_dashboard.store.memory_store import DataStore


def make_employee(employee_id: str, **overrides) -> Employee:
    data = dict(
        id=employee_id,
        name=f"Name {employee_id}",
        email=f"{employee_id.lower()}@company.com",
        position="Associate",
        department="Engineering",
        joining_date="2022-01-10",
        salary=60000.0,
        status=EmployeeStatus.ACTIVE,
    )
    data.update(overrides)
    return Employee(**data)


def make_attendance(record_id: str, employee_id: str, work_date: str, status=AttendanceStatus.PRESENT, hours=8.0, notes=None) -> Attendance:
    absent = status == AttendanceStatus.ABSENT
    return Attendance(
        id=record_id,
        employee_id=employee_id,
        date=work_date,
        check_in="" if absent else "09:00",
        check_out="" if absent else "17:00",
        status=status,
        hours_worked=0.0 if absent else hours,
        notes=notes,
    )


def make_salary(record_id: str, employee_id: str, **overrides) -> SalaryRecord:
    data = dict(
        id=record_id,
        employee_id=employee_id,
        month="January",
        year=2024,
        base_salary=5000.0,
        overtime_pay=0.0,
        deductions=100.0,
        bonus=0.0,
        total_salary=4900.0,
        status=SalaryStatus.PENDING,
        payment_date=None,
    )
    data.update(overrides)
    return SalaryRecord(**data)


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 3, 15)


@pytest.fixture
def notifier() -> CollectingNotificationSink:
    return CollectingNotificationSink()


@pytest.fixture
def store(fixed_today) -> DataStore:
    s = DataStore()
    employees = [
        make_employee("EMP-1000", name="John Smith", department="Engineering", position="Manager"),
        make_employee("EMP-1001", name="Jane Brown", department="HR", status=EmployeeStatus.ON_LEAVE),
        make_employee("EMP-1002", name="Mike Davis", department="Engineering", status=EmployeeStatus.INACTIVE, joining_date="2023-06-01"),
    ]
    attendance = [
        make_attendance("a1", "EMP-1000", "2024-03-15", AttendanceStatus.PRESENT, 8.0),
        make_attendance("a2", "EMP-1001", "2024-03-15", AttendanceStatus.ABSENT),
        make_attendance("a3", "EMP-1000", "2024-03-14", AttendanceStatus.LATE, 6.5, notes="Arrived late"),
        make_attendance("a4", "EMP-1001", "2024-03-01", AttendanceStatus.HALF_DAY, 4.0),
    ]
    salaries = [
        make_salary("s1", "EMP-1000"),
        make_salary("s2", "EMP-1001", month="February", base_salary=4000.0, deductions=0.0, total_salary=4000.0,
                    status=SalaryStatus.PAID, payment_date="2024-02-15"),
    ]
    departments = [
        Department(id="dept-1", name="Engineering", manager="David Miller", employee_count=2),
        Department(id="dept-2", name="HR", manager="Sarah Johnson", employee_count=1),
    ]
    s.load(employees=employees, attendance=attendance, salary_records=salaries, departments=departments)
    return s


@pytest.fixture
def container(store, fixed_today, notifier, tmp_path):
    return build_container(export_dir=tmp_path / "exports", clock=lambda: fixed_today, notifier=notifier, store=store)
