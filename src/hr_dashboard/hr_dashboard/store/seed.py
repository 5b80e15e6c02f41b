"""Demo data for the in-memory store.

Mirrors what the dashboard shows out of the box: 30 employees, 30 days of
attendance and six monthly salary records per employee.
"""

from __future__ import annotations

import random
import uuid
from datetime import date
from typing import Optional

from ..attendance.model import Attendance
from ..common.datetime_utils import days_back, to_iso
from ..core.constants import EMPLOYEE_ID_PREFIX, EMPLOYEE_ID_START
from ..core.enums import AttendanceStatus, EmployeeStatus, SalaryStatus
from ..employees.model import Department, Employee
from ..salary.model import SalaryRecord
from .memory_store import DataStore

DEPARTMENTS = ["Engineering", "HR", "Finance", "Marketing", "Operations"]
POSITIONS = ["Manager", "Senior", "Junior", "Intern", "Director", "VP", "Associate"]
FIRST_NAMES = ["John", "Jane", "Mike", "Sarah", "David", "Emma", "Chris", "Alex", "Robert", "Lisa"]
LAST_NAMES = ["Smith", "Johnson", "Williams", "Brown", "Jones", "Miller", "Davis", "Garcia", "Rodriguez", "Wilson"]
SALARY_MONTHS = ["January", "February", "March", "April", "May", "June"]
SALARY_YEAR = 2023

_STATUS_ORDER = [
    AttendanceStatus.PRESENT,
    AttendanceStatus.ABSENT,
    AttendanceStatus.LATE,
    AttendanceStatus.HALF_DAY,
]


def _short_id(rng: random.Random) -> str:
    return uuid.UUID(int=rng.getrandbits(128)).hex[:8]


def generate_employees(rng: random.Random, count: int) -> list[Employee]:
    out = []
    for index in range(count):
        first, last = rng.choice(FIRST_NAMES), rng.choice(LAST_NAMES)
        joined = date(2020 + rng.randrange(3), rng.randrange(12) + 1, rng.randrange(28) + 1)
        out.append(
            Employee(
                id=f"{EMPLOYEE_ID_PREFIX}{EMPLOYEE_ID_START + index}",
                name=f"{first} {last}",
                email=f"{first.lower()}.{last.lower()}@company.com",
                position=rng.choice(POSITIONS),
                department=rng.choice(DEPARTMENTS),
                joining_date=to_iso(joined),
                salary=float(rng.randrange(30000, 100000)),
                status=rng.choice(list(EmployeeStatus)),
                contact_number=f"+1 {rng.randrange(100, 1000)}-{rng.randrange(100, 1000)}-{rng.randrange(1000, 10000)}",
                address=f"{rng.randrange(1000, 10000)} Main St, City, State",
            )
        )
    return out


def generate_attendance(rng: random.Random, employees: list[Employee], days: int, today: date) -> list[Attendance]:
    """Inactive employees get no records; on-leave ones are only present or absent."""
    out = []
    for i in range(days):
        work_date = to_iso(days_back(today, i))
        for e in employees:
            if e.status == EmployeeStatus.INACTIVE:
                continue

            choices = 2 if e.status == EmployeeStatus.ON_LEAVE else 4
            status = _STATUS_ORDER[rng.randrange(choices)]
            in_hour = 8 + rng.randrange(2)
            check_in = f"{in_hour:02d}:{rng.randrange(60):02d}"

            if status == AttendanceStatus.PRESENT:
                hours = 8 + rng.random()
            elif status == AttendanceStatus.HALF_DAY:
                hours = 4 + rng.random()
            elif status == AttendanceStatus.LATE:
                hours = 6 + rng.random()
            else:
                hours = 0.0
            out_hour = min(19, in_hour + int(hours))
            check_out = f"{out_hour:02d}:{rng.randrange(60):02d}"

            absent = status == AttendanceStatus.ABSENT
            out.append(
                Attendance(
                    id=_short_id(rng),
                    employee_id=e.id,
                    date=work_date,
                    check_in="" if absent else check_in,
                    check_out="" if absent else check_out,
                    status=status,
                    hours_worked=round(hours, 2),
                    notes="No show" if absent else "Arrived late" if status == AttendanceStatus.LATE else "",
                )
            )
    return out


def generate_salary_records(rng: random.Random, employees: list[Employee]) -> list[SalaryRecord]:
    out = []
    for e in employees:
        for i, month in enumerate(SALARY_MONTHS):
            base = round(e.salary / 12, 2)
            overtime = float(rng.randrange(500)) if rng.random() < 0.3 else 0.0
            deductions = float(int(base * rng.random() * 0.1))
            bonus = float(rng.randrange(1000)) if rng.random() < 0.2 else 0.0
            paid = i < len(SALARY_MONTHS) - 1
            out.append(
                SalaryRecord(
                    id=_short_id(rng),
                    employee_id=e.id,
                    month=month,
                    year=SALARY_YEAR,
                    base_salary=base,
                    overtime_pay=overtime,
                    deductions=deductions,
                    bonus=bonus,
                    total_salary=round(base + overtime + bonus - deductions, 2),
                    status=SalaryStatus.PAID if paid else SalaryStatus.PENDING,
                    payment_date=f"{SALARY_YEAR}-{i + 1:02d}-15" if paid else None,
                )
            )
    return out


def generate_departments(employees: list[Employee]) -> list[Department]:
    managers = ["David Miller", "Sarah Johnson", "Robert Wilson", "Emma Davis", "Chris Brown"]
    return [
        Department(
            id=f"dept-{i + 1}",
            name=name,
            manager=managers[i],
            employee_count=sum(1 for e in employees if e.department == name),
        )
        for i, name in enumerate(DEPARTMENTS)
    ]


def seed_store(
    store: DataStore,
    *,
    today: date,
    employee_count: int = 30,
    days: int = 30,
    seed: Optional[int] = None,
) -> None:
    rng = random.Random(seed)
    employees = generate_employees(rng, employee_count)
    store.load(
        employees=employees,
        attendance=generate_attendance(rng, employees, days, today),
        salary_records=generate_salary_records(rng, employees),
        departments=generate_departments(employees),
    )
