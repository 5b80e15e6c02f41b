from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import Clock, today_local
from .employees.memory_employee_repository import InMemoryDepartmentRepository, InMemoryEmployeeRepository
from .employees.service import EmployeeService
from .notifications.sink import LoggingNotificationSink, NotificationSink
from .reports.exporter import ExcelSpreadsheetWriter, SpreadsheetWriter
from .reports.service import AttendanceExportService
from .reports.statistics import DashboardService, ReportStatisticsService
from .salary.memory_salary_repository import InMemorySalaryRepository
from .salary.service import SalaryService
from .store.memory_store import DataStore


@dataclass(frozen=True)
class Container:
    store: DataStore
    clock: Clock

    employees_repo: InMemoryEmployeeRepository
    departments_repo: InMemoryDepartmentRepository
    attendance_repo: InMemoryAttendanceRepository
    salary_repo: InMemorySalaryRepository

    employee_service: EmployeeService
    attendance_service: AttendanceService
    salary_service: SalaryService
    export_service: AttendanceExportService
    report_statistics_service: ReportStatisticsService
    dashboard_service: DashboardService

    notifier: NotificationSink
    writer: SpreadsheetWriter


def build_container(
    *,
    export_dir: Path | str,
    latency_seconds: float = 0.0,
    clock: Clock = today_local,
    notifier: NotificationSink | None = None,
    writer: SpreadsheetWriter | None = None,
    store: DataStore | None = None,
) -> Container:
    store = store or DataStore(latency_seconds=latency_seconds)
    notifier = notifier or LoggingNotificationSink()
    writer = writer or ExcelSpreadsheetWriter(export_dir)

    employees_repo = InMemoryEmployeeRepository(store)
    departments_repo = InMemoryDepartmentRepository(store)
    attendance_repo = InMemoryAttendanceRepository(store)
    salary_repo = InMemorySalaryRepository(store)

    employee_service = EmployeeService(employees_repo, notifier=notifier)
    attendance_service = AttendanceService(attendance_repo, employees_repo, clock=clock)
    salary_service = SalaryService(salary_repo, employees_repo, notifier=notifier)
    export_service = AttendanceExportService(writer, clock=clock, notifier=notifier)
    report_statistics_service = ReportStatisticsService(employees_repo, attendance_repo, departments_repo, clock=clock)
    dashboard_service = DashboardService(
        employees_repo, attendance_repo, salary_repo, report_statistics_service, clock=clock
    )

    return Container(
        store=store,
        clock=clock,
        employees_repo=employees_repo,
        departments_repo=departments_repo,
        attendance_repo=attendance_repo,
        salary_repo=salary_repo,
        employee_service=employee_service,
        attendance_service=attendance_service,
        salary_service=salary_service,
        export_service=export_service,
        report_statistics_service=report_statistics_service,
        dashboard_service=dashboard_service,
        notifier=notifier,
        writer=writer,
    )
