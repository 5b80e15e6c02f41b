"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the business rules live in services.
"""

from datetime import date

from src.hr_dashboard.hr_dashboard.container import build_container
from src.hr_dashboard.hr_dashboard.core.enums import ExportPeriod
from src.hr_dashboard.hr_dashboard.reports.model import ExportOptions
from src.hr_dashboard.hr_dashboard.store.seed import seed_store


def main():
    container = build_container(export_dir="exports")
    seed_store(container.store, today=date.today(), employee_count=10, days=14, seed=7)

    print(container.dashboard_service.overview())

    options = ExportOptions(period=ExportPeriod.CUSTOM, start_date=date.today().replace(day=1), end_date=date.today(), include_details=False)
    print(container.export_service.export_attendance(
        container.employees_repo.list_all(),
        container.attendance_repo.list_all(),
        options,
    ))


if __name__ == "__main__":
    main()
