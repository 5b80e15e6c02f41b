"""Export attendance from a freshly seeded demo store.

Usage: python scripts/export_attendance.py [daily|weekly|monthly] [--summary]
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hr_dashboard.hr_dashboard.container import build_container
from src.hr_dashboard.hr_dashboard.core.enums import ExportPeriod
from src.hr_dashboard.hr_dashboard.reports.model import ExportOptions
from src.hr_dashboard.hr_dashboard.store.seed import seed_store


def main(argv: list[str]) -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(export_dir=settings.EXPORT_DIR)
    seed = getattr(settings, "SEED_RANDOM", None)
    seed_store(
        container.store,
        today=container.clock(),
        employee_count=settings.SEED_EMPLOYEES,
        days=settings.SEED_DAYS,
        seed=int(seed) if seed is not None else None,
    )

    args = [a for a in argv if not a.startswith("--")]
    options = ExportOptions(
        period=ExportPeriod(args[0] if args else "weekly"),
        include_details="--summary" not in argv,
    )
    result = container.export_service.export_attendance(
        container.employees_repo.list_all(),
        container.attendance_repo.list_all(),
        options,
    )
    print(f"OK: {result.row_count} rows -> {result.path}")


if __name__ == "__main__":
    main(sys.argv[1:])
