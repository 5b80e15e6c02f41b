from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .employees.controller import register as register_employees
from .reports.controller import register as register_reports
from .salary.controller import register as register_salary
from .store.seed import seed_store

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["EXPORT_DIR"] = str(Path(getattr(settings, "EXPORT_DIR", "exports")).resolve())

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("[hr-dashboard] settings=%s export_dir=%s", settings_module, app.config["EXPORT_DIR"])

    if container is None:
        container = build_container(
            export_dir=app.config["EXPORT_DIR"],
            latency_seconds=float(getattr(settings, "STORE_LATENCY_SECONDS", 0)),
        )
        if bool(getattr(settings, "AUTO_SEED", False)):
            seed = getattr(settings, "SEED_RANDOM", None)
            seed_store(
                container.store,
                today=container.clock(),
                employee_count=int(getattr(settings, "SEED_EMPLOYEES", 30)),
                days=int(getattr(settings, "SEED_DAYS", 30)),
                seed=int(seed) if seed is not None else None,
            )
            logger.info("[hr-dashboard] demo seed ready")

    # exports are served from wherever the writer puts them
    app.config["EXPORT_DIR"] = str(getattr(container.writer, "export_dir", app.config["EXPORT_DIR"]))
    app.extensions["hr_dashboard"] = container

    register_employees(app, container)
    register_attendance(app, container)
    register_salary(app, container)
    register_reports(app, container)

    return app
