from __future__ import annotations

import logging

from flask import Flask, jsonify, request, send_file, send_from_directory

from ..common.datetime_utils import parse_iso_date
from ..common.serialization import to_json_dict
from ..common.validators import require_choice
from ..container import Container
from ..core.constants import DASHBOARD_TREND_DAYS, MAX_TREND_DAYS
from ..core.enums import ExportPeriod
from ..core.exceptions import ValidationError
from .exporter import XLSX_MIMETYPE
from .filter import filter_attendance
from .model import ExportOptions

logger = logging.getLogger(__name__)

_TRUE = {"1", "true", "yes", "on"}


def parse_export_options(data) -> ExportOptions:
    """Build ExportOptions from a JSON body or query string mapping."""
    period = require_choice(data.get("period") or ExportPeriod.WEEKLY.value, ExportPeriod, "Period")

    def _date(key: str):
        value = data.get(key)
        if not value:
            return None
        try:
            return parse_iso_date(str(value))
        except ValueError:
            raise ValidationError(f"{key} must be a YYYY-MM-DD date") from None

    if hasattr(data, "getlist"):
        # ?employee_ids=a&employee_ids=b and ?employee_ids=a,b are both accepted
        raw_ids = ",".join(data.getlist("employee_ids"))
    else:
        raw_ids = data.get("employee_ids") or []
    if raw_ids == "all":
        raw_ids = []
    elif isinstance(raw_ids, str):
        raw_ids = [i for i in raw_ids.split(",") if i.strip()]

    include = data.get("include_details", True)
    if isinstance(include, str):
        include = include.strip().lower() in _TRUE

    return ExportOptions(
        period=period,
        start_date=_date("start_date"),
        end_date=_date("end_date"),
        employee_ids=tuple(str(i).strip() for i in raw_ids),
        include_details=bool(include),
    )


def register(app: Flask, container: Container) -> None:
    def _error(message: str, status: int):
        container.notifier.error(message)
        return jsonify({"success": False, "message": message}), status

    @app.route("/api/reports/attendance/export", methods=["POST"], endpoint="reports_export")
    def reports_export():
        """Write the export into EXPORT_DIR and report the filename."""
        try:
            options = parse_export_options(request.get_json(silent=True) or {})
            result = container.export_service.export_attendance(
                container.employees_repo.list_all(),
                container.attendance_repo.list_all(),
                options,
            )
        except ValidationError as e:
            return _error(f"Export failed: {e}", 400)
        except Exception:
            logger.exception("Attendance export failed")
            return _error("Failed to export attendance", 500)

        return jsonify({"success": result.success, "filename": result.filename, "row_count": result.row_count})

    @app.route("/api/reports/attendance/download", methods=["GET"], endpoint="reports_download")
    def reports_download():
        """Same export, streamed straight back to the browser."""
        try:
            options = parse_export_options(request.args)
            filename, output = container.export_service.render_attendance(
                container.employees_repo.list_all(),
                container.attendance_repo.list_all(),
                options,
            )
        except ValidationError as e:
            return _error(f"Export failed: {e}", 400)
        except Exception:
            logger.exception("Attendance download failed")
            return _error("Failed to export attendance", 500)

        return send_file(output, download_name=filename, as_attachment=True, mimetype=XLSX_MIMETYPE)

    @app.route("/api/reports/files/<path:filename>", methods=["GET"], endpoint="reports_file")
    def reports_file(filename: str):
        return send_from_directory(app.config["EXPORT_DIR"], filename, as_attachment=True, mimetype=XLSX_MIMETYPE)

    @app.route("/api/reports/departments", methods=["GET"], endpoint="reports_departments")
    def reports_departments():
        stats = container.report_statistics_service
        return jsonify(
            {
                "success": True,
                "attendance": stats.department_attendance(),
                "working_hours": stats.department_working_hours(),
            }
        )

    @app.route("/api/reports/status-distribution", methods=["GET"], endpoint="reports_status_distribution")
    def reports_status_distribution():
        try:
            options = parse_export_options(request.args)
            records = filter_attendance(container.attendance_repo.list_all(), options, today=container.clock())
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "data": container.report_statistics_service.status_distribution(records)})

    @app.route("/api/reports/attendance-trend", methods=["GET"], endpoint="reports_attendance_trend")
    def reports_attendance_trend():
        days = request.args.get("days", DASHBOARD_TREND_DAYS, type=int)
        if not 1 <= days <= MAX_TREND_DAYS:
            return jsonify({"success": False, "message": f"days must be between 1 and {MAX_TREND_DAYS}"}), 400
        stats = container.report_statistics_service
        trend = stats.attendance_trend(days=days)
        return jsonify({"success": True, "data": trend, "totals": stats.trend_totals(trend)})

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    def dashboard():
        overview = container.dashboard_service.overview()
        overview["recent_employees"] = [to_json_dict(e) for e in overview["recent_employees"]]
        return jsonify({"success": True, "data": overview})
