from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import list_response, result_response
from ..common.serialization import to_json_dict
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    def attendance_list():
        employee_id = request.args.get("employee_id")
        work_date = request.args.get("date")

        if work_date:
            rows, counts = service.daily_breakdown(
                work_date,
                employee_id=employee_id or None,
                status=request.args.get("status") or None,
                search=request.args.get("search", ""),
            )
            return list_response(rows, stats=to_json_dict(counts))
        if employee_id:
            return list_response(service.get_employee_attendance(employee_id))
        return list_response(service.list_attendance())

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_create")
    def attendance_create():
        payload = request.get_json(silent=True) or {}
        result = service.record_attendance(
            employee_id=payload.get("employee_id", ""),
            work_date=payload.get("date", ""),
            status=payload.get("status", ""),
            hours_worked=payload.get("hours_worked", 0),
            check_in=payload.get("check_in", ""),
            check_out=payload.get("check_out", ""),
            notes=payload.get("notes"),
        )
        return result_response(result, status=201)

    @app.route("/api/attendance/today", methods=["GET"], endpoint="attendance_today")
    def attendance_today():
        return jsonify({"success": True, "data": service.today_summary()})
