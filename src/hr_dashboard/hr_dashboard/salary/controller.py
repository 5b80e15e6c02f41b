from __future__ import annotations

from flask import Flask, request

from ..common.http import list_response, result_response
from ..common.serialization import to_json_dict
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.salary_service

    @app.route("/api/salaries", methods=["GET"], endpoint="salaries_list")
    def salaries_list():
        employee_id = request.args.get("employee_id")
        if employee_id:
            records = service.get_employee_salary_records(employee_id)
        else:
            records = service.list_salary_records(
                month=request.args.get("month") or None,
                status=request.args.get("status") or None,
                search=request.args.get("search", ""),
                order=request.args.get("order", "desc"),
            )
        return list_response(records, totals=to_json_dict(service.totals(records)))

    @app.route("/api/salaries/<record_id>", methods=["GET"], endpoint="salaries_get")
    def salaries_get(record_id: str):
        return result_response(service.get_salary_record(record_id))

    @app.route("/api/salaries/<record_id>", methods=["PATCH", "PUT"], endpoint="salaries_update")
    def salaries_update(record_id: str):
        payload = request.get_json(silent=True) or {}
        return result_response(service.update_salary_record(record_id, payload))
