from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import error_response, list_response, result_response
from ..common.serialization import to_json_dict
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    def employees_list():
        employees = service.search_employees(
            request.args.get("search", ""),
            status=request.args.get("status") or None,
            department=request.args.get("department") or None,
        )
        return list_response(employees, total=len(service.list_employees()))

    @app.route("/api/employees", methods=["POST"], endpoint="employees_create")
    def employees_create():
        payload = request.get_json(silent=True) or {}
        return result_response(service.add_employee(payload), status=201)

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="employees_get")
    def employees_get(employee_id: str):
        return result_response(service.get_employee(employee_id))

    @app.route("/api/employees/<employee_id>", methods=["PATCH", "PUT"], endpoint="employees_update")
    def employees_update(employee_id: str):
        payload = request.get_json(silent=True) or {}
        return result_response(service.update_employee(employee_id, payload))

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="employees_delete")
    def employees_delete(employee_id: str):
        return result_response(service.delete_employee(employee_id))

    @app.route("/api/employees/filter", methods=["GET"], endpoint="employees_filter")
    def employees_filter():
        try:
            employees = service.filter_employees(**request.args.to_dict())
        except ValidationError as e:
            return error_response(str(e), 400)
        return list_response(employees)

    @app.route("/api/departments", methods=["GET"], endpoint="departments_list")
    def departments_list():
        return jsonify(
            {
                "success": True,
                "data": [to_json_dict(d) for d in container.departments_repo.list_all()],
                "names": service.list_departments(),
            }
        )
