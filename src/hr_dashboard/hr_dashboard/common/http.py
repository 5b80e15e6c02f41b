from __future__ import annotations

from flask import jsonify

from ..core.enums import ErrorKind
from ..core.result import Result
from .serialization import to_json_dict

_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION: 400,
}


def error_response(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def result_response(result: Result, *, status: int = 200):
    """Map a CRUD Result onto a JSON response."""
    if not result.ok:
        return error_response(result.message, _STATUS_BY_KIND.get(result.error_kind, 400))
    return jsonify({"success": True, "data": to_json_dict(result.value)}), status


def list_response(items, **extra):
    return jsonify({"success": True, "data": [to_json_dict(i) for i in items], **extra})
