from __future__ import annotations

import logging
from dataclasses import fields
from typing import Optional

from ..common.validators import require_choice, require_iso_date, require_non_empty, require_non_negative
from ..core.enums import EmployeeStatus
from ..core.exceptions import ValidationError
from ..core.result import Result
from ..notifications.sink import LoggingNotificationSink, NotificationSink
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

_REQUIRED_TEXT = {
    "name": "Name",
    "email": "Email",
    "position": "Position",
    "department": "Department",
}
_OPTIONAL_TEXT = ("contact_number", "address", "profile_image")
_EDITABLE = {f.name for f in fields(Employee)} - {"id"}


def _clean_employee_fields(data: dict, *, partial: bool) -> dict:
    unknown = set(data) - _EDITABLE
    if "id" in data:
        raise ValidationError("Employee id cannot be changed")
    if unknown:
        raise ValidationError(f"Unknown employee fields: {', '.join(sorted(unknown))}")

    out: dict = {}
    for key, label in _REQUIRED_TEXT.items():
        if key in data or not partial:
            out[key] = require_non_empty(data.get(key), label)
    if "email" in out and "@" not in out["email"]:
        raise ValidationError("Email is not valid")
    if "joining_date" in data or not partial:
        out["joining_date"] = require_iso_date(data.get("joining_date"), "Joining date")
    if "salary" in data or not partial:
        out["salary"] = require_non_negative(data.get("salary"), "Salary")
    if "status" in data or not partial:
        out["status"] = require_choice(data.get("status", EmployeeStatus.ACTIVE), EmployeeStatus, "Status")
    for key in _OPTIONAL_TEXT:
        if key in data:
            out[key] = data[key] or None
    return out


class EmployeeService:
    """Use case: manage employees (staff page)."""

    def __init__(self, employees: EmployeeRepository, *, notifier: Optional[NotificationSink] = None):
        self._employees = employees
        self._notifier = notifier or LoggingNotificationSink()

    def list_employees(self):
        return self._employees.list_all()

    def get_employee(self, employee_id: str) -> Result[Employee]:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            return Result.not_found(f"Employee not found: {employee_id}")
        return Result.success(employee)

    def add_employee(self, data: dict) -> Result[Employee]:
        try:
            clean = _clean_employee_fields(data, partial=False)
        except ValidationError as e:
            self._notifier.error(f"Failed to add employee: {e}")
            return Result.invalid(str(e))

        employee = self._employees.create(clean)
        logger.info("Employee %s added", employee.id)
        self._notifier.success(f"Added employee: {employee.name}")
        return Result.success(employee)

    def update_employee(self, employee_id: str, changes: dict) -> Result[Employee]:
        try:
            clean = _clean_employee_fields(changes, partial=True)
        except ValidationError as e:
            self._notifier.error(f"Failed to update employee: {e}")
            return Result.invalid(str(e))

        employee = self._employees.update(employee_id, clean)
        if not employee:
            logger.warning("Update of unknown employee %s", employee_id)
            self._notifier.error(f"Employee not found: {employee_id}")
            return Result.not_found(f"Employee not found: {employee_id}")

        self._notifier.success(f"Updated employee: {employee.name}")
        return Result.success(employee)

    def delete_employee(self, employee_id: str) -> Result[Employee]:
        employee = self._employees.delete(employee_id)
        if not employee:
            logger.warning("Delete of unknown employee %s", employee_id)
            self._notifier.error(f"Employee not found: {employee_id}")
            return Result.not_found(f"Employee not found: {employee_id}")

        logger.info("Employee %s deleted", employee_id)
        self._notifier.success(f"Deleted employee: {employee.name}")
        return Result.success(employee)

    def filter_employees(self, **criteria) -> list[Employee]:
        """Case-insensitive substring match on every non-empty criterion."""
        wanted = {k: str(getattr(v, "value", v)).lower() for k, v in criteria.items() if v not in (None, "")}
        unknown = set(wanted) - {f.name for f in fields(Employee)}
        if unknown:
            raise ValidationError(f"Unknown employee fields: {', '.join(sorted(unknown))}")

        def matches(e: Employee) -> bool:
            for key, needle in wanted.items():
                value = getattr(e, key)
                if value is None:
                    return False
                if needle not in str(getattr(value, "value", value)).lower():
                    return False
            return True

        return [e for e in self._employees.list_all() if matches(e)]

    def search_employees(
        self,
        query: str = "",
        *,
        status: Optional[str] = None,
        department: Optional[str] = None,
    ) -> list[Employee]:
        """Staff page search: query over name/email/id/position plus exact filters."""
        q = (query or "").strip().lower()
        out = []
        for e in self._employees.list_all():
            if q and not any(q in s.lower() for s in (e.name, e.email, e.id, e.position)):
                continue
            if status and e.status.value != status:
                continue
            if department and e.department != department:
                continue
            out.append(e)
        return out

    def list_departments(self) -> list[str]:
        seen: dict[str, None] = {}
        for e in self._employees.list_all():
            seen.setdefault(e.department, None)
        return list(seen)
