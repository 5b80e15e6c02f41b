from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Department, Employee


class EmployeeRepository(Protocol):
    """Repository interface for employees.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, fields: dict) -> Employee:
        """Store a new employee; the repository assigns the id."""
        raise NotImplementedError

    def update(self, employee_id: str, changes: dict) -> Optional[Employee]:
        raise NotImplementedError

    def delete(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError


class DepartmentRepository(Protocol):
    def list_all(self) -> Sequence[Department]:
        raise NotImplementedError
