from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class Employee:
    """Domain entity: one employee.

    Note: plain data object, storage lives in the repository layer.
    """

    id: str
    name: str
    email: str
    position: str
    department: str
    joining_date: str
    salary: float
    status: EmployeeStatus
    contact_number: Optional[str] = None
    address: Optional[str] = None
    profile_image: Optional[str] = None


@dataclass(frozen=True)
class Department:
    id: str
    name: str
    manager: str
    employee_count: int
