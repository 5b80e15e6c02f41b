from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import SalaryStatus


@dataclass(frozen=True)
class SalaryRecord:
    """Domain entity: monthly salary record of an employee."""

    id: str
    employee_id: str
    month: str
    year: int
    base_salary: float
    overtime_pay: float
    deductions: float
    bonus: float
    total_salary: float
    status: SalaryStatus
    payment_date: Optional[str] = None


@dataclass(frozen=True)
class SalaryTotals:
    pending_total: float
    paid_total: float
    average: float
    pending_count: int
    paid_count: int
    record_count: int
