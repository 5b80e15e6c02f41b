from __future__ import annotations

from abc import ABC, abstractmethod


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def total(self, *, base_salary: float, overtime_pay: float, bonus: float, deductions: float) -> float:
        raise NotImplementedError
