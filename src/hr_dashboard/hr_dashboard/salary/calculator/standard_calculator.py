from __future__ import annotations

from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: base + overtime + bonus - deductions, rounded to cents."""

    def total(self, *, base_salary: float, overtime_pay: float, bonus: float, deductions: float) -> float:
        return round(float(base_salary) + float(overtime_pay) + float(bonus) - float(deductions), 2)
