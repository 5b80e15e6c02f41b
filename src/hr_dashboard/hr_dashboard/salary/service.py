from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Optional

from ..common.validators import require_choice, require_iso_date, require_non_negative
from ..core.enums import SalaryStatus
from ..core.exceptions import ValidationError
from ..core.result import Result
from ..employees.repository import EmployeeRepository
from ..notifications.sink import LoggingNotificationSink, NotificationSink
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import SalaryRecord, SalaryTotals
from .repository import SalaryRepository

logger = logging.getLogger(__name__)

_AMOUNTS = ("base_salary", "overtime_pay", "deductions", "bonus")
_EDITABLE = set(_AMOUNTS) | {"status", "payment_date"}


class SalaryService:
    def __init__(
        self,
        salaries: SalaryRepository,
        employees: EmployeeRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
        notifier: Optional[NotificationSink] = None,
    ):
        self._salaries = salaries
        self._employees = employees
        self._calculator = calculator or StandardPayrollCalculator()
        self._notifier = notifier or LoggingNotificationSink()

    def get_salary_record(self, record_id: str) -> Result[SalaryRecord]:
        record = self._salaries.get_by_id(record_id)
        if not record:
            return Result.not_found(f"Salary record not found: {record_id}")
        return Result.success(record)

    def get_employee_salary_records(self, employee_id: str) -> list[SalaryRecord]:
        return list(self._salaries.list_for_employee(employee_id))

    def _apply_changes(self, record: SalaryRecord, changes: dict) -> SalaryRecord:
        clean: dict = {}
        for key in _AMOUNTS:
            if key in changes:
                clean[key] = require_non_negative(changes[key], key.replace("_", " ").capitalize())
        if "status" in changes:
            clean["status"] = require_choice(changes["status"], SalaryStatus, "Status")
        if "payment_date" in changes:
            clean["payment_date"] = (
                require_iso_date(changes["payment_date"], "Payment date") if changes["payment_date"] else None
            )

        updated = replace(record, **clean)
        if updated.status == SalaryStatus.PAID and not updated.payment_date:
            raise ValidationError("Payment date is required for a paid salary record")

        total = self._calculator.total(
            base_salary=updated.base_salary,
            overtime_pay=updated.overtime_pay,
            bonus=updated.bonus,
            deductions=updated.deductions,
        )
        return replace(updated, total_salary=total)

    def update_salary_record(self, record_id: str, changes: dict) -> Result[SalaryRecord]:
        """Merge ``changes`` into the record and recompute its total."""
        unknown = set(changes) - _EDITABLE - {"total_salary"}
        if unknown:
            message = f"Fields cannot be edited: {', '.join(sorted(unknown))}"
            self._notifier.error(message)
            return Result.invalid(message)

        try:
            record = self._salaries.update(record_id, lambda r: self._apply_changes(r, changes))
        except ValidationError as e:
            self._notifier.error(f"Failed to update salary record: {e}")
            return Result.invalid(str(e))

        if not record:
            logger.warning("Update of unknown salary record %s", record_id)
            self._notifier.error(f"Salary record not found: {record_id}")
            return Result.not_found(f"Salary record not found: {record_id}")

        logger.info("Salary record %s updated, total=%.2f", record.id, record.total_salary)
        self._notifier.success("Salary record updated")
        return Result.success(record)

    def list_salary_records(
        self,
        *,
        month: Optional[str] = None,
        status: Optional[str] = None,
        search: str = "",
        order: str = "desc",
    ) -> list[SalaryRecord]:
        """Salary page listing: month/status/search filters, sorted by total."""
        names = {e.id: e.name.lower() for e in self._employees.list_all()}
        q = (search or "").strip().lower()

        rows = []
        for r in self._salaries.list_all():
            if month and r.month != month:
                continue
            if status and r.status.value != status:
                continue
            if q and q not in r.employee_id.lower() and q not in names.get(r.employee_id, ""):
                continue
            rows.append(r)

        rows.sort(key=lambda r: r.total_salary, reverse=(order != "asc"))
        return rows

    @staticmethod
    def totals(records: Iterable[SalaryRecord]) -> SalaryTotals:
        records = list(records)
        pending = [r.total_salary for r in records if r.status == SalaryStatus.PENDING]
        paid = [r.total_salary for r in records if r.status == SalaryStatus.PAID]
        overall = sum(r.total_salary for r in records)
        return SalaryTotals(
            pending_total=round(sum(pending), 2),
            paid_total=round(sum(paid), 2),
            average=round(overall / len(records), 2) if records else 0.0,
            pending_count=len(pending),
            paid_count=len(paid),
            record_count=len(records),
        )
