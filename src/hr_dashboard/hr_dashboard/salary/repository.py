from __future__ import annotations

from typing import Callable, Optional, Protocol, Sequence

from .model import SalaryRecord


class SalaryRepository(Protocol):
    def list_all(self) -> Sequence[SalaryRecord]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[SalaryRecord]:
        raise NotImplementedError

    def get_by_id(self, record_id: str) -> Optional[SalaryRecord]:
        raise NotImplementedError

    def update(self, record_id: str, transform: Callable[[SalaryRecord], SalaryRecord]) -> Optional[SalaryRecord]:
        """Replace the record with ``transform(current)``; None if the id is unknown."""
        raise NotImplementedError
