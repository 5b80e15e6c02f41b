from __future__ import annotations

from dataclasses import replace
from typing import Callable, Optional, Sequence

from ..store.memory_store import DataStore
from .model import SalaryRecord


class InMemorySalaryRepository:
    def __init__(self, store: DataStore):
        self._store = store

    def list_all(self) -> Sequence[SalaryRecord]:
        return list(self._store.snapshot().salary_records)

    def list_for_employee(self, employee_id: str) -> Sequence[SalaryRecord]:
        return [s for s in self._store.snapshot().salary_records if s.employee_id == employee_id]

    def get_by_id(self, record_id: str) -> Optional[SalaryRecord]:
        for s in self._store.snapshot().salary_records:
            if s.id == record_id:
                return s
        return None

    def update(self, record_id: str, transform: Callable[[SalaryRecord], SalaryRecord]) -> Optional[SalaryRecord]:
        def change(state):
            items = list(state.salary_records)
            for idx, s in enumerate(items):
                if s.id == record_id:
                    # transform may raise; the state is then left untouched
                    items[idx] = transform(s)
                    return replace(state, salary_records=tuple(items)), items[idx]
            return state, None

        return self._store.mutate(change)
