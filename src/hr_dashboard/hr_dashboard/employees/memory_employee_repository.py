from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..core.constants import EMPLOYEE_ID_PREFIX
from ..store.memory_store import DataStore, StoreState, highest_employee_seq
from .model import Department, Employee


def next_employee_seq(state: StoreState) -> int:
    """One above every id this store has ever issued or loaded."""
    return max(state.last_employee_seq, highest_employee_seq(state.employees)) + 1


class InMemoryEmployeeRepository:
    def __init__(self, store: DataStore):
        self._store = store

    def list_all(self) -> Sequence[Employee]:
        return list(self._store.snapshot().employees)

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        for e in self._store.snapshot().employees:
            if e.id == employee_id:
                return e
        return None

    def create(self, fields: dict) -> Employee:
        def change(state):
            seq = next_employee_seq(state)
            employee = Employee(id=f"{EMPLOYEE_ID_PREFIX}{seq}", **fields)
            return replace(state, employees=state.employees + (employee,), last_employee_seq=seq), employee

        return self._store.mutate(change)

    def update(self, employee_id: str, changes: dict) -> Optional[Employee]:
        def change(state):
            items = list(state.employees)
            for idx, e in enumerate(items):
                if e.id == employee_id:
                    items[idx] = replace(e, **changes)
                    return replace(state, employees=tuple(items)), items[idx]
            return state, None

        return self._store.mutate(change)

    def delete(self, employee_id: str) -> Optional[Employee]:
        def change(state):
            found = next((e for e in state.employees if e.id == employee_id), None)
            if not found:
                return state, None
            remaining = tuple(e for e in state.employees if e.id != employee_id)
            return replace(state, employees=remaining), found

        return self._store.mutate(change)


class InMemoryDepartmentRepository:
    def __init__(self, store: DataStore):
        self._store = store

    def list_all(self) -> Sequence[Department]:
        return list(self._store.snapshot().departments)
