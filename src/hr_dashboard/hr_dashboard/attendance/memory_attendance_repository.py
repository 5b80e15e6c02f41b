from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from ..store.memory_store import DataStore
from .model import Attendance


class InMemoryAttendanceRepository:
    """Read-mostly view of the attendance collection (records are immutable)."""

    def __init__(self, store: DataStore):
        self._store = store

    def list_all(self) -> Sequence[Attendance]:
        return list(self._store.snapshot().attendance)

    def list_for_employee(self, employee_id: str) -> Sequence[Attendance]:
        return [a for a in self._store.snapshot().attendance if a.employee_id == employee_id]

    def list_for_date(self, work_date: str) -> Sequence[Attendance]:
        return [a for a in self._store.snapshot().attendance if a.date == work_date]

    def add(self, record: Attendance) -> Attendance:
        def change(state):
            return replace(state, attendance=state.attendance + (record,)), record

        return self._store.mutate(change)
