from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, replace
from typing import Callable, Iterable, Tuple, TypeVar

from ..attendance.model import Attendance
from ..core.constants import EMPLOYEE_ID_PREFIX, EMPLOYEE_ID_START
from ..employees.model import Department, Employee
from ..salary.model import SalaryRecord

logger = logging.getLogger(__name__)

R = TypeVar("R")


def highest_employee_seq(employees: Iterable[Employee]) -> int:
    """Highest numeric `EMP-` suffix among ``employees``."""
    highest = EMPLOYEE_ID_START - 1
    for e in employees:
        suffix = e.id[len(EMPLOYEE_ID_PREFIX):] if e.id.startswith(EMPLOYEE_ID_PREFIX) else ""
        if suffix.isdigit():
            highest = max(highest, int(suffix))
    return highest


@dataclass(frozen=True)
class StoreState:
    """Immutable snapshot of every collection held by the store."""

    employees: Tuple[Employee, ...] = ()
    attendance: Tuple[Attendance, ...] = ()
    salary_records: Tuple[SalaryRecord, ...] = ()
    departments: Tuple[Department, ...] = ()
    # never decreases; ids of deleted employees are not reissued
    last_employee_seq: int = EMPLOYEE_ID_START - 1


class DataStore:
    """Process-wide in-memory store.

    Readers get the current immutable ``StoreState``. Writers run one at a
    time under a lock, wait for the configured latency, build the next state
    from the current one and swap it in with a single assignment, so a
    reader sees either the old or the new state and never a partial one.
    """

    def __init__(self, *, latency_seconds: float = 0.0, sleep: Callable[[float], None] = time.sleep):
        self._state = StoreState()
        self._write_lock = threading.RLock()
        self._latency = max(float(latency_seconds), 0.0)
        self._sleep = sleep

    @property
    def latency_seconds(self) -> float:
        return self._latency

    def snapshot(self) -> StoreState:
        return self._state

    def load(self, **collections) -> None:
        """Replace whole collections at once (used by the seeder)."""
        with self._write_lock:
            state = replace(self._state, **{k: tuple(v) for k, v in collections.items()})
            if "employees" in collections:
                seq = max(state.last_employee_seq, highest_employee_seq(state.employees))
                state = replace(state, last_employee_seq=seq)
            self._state = state
            logger.info(
                "Store loaded: %d employees, %d attendance, %d salary records",
                len(self._state.employees),
                len(self._state.attendance),
                len(self._state.salary_records),
            )

    def mutate(self, change: Callable[[StoreState], Tuple[StoreState, R]]) -> R:
        """Apply ``change`` atomically and return its result.

        ``change`` receives the current state and returns ``(next_state,
        result)``. Returning the same state object means nothing changed.
        """
        with self._write_lock:
            if self._latency:
                self._sleep(self._latency)
            next_state, result = change(self._state)
            self._state = next_state
            return result
