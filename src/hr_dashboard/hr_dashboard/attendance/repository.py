from __future__ import annotations

from typing import Protocol, Sequence

from .model import Attendance


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[Attendance]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[Attendance]:
        raise NotImplementedError

    def list_for_date(self, work_date: str) -> Sequence[Attendance]:
        raise NotImplementedError

    def add(self, record: Attendance) -> Attendance:
        raise NotImplementedError
