from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from ..core.enums import ExportPeriod


@dataclass(frozen=True)
class ExportOptions:
    """What the caller asks to export.

    ``start_date``/``end_date`` only matter for the custom period;
    an empty ``employee_ids`` means every employee.
    """

    period: ExportPeriod
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    employee_ids: Sequence[str] = field(default_factory=tuple)
    include_details: bool = True


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of ISO dates."""

    start: str
    end: str

    def contains(self, iso_date: str) -> bool:
        return self.start <= iso_date <= self.end


@dataclass(frozen=True)
class ExportResult:
    success: bool
    filename: str
    row_count: int = 0
    path: Optional[Path] = None
