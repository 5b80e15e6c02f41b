from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional, Protocol, Sequence

import pandas as pd

logger = logging.getLogger(__name__)

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


class SpreadsheetWriter(Protocol):
    def write(self, rows: Sequence[dict], *, sheet_name: str, filename: str, columns: Optional[Sequence[str]] = None) -> Path:
        raise NotImplementedError


def _frame(rows: Sequence[dict], columns: Optional[Sequence[str]]) -> pd.DataFrame:
    # columns keep the header row even when there is nothing to export
    return pd.DataFrame(list(rows), columns=list(columns) if columns else None)


def to_excel_bytes(rows: Sequence[dict], *, sheet_name: str, columns: Optional[Sequence[str]] = None) -> io.BytesIO:
    """Workbook in memory (for send_file)."""
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        _frame(rows, columns).to_excel(writer, index=False, sheet_name=sheet_name)
    output.seek(0)
    return output


class ExcelSpreadsheetWriter:
    """Writes one-sheet .xlsx files into ``export_dir`` (existing files are overwritten)."""

    def __init__(self, export_dir: Path | str):
        self._export_dir = Path(export_dir)

    @property
    def export_dir(self) -> Path:
        return self._export_dir

    def write(self, rows: Sequence[dict], *, sheet_name: str, filename: str, columns: Optional[Sequence[str]] = None) -> Path:
        self._export_dir.mkdir(parents=True, exist_ok=True)
        path = self._export_dir / filename
        with pd.ExcelWriter(path, engine="openpyxl") as writer:
            _frame(rows, columns).to_excel(writer, index=False, sheet_name=sheet_name)
        logger.info("Wrote %d rows to %s", len(rows), path)
        return path
