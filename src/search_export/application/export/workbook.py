"""Application export – turn CSV report text into an .xlsx workbook."""
from __future__ import annotations

import csv
import io
import re

import openpyxl
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Font

__all__ = ["MAX_COLUMN_WIDTH", "csv_to_workbook", "sheet_title"]

MAX_COLUMN_WIDTH = 50
_SHEET_TITLE_LIMIT = 31
_INVALID_SHEET_CHARS = re.compile(r"[\[\]:*?/\\]")


def sheet_title(name: str) -> str:
    cleaned = _INVALID_SHEET_CHARS.sub("_", name).strip("'")
    return cleaned[:_SHEET_TITLE_LIMIT] or "Sheet1"


def csv_to_workbook(raw: str, sheet_name: str = "Sheet1") -> bytes:
    """Parse *raw* as CSV and return workbook bytes.

    Cells are written as the raw strings from the report: no number or
    date coercion, so ids with leading zeros survive, and values starting
    with ``=`` stay text instead of becoming formulas.
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = sheet_title(sheet_name)

    reader = csv.reader(io.StringIO(raw.lstrip("\ufeff"), newline=""))
    for row_idx, row in enumerate(reader, start=1):
        for col_idx, value in enumerate(row, start=1):
            cell = ws.cell(row=row_idx, column=col_idx, value=ILLEGAL_CHARACTERS_RE.sub("", value))
            cell.data_type = "s"
            if row_idx == 1:
                cell.font = Font(bold=True)

    for col_cells in ws.columns:
        max_len = max(len(str(cell.value or "")) for cell in col_cells)
        ws.column_dimensions[col_cells[0].column_letter].width = min(max_len + 2, MAX_COLUMN_WIDTH)

    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()
