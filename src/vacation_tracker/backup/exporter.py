"""Spreadsheet export of the employee and vacation collections."""

from __future__ import annotations

import io
from datetime import datetime
from typing import Optional, Sequence

import pandas as pd
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from ..employees.model import Employee
from ..vacations.model import Vacation

EMPLOYEE_COLUMNS = ["Employee ID", "Name", "Yearly Allowance", "Used Days", "Remaining Days", "Color"]
VACATION_COLUMNS = ["Vacation ID", "Employee ID", "Employee Name", "Start Date", "End Date", "Working Days", "Note"]

HEADER_FILL = PatternFill(fill_type="solid", fgColor="1C5975")
HEADER_FONT = Font(bold=True, color="FFFFFF")
MAX_COLUMN_WIDTH = 30


def _text(value: Optional[str]) -> str:
    """Cell-safe text: openpyxl refuses control characters in worksheets."""
    return ILLEGAL_CHARACTERS_RE.sub("", value or "")


def _style_sheet(ws) -> None:
    for cell in ws[1]:
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL

    # Values starting with "=" would otherwise be stored as live formulas
    for row in ws.iter_rows(min_row=2):
        for cell in row:
            if cell.data_type == "f":
                cell.data_type = "s"

    for idx, column in enumerate(ws.columns, start=1):
        longest = max((len(str(c.value)) for c in column if c.value is not None), default=0)
        ws.column_dimensions[get_column_letter(idx)].width = min(longest + 2, MAX_COLUMN_WIDTH)


def build_workbook(
    employees: Sequence[Employee],
    vacations: Sequence[Vacation],
    *,
    generated_at: datetime,
) -> bytes:
    """Render an .xlsx with Employees, Vacations and Summary sheets."""

    names = {e.id: _text(e.name) for e in employees}

    employees_df = pd.DataFrame(
        [[_text(e.id), _text(e.name), e.allowance, e.used, e.remaining, _text(e.color)] for e in employees],
        columns=EMPLOYEE_COLUMNS,
    )
    vacations_df = pd.DataFrame(
        [
            [
                _text(v.id),
                _text(v.employee_id),
                names.get(v.employee_id, "Unknown"),
                v.start_date.isoformat(),
                v.end_date.isoformat(),
                v.working_days,
                _text(v.note),
            ]
            for v in vacations
        ],
        columns=VACATION_COLUMNS,
    )
    summary_df = pd.DataFrame(
        [
            ["Generated At", generated_at.isoformat()],
            ["Total Employees", len(employees)],
            ["Total Vacation Records", len(vacations)],
            ["Total Working Days Booked", sum(v.working_days for v in vacations)],
        ],
        columns=["Backup Information", "Value"],
    )

    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        employees_df.to_excel(writer, index=False, sheet_name="Employees")
        vacations_df.to_excel(writer, index=False, sheet_name="Vacations")
        summary_df.to_excel(writer, index=False, sheet_name="Summary")
        for ws in writer.sheets.values():
            _style_sheet(ws)

    return out.getvalue()
