"""Excel summary of generated models."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from schema_learner.model_emission import TypeDefinition

from .constants import TYPES_COLUMNS, TYPES_SHEET_NAME


def write_model_workbook(definitions: Sequence[TypeDefinition], output_path: Path | str) -> Path:
    """Write a workbook listing every field of every type definition."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = TYPES_SHEET_NAME

    for column_index, name in enumerate(TYPES_COLUMNS, start=1):
        cell = sheet.cell(row=1, column=column_index, value=name)
        cell.style = "Headline 3"

    row_index = 2
    for definition in definitions:
        if not definition.fields:
            sheet.cell(row=row_index, column=1, value=definition.name)
            row_index += 1
            continue
        for field in definition.fields:
            sheet.cell(row=row_index, column=1, value=definition.name)
            sheet.cell(row=row_index, column=2, value=field.name)
            sheet.cell(row=row_index, column=3, value=field.json_key)
            sheet.cell(row=row_index, column=4, value=field.field_type.describe())
            row_index += 1

    _fit_column_widths(sheet)
    sheet.freeze_panes = "A2"

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()


def _fit_column_widths(sheet: Worksheet) -> None:
    for column_index in range(1, len(TYPES_COLUMNS) + 1):
        letter = get_column_letter(column_index)
        longest = max(
            (len(str(cell.value)) for cell in sheet[letter] if cell.value is not None),
            default=0,
        )
        sheet.column_dimensions[letter].width = max(12, min(longest + 4, 60))
