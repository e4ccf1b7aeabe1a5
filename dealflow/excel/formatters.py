"""
Cell-level formatting for deal workbooks: headers, values, KPI cards, column widths.
"""
from __future__ import annotations

from openpyxl.cell.cell import Cell
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from dealflow.excel.styles import (
    HEADER_FONT, HEADER_FILL, HEADER_BORDER,
    DATA_FONT, MUTED_FONT, TOTAL_FONT,
    THIN_BORDER, TOTAL_BORDER,
    ALTERNATE_FILL, TOTAL_FILL,
    KPI_VALUE_FONT, KPI_LABEL_FONT,
    CENTER, LEFT, RIGHT,
    HIGHLIGHT_FILLS,
)

UNDISCLOSED = "Undisclosed"

# Column kind -> Excel number format; kinds not listed are left-aligned text
NUMBER_FORMATS = {
    "currency": '"$"#,##0',
    "percent": '0.0"%"',
    "number": "#,##0",
    "date": "yyyy-mm-dd",
}


def style_header(ws: Worksheet, row: int, last_col: int, first_col: int = 1) -> None:
    """Navy header band across [first_col, last_col]."""
    for col in range(first_col, last_col + 1):
        cell = ws.cell(row=row, column=col)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = CENTER
        cell.border = HEADER_BORDER


def _apply_number_format(cell: Cell, kind: str) -> None:
    fmt = NUMBER_FORMATS.get(kind)
    if fmt:
        cell.number_format = fmt
        cell.alignment = RIGHT
    else:
        cell.alignment = LEFT


def write_value(
    ws: Worksheet,
    row: int,
    col: int,
    value,
    kind: str = "text",
    total: bool = False,
    highlight: str | None = None,
) -> Cell:
    """Write one table cell with border, banding and number format.

    An unknown currency amount is shown as "Undisclosed", never as $0.
    """
    cell = ws.cell(row=row, column=col)
    if value is None and kind == "currency":
        cell.value = UNDISCLOSED
        cell.font = MUTED_FONT
        cell.alignment = RIGHT
    else:
        cell.value = "" if value is None else value
        cell.font = TOTAL_FONT if total else DATA_FONT
        _apply_number_format(cell, kind)
    cell.border = TOTAL_BORDER if total else THIN_BORDER

    fill = HIGHLIGHT_FILLS.get(highlight) if highlight else None
    if fill is not None:
        cell.fill = fill
    elif total:
        cell.fill = TOTAL_FILL
    elif row % 2 == 0:
        cell.fill = ALTERNATE_FILL
    return cell


def kpi_card(ws: Worksheet, row: int, col: int, value, label: str, kind: str = "number") -> None:
    """Large KPI figure with a small caption underneath."""
    figure = ws.cell(row=row, column=col, value=value)
    figure.font = KPI_VALUE_FONT
    figure.alignment = CENTER
    if kind in NUMBER_FORMATS:
        figure.number_format = NUMBER_FORMATS[kind]

    caption = ws.cell(row=row + 1, column=col, value=label)
    caption.font = KPI_LABEL_FONT
    caption.alignment = CENTER


def fit_columns(ws: Worksheet, floor: int = 10, ceiling: int = 60) -> None:
    """Size each column to its longest rendered value, clamped to [floor, ceiling]."""
    widths: dict[int, int] = {}
    for row in ws.iter_rows():
        for cell in row:
            if cell.value is None:
                continue
            widths[cell.column] = max(widths.get(cell.column, 0), len(str(cell.value)))
    for col, longest in widths.items():
        ws.column_dimensions[get_column_letter(col)].width = min(max(longest + 2, floor), ceiling)
