"""
DealWorkbook — builder for the styled deal flow workbook.
"""
from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import pandas as pd
from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from dealflow.excel.styles import (
    TITLE_FONT, SUBTITLE_FONT, SECTION_FONT, MUTED_FONT,
    LEGEND_BOLD_FONT, DATA_FONT,
    LEGEND_FILL, THIN_BORDER, WRAP,
)
from dealflow.excel.formatters import fit_columns, kpi_card, style_header, write_value

Column = tuple[str, str, str]                    # (key, kind, header)
Highlighter = Callable[[int, dict], Optional[str]]

TOTALLED_KINDS = ("currency", "number")


class DealWorkbook:
    """Sheets are appended in call order; the workbook's default sheet is reused for the first one."""

    def __init__(self) -> None:
        self.wb = Workbook()
        self._fresh = True

    def sheet(self, title: str) -> Worksheet:
        if self._fresh:
            self._fresh = False
            ws = self.wb.active
            ws.title = title
            return ws
        return self.wb.create_sheet(title=title)

    # ------------------------------------------------------------------
    # Headings
    # ------------------------------------------------------------------

    def heading(self, ws: Worksheet, title: str, subtitle: str, span: int = 6) -> int:
        """Title and subtitle across the first `span` columns. Returns the first free row."""
        for row, text, font in ((1, title, TITLE_FONT), (2, subtitle, SUBTITLE_FONT)):
            ws.cell(row=row, column=1, value=text).font = font
            ws.merge_cells(start_row=row, start_column=1, end_row=row, end_column=span)
        return 4

    def section(self, ws: Worksheet, row: int, title: str) -> int:
        ws.cell(row=row, column=1, value=title).font = SECTION_FONT
        return row + 2

    def kpis(self, ws: Worksheet, row: int, cards: list[tuple], spacing: int = 2) -> int:
        """One KPI card per (value, label, kind), left to right. Returns the row after the cards."""
        for i, (value, label, kind) in enumerate(cards):
            kpi_card(ws, row, 1 + i * spacing, value, label, kind)
        return row + 3

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def table(
        self,
        ws: Worksheet,
        start_row: int,
        columns: list[Column],
        rows: list[dict],
        highlight: Highlighter | None = None,
        total: bool = False,
        freeze: bool = True,
        empty_text: str = "No matching deals",
    ) -> int:
        """Header, one line per row dict, optional TOTAL line. Returns the row after the table."""
        for col, (_, _, header) in enumerate(columns, 1):
            ws.cell(row=start_row, column=col, value=header)
        style_header(ws, start_row, len(columns))

        row = start_row + 1
        if not rows:
            ws.cell(row=row, column=1, value=empty_text).font = MUTED_FONT
            row += 1
        for idx, record in enumerate(rows):
            self._table_row(ws, row, columns, record, highlight(idx, record) if highlight else None)
            row += 1

        if total and rows:
            self._total_row(ws, row, columns, rows)
            row += 1

        fit_columns(ws)
        if freeze:
            ws.freeze_panes = ws.cell(row=start_row + 1, column=1)
        return row

    @staticmethod
    def _table_row(ws: Worksheet, row: int, columns: list[Column], record: dict, hl: str | None) -> None:
        for col, (key, kind, _) in enumerate(columns, 1):
            value = record.get(key)
            if value is not None and pd.isna(value):
                value = None
            write_value(ws, row, col, value, kind, highlight=hl)

    @staticmethod
    def _total_row(ws: Worksheet, row: int, columns: list[Column], rows: list[dict]) -> None:
        frame = pd.DataFrame(rows)
        write_value(ws, row, 1, "TOTAL", total=True)
        for col, (key, kind, _) in enumerate(columns[1:], 2):
            if kind in TOTALLED_KINDS and key in frame.columns:
                write_value(ws, row, col, float(pd.to_numeric(frame[key], errors="coerce").sum()), kind, total=True)
            else:
                write_value(ws, row, col, "", total=True)

    def key_table(self, ws: Worksheet, start_row: int, items: list[tuple[str, str]],
                  headers: tuple[str, str] = ("Type", "What It Includes")) -> int:
        """Two-column legend (term, explanation). Returns the row after a blank spacer."""
        for col, header in enumerate(headers, 1):
            ws.cell(row=start_row, column=col, value=header)
        style_header(ws, start_row, 2)

        for offset, (term, explanation) in enumerate(items, 1):
            for col, text, font in ((1, term, LEGEND_BOLD_FONT), (2, explanation, DATA_FONT)):
                cell = ws.cell(row=start_row + offset, column=col, value=text)
                cell.font = font
                cell.fill = LEGEND_FILL
                cell.border = THIN_BORDER
                if col == 2:
                    cell.alignment = WRAP

        ws.column_dimensions["A"].width = 22
        ws.column_dimensions["B"].width = 75
        return start_row + len(items) + 2

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def save(self, path: str | Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.wb.save(path)
        return path
