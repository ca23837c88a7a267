"""Write placed crossword clues and the solved grid to an XLSX file."""

from __future__ import annotations

import openpyxl
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from models import CellType, Grid, NumberedClue, WordEntry

BLACK_FILL = PatternFill(fill_type="solid", start_color="000000", end_color="000000")


def write_clues_xlsx(
    across: list[NumberedClue],
    down: list[NumberedClue],
    output_path: str,
    unplaced: list[WordEntry] | None = None,
    grid: Grid | None = None,
) -> None:
    """Write across and down clues to an Excel workbook.

    Numbering is embedded in the clue cell: '1. Clue text'.
    Answers are in column B.
    If *grid* is provided, a "Grid" sheet shows the solution with black cells.
    If *unplaced* is provided, a "Not placed" sheet lists words that didn't fit.
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Clues"

    header_font = Font(bold=True, size=12)
    row = 1

    for title, clues in (("ACROSS", across), ("DOWN", down)):
        ws.cell(row=row, column=1, value=title).font = header_font
        row += 1
        for clue in clues:
            ws.cell(row=row, column=1, value=f"{clue.number}. {clue.clue_text}")
            ws.cell(row=row, column=2, value=clue.answer)
            row += 1
        # Blank separator
        row += 1

    ws.column_dimensions["A"].width = 60
    ws.column_dimensions["B"].width = 15

    if grid is not None:
        _write_grid_sheet(wb, grid)

    if unplaced:
        ws2 = wb.create_sheet(title="Not placed")
        ws2.cell(row=1, column=1, value="Clue").font = header_font
        ws2.cell(row=1, column=2, value="Word").font = header_font
        for i, entry in enumerate(unplaced, start=2):
            ws2.cell(row=i, column=1, value=entry.clue_text)
            ws2.cell(row=i, column=2, value=entry.display or entry.answer)
        ws2.column_dimensions["A"].width = 60
        ws2.column_dimensions["B"].width = 15

    wb.save(output_path)


def _write_grid_sheet(wb, grid: Grid) -> None:
    ws = wb.create_sheet(title="Grid")
    centered = Alignment(horizontal="center", vertical="center")

    for r in range(grid.size):
        for c in range(grid.size):
            cell = grid.cells[r][c]
            xl_cell = ws.cell(row=r + 1, column=c + 1)
            if cell.cell_type == CellType.BLACK:
                xl_cell.fill = BLACK_FILL
            else:
                xl_cell.value = cell.letter
                xl_cell.alignment = centered

    for c in range(grid.size):
        ws.column_dimensions[get_column_letter(c + 1)].width = 4
