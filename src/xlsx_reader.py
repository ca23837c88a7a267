"""Read and pre-filter a crossword word pool from an XLSX workbook.

Expected columns: A number (ordering hint), B clue, C word, D difficulty (optional).
"""

from __future__ import annotations

import sys
from pathlib import Path

import openpyxl

from models import CrosswordError, WordEntry, normalize_answer

MIN_WORD_LENGTH = 3


def read_words(path: str | Path, grid_size: int | None = None) -> list[WordEntry]:
    """Open *path*, detect header, parse rows, filter and return word entries.

    Rows keep their workbook order; the number column is only used to tell
    data rows from header rows.
    """
    path = Path(path)
    if not path.exists():
        raise CrosswordError(f"File not found: {path}")

    wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    try:
        ws = wb.active
        header_row = _detect_header_row(ws)
        entries: list[WordEntry] = []

        for row in ws.iter_rows(min_row=header_row + 1, values_only=True):
            entry = _parse_row(row)
            if entry is not None:
                entries.append(entry)
    finally:
        wb.close()

    return _validate_and_filter(entries, grid_size)


def _parse_row(row: tuple) -> WordEntry | None:
    if not row or row[0] is None:
        return None
    try:
        int(row[0])
    except (ValueError, TypeError):
        return None

    clue_text = _cell_text(row, 1)
    display = _cell_text(row, 2)
    if not normalize_answer(display):
        return None
    difficulty = _cell_text(row, 3).lower() or None
    return WordEntry.create(display, clue_text, difficulty)


def _cell_text(row: tuple, index: int) -> str:
    if len(row) <= index or row[index] is None:
        return ""
    return str(row[index]).strip()


def _detect_header_row(sheet) -> int:
    """Return the 1-based index of the header row (0 when there is none).

    The header is the row before the first row whose column A is an int.
    Falls back to row 1.
    """
    for index, row in enumerate(
        sheet.iter_rows(min_row=1, max_row=20, max_col=1, values_only=True), start=1
    ):
        try:
            int(row[0])
            return index - 1
        except (ValueError, TypeError, IndexError):
            continue
    return 1


def _validate_and_filter(
    entries: list[WordEntry], grid_size: int | None
) -> list[WordEntry]:
    """Drop short, over-long (when *grid_size* is given) and duplicate words."""
    seen_answers: set[str] = set()
    result: list[WordEntry] = []

    for entry in entries:
        if entry.length < MIN_WORD_LENGTH:
            print(
                f"Warning: skipping '{entry.answer}' (too short, <{MIN_WORD_LENGTH} letters)",
                file=sys.stderr,
            )
            continue
        if grid_size is not None and entry.length > grid_size:
            print(
                f"Warning: skipping '{entry.answer}' (too long for {grid_size}x{grid_size} grid)",
                file=sys.stderr,
            )
            continue
        if entry.answer in seen_answers:
            print(
                f"Warning: duplicate word '{entry.answer}', skipping",
                file=sys.stderr,
            )
            continue
        seen_answers.add(entry.answer)
        result.append(entry)

    if not result:
        raise CrosswordError("No valid word entries after filtering")

    return result
