"""Post-processing: crossword numbering, fill density, rendering grid and clue lists."""

from __future__ import annotations

from dataclasses import replace

from models import CellType, Direction, Grid, NumberedClue, PlacedWord, WorkingGrid


def number_words(placed: list[PlacedWord]) -> list[PlacedWord]:
    """Sort by (row, col) and assign crossword numbers.

    An across and a down word starting on the same cell share one number.
    """
    ordered = sorted(placed, key=lambda p: (p.row, p.col))
    numbers: dict[tuple[int, int], int] = {}
    counter = 1
    numbered: list[PlacedWord] = []

    for entry in ordered:
        key = (entry.row, entry.col)
        if key not in numbers:
            numbers[key] = counter
            counter += 1
        numbered.append(replace(entry, number=numbers[key]))

    return numbered


def compute_density(letters: WorkingGrid) -> float:
    """Percentage of filled cells in a square working grid."""
    size = len(letters)
    if size == 0:
        return 0.0
    filled = sum(1 for row in letters for letter in row if letter is not None)
    return filled / (size * size) * 100


def build_grid(placed: list[PlacedWord], grid_size: int) -> Grid:
    """Create a Grid, write letters from each PlacedWord and mark start numbers."""
    grid = Grid.create(grid_size)

    for entry in placed:
        for (r, c), letter in zip(entry.cells(), entry.answer):
            cell = grid.cells[r][c]
            cell.cell_type = CellType.WHITE
            if cell.letter is not None and cell.letter != letter:
                raise ValueError(
                    f"Letter conflict at ({r},{c}): existing '{cell.letter}' vs '{letter}'"
                )
            cell.letter = letter
        if entry.number:
            grid.cells[entry.row][entry.col].number = entry.number

    return grid


def build_clue_lists(
    placed: list[PlacedWord],
) -> tuple[list[NumberedClue], list[NumberedClue]]:
    """Split numbered words into across/down clue lists sorted by number."""
    across: list[NumberedClue] = []
    down: list[NumberedClue] = []

    for entry in placed:
        clue = NumberedClue(
            number=entry.number,
            clue_text=entry.clue_text,
            answer=entry.answer,
            direction=entry.direction,
        )
        if entry.direction == Direction.ACROSS:
            across.append(clue)
        else:
            down.append(clue)

    across.sort(key=lambda c: c.number)
    down.sort(key=lambda c: c.number)
    return across, down
