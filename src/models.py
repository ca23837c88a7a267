"""Data models for the crossword placement engine."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

WorkingGrid = list[list[Optional[str]]]


class CellType(Enum):
    BLACK = "BLACK"
    WHITE = "WHITE"


class Direction(Enum):
    ACROSS = "ACROSS"
    DOWN = "DOWN"

    @property
    def code(self) -> str:
        """Single-letter code used in stored word lists ('H' or 'V')."""
        return "H" if self is Direction.ACROSS else "V"

    @property
    def label(self) -> str:
        return "Horizontal" if self is Direction.ACROSS else "Vertical"


def normalize_answer(raw: str) -> str:
    """Uppercase, drop diacritics, strip everything that is not a letter."""
    decomposed = unicodedata.normalize("NFKD", raw.upper())
    return "".join(c for c in decomposed if c.isalpha())


@dataclass(frozen=True)
class WordEntry:
    """A word from the input pool. ``answer`` is uppercase, letters only."""

    answer: str
    display: str
    clue_text: str
    difficulty: str | None = None

    @classmethod
    def create(
        cls, display: str, clue_text: str, difficulty: str | None = None
    ) -> WordEntry:
        """Build an entry from a display form, normalizing the answer."""
        return cls(
            answer=normalize_answer(display),
            display=display.strip(),
            clue_text=clue_text,
            difficulty=difficulty,
        )

    @property
    def length(self) -> int:
        return len(self.answer)


@dataclass(frozen=True)
class PlacedWord:
    """A word written into the grid. ``number`` is 0 until numbering runs."""

    answer: str
    display: str
    clue_text: str
    row: int
    col: int
    direction: Direction
    length: int
    number: int = 0

    @classmethod
    def from_entry(
        cls, entry: WordEntry, row: int, col: int, direction: Direction
    ) -> PlacedWord:
        return cls(
            answer=entry.answer,
            display=entry.display or entry.answer,
            clue_text=entry.clue_text,
            row=row,
            col=col,
            direction=direction,
            length=entry.length,
        )

    def cells(self) -> list[tuple[int, int]]:
        dr = 1 if self.direction == Direction.DOWN else 0
        dc = 1 if self.direction == Direction.ACROSS else 0
        return [(self.row + dr * i, self.col + dc * i) for i in range(self.length)]


@dataclass
class Cell:
    """A single cell in the rendered crossword grid."""

    cell_type: CellType = CellType.BLACK
    letter: str | None = None
    number: int | None = None


@dataclass
class Grid:
    """An NxN crossword grid of Cell objects."""

    size: int
    cells: list[list[Cell]] = field(default_factory=list)

    @classmethod
    def create(cls, size: int) -> Grid:
        """Create a grid of all-BLACK cells."""
        cells = [[Cell() for _ in range(size)] for _ in range(size)]
        return cls(size=size, cells=cells)


@dataclass(frozen=True)
class NumberedClue:
    """A clue with its grid-assigned display number."""

    number: int
    clue_text: str
    answer: str
    direction: Direction


@dataclass
class CrosswordResult:
    """Outcome of one generation run.

    ``letters`` holds N rows of N optional letters (``None`` is a black cell),
    ``placed`` is numbered and sorted by (row, col), ``density`` is a
    percentage of filled cells.
    """

    grid_size: int
    letters: WorkingGrid
    placed: list[PlacedWord]
    density: float
    attempts: int = 0
    truncated: bool = False
    unplaced: list[WordEntry] = field(default_factory=list)

    @property
    def word_count(self) -> int:
        return len(self.placed)


class CrosswordError(Exception):
    """Fatal error during crossword generation."""
