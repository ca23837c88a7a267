"""Crossword word placement: longest-first greedy fill, first legal candidate wins."""

from __future__ import annotations

from collections import namedtuple
from dataclasses import dataclass, field
from typing import Sequence

from grid_builder import compute_density, number_words
from models import CrosswordResult, Direction, PlacedWord, WordEntry, WorkingGrid

# Ceiling on candidate evaluations across a whole run.
MAX_ATTEMPTS = 50_000

Candidate = namedtuple("Candidate", ["row", "col", "direction"])


@dataclass
class PlacementContext:
    """Mutable state owned by a single placement run."""

    grid_size: int
    working: WorkingGrid
    placed: list[PlacedWord] = field(default_factory=list)
    skipped: list[WordEntry] = field(default_factory=list)
    attempts: int = 0
    max_attempts: int = MAX_ATTEMPTS
    truncated: bool = False

    @classmethod
    def create(cls, grid_size: int, max_attempts: int = MAX_ATTEMPTS) -> PlacementContext:
        working: WorkingGrid = [[None] * grid_size for _ in range(grid_size)]
        return cls(grid_size=grid_size, working=working, max_attempts=max_attempts)


def generate_crossword(
    words: Sequence[WordEntry],
    grid_size: int,
    max_attempts: int = MAX_ATTEMPTS,
) -> CrosswordResult:
    """Place *words* on a *grid_size* square grid, then number and score it.

    Never raises for words that do not fit; they end up in ``unplaced``.
    """
    if grid_size < 1:
        raise ValueError(f"Grid size must be positive, got {grid_size}")

    ctx = place_words(words, grid_size, max_attempts=max_attempts)
    return CrosswordResult(
        grid_size=grid_size,
        letters=ctx.working,
        placed=number_words(ctx.placed),
        density=compute_density(ctx.working),
        attempts=ctx.attempts,
        truncated=ctx.truncated,
        unplaced=list(ctx.skipped),
    )


# ── Word sequencing ──────────────────────────────────────────────────

def sequence_words(words: Sequence[WordEntry]) -> list[WordEntry]:
    """Longest first. Ties keep their input order."""
    return sorted(words, key=lambda w: len(w.answer), reverse=True)


# ── Greedy placement ─────────────────────────────────────────────────

def place_words(
    words: Sequence[WordEntry],
    grid_size: int,
    max_attempts: int = MAX_ATTEMPTS,
) -> PlacementContext:
    """Place each word at its first legal candidate; never revisit a placement.

    ``ctx.placed`` is in placement order (not numbered yet).
    """
    ctx = PlacementContext.create(grid_size, max_attempts)
    ordered = sequence_words(words)

    for index, entry in enumerate(ordered):
        if not _place_one(entry, ctx):
            ctx.skipped.append(entry)
        if ctx.truncated:
            ctx.skipped.extend(ordered[index + 1:])
            break

    return ctx


def _place_one(entry: WordEntry, ctx: PlacementContext) -> bool:
    """Try the candidates for *entry* in order; write the first legal one."""
    answer = entry.answer
    if not answer:
        return False

    first = not ctx.placed
    for cand in find_candidates(answer, ctx.working, ctx.grid_size, first):
        if ctx.attempts >= ctx.max_attempts:
            ctx.truncated = True
            return False
        ctx.attempts += 1
        if is_valid_placement(answer, cand.row, cand.col, cand.direction,
                              ctx.working, ctx.grid_size, require_intersection=not first):
            _place_on_grid(answer, cand.row, cand.col, cand.direction, ctx.working)
            ctx.placed.append(PlacedWord.from_entry(entry, cand.row, cand.col, cand.direction))
            return True
    return False


# ── Candidate finding ─────────────────────────────────────────────────

def find_candidates(
    answer: str, working: WorkingGrid, grid_size: int, first: bool,
) -> list[Candidate]:
    """Enumerate start positions for *answer*, in grid-scan order.

    The first word gets a single centered across slot. Later words get one
    across and one down start for every (filled cell, matching letter offset)
    pair: rows outer, columns inner, offsets in word order. Duplicates are kept.
    """
    if first:
        return [Candidate(grid_size // 2, (grid_size - len(answer)) // 2, Direction.ACROSS)]

    candidates: list[Candidate] = []
    for r in range(grid_size):
        for c in range(grid_size):
            existing = working[r][c]
            if existing is None or existing not in answer:
                continue
            for k, ch in enumerate(answer):
                if ch != existing:
                    continue
                if c - k >= 0:
                    candidates.append(Candidate(r, c - k, Direction.ACROSS))
                if r - k >= 0:
                    candidates.append(Candidate(r - k, c, Direction.DOWN))
    return candidates


# ── Validation ────────────────────────────────────────────────────────

def is_valid_placement(
    answer: str, row: int, col: int, direction: Direction,
    working: WorkingGrid, grid_size: int, require_intersection: bool,
) -> bool:
    """Check bounds, head/tail isolation, letter agreement and side contact.

    Read-only: the grid is never touched here.
    """
    length = len(answer)
    dr = 1 if direction == Direction.DOWN else 0
    dc = 1 if direction == Direction.ACROSS else 0

    if not (0 <= row < grid_size and 0 <= col < grid_size):
        return False
    if row + dr * length > grid_size or col + dc * length > grid_size:
        return False

    # Cell before start and cell after end must be empty/edge
    if _is_filled(working, grid_size, row - dr, col - dc):
        return False
    if _is_filled(working, grid_size, row + dr * length, col + dc * length):
        return False

    # Perpendicular offsets
    pr, pc = dc, dr

    intersections = 0
    for i, letter in enumerate(answer):
        r = row + dr * i
        c = col + dc * i
        existing = working[r][c]
        if existing is not None:
            if existing != letter:
                return False
            intersections += 1
        elif (_is_filled(working, grid_size, r + pr, c + pc)
              or _is_filled(working, grid_size, r - pr, c - pc)):
            return False

    if require_intersection and intersections == 0:
        return False
    return True


def _is_filled(working: WorkingGrid, grid_size: int, r: int, c: int) -> bool:
    return 0 <= r < grid_size and 0 <= c < grid_size and working[r][c] is not None


# ── Grid manipulation ─────────────────────────────────────────────────

def _place_on_grid(
    answer: str, row: int, col: int, direction: Direction, working: WorkingGrid,
) -> None:
    dr = 1 if direction == Direction.DOWN else 0
    dc = 1 if direction == Direction.ACROSS else 0
    for i, letter in enumerate(answer):
        working[row + dr * i][col + dc * i] = letter
