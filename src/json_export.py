"""Serialize a generated crossword as the grid and words JSON blobs."""

from __future__ import annotations

import json
from pathlib import Path

from models import CrosswordResult, PlacedWord


def grid_rows(result: CrosswordResult) -> list[dict]:
    """One ``{"List": [...]}`` object per row; ``None`` marks a black cell."""
    return [{"List": list(row)} for row in result.letters]


def word_record(word: PlacedWord) -> dict:
    return {
        "word": word.answer,
        "display_word": word.display,
        "clue": word.clue_text,
        "row": word.row,
        "col": word.col,
        "dir": word.direction.code,
        "orientation": word.direction.label,
        "length": word.length,
        "number": word.number,
    }


def puzzle_document(result: CrosswordResult) -> dict:
    """The stored puzzle record: both blobs are embedded as JSON strings."""
    return {
        "grid_size": result.grid_size,
        "grid_JSON": json.dumps(grid_rows(result), ensure_ascii=False),
        "words_JSON": json.dumps(
            [word_record(w) for w in result.placed], ensure_ascii=False
        ),
        "grid_density": round(result.density, 2),
        "total_words": result.word_count,
    }


def write_puzzle_json(result: CrosswordResult, output_path: str | Path) -> None:
    doc = puzzle_document(result)
    Path(output_path).write_text(json.dumps(doc, ensure_ascii=False, indent=2), encoding="utf-8")
