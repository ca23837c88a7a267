#!/usr/bin/env python3
"""CLI entry point for crossword generation.

Reads a word pool from XLSX, places it on a square grid, enforces the
minimum-word threshold (retrying with reshuffled pools when a seed is given)
and writes JSON, PDF, clue XLSX, puzzle SVG and answer SVG outputs.
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path
from typing import Sequence

from models import CrosswordError, CrosswordResult, WordEntry

DEFAULT_GRID_SIZE = 15
DEFAULT_MAX_WORDS = 30
DEFAULT_MIN_WORDS = 10


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Generate a crossword puzzle from an XLSX word list."
    )
    p.add_argument("input", help="Path to XLSX file with numbers/clues/words")
    p.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Output base path (default: input with .json extension)",
    )
    p.add_argument("--grid-size", type=int, default=DEFAULT_GRID_SIZE,
                   help=f"Grid size NxN (default: {DEFAULT_GRID_SIZE})")
    p.add_argument("--max-words", type=int, default=DEFAULT_MAX_WORDS,
                   help=f"Words handed to the placer per attempt (default: {DEFAULT_MAX_WORDS})")
    p.add_argument("--min-words", type=int, default=DEFAULT_MIN_WORDS,
                   help=f"Minimum placed words to accept (default: {DEFAULT_MIN_WORDS})")
    p.add_argument("--seed", type=int, default=None,
                   help="Shuffle the pool with this seed (default: keep workbook order)")
    p.add_argument("--retries", type=int, default=10,
                   help="Shuffled attempts when a seed is given (default: 10)")
    p.add_argument("--max-attempts", type=int, default=None,
                   help="Candidate evaluation budget per run (default: engine ceiling)")
    p.add_argument("--title", default="CROSSWORD",
                   help='Title text (default: "CROSSWORD")')
    return p


def main(argv: list[str] | None = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    if args.grid_size < 1:
        parser.error("--grid-size must be a positive integer")

    t0 = time.time()
    try:
        _run(args, t0)
    except CrosswordError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def build_puzzle(
    words: Sequence[WordEntry],
    grid_size: int,
    max_words: int = DEFAULT_MAX_WORDS,
    min_words: int = DEFAULT_MIN_WORDS,
    seed: int | None = None,
    retries: int = 10,
    max_attempts: int | None = None,
) -> CrosswordResult:
    """Run the placer until *min_words* are placed; return the best attempt.

    Without a seed the pool order is fixed, so a single attempt is made.
    Raises CrosswordError if the best attempt is below the threshold.
    """
    from grid_placer import MAX_ATTEMPTS, generate_crossword

    budget = MAX_ATTEMPTS if max_attempts is None else max_attempts
    rng = random.Random(seed) if seed is not None else None
    attempts = max(1, retries) if rng is not None else 1

    best: CrosswordResult | None = None
    for attempt in range(1, attempts + 1):
        pool = list(words)
        if rng is not None:
            rng.shuffle(pool)
        result = generate_crossword(pool[:max_words], grid_size, max_attempts=budget)

        if best is None or (result.word_count, result.density) > (best.word_count, best.density):
            best = result
        if best.word_count >= min_words:
            break
        print(
            f"Attempt {attempt}/{attempts}: placed {result.word_count} words "
            f"(need {min_words})",
            file=sys.stderr,
        )

    if best.word_count < min_words:
        raise CrosswordError(
            f"Could only place {best.word_count} words (minimum {min_words} required)"
        )
    return best


def _output_all(result: CrosswordResult, title: str, output_path: str) -> None:
    """Generate all output files in an 'output' folder: JSON, PDF, XLSX, puzzle SVG, answer SVG."""
    from grid_builder import build_clue_lists, build_grid
    from json_export import write_puzzle_json
    from pdf_renderer import render_pdf
    from svg_renderer import render_answer_svg, render_puzzle_svg
    from xlsx_writer import write_clues_xlsx

    grid = build_grid(result.placed, result.grid_size)
    across, down = build_clue_lists(result.placed)

    stem = Path(output_path).stem
    out_dir = Path(output_path).parent / "output"
    out_dir.mkdir(exist_ok=True)

    json_path = str(out_dir / f"{stem}.json")
    pdf_path = str(out_dir / f"{stem}.pdf")
    xlsx_path = str(out_dir / f"{stem}_clues.xlsx")
    puzzle_svg_path = str(out_dir / f"{stem}_puzzle.svg")
    answer_svg_path = str(out_dir / f"{stem}_answer.svg")

    subtitle = f"{result.word_count} words, grid density {result.density:.0f}%"

    write_puzzle_json(result, json_path)
    render_pdf(grid, across, down, title, pdf_path, subtitle=subtitle)
    write_clues_xlsx(across, down, xlsx_path, unplaced=result.unplaced, grid=grid)
    render_puzzle_svg(grid, puzzle_svg_path)
    render_answer_svg(grid, answer_svg_path)

    for path in (json_path, pdf_path, xlsx_path, puzzle_svg_path, answer_svg_path):
        print(f"Output: {path}", file=sys.stderr)


def _run(args, t0: float) -> None:
    from xlsx_reader import read_words

    input_path = Path(args.input)
    output_path = args.output or str(input_path.with_suffix(".json"))

    words = read_words(input_path, args.grid_size)
    print(f"Read {len(words)} valid word entries", file=sys.stderr)
    print(
        f"Generating {args.grid_size}x{args.grid_size} crossword"
        + (f" (seed={args.seed})" if args.seed is not None else "")
        + "...",
        file=sys.stderr,
    )

    result = build_puzzle(
        words,
        args.grid_size,
        max_words=args.max_words,
        min_words=args.min_words,
        seed=args.seed,
        retries=args.retries,
        max_attempts=args.max_attempts,
    )
    if result.truncated:
        print("Warning: attempt budget exhausted, result is partial", file=sys.stderr)

    _output_all(result, args.title, output_path)

    elapsed = time.time() - t0
    print(
        f"Placed {result.word_count} words, "
        f"grid density {result.density:.2f}%, "
        f"time {elapsed:.1f}s",
        file=sys.stderr,
    )


if __name__ == "__main__":
    main()
