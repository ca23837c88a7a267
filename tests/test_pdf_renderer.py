"""Tests for pdf_renderer.py."""

import re

from models import Direction, NumberedClue, WordEntry
from grid_builder import build_clue_lists, build_grid, number_words
from grid_placer import generate_crossword
from pdf_renderer import LayoutParams, _fit_layout, _initial_layout, render_pdf


def _make_simple_puzzle():
    words = [
        WordEntry.create(w, f"Clue for {w} & friends")
        for w in ("Montanha", "Sardinha", "Castelo", "Janela", "Praia")
    ]
    result = generate_crossword(words, 9)
    grid = build_grid(result.placed, result.grid_size)
    across, down = build_clue_lists(result.placed)
    return grid, across, down


class TestRenderPdf:
    def test_creates_valid_pdf(self, tmp_path):
        grid, across, down = _make_simple_puzzle()
        path = tmp_path / "puzzle.pdf"
        render_pdf(grid, across, down, "TESTE", str(path))
        assert path.read_bytes().startswith(b"%PDF-")

    def test_two_pages(self, tmp_path):
        grid, across, down = _make_simple_puzzle()
        path = tmp_path / "puzzle.pdf"
        render_pdf(grid, across, down, "TESTE", str(path), subtitle="5 words")
        pages = re.findall(rb"/Type\s*/Page[^s]", path.read_bytes())
        assert len(pages) == 2

    def test_letter_page_size(self, tmp_path):
        grid, across, down = _make_simple_puzzle()
        path = tmp_path / "puzzle.pdf"
        render_pdf(grid, across, down, "TESTE", str(path))
        content = path.read_bytes()
        assert b"612" in content
        assert b"792" in content

    def test_empty_puzzle(self, tmp_path):
        grid = build_grid(number_words([]), 15)
        path = tmp_path / "empty.pdf"
        render_pdf(grid, [], [], "VAZIO", str(path))
        assert path.stat().st_size > 0


class TestLayout:
    def test_cell_size_scaling(self):
        assert _initial_layout(15, "T", "").cell_size == 24.0
        assert _initial_layout(20, "T", "").cell_size == 20.0
        assert _initial_layout(25, "T", "").cell_size == 16.0

    def test_grid_dim(self):
        assert LayoutParams(grid_size=15, cell_size=24.0).grid_dim == 360.0

    def test_subtitle_pushes_grid_down(self):
        plain = LayoutParams(grid_size=15)
        with_subtitle = LayoutParams(grid_size=15, subtitle="30 words")
        assert with_subtitle.grid_top < plain.grid_top


class TestFitLayout:
    def test_no_change_when_fits(self):
        across = [NumberedClue(1, "Short clue", "TEST", Direction.ACROSS)]
        down = [NumberedClue(2, "Short clue", "TEST", Direction.DOWN)]
        layout = _initial_layout(15, "T", "")
        original = (layout.clue_font_size, layout.cell_size)
        layout = _fit_layout(across, down, layout)
        assert (layout.clue_font_size, layout.cell_size) == original

    def test_shrinks_for_many_clues(self):
        long_text = "A rather long clue that will certainly need to wrap over lines"
        across = [NumberedClue(i, long_text, "TEST", Direction.ACROSS) for i in range(1, 60)]
        layout = _initial_layout(15, "T", "")
        original_font = layout.clue_font_size
        layout = _fit_layout(across, [], layout)
        assert layout.clue_font_size < original_font
