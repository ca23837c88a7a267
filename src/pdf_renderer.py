"""Render a generated crossword to a printable PDF using ReportLab.

Page 1: title banner, the empty grid and the clues (ACROSS on the left,
DOWN on the right). Page 2: the answer key.
"""

from __future__ import annotations

from dataclasses import dataclass
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen.canvas import Canvas
from reportlab.platypus import Paragraph

from models import CellType, Grid, NumberedClue

PAGE_W, PAGE_H = letter  # 612 x 792
MARGIN = 36
BANNER_H = 28.0
SECTION_HEADER_H = 14.0
COLUMN_GUTTER = 18.0


@dataclass
class LayoutParams:
    """Page measurements; derived positions come from the properties."""

    grid_size: int
    cell_size: float = 24.0
    number_font_size: float = 8.0
    clue_font_size: float = 9.5
    title: str = "CROSSWORD"
    subtitle: str = ""

    @property
    def grid_dim(self) -> float:
        return self.cell_size * self.grid_size

    @property
    def banner_y(self) -> float:
        return PAGE_H - MARGIN - BANNER_H

    @property
    def grid_x(self) -> float:
        return (PAGE_W - self.grid_dim) / 2

    @property
    def grid_top(self) -> float:
        return self.banner_y - (22 if self.subtitle else 10)

    @property
    def clue_top(self) -> float:
        return self.grid_top - self.grid_dim - 14

    @property
    def clue_col_w(self) -> float:
        return (PAGE_W - 2 * MARGIN - COLUMN_GUTTER) / 2


def render_pdf(
    grid: Grid,
    across: list[NumberedClue],
    down: list[NumberedClue],
    title: str,
    output_path: str,
    subtitle: str = "",
) -> None:
    """Lay out and draw the puzzle page and the answer key page."""
    layout = _fit_layout(across, down, _initial_layout(grid.size, title, subtitle))

    c = Canvas(output_path, pagesize=letter)

    _draw_banner(c, layout.title, layout.subtitle)
    _draw_grid(c, grid, layout, show_answers=False)
    _draw_clue_column(c, "ACROSS", across, MARGIN, layout)
    _draw_clue_column(c, "DOWN", down, MARGIN + layout.clue_col_w + COLUMN_GUTTER, layout)
    c.showPage()

    answer_layout = LayoutParams(
        grid_size=layout.grid_size,
        cell_size=layout.cell_size,
        number_font_size=layout.number_font_size,
        title="ANSWER KEY",
    )
    _draw_banner(c, answer_layout.title, "")
    _draw_grid(c, grid, answer_layout, show_answers=True)
    c.showPage()

    c.save()


def _initial_layout(grid_size: int, title: str, subtitle: str) -> LayoutParams:
    lp = LayoutParams(grid_size=grid_size, title=title, subtitle=subtitle)
    if grid_size <= 15:
        lp.cell_size, lp.number_font_size = 24.0, 8.0
    elif grid_size <= 20:
        lp.cell_size, lp.number_font_size = 20.0, 7.0
    else:
        lp.cell_size, lp.number_font_size = 16.0, 6.0
    return lp


def _fit_layout(
    across: list[NumberedClue],
    down: list[NumberedClue],
    layout: LayoutParams,
) -> LayoutParams:
    """Shrink clue font, then cells, until both clue columns fit on page 1."""
    for _ in range(16):
        needed = max(_column_height(across, layout), _column_height(down, layout))
        if needed <= layout.clue_top - MARGIN:
            break
        if layout.clue_font_size > 6.5:
            layout.clue_font_size -= 0.5
        elif layout.cell_size > 12:
            layout.cell_size -= 1
        else:
            break
    return layout


def _column_height(clues: list[NumberedClue], layout: LayoutParams) -> float:
    style = _clue_style(layout)
    height = SECTION_HEADER_H + 4
    for clue in clues:
        _, h = Paragraph(_clue_markup(clue), style).wrap(layout.clue_col_w, 10000)
        height += h + style.spaceAfter
    return height


def _clue_style(layout: LayoutParams) -> ParagraphStyle:
    return ParagraphStyle(
        "ClueStyle",
        fontName="Helvetica",
        fontSize=layout.clue_font_size,
        leading=layout.clue_font_size + 1.5,
        spaceAfter=1.0,
    )


def _clue_markup(clue: NumberedClue) -> str:
    """Format clue as ``<b>N.</b> text`` with XML escaping."""
    return f"<b>{clue.number}.</b> {escape(clue.clue_text)}"


# ─── Drawing ────────────────────────────────────────────────────────────────


def _draw_banner(c, title: str, subtitle: str) -> None:
    """Black banner with the centered title; optional subtitle underneath."""
    width = PAGE_W - 2 * MARGIN
    y = PAGE_H - MARGIN - BANNER_H

    c.setFillColorRGB(0, 0, 0)
    c.rect(MARGIN, y, width, BANNER_H, fill=1, stroke=0)
    c.setFillColorRGB(1, 1, 1)
    c.setFont("Helvetica-Bold", 16)
    c.drawCentredString(PAGE_W / 2, y + (BANNER_H - 16) / 2 + 2, title)

    if subtitle:
        c.setFillColorRGB(0, 0, 0)
        c.setFont("Helvetica", 9)
        c.drawCentredString(PAGE_W / 2, y - 12, subtitle)


def _draw_grid(c, grid: Grid, layout: LayoutParams, show_answers: bool) -> None:
    """Black/white cells, start numbers and (for the key) letters."""
    cs = layout.cell_size
    x0, y0 = layout.grid_x, layout.grid_top

    for r, row in enumerate(grid.cells):
        for col, cell in enumerate(row):
            cx = x0 + col * cs
            cy = y0 - (r + 1) * cs

            if cell.cell_type == CellType.BLACK:
                c.setFillColorRGB(0, 0, 0)
                c.rect(cx, cy, cs, cs, fill=1, stroke=0)
                continue

            c.setFillColorRGB(1, 1, 1)
            c.setStrokeColorRGB(0, 0, 0)
            c.setLineWidth(0.5)
            c.rect(cx, cy, cs, cs, fill=1, stroke=1)

            c.setFillColorRGB(0, 0, 0)
            if cell.number is not None:
                c.setFont("Helvetica-Bold", layout.number_font_size)
                c.drawString(cx + 1.5, cy + cs - layout.number_font_size - 1, str(cell.number))

            if show_answers and cell.letter:
                font_size = cs * 0.45
                c.setFont("Helvetica", font_size)
                lw = stringWidth(cell.letter, "Helvetica", font_size)
                c.drawString(cx + cs * 0.55 - lw / 2, cy + cs * 0.42 - font_size / 2, cell.letter)

    c.setStrokeColorRGB(0, 0, 0)
    c.setLineWidth(1.5)
    c.rect(x0, y0 - layout.grid_dim, layout.grid_dim, layout.grid_dim, fill=0, stroke=1)


def _draw_clue_column(
    c, heading: str, clues: list[NumberedClue], x: float, layout: LayoutParams,
) -> None:
    width = layout.clue_col_w
    y = layout.clue_top

    c.setFillColorRGB(0, 0, 0)
    c.rect(x, y - SECTION_HEADER_H, width, SECTION_HEADER_H, fill=1, stroke=0)
    c.setFillColorRGB(1, 1, 1)
    c.setFont("Helvetica-Bold", 9)
    c.drawString(x + 4, y - SECTION_HEADER_H + 3.5, heading)
    y -= SECTION_HEADER_H + 4

    style = _clue_style(layout)
    for clue in clues:
        p = Paragraph(_clue_markup(clue), style)
        _, h = p.wrap(width, 10000)
        p.drawOn(c, x, y - h)
        y -= h + style.spaceAfter
