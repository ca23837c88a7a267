"""Render a crossword grid as standalone SVG (puzzle or answer key)."""

from __future__ import annotations

from models import Cell, CellType, Grid

FONT_FAMILY = "Helvetica, Arial, sans-serif"


def svg_markup(
    grid: Grid,
    show_answers: bool = False,
    cell_size: float | None = None,
) -> str:
    """Return the SVG document for *grid*. Empty cells are drawn black."""
    if cell_size is None:
        cell_size = _default_cell_size(grid.size)
    grid_dim = cell_size * grid.size

    parts = [
        '<?xml version="1.0" encoding="UTF-8"?>\n',
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{grid_dim}" '
        f'height="{grid_dim}" viewBox="0 0 {grid_dim} {grid_dim}">\n',
    ]
    for r, row in enumerate(grid.cells):
        for c, cell in enumerate(row):
            parts.extend(_cell_elements(
                cell, c * cell_size, r * cell_size, cell_size,
                _number_font_size(grid.size), show_answers,
            ))

    # Outer border
    parts.append(
        f'  <rect x="0" y="0" width="{grid_dim}" height="{grid_dim}" '
        f'fill="none" stroke="black" stroke-width="1.5"/>\n'
    )
    parts.append("</svg>\n")
    return "".join(parts)


def render_svg(
    grid: Grid,
    output_path: str,
    show_answers: bool = False,
    cell_size: float | None = None,
) -> None:
    """Write the crossword grid to an SVG file."""
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(svg_markup(grid, show_answers=show_answers, cell_size=cell_size))


def render_puzzle_svg(grid: Grid, output_path: str) -> None:
    render_svg(grid, output_path, show_answers=False)


def render_answer_svg(grid: Grid, output_path: str) -> None:
    render_svg(grid, output_path, show_answers=True)


def _cell_elements(
    cell: Cell, x: float, y: float, size: float,
    number_font: float, show_answers: bool,
) -> list[str]:
    rect = f'  <rect x="{x}" y="{y}" width="{size}" height="{size}" '
    if cell.cell_type == CellType.BLACK:
        return [rect + 'fill="black"/>\n']

    elements = [rect + 'fill="white" stroke="black" stroke-width="0.5"/>\n']
    if cell.number is not None:
        elements.append(
            f'  <text x="{x + 1.5}" y="{y + number_font + 1}" '
            f'font-family="{FONT_FAMILY}" font-weight="bold" '
            f'font-size="{number_font}" fill="black">{cell.number}</text>\n'
        )
    if show_answers and cell.letter:
        elements.append(
            f'  <text x="{x + size * 0.55}" y="{y + size * 0.58}" '
            f'text-anchor="middle" dominant-baseline="central" '
            f'font-family="{FONT_FAMILY}" font-size="{size * 0.45}" '
            f'fill="black">{cell.letter}</text>\n'
        )
    return elements


def _default_cell_size(grid_size: int) -> float:
    if grid_size <= 15:
        return 24.0
    elif grid_size <= 20:
        return 20.0
    else:
        return 16.0


def _number_font_size(grid_size: int) -> float:
    if grid_size <= 13:
        return 8.5
    elif grid_size <= 15:
        return 8.0
    elif grid_size <= 20:
        return 7.0
    else:
        return 6.0
