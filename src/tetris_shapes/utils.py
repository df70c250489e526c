"""Text rendering helpers for debugging shapes."""

from __future__ import annotations

from typing import Dict, Iterable

from .shape import Cell, Color, Shape


EMPTY_GLYPH = "."

# Initial letters except where they would collide (GREEN/GREY) or where a
# heavier glyph reads better.
COLOR_GLYPHS: Dict[Color, str] = {
    Color.BLACK: "#",
    Color.RED: "R",
    Color.GREEN: "G",
    Color.YELLOW: "Y",
    Color.BLUE: "B",
    Color.PURPLE: "P",
    Color.CYAN: "C",
    Color.GREY: "g",
}


def cell_glyph(cell: Cell) -> str:
    """Return the single character used to draw ``cell``."""

    if cell is None:
        return EMPTY_GLYPH
    return COLOR_GLYPHS[cell]


def render_shape(shape: Shape) -> str:
    """Return ``shape`` as text, one newline-terminated line per row."""

    return "".join("".join(cell_glyph(c) for c in row) + "\n" for row in shape.rows)


def render_shapes(shapes: Iterable[Shape]) -> str:
    """Render several shapes separated by blank lines."""

    return "".join(render_shape(shape) + "\n" for shape in shapes)


__all__ = ["COLOR_GLYPHS", "EMPTY_GLYPH", "cell_glyph", "render_shape", "render_shapes"]
