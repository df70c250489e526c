"""Pure transformations on :class:`~tetris_shapes.shape.Shape` values.

The helpers fall into three groups:

``rotate_shape``
    Quarter turn computed as ``transpose(reverse(rows))``.

``shift_shape`` / ``pad_shape`` / ``pad_shape_to``
    Grow a shape with empty cells.  Horizontal padding is expressed as vertical
    padding of the transposed grid so that only one padding routine exists.

``overlaps`` / ``combine``
    Detect and merge occupied cells of two shapes.

None of the functions mutate their arguments; each returns a new shape.
"""

from __future__ import annotations

import logging
from typing import Callable, Tuple

import numpy as np

from .shape import Cell, Color, Row, Shape, empty_shape, occupancy, size


LOGGER = logging.getLogger(__name__)

# Colour written where two occupied cells are merged.
CLASH_COLOR = Color.BLACK


class ShapeOverlapError(ValueError):
    """Raised by a strict :func:`combine` when the inputs overlap."""


def _transpose(rows: Tuple[Row, ...]) -> Tuple[Row, ...]:
    return tuple(zip(*rows))


def _check_offset(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def rotate_shape(shape: Shape) -> Shape:
    """Return ``shape`` rotated by 90 degrees.

    Row ``i`` of the result is column ``i`` of the input read bottom to top,
    so width and height swap.  Four rotations give back the original shape.
    """

    return Shape(_transpose(tuple(reversed(shape.rows))))


def rotate_shape_n(shape: Shape, turns: int) -> Shape:
    """Apply :func:`rotate_shape` ``turns`` times (wrapped modulo four)."""

    for _ in range(turns % 4):
        shape = rotate_shape(shape)
    return shape


def vertical_padding(rows: int, shape: Shape) -> Tuple[Shape, Shape]:
    """Return ``(top_padded, bottom_padded)`` copies of ``shape``.

    ``rows`` empty rows of the shape's current width are prepended in the first
    variant and appended in the second.
    """

    _check_offset("rows", rows)
    if rows == 0:
        return shape, shape
    width, _ = size(shape)
    padding = empty_shape(width, rows).rows
    return Shape(padding + shape.rows), Shape(shape.rows + padding)


def horizontal_padding(cols: int, shape: Shape) -> Tuple[Shape, Shape]:
    """Return ``(left_padded, right_padded)`` copies of ``shape``.

    Columns are added by padding the transposed grid vertically and then
    transposing back.
    """

    _check_offset("cols", cols)
    if cols == 0:
        return shape, shape
    top, bottom = vertical_padding(cols, Shape(_transpose(shape.rows)))
    return Shape(_transpose(top.rows)), Shape(_transpose(bottom.rows))


def pad_top(rows: int, shape: Shape) -> Shape:
    return vertical_padding(rows, shape)[0]


def pad_bottom(rows: int, shape: Shape) -> Shape:
    return vertical_padding(rows, shape)[1]


def pad_left(cols: int, shape: Shape) -> Shape:
    return horizontal_padding(cols, shape)[0]


def pad_right(cols: int, shape: Shape) -> Shape:
    return horizontal_padding(cols, shape)[1]


def shift_shape(cols: int, rows: int, shape: Shape) -> Shape:
    """Add ``rows`` empty rows above and ``cols`` empty columns left of ``shape``.

    Raises:
        ValueError: If either offset is negative.
    """

    return pad_left(cols, pad_top(rows, shape))


def pad_shape(cols: int, rows: int, shape: Shape) -> Shape:
    """Add ``rows`` empty rows below and ``cols`` empty columns right of ``shape``.

    Raises:
        ValueError: If either offset is negative.
    """

    return pad_right(cols, pad_bottom(rows, shape))


def pad_shape_to(width: int, height: int, shape: Shape) -> Shape:
    """Pad ``shape`` on the right and bottom until it is ``width`` x ``height``.

    Raises:
        ValueError: If the target is smaller than ``shape`` in either axis.
            Shapes are never cropped.
    """

    cur_width, cur_height = size(shape)
    if width < cur_width or height < cur_height:
        raise ValueError(
            f"Cannot pad {cur_width}x{cur_height} shape down to {width}x{height}"
        )
    return pad_shape(width - cur_width, height - cur_height, shape)


def overlaps(first: Shape, second: Shape) -> bool:
    """Return ``True`` if any position is occupied in both shapes.

    Only the common top-left sub-rectangle is compared.  When the shapes have
    different sizes, rows and columns beyond the smaller extent are ignored, so
    callers wanting a full check should align the shapes with
    :func:`pad_shape_to` first.
    """

    a = occupancy(first)
    b = occupancy(second)
    height = min(a.shape[0], b.shape[0])
    width = min(a.shape[1], b.shape[1])
    return bool(np.any(a[:height, :width] & b[:height, :width]))


def zip_shape_with(
    func: Callable[[Cell, Cell], Cell], first: Shape, second: Shape
) -> Shape:
    """Merge two shapes cell by cell with ``func``.

    Like :func:`zip`, the result covers only the common sub-rectangle.
    """

    return Shape(
        tuple(
            tuple(func(a, b) for a, b in zip(row_a, row_b))
            for row_a, row_b in zip(first.rows, second.rows)
        )
    )


def clash(first: Cell, second: Cell) -> Cell:
    """Merge rule for :func:`combine`.

    An empty cell yields to the other one; two occupied cells produce
    :data:`CLASH_COLOR` so the collision stays visible.
    """

    if first is None:
        return second
    if second is None:
        return first
    return CLASH_COLOR


def combine(first: Shape, second: Shape, *, strict: bool = False) -> Shape:
    """Return the union of ``first`` and ``second``.

    Both shapes are padded to the elementwise maximum of their sizes before
    being merged with :func:`clash`.  The inputs are expected not to overlap;
    by default an overlap is only logged and the shared cells become
    :data:`CLASH_COLOR`.

    Raises:
        ShapeOverlapError: If ``strict`` is set and the aligned shapes overlap.
    """

    (w1, h1), (w2, h2) = size(first), size(second)
    width, height = max(w1, w2), max(h1, h2)
    if (w1, h1) != (w2, h2):
        LOGGER.debug(
            "Aligning %dx%d and %dx%d shapes to %dx%d", w1, h1, w2, h2, width, height
        )
    padded_first = pad_shape_to(width, height, first)
    padded_second = pad_shape_to(width, height, second)

    if overlaps(padded_first, padded_second):
        if strict:
            raise ShapeOverlapError("Cannot combine overlapping shapes")
        LOGGER.warning("Combining overlapping shapes; shared cells marked %s", CLASH_COLOR.value)

    return zip_shape_with(clash, padded_first, padded_second)


__all__ = [
    "CLASH_COLOR",
    "ShapeOverlapError",
    "clash",
    "combine",
    "horizontal_padding",
    "overlaps",
    "pad_bottom",
    "pad_left",
    "pad_right",
    "pad_shape",
    "pad_shape_to",
    "pad_top",
    "rotate_shape",
    "rotate_shape_n",
    "shift_shape",
    "vertical_padding",
    "zip_shape_with",
]
