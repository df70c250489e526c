"""Shape representation and basic queries.

A :class:`Shape` is an immutable rectangular grid of cells.  Each cell is either
``None`` (empty) or a :class:`Color` marking an occupied block.  Rows are stored
top to bottom as tuples so that shapes compare and hash structurally.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Optional, Tuple

import numpy as np
from numpy.typing import NDArray


class Color(str, Enum):
    """Enumeration of the block colours a cell may hold."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    PURPLE = "purple"
    CYAN = "cyan"
    GREY = "grey"


Cell = Optional[Color]
Row = Tuple[Cell, ...]
Size = Tuple[int, int]  # (width, height)


class InvalidShapeError(ValueError):
    """Raised when a grid does not describe a non-empty rectangular shape."""


@dataclass(frozen=True)
class Shape:
    """Rectangular grid of optionally coloured cells.

    The plain constructor does not validate its input so that known-good
    literals and deliberately broken fixtures can be built directly.  Use
    :meth:`from_rows` (or :func:`make_shape`) for grids of unknown origin.
    """

    rows: Tuple[Row, ...]

    def __post_init__(self) -> None:
        # Normalise nested lists into tuples; frozen dataclasses need setattr.
        object.__setattr__(self, "rows", tuple(tuple(row) for row in self.rows))

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Cell]]) -> "Shape":
        """Return a validated shape built from ``rows``.

        Raises:
            InvalidShapeError: If the grid is empty or not rectangular.
        """

        shape = cls(rows)
        if not is_valid(shape):
            raise InvalidShapeError(f"Not a rectangular non-empty grid: {shape.rows!r}")
        return shape

    @classmethod
    def from_strings(
        cls, lines: Iterable[str], palette: Mapping[str, Color]
    ) -> "Shape":
        """Build a validated shape from text rows.

        Each character is looked up in ``palette``; characters without an
        entry (typically spaces) become empty cells.
        """

        return cls.from_rows([[palette.get(ch) for ch in line] for line in lines])

    @property
    def width(self) -> int:
        return size(self)[0]

    @property
    def height(self) -> int:
        return size(self)[1]

    @property
    def size(self) -> Size:
        return size(self)

    @property
    def block_count(self) -> int:
        return block_count(self)

    def __str__(self) -> str:
        from .utils import render_shape

        return render_shape(self)


def make_shape(rows: Iterable[Iterable[Cell]]) -> Shape:
    """Smart constructor equivalent to :meth:`Shape.from_rows`."""

    return Shape.from_rows(rows)


def size(shape: Shape) -> Size:
    """Return ``(width, height)`` of ``shape``.

    The width is taken from the first row; ``shape`` is expected to satisfy
    :func:`is_valid`.

    Raises:
        InvalidShapeError: If ``shape`` has no rows at all.
    """

    if not shape.rows:
        raise InvalidShapeError("Shape has no rows")
    return len(shape.rows[0]), len(shape.rows)


def block_count(shape: Shape) -> int:
    """Return how many cells of ``shape`` are occupied."""

    return sum(1 for row in shape.rows for cell in row if cell is not None)


def empty_shape(width: int, height: int) -> Shape:
    """Return a ``width`` x ``height`` shape with every cell empty.

    Raises:
        InvalidShapeError: If either dimension is smaller than one.
    """

    if width < 1 or height < 1:
        raise InvalidShapeError(f"Invalid empty shape size: {width}x{height}")
    return Shape(tuple((None,) * width for _ in range(height)))


def is_valid(shape: Shape) -> bool:
    """Return ``True`` if ``shape`` is a non-empty rectangular grid.

    Safe to call on malformed shapes: an empty row list, zero-width rows and
    ragged rows all yield ``False``.
    """

    if not shape.rows:
        return False
    lengths = {len(row) for row in shape.rows}
    return len(lengths) == 1 and lengths.pop() > 0


def occupancy(shape: Shape) -> NDArray[np.bool_]:
    """Return a ``(height, width)`` boolean mask of the occupied cells."""

    width, height = size(shape)
    mask = np.zeros((height, width), dtype=np.bool_)
    for r, row in enumerate(shape.rows):
        for c, cell in enumerate(row):
            if cell is not None:
                mask[r, c] = True
    return mask


__all__ = [
    "Cell",
    "Color",
    "InvalidShapeError",
    "Row",
    "Shape",
    "Size",
    "block_count",
    "empty_shape",
    "is_valid",
    "make_shape",
    "occupancy",
    "size",
]
