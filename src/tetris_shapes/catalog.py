"""The seven tetrominoes and the random generators used for test data.

Every shape is written as a small text literal, one string per row, and coloured
with a single fixed colour per class.  The catalogue order ``I J T O Z L S`` is
stable and doubles as an index space for sampling.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from .shape import Color, Shape


class ShapeType(str, Enum):
    """Enumeration of the seven standard tetromino shapes in catalogue order."""

    I = "I"
    J = "J"
    T = "T"
    O = "O"
    Z = "Z"
    L = "L"
    S = "S"


SHAPE_COLORS: Dict[ShapeType, Color] = {
    ShapeType.I: Color.RED,
    ShapeType.J: Color.GREY,
    ShapeType.T: Color.BLUE,
    ShapeType.O: Color.YELLOW,
    ShapeType.Z: Color.CYAN,
    ShapeType.L: Color.GREEN,
    ShapeType.S: Color.PURPLE,
}


# Spawn layouts; any non-space character is a block of the class colour.
_LITERALS: Dict[ShapeType, Tuple[str, ...]] = {
    ShapeType.I: ("I",
                  "I",
                  "I",
                  "I"),
    ShapeType.J: (" J",
                  " J",
                  "JJ"),
    ShapeType.T: (" T",
                  "TT",
                  " T"),
    ShapeType.O: ("OO",
                  "OO"),
    ShapeType.Z: (" Z",
                  "ZZ",
                  "Z "),
    ShapeType.L: ("LL",
                  " L",
                  " L"),
    ShapeType.S: ("S ",
                  "SS",
                  " S"),
}


def _build_shape(shape_type: ShapeType) -> Shape:
    color = SHAPE_COLORS[shape_type]
    return Shape(
        tuple(
            tuple(None if ch == " " else color for ch in line)
            for line in _LITERALS[shape_type]
        )
    )


SHAPES_BY_TYPE: Dict[ShapeType, Shape] = {t: _build_shape(t) for t in ShapeType}

ALL_SHAPES: Tuple[Shape, ...] = tuple(SHAPES_BY_TYPE[t] for t in ShapeType)

ALL_COLORS: Tuple[Color, ...] = tuple(Color)


def get_shape(shape_type: ShapeType) -> Shape:
    """Return the catalogue shape for ``shape_type``."""

    return SHAPES_BY_TYPE[ShapeType(shape_type)]


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Return a private :class:`random.Random`, seeded when ``seed`` is given."""

    return random.Random(seed)


def _choose(options: Sequence, rng: Optional[random.Random]):
    if rng is None:
        rng = make_rng()
    return rng.choice(options)


def random_shape(rng: Optional[random.Random] = None) -> Shape:
    """Return one of :data:`ALL_SHAPES`, each equally likely.

    Parameters
    ----------
    rng:
        Source of randomness.  Pass a seeded :class:`random.Random` (or any
        object with a compatible ``choice`` method) for reproducible results.
        When omitted a fresh generator is created so no global state is used.
    """

    return _choose(ALL_SHAPES, rng)


def random_color(rng: Optional[random.Random] = None) -> Color:
    """Return one of the eight :class:`Color` members, each equally likely."""

    return _choose(ALL_COLORS, rng)


def random_shapes(count: int, rng: Optional[random.Random] = None) -> List[Shape]:
    """Return ``count`` independently drawn catalogue shapes."""

    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if rng is None:
        rng = make_rng()
    return [random_shape(rng) for _ in range(count)]


__all__ = [
    "ALL_COLORS",
    "ALL_SHAPES",
    "SHAPES_BY_TYPE",
    "SHAPE_COLORS",
    "ShapeType",
    "get_shape",
    "make_rng",
    "random_color",
    "random_shape",
    "random_shapes",
]
