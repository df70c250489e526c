"""Tetromino shapes and a small algebra for rotating, padding and combining them."""

from .shape import (
    Cell,
    Color,
    InvalidShapeError,
    Row,
    Shape,
    block_count,
    empty_shape,
    is_valid,
    make_shape,
    occupancy,
    size,
)
from .catalog import (
    ALL_SHAPES,
    SHAPE_COLORS,
    ShapeType,
    get_shape,
    make_rng,
    random_color,
    random_shape,
    random_shapes,
)
from .transform import (
    ShapeOverlapError,
    clash,
    combine,
    overlaps,
    pad_shape,
    pad_shape_to,
    rotate_shape,
    rotate_shape_n,
    shift_shape,
    zip_shape_with,
)
from .utils import render_shape, render_shapes

__all__ = [
    "ALL_SHAPES",
    "Cell",
    "Color",
    "InvalidShapeError",
    "Row",
    "SHAPE_COLORS",
    "Shape",
    "ShapeOverlapError",
    "ShapeType",
    "block_count",
    "clash",
    "combine",
    "empty_shape",
    "get_shape",
    "is_valid",
    "make_rng",
    "make_shape",
    "occupancy",
    "overlaps",
    "pad_shape",
    "pad_shape_to",
    "random_color",
    "random_shape",
    "random_shapes",
    "render_shape",
    "render_shapes",
    "rotate_shape",
    "rotate_shape_n",
    "shift_shape",
    "size",
    "zip_shape_with",
]
