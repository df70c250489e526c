from __future__ import annotations

import logging

import pytest

from tetris_shapes.catalog import ALL_SHAPES, ShapeType, get_shape
from tetris_shapes.shape import Color, Shape, block_count, empty_shape, size
from tetris_shapes.transform import (
    CLASH_COLOR,
    ShapeOverlapError,
    clash,
    combine,
    horizontal_padding,
    overlaps,
    pad_shape,
    pad_shape_to,
    rotate_shape,
    rotate_shape_n,
    shift_shape,
    vertical_padding,
    zip_shape_with,
)

R = Color.RED
B = Color.BLUE
_ = None


def _occupied(shape: Shape) -> set[tuple[int, int]]:
    return {
        (r, c)
        for r, row in enumerate(shape.rows)
        for c, cell in enumerate(row)
        if cell is not None
    }


@pytest.mark.parametrize("shape", ALL_SHAPES)
def test_rotation_is_a_four_cycle(shape: Shape) -> None:
    rotated = shape
    for _turn in range(4):
        rotated = rotate_shape(rotated)
    assert rotated == shape
    assert rotate_shape_n(shape, 4) == shape
    assert rotate_shape_n(shape, 5) == rotate_shape(shape)


@pytest.mark.parametrize("shape", ALL_SHAPES)
def test_rotation_swaps_size_and_keeps_blocks(shape: Shape) -> None:
    width, height = size(shape)
    rotated = rotate_shape(shape)
    assert size(rotated) == (height, width)
    assert block_count(rotated) == block_count(shape)


def test_rotating_i_lays_it_flat() -> None:
    rotated = rotate_shape(get_shape(ShapeType.I))
    assert size(rotated) == (4, 1)
    assert rotated.rows == ((R, R, R, R),)


def test_rotation_direction() -> None:
    g = Color.GREY
    rotated = rotate_shape(get_shape(ShapeType.J))
    assert rotated.rows == ((g, _, _), (g, g, g))


def test_vertical_and_horizontal_padding_variants() -> None:
    shape = Shape([[R, B]])
    top, bottom = vertical_padding(1, shape)
    assert top.rows == ((_, _), (R, B))
    assert bottom.rows == ((R, B), (_, _))
    left, right = horizontal_padding(2, shape)
    assert left.rows == ((_, _, R, B),)
    assert right.rows == ((R, B, _, _),)


@pytest.mark.parametrize("shape", ALL_SHAPES)
@pytest.mark.parametrize("cols, rows", [(0, 0), (1, 0), (0, 2), (3, 1)])
def test_padding_and_shifting_are_size_additive(shape: Shape, cols: int, rows: int) -> None:
    width, height = size(shape)
    for transform in (pad_shape, shift_shape):
        padded = transform(cols, rows, shape)
        assert size(padded) == (width + cols, height + rows)
        assert block_count(padded) == block_count(shape)


def test_shift_places_block_bottom_right() -> None:
    block = get_shape(ShapeType.O)
    shifted = shift_shape(1, 1, block)
    assert size(shifted) == (3, 3)
    assert all(cell is None for cell in shifted.rows[0])
    assert all(row[0] is None for row in shifted.rows)
    assert tuple(row[1:] for row in shifted.rows[1:]) == block.rows


def test_pad_shape_keeps_content_top_left() -> None:
    padded = pad_shape(1, 2, Shape([[R]]))
    assert padded.rows == ((R, _), (_, _), (_, _))


@pytest.mark.parametrize("shape", ALL_SHAPES)
def test_pad_shape_to_reaches_target(shape: Shape) -> None:
    assert size(pad_shape_to(4, 4, shape)) == (4, 4)
    assert pad_shape_to(*size(shape), shape) == shape


def test_negative_padding_is_rejected() -> None:
    shape = get_shape(ShapeType.T)
    with pytest.raises(ValueError):
        pad_shape(-1, 0, shape)
    with pytest.raises(ValueError):
        shift_shape(0, -1, shape)
    with pytest.raises(ValueError):
        pad_shape_to(1, 3, shape)


@pytest.mark.parametrize("shape", ALL_SHAPES)
def test_empty_shape_overlaps_nothing(shape: Shape) -> None:
    assert not overlaps(shape, empty_shape(*size(shape)))
    assert overlaps(shape, shape)


def test_overlap_only_compares_common_region() -> None:
    small = Shape([[R]])
    wide = Shape([[_, B]])
    tall = Shape([[_], [B]])
    assert not overlaps(small, wide)
    assert not overlaps(small, tall)
    assert overlaps(small, Shape([[B, _], [_, _]]))


def test_clash_rule() -> None:
    assert clash(_, _) is None
    assert clash(R, _) is R
    assert clash(_, B) is B
    assert clash(R, B) is CLASH_COLOR is Color.BLACK


def test_zip_shape_with_truncates_to_common_region() -> None:
    merged = zip_shape_with(clash, Shape([[R, _, _]]), Shape([[_, B], [B, B]]))
    assert merged.rows == ((R, B),)


def test_combine_with_empty_is_identity() -> None:
    o = get_shape(ShapeType.O)
    assert combine(o, empty_shape(2, 2)) == o
    assert combine(empty_shape(2, 2), o) == o


def test_combine_grows_to_max_size() -> None:
    i = get_shape(ShapeType.I)
    flat = shift_shape(1, 0, rotate_shape(i))
    combined = combine(i, flat)
    assert size(combined) == (5, 4)
    assert block_count(combined) == 8


@pytest.mark.parametrize("first", ALL_SHAPES)
@pytest.mark.parametrize("second", ALL_SHAPES)
def test_combine_is_commutative_without_overlap(first: Shape, second: Shape) -> None:
    moved = shift_shape(size(first)[0], 0, second)
    a = combine(first, moved)
    b = combine(moved, first)
    assert a == b
    assert block_count(a) == block_count(first) + block_count(second)
    assert _occupied(a) == _occupied(first) | _occupied(moved)


def test_combine_marks_overlap_and_logs(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="tetris_shapes.transform"):
        combined = combine(Shape([[R, _]]), Shape([[B, B]]))
    assert combined.rows == ((Color.BLACK, B),)
    assert "overlapping" in caplog.text


def test_strict_combine_raises_on_overlap() -> None:
    with pytest.raises(ShapeOverlapError):
        combine(get_shape(ShapeType.O), get_shape(ShapeType.T), strict=True)
    with pytest.raises(ShapeOverlapError):
        combine(Shape([[R], [R]]), Shape([[_, R], [R, _]]), strict=True)
    assert combine(Shape([[R], [_]]), Shape([[_, B], [B, _]]), strict=True).rows == (
        (R, B),
        (B, _),
    )


def test_inputs_are_not_mutated() -> None:
    shape = get_shape(ShapeType.L)
    before = shape.rows
    rotate_shape(shape)
    pad_shape(2, 2, shape)
    shift_shape(2, 2, shape)
    combine(shape, empty_shape(4, 4))
    assert shape.rows == before
