from __future__ import annotations

import pytest

from cup_tetris.game.geometry import Point, translate_points
from cup_tetris.game.pieces import (
    FIGURE_CATALOG,
    FIGURE_NAMES,
    CellKind,
    CellState,
    Rotation,
    Shape,
    rotate_points,
)


def test_point_arithmetic():
    a, b = Point(2, -3), Point(-1, 5)
    assert a + b == Point(1, 2)
    assert b + a == a + b


def test_translate_points_without_offset_is_noop():
    pts = (Point(1, 1), Point(2, 0))
    assert translate_points(pts, None) == pts
    assert translate_points(pts, Point(3, 4)) == (Point(4, 5), Point(5, 4))


@pytest.mark.parametrize(
    "shape, coords",
    [
        (Shape.SQUARE, [(0, 0), (0, 1), (1, 0), (1, 1)]),
        (Shape.STICK, [(-1, 0), (0, 0), (1, 0), (2, 0)]),
        (Shape.S, [(-1, 0), (0, 0), (0, -1), (1, -1)]),
        (Shape.Z, [(-1, -1), (0, -1), (0, 0), (1, 0)]),
        (Shape.L, [(0, 1), (0, 0), (0, -1), (1, -1)]),
        (Shape.J, [(0, 1), (0, 0), (0, -1), (-1, -1)]),
        (Shape.T, [(-1, 0), (0, 0), (1, 0), (0, 1)]),
    ],
)
def test_catalog_literal_offsets(shape, coords):
    figure = FIGURE_CATALOG[shape]
    assert figure.shape == shape
    assert figure.points == tuple(Point(x, y) for x, y in coords)


def test_catalog_covers_every_shape_with_a_name():
    assert set(FIGURE_CATALOG) == set(Shape)
    assert FIGURE_NAMES[Shape.STICK] == "Stick"
    assert FIGURE_NAMES[Shape.SQUARE] == "Square"


def test_rotation_transforms():
    pts = (Point(2, 1),)
    assert rotate_points(pts, Rotation.LEFT) == (Point(1, -2),)
    assert rotate_points(pts, Rotation.RIGHT) == (Point(-1, 2),)


@pytest.mark.parametrize("shape", list(Shape))
def test_left_and_right_rotations_are_inverse(shape):
    figure = FIGURE_CATALOG[shape]
    assert figure.rotated(Rotation.LEFT).rotated(Rotation.RIGHT) == figure
    assert figure.rotated(Rotation.RIGHT).rotated(Rotation.LEFT) == figure
    quarter_turns = figure
    for _ in range(4):
        quarter_turns = quarter_turns.rotated(Rotation.RIGHT)
    assert quarter_turns == figure


def test_rotated_does_not_touch_catalog_entry():
    before = FIGURE_CATALOG[Shape.T].points
    FIGURE_CATALOG[Shape.T].rotated(Rotation.LEFT)
    assert FIGURE_CATALOG[Shape.T].points == before


def test_cell_state_filled_flags():
    assert not CellState.empty().is_filled
    assert not CellState.shadow().is_filled
    assert CellState.active(Shape.Z).is_filled
    settled = CellState.settled(Shape.L)
    assert settled.is_filled
    assert settled.kind == CellKind.SETTLED
    assert settled.shape == Shape.L
