from __future__ import annotations

import numpy as np
import pytest

from cup_tetris.game.geometry import Point
from cup_tetris.game.grid import EMPTY_CODE, Cup
from cup_tetris.game.pieces import CellState, Shape
from cup_tetris.game.rules import ScoringRules


@pytest.fixture
def cup() -> Cup:
    return Cup(10, 20)


def test_new_cup_is_empty(cup):
    assert cup.grid.shape == (20, 10)
    assert cup.grid.dtype == np.int8
    assert np.all(cup.grid == EMPTY_CODE)
    assert not cup.is_top_row_filled()
    assert cup.get_max_height() == 0


@pytest.mark.parametrize("point", [Point(-1, 5), Point(10, 5), Point(3, 20), Point(3, -1)])
def test_out_of_bounds_points_are_blocked(cup, point):
    assert cup.is_blocked(point)


def test_missing_point_is_not_blocked(cup):
    assert cup.is_blocked(None) is False


def test_blocked_only_on_settled_cells(cup):
    cup.grid[19, :] = int(Shape.T)
    cup.grid[19, 6] = EMPTY_CODE
    assert cup.is_blocked(Point(0, 19))
    assert cup.is_blocked(Point(9, 19))
    assert not cup.is_blocked(Point(6, 19))
    assert cup.can_place([Point(6, 19), Point(6, 18)])
    assert not cup.can_place([Point(6, 19), Point(5, 19)])


def test_cell_decodes_states(cup):
    cup.merge([Point(2, 3)], Shape.J)
    assert cup.cell(2, 3) == CellState.settled(Shape.J)
    assert cup.cell(0, 0) == CellState.empty()


def test_merge_drops_cells_outside(cup):
    cup.merge([Point(0, -1), Point(0, 0)], Shape.S)
    assert cup.grid[0, 0] == int(Shape.S)
    assert cup.is_top_row_filled()


def test_top_row_filled_ignores_lower_rows(cup):
    cup.grid[1, :] = int(Shape.SQUARE)
    assert not cup.is_top_row_filled()
    cup.grid[0, 9] = int(Shape.SQUARE)
    assert cup.is_top_row_filled()


def test_incomplete_row_is_kept(cup):
    cup.grid[19, :9] = int(Shape.T)
    assert cup.scan_and_clear_lines() == 0
    assert np.all(cup.grid[19, :9] == int(Shape.T))


def test_clear_single_row_shifts_rows_above(cup):
    cup.grid[19, :] = int(Shape.T)
    cup.grid[18, 0] = int(Shape.L)
    cup.grid[10, 4] = int(Shape.J)
    assert cup.is_row_complete(19)
    assert not cup.is_row_complete(18)

    assert cup.scan_and_clear_lines() == 1

    assert cup.grid[19, 0] == int(Shape.L)
    assert np.all(cup.grid[19, 1:] == EMPTY_CODE)
    assert cup.grid[11, 4] == int(Shape.J)
    assert np.all(cup.grid[0] == EMPTY_CODE)
    assert np.count_nonzero(cup.grid != EMPTY_CODE) == 2


def test_clear_separated_rows(cup):
    cup.grid[17, :] = int(Shape.Z)
    cup.grid[18, 3] = int(Shape.S)
    cup.grid[19, :] = int(Shape.Z)

    assert cup.scan_and_clear_lines() == 2

    assert cup.grid[19, 3] == int(Shape.S)
    assert np.count_nonzero(cup.grid != EMPTY_CODE) == 1


def test_delete_row_ignores_bad_index(cup):
    cup.grid[5, 5] = int(Shape.T)
    cup.delete_row(-1)
    cup.delete_row(20)
    assert cup.grid[5, 5] == int(Shape.T)


@pytest.mark.parametrize("lines, points", [(0, 0), (1, 1), (2, 4), (3, 9), (4, 16)])
def test_score_is_square_of_lines(lines, points):
    assert ScoringRules().score_for_lines(lines) == points
