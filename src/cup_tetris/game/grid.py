from __future__ import annotations

import logging
from typing import Iterable, Optional

import numpy as np

from .geometry import Point
from .pieces import CellState, Shape


logger = logging.getLogger(__name__)

EMPTY_CODE = -1


class Cup:
    """Fixed-size well of settled cells.

    Cells are stored as ``int8`` codes: ``EMPTY_CODE`` for empty and the
    ``Shape`` value for settled blocks. Row 0 is the top; there is no stored
    floor row, the bottom edge is a bounds check.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.full((self.height, self.width), EMPTY_CODE, dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(EMPTY_CODE)

    def is_inside(self, point: Point) -> bool:
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def cell(self, x: int, y: int) -> CellState:
        code = int(self.grid[y, x])
        if code == EMPTY_CODE:
            return CellState.empty()
        return CellState.settled(Shape(code))

    def is_blocked(self, point: Optional[Point]) -> bool:
        if point is None:
            return False
        if not self.is_inside(point):
            return True
        return self.grid[point.y, point.x] != EMPTY_CODE

    def can_place(self, cells: Iterable[Point]) -> bool:
        return not any(self.is_blocked(p) for p in cells)

    def merge(self, cells: Iterable[Point], shape: Shape) -> None:
        """Write cells permanently with ``shape``; cells outside the cup are dropped."""
        for p in cells:
            if self.is_inside(p):
                self.grid[p.y, p.x] = int(shape)

    def is_top_row_filled(self) -> bool:
        return bool(np.any(self.grid[0] != EMPTY_CODE))

    def is_row_complete(self, index: int) -> bool:
        return bool(np.all(self.grid[index] != EMPTY_CODE))

    def delete_row(self, index: int) -> None:
        if not 0 <= index < self.height:
            return
        # Shift everything above down by one, then open a fresh row at the top
        self.grid[1 : index + 1] = self.grid[0:index].copy()
        self.grid[0].fill(EMPTY_CODE)

    def scan_and_clear_lines(self) -> int:
        """Delete complete rows one at a time from top to bottom.

        Deleting a row only moves rows above it, so rows below the one being
        examined keep their indices and a single downward scan is enough.
        """
        cleared = 0
        for y in range(self.height):
            if self.is_row_complete(y):
                self.delete_row(y)
                cleared += 1
        if cleared:
            logger.debug("cleared %d line(s)", cleared)
        return cleared

    def get_max_height(self) -> int:
        non_empty_rows = np.where(np.any(self.grid != EMPTY_CODE, axis=1))[0]
        if non_empty_rows.size == 0:
            return 0
        return self.height - int(non_empty_rows[0])

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
