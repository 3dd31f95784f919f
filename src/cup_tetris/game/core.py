from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Dict, List, Optional

import numpy as np

from .geometry import Point, Points
from .grid import Cup
from .pieces import FIGURE_CATALOG, FIGURE_NAMES, CellState, Figure, Rotation, Shape
from .rules import ScoringRules


logger = logging.getLogger(__name__)

DOWN = Point(0, 1)


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE_LEFT = 2
    ROTATE_RIGHT = 3
    HARD_DROP = 4
    SOFT_DROP = 5
    NONE = 6


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    fps: int = 30
    fall_period: int = 15  # frames between gravity steps
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width < 4 or self.height < 4:
            raise ValueError(f"cup must be at least 4x4, got {self.width}x{self.height}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.fall_period <= 0:
            raise ValueError(f"fall_period must be positive, got {self.fall_period}")

    @property
    def spawn_offset(self) -> Point:
        return Point(self.width // 2, 1)


@dataclass
class Frame:
    """Read-only snapshot handed to a display for one render pass."""

    cells: List[List[CellState]]
    score: int
    next_shape: Shape

    @property
    def next_name(self) -> str:
        return FIGURE_NAMES[self.next_shape]

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0


class CupTetrisGame:
    """Game context: the cup, the falling figure, its offset, the next shape and the score.

    Translation only ever changes ``offset`` and rotation only ever changes the
    figure's local points. Every transform is computed as a candidate, tested
    against the cup and committed only when it does not collide, so a rejected
    move leaves the state untouched.
    """

    def __init__(self, config: Optional[GameConfig] = None, rules: Optional[ScoringRules] = None) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.rng = random.Random(self.config.random_seed)
        self.cup = Cup(self.config.width, self.config.height)
        self.score = 0
        self.lines_cleared_total = 0
        self.figure: Figure = FIGURE_CATALOG[Shape.SQUARE]
        self.offset = Point(0, 0)
        self.next_shape = Shape.SQUARE
        self._actions: Dict[Action, Callable[[], bool]] = {
            Action.LEFT: self.move_left,
            Action.RIGHT: self.move_right,
            Action.ROTATE_LEFT: self.rotate_left,
            Action.ROTATE_RIGHT: self.rotate_right,
            Action.HARD_DROP: lambda: self.hard_drop() > 0,
            Action.SOFT_DROP: self.fall,
        }
        self.reset()

    def reset(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self.rng.seed(seed)
        self.cup.reset()
        self.score = 0
        self.lines_cleared_total = 0
        self.next_shape = self._random_shape()
        self.spawn()

    def _random_shape(self) -> Shape:
        return Shape(self.rng.randrange(len(FIGURE_CATALOG)))

    # Spawning

    def spawn(self) -> None:
        """Make the pending shape the live figure and draw a new pending one.

        Spawning never checks for overlap; a blocked spawn ends the game at the
        next landing.
        """
        self.offset = self.config.spawn_offset
        self.figure = FIGURE_CATALOG[self.next_shape]
        self.next_shape = self._random_shape()
        logger.debug("spawned %s, next %s", self.figure.shape.name, self.next_shape.name)

    # Collision

    def figure_cells(self) -> Points:
        return self.figure.cells_at(self.offset)

    def figure_collides(self, figure: Optional[Figure] = None, offset: Optional[Point] = None) -> bool:
        figure = figure or self.figure
        offset = offset if offset is not None else self.offset
        return not self.cup.can_place(figure.cells_at(offset))

    # Transforms

    def translate(self, dx: int, dy: int) -> bool:
        candidate = self.offset + Point(dx, dy)
        if self.figure_collides(offset=candidate):
            return False
        self.offset = candidate
        return True

    def move_left(self) -> bool:
        return self.translate(-1, 0)

    def move_right(self) -> bool:
        return self.translate(1, 0)

    def fall(self) -> bool:
        return self.translate(DOWN.x, DOWN.y)

    def rotate(self, direction: Rotation) -> bool:
        candidate = self.figure.rotated(direction)
        if self.figure_collides(figure=candidate):
            return False
        self.figure = candidate
        return True

    def rotate_left(self) -> bool:
        return self.rotate(Rotation.LEFT)

    def rotate_right(self) -> bool:
        return self.rotate(Rotation.RIGHT)

    def hard_drop(self) -> int:
        rows = 0
        while self.fall():
            rows += 1
        return rows

    def apply(self, action: Action) -> bool:
        handler = self._actions.get(Action(action))
        if handler is None:
            return False
        return handler()

    # Landing and scoring

    def land(self) -> None:
        """Merge the live figure into the cup at its current offset."""
        self.cup.merge(self.figure_cells(), self.figure.shape)
        logger.debug("landed %s at (%d, %d)", self.figure.shape.name, self.offset.x, self.offset.y)

    def clear_lines(self) -> int:
        lines = self.cup.scan_and_clear_lines()
        self.lines_cleared_total += lines
        self.score += self.rules.score_for_lines(lines)
        return lines

    def is_over(self) -> bool:
        return self.cup.is_top_row_filled()

    # Projection and rendering

    def shadow_offset(self) -> Point:
        offset = self.offset
        while not self.figure_collides(offset=offset + DOWN):
            offset = offset + DOWN
        return offset

    def shadow_cells(self) -> Points:
        """Cells the live figure would occupy after a hard drop; live state is not touched."""
        return self.figure.cells_at(self.shadow_offset())

    def build_frame(self) -> Frame:
        active = set(self.figure_cells())
        shadow = set(self.shadow_cells())
        cells: List[List[CellState]] = []
        for y in range(self.cup.height):
            row: List[CellState] = []
            for x in range(self.cup.width):
                p = Point(x, y)
                # The falling figure is drawn over its own shadow
                if p in active:
                    row.append(CellState.active(self.figure.shape))
                elif p in shadow:
                    row.append(CellState.shadow())
                else:
                    row.append(self.cup.cell(x, y))
            cells.append(row)
        return Frame(cells=cells, score=self.score, next_shape=self.next_shape)

    def get_state(self) -> np.ndarray:
        """Observation grid: 0 empty, ``shape + 1`` settled, ``-(shape + 1)`` falling."""
        state = self.cup.clone_state() + 1
        for p in self.figure_cells():
            if self.cup.is_inside(p):
                state[p.y, p.x] = -(int(self.figure.shape) + 1)
        return state

    def info(self) -> Dict[str, int]:
        return {
            "score": self.score,
            "lines_cleared_total": self.lines_cleared_total,
            "max_height": self.cup.get_max_height(),
        }
