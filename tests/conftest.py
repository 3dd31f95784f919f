from __future__ import annotations

from typing import Iterable, List, Optional

import pytest

from cup_tetris.game import CupTetrisGame, Frame, GameConfig, Shape
from cup_tetris.game.grid import EMPTY_CODE


class FakeDisplay:
    """Scripted display: hands out queued keys, records frames."""

    def __init__(self, keys: Iterable[Optional[str]] = (), max_polls: int = 100_000) -> None:
        self.keys: List[Optional[str]] = list(keys)
        self.max_polls = max_polls
        self.polls = 0
        self.timeouts: List[int] = []
        self.frames: List[Frame] = []
        self.game_over_score: Optional[int] = None
        self.closed = False

    def poll_key(self, timeout_ms: int) -> Optional[str]:
        self.polls += 1
        self.timeouts.append(timeout_ms)
        if self.polls > self.max_polls:
            raise RuntimeError("game did not end")
        return self.keys.pop(0) if self.keys else None

    def render(self, frame: Frame) -> None:
        self.frames.append(frame)

    def show_game_over(self, score: int) -> None:
        self.game_over_score = score

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def game() -> CupTetrisGame:
    return CupTetrisGame(GameConfig(random_seed=1234))


@pytest.fixture
def fake_display() -> FakeDisplay:
    return FakeDisplay()


def fill_row(game: CupTetrisGame, y: int, skip: Iterable[int] = (), shape: Shape = Shape.T) -> None:
    skip = set(skip)
    for x in range(game.cup.width):
        game.cup.grid[y, x] = EMPTY_CODE if x in skip else int(shape)


def use_figure(game: CupTetrisGame, shape: Shape) -> None:
    """Respawn the live figure as ``shape``."""
    game.next_shape = shape
    game.spawn()
