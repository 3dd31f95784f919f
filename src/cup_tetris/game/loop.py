from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Optional, TYPE_CHECKING

from .core import Action, CupTetrisGame

if TYPE_CHECKING:
    from cup_tetris.visualization.display import Display


logger = logging.getLogger(__name__)

MILLISECONDS_PER_SECOND = 1000

KEY_BINDINGS: Dict[str, Action] = {
    "h": Action.LEFT,
    "l": Action.RIGHT,
    "u": Action.ROTATE_LEFT,
    "i": Action.ROTATE_RIGHT,
    "j": Action.HARD_DROP,
    "k": Action.SOFT_DROP,
}


class LoopState(Enum):
    INITIAL = "initial"
    RUNNING = "running"
    GAME_OVER = "game_over"
    ENDED = "ended"


def action_for_key(key: Optional[str]) -> Action:
    if key is None:
        return Action.NONE
    return KEY_BINDINGS.get(key, Action.NONE)


class GameLoop:
    """Fixed-rate frame scheduler.

    Each frame handles at most one input action, finishes a landing marked on
    the previous frame (merge, then spawn), clears and scores complete rows,
    renders, and on every ``fall_period``-th frame applies gravity. A rejected
    gravity step marks the figure as landed; it stays visible as the live
    figure for one more frame before it is merged.
    """

    def __init__(self, game: CupTetrisGame, display: Optional["Display"] = None) -> None:
        self.game = game
        self.display = display
        self.frame = 0
        self.landed = False
        self.state = LoopState.INITIAL

    @property
    def timeout_ms(self) -> int:
        return MILLISECONDS_PER_SECOND // self.game.config.fps

    def advance(self, action: Action = Action.NONE) -> int:
        """Run one frame and return the number of lines cleared in it."""
        if self.state in (LoopState.GAME_OVER, LoopState.ENDED):
            return 0
        self.state = LoopState.RUNNING

        self.game.apply(action)

        if self.landed:
            self.landed = False
            self.game.land()
            self.game.spawn()

        lines = self.game.clear_lines()

        if self.display is not None:
            self.display.render(self.game.build_frame())

        if self.frame % self.game.config.fall_period == 0:
            self.landed = not self.game.fall()
        self.frame += 1

        if self.game.is_over():
            self.state = LoopState.GAME_OVER
            logger.info("game over after %d frames, score %d", self.frame, self.game.score)
        return lines

    def run(self) -> int:
        """Play until the top row fills, then show the score; returns the final score."""
        if self.display is None:
            raise ValueError("GameLoop.run() needs a display")
        display = self.display
        try:
            while self.state in (LoopState.INITIAL, LoopState.RUNNING):
                key = display.poll_key(self.timeout_ms)
                self.advance(action_for_key(key))
            display.show_game_over(self.game.score)
            self.state = LoopState.ENDED
            return self.game.score
        finally:
            display.close()
