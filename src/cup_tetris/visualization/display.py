from __future__ import annotations

from typing import Optional, Protocol

from cup_tetris.game.core import Frame


class Display(Protocol):
    """What the game loop needs from a front end: paint a frame and read keys."""

    def poll_key(self, timeout_ms: int) -> Optional[str]:
        """Wait up to ``timeout_ms`` for one key; ``None`` when nothing arrived."""
        ...

    def render(self, frame: Frame) -> None:
        ...

    def show_game_over(self, score: int) -> None:
        """Show the final score and block until one key is pressed."""
        ...

    def close(self) -> None:
        ...
