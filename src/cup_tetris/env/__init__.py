"""Gymnasium environments for Cup Tetris."""

from __future__ import annotations

from gymnasium.envs.registration import register

# One environment step is one game frame
register(
    id="CupTetris-20x10-v0",
    entry_point="cup_tetris.env.cup_env:CupTetrisEnv",
)

__all__ = ["CupTetris-20x10-v0"]
