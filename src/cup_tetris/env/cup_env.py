from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from cup_tetris.game import Action, CupTetrisGame, GameConfig, GameLoop, LoopState
from cup_tetris.visualization.renderer import color_for_value


class CupTetrisEnv(gym.Env):
    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 max_episode_steps: Optional[int] = None) -> None:
        super().__init__()
        self.game = CupTetrisGame(config)
        self.loop = GameLoop(self.game)
        self.render_mode = render_mode
        self.max_episode_steps = max_episode_steps

        height, width = self.game.cup.height, self.game.cup.width
        n_shapes = 7
        # Observation: 0 empty, shape+1 settled, -(shape+1) falling figure
        self.observation_space = spaces.Box(low=-n_shapes, high=n_shapes, shape=(height, width), dtype=np.int8)
        self.action_space = spaces.Discrete(len(Action))

        self._steps = 0

    def _get_info(self, lines: int = 0) -> Dict[str, Any]:
        info: Dict[str, Any] = dict(self.game.info())
        info["lines"] = lines
        info["frame"] = self.loop.frame
        info["next_shape"] = int(self.game.next_shape)
        return info

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.reset(seed)
        self.loop = GameLoop(self.game)
        self._steps = 0
        return self.game.get_state(), self._get_info()

    def step(self, action: int):
        score_before = self.game.score
        lines = self.loop.advance(Action(int(action)))
        self._steps += 1

        reward = float(self.game.score - score_before)
        terminated = self.loop.state == LoopState.GAME_OVER
        truncated = self.max_episode_steps is not None and self._steps >= self.max_episode_steps
        return self.game.get_state(), reward, terminated, truncated, self._get_info(lines)

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            grid = self.game.get_state()
            cell = 12
            h, w = grid.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color_for_value(int(grid[y, x]))
            return img
        return None

    def close(self) -> None:
        pass
