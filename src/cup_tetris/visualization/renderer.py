from __future__ import annotations

from typing import Optional, Tuple

import pygame

from cup_tetris.game.core import Frame
from cup_tetris.game.pieces import CellKind, CellState


RGB = Tuple[int, int, int]

EMPTY_COLOR: RGB = (20, 20, 26)
SHADOW_COLOR: RGB = (90, 90, 100)


def color_for_value(v: int) -> RGB:
    """Colour for an observation code: 0 empty, +-(shape + 1) for blocks."""
    palette = {
        0: EMPTY_COLOR,
        1: (240, 240, 0),  # Square
        2: (0, 240, 240),  # Stick
        3: (0, 240, 0),    # S
        4: (240, 0, 0),    # Z
        5: (240, 160, 0),  # L
        6: (0, 0, 240),    # J
        7: (160, 0, 240),  # T
    }
    return palette.get(abs(v), (200, 200, 200))


def color_for_cell(cell: CellState) -> RGB:
    if cell.kind == CellKind.SHADOW:
        return SHADOW_COLOR
    if cell.shape is None:
        return EMPTY_COLOR
    return color_for_value(int(cell.shape) + 1)


class WindowDisplay:
    """pygame front end drawing the same frames as the terminal display."""

    def __init__(self, cell_size: int = 28, margin: int = 20, legend_height: int = 48) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.legend_height = legend_height
        pygame.init()
        pygame.display.set_caption("Cup Tetris")
        pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])
        self.font = pygame.font.SysFont(None, 24)
        self.screen: Optional[pygame.Surface] = None

    def _ensure_screen(self, frame: Frame) -> pygame.Surface:
        if self.screen is None:
            width = frame.width * self.cell_size + self.margin * 2
            height = frame.height * self.cell_size + self.margin * 2 + self.legend_height
            self.screen = pygame.display.set_mode((width, height))
        return self.screen

    def _grid_surface(self, frame: Frame) -> pygame.Surface:
        surf = pygame.Surface((frame.width * self.cell_size, frame.height * self.cell_size))
        surf.fill((30, 30, 36))
        for y, row in enumerate(frame.cells):
            for x, cell in enumerate(row):
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, color_for_cell(cell), rect)
        return surf

    def poll_key(self, timeout_ms: int) -> Optional[str]:
        """Wait for a key press; other events do not end the wait early."""
        deadline = pygame.time.get_ticks() + timeout_ms
        while True:
            remaining = deadline - pygame.time.get_ticks()
            if remaining <= 0:
                return None
            event = pygame.event.wait(remaining)
            if event.type == pygame.QUIT:
                raise SystemExit(0)
            if event.type == pygame.KEYDOWN and event.unicode:
                return event.unicode

    def render(self, frame: Frame) -> None:
        screen = self._ensure_screen(frame)
        screen.fill((10, 10, 14))
        lines = [f"Score: {frame.score}", f"Next: {frame.next_name}"]
        for i, txt in enumerate(lines):
            img = self.font.render(txt, True, (230, 230, 230))
            screen.blit(img, (self.margin, self.margin // 2 + i * 20))
        screen.blit(self._grid_surface(frame), (self.margin, self.margin + self.legend_height))
        pygame.display.flip()

    def show_game_over(self, score: int) -> None:
        if self.screen is not None:
            font = pygame.font.SysFont(None, 36)
            text = font.render(f"Game Over - score {score}", True, (255, 100, 100))
            rect = text.get_rect(center=(self.screen.get_width() // 2, self.screen.get_height() // 2))
            self.screen.blit(text, rect)
            pygame.display.flip()
        while True:
            event = pygame.event.wait()
            if event.type in (pygame.QUIT, pygame.KEYDOWN):
                return

    def close(self) -> None:
        pygame.quit()
