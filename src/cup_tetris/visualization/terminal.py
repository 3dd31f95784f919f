from __future__ import annotations

import curses
from typing import Any, Optional

from cup_tetris.game.core import Frame
from cup_tetris.game.pieces import CellKind, CellState, Shape


TILE_SPACE = "  "
TILE_FILLED = "[]"

SHAPE_COLORS = {
    Shape.SQUARE: curses.COLOR_YELLOW,
    Shape.STICK: curses.COLOR_CYAN,
    Shape.S: curses.COLOR_GREEN,
    Shape.Z: curses.COLOR_RED,
    Shape.L: curses.COLOR_YELLOW,
    Shape.J: curses.COLOR_BLUE,
    Shape.T: curses.COLOR_MAGENTA,
}
SHADOW_PAIR = len(SHAPE_COLORS) + 1


def shape_pair(shape: Shape) -> int:
    # Pair 0 is reserved by curses
    return int(shape) + 1


def safe_addstr(stdscr: Any, y: int, x: int, s: str, attr: int = 0) -> None:
    try:
        stdscr.addstr(y, x, s, attr)
    except curses.error:
        pass


class TerminalDisplay:
    """curses front end: legend, bordered cup, two characters per cell."""

    def __init__(self, stdscr: Any = None) -> None:
        self.stdscr = stdscr if stdscr is not None else curses.initscr()
        self._closed = False
        self._colors = False
        try:
            self._setup()
        except Exception:
            curses.endwin()
            raise

    def _setup(self) -> None:
        curses.cbreak()
        curses.noecho()
        self.stdscr.nodelay(True)
        self.stdscr.keypad(True)
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        if curses.has_colors():
            curses.start_color()
            for shape, color in SHAPE_COLORS.items():
                curses.init_pair(shape_pair(shape), color, curses.COLOR_BLACK)
            curses.init_pair(SHADOW_PAIR, curses.COLOR_WHITE, curses.COLOR_BLACK)
            self._colors = True

    def _attr(self, cell: CellState) -> int:
        if cell.kind == CellKind.EMPTY:
            return 0
        if not self._colors:
            return curses.A_BOLD if cell.is_filled else 0
        if cell.kind == CellKind.SHADOW:
            return curses.color_pair(SHADOW_PAIR)
        return curses.color_pair(shape_pair(cell.shape)) | curses.A_BOLD

    def poll_key(self, timeout_ms: int) -> Optional[str]:
        self.stdscr.timeout(timeout_ms)
        code = self.stdscr.getch()
        if code < 0 or code > 255:
            return None
        return chr(code)

    def render(self, frame: Frame) -> None:
        scr = self.stdscr
        scr.erase()
        border = "+" + "=" * (len(TILE_FILLED) * frame.width) + "+"
        safe_addstr(scr, 1, 0, f"score: {frame.score}", curses.A_BOLD)
        safe_addstr(scr, 2, 0, f"next: {int(frame.next_shape)} - {frame.next_name}", curses.A_BOLD)
        top = 4
        safe_addstr(scr, top, 0, border, curses.A_BOLD)
        for y, row in enumerate(frame.cells):
            for x, cell in enumerate(row):
                tile = TILE_SPACE if cell.kind == CellKind.EMPTY else TILE_FILLED
                safe_addstr(scr, top + 1 + y, 1 + x * len(TILE_FILLED), tile, self._attr(cell))
        safe_addstr(scr, top + 1 + frame.height, 0, border, curses.A_BOLD)
        scr.refresh()

    def show_game_over(self, score: int) -> None:
        scr = self.stdscr
        scr.erase()
        safe_addstr(scr, 1, 0, "game over!", curses.A_BOLD)
        safe_addstr(scr, 2, 0, f"your score: {score}", curses.A_BOLD)
        scr.refresh()
        scr.timeout(-1)
        scr.getch()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.stdscr.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()
