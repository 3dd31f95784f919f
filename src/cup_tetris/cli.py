from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from cup_tetris.game import CupTetrisGame, GameConfig, GameLoop


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="cup-tetris", description="Falling-block puzzle in the terminal.")
    p.add_argument("--display", choices=["terminal", "window"], default="terminal")
    p.add_argument("--width", type=int, default=10)
    p.add_argument("--height", type=int, default=20)
    p.add_argument("--fps", type=int, default=30)
    p.add_argument("--fall-period", type=int, default=15,
                   help="Frames between gravity steps")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--log-file", type=str, default=None,
                   help="Write logs here; the terminal display owns stdout")
    p.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING"], default="INFO")
    return p


def configure_logging(log_file: Optional[str], level: str) -> None:
    if log_file is None:
        logging.getLogger("cup_tetris").addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def make_display(kind: str):
    if kind == "window":
        from cup_tetris.visualization.renderer import WindowDisplay
        return WindowDisplay()
    from cup_tetris.visualization.terminal import TerminalDisplay
    return TerminalDisplay()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.log_level)
    try:
        config = GameConfig(
            width=args.width,
            height=args.height,
            fps=args.fps,
            fall_period=args.fall_period,
            random_seed=args.seed,
        )
    except ValueError as exc:
        build_parser().error(str(exc))
    game = CupTetrisGame(config)
    score = GameLoop(game, make_display(args.display)).run()
    logging.getLogger(__name__).info("final score %d", score)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
