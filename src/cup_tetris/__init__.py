"""Cup Tetris: a falling-block puzzle played in a terminal."""

__version__ = "0.1.0"
