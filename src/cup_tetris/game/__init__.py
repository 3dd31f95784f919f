"""Game module for Cup Tetris.

Exports the core game engine and supporting classes:
- Point: Integer cell coordinate
- Cup: The well of settled cells, line detection and clearing
- Figure, Shape, FIGURE_CATALOG: The seven tetromino figures
- CellState, CellKind: Logical content of a rendered cell
- ScoringRules: Line clear scoring
- CupTetrisGame: Game context and figure transforms
- GameLoop: Fixed-rate frame scheduler
"""

from .geometry import Point
from .grid import Cup
from .pieces import FIGURE_CATALOG, FIGURE_NAMES, CellKind, CellState, Figure, Rotation, Shape
from .rules import ScoringRules
from .core import Action, CupTetrisGame, Frame, GameConfig
from .loop import KEY_BINDINGS, GameLoop, LoopState

__all__ = [
    "Point",
    "Cup",
    "FIGURE_CATALOG",
    "FIGURE_NAMES",
    "CellKind",
    "CellState",
    "Figure",
    "Rotation",
    "Shape",
    "ScoringRules",
    "Action",
    "CupTetrisGame",
    "Frame",
    "GameConfig",
    "KEY_BINDINGS",
    "GameLoop",
    "LoopState",
]
