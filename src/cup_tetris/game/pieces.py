from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Optional

from .geometry import Point, Points, translate_points


class Shape(IntEnum):
    SQUARE = 0
    STICK = 1
    S = 2
    Z = 3
    L = 4
    J = 5
    T = 6


class CellKind(IntEnum):
    EMPTY = 0
    SHADOW = 1
    ACTIVE = 2
    SETTLED = 3


@dataclass(frozen=True)
class CellState:
    """What a single cup cell holds for game logic and display.

    Only ACTIVE and SETTLED cells carry a shape; colours are looked up from the
    shape by the display adapters.
    """

    kind: CellKind
    shape: Optional[Shape] = None

    @classmethod
    def empty(cls) -> "CellState":
        return cls(CellKind.EMPTY)

    @classmethod
    def shadow(cls) -> "CellState":
        return cls(CellKind.SHADOW)

    @classmethod
    def active(cls, shape: Shape) -> "CellState":
        return cls(CellKind.ACTIVE, Shape(shape))

    @classmethod
    def settled(cls, shape: Shape) -> "CellState":
        return cls(CellKind.SETTLED, Shape(shape))

    @property
    def is_filled(self) -> bool:
        return self.kind in (CellKind.ACTIVE, CellKind.SETTLED)


class Rotation(IntEnum):
    LEFT = -1
    RIGHT = 1


def rotate_points(points: Points, direction: Rotation) -> Points:
    """Rotate local points by 90 degrees around the local origin."""
    if direction == Rotation.LEFT:
        return tuple(Point(p.y, -p.x) for p in points)
    return tuple(Point(-p.y, p.x) for p in points)


@dataclass(frozen=True)
class Figure:
    shape: Shape
    points: Points

    def rotated(self, direction: Rotation) -> "Figure":
        return Figure(self.shape, rotate_points(self.points, direction))

    def cells_at(self, offset: Point) -> Points:
        return translate_points(self.points, offset)


def _figure(shape: Shape, *coords: tuple) -> Figure:
    return Figure(shape, tuple(Point(x, y) for x, y in coords))


FIGURE_CATALOG: Dict[Shape, Figure] = {
    Shape.SQUARE: _figure(Shape.SQUARE, (0, 0), (0, 1), (1, 0), (1, 1)),
    Shape.STICK: _figure(Shape.STICK, (-1, 0), (0, 0), (1, 0), (2, 0)),
    Shape.S: _figure(Shape.S, (-1, 0), (0, 0), (0, -1), (1, -1)),
    Shape.Z: _figure(Shape.Z, (-1, -1), (0, -1), (0, 0), (1, 0)),
    Shape.L: _figure(Shape.L, (0, 1), (0, 0), (0, -1), (1, -1)),
    Shape.J: _figure(Shape.J, (0, 1), (0, 0), (0, -1), (-1, -1)),
    Shape.T: _figure(Shape.T, (-1, 0), (0, 0), (1, 0), (0, 1)),
}

FIGURE_NAMES: Dict[Shape, str] = {
    Shape.SQUARE: "Square",
    Shape.STICK: "Stick",
    Shape.S: "S",
    Shape.Z: "Z",
    Shape.L: "L",
    Shape.J: "J",
    Shape.T: "T",
}
