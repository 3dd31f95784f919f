from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple


@dataclass(frozen=True)
class Point:
    """Integer cell coordinate. ``y`` grows downward, row 0 is the top of the cup."""

    x: int
    y: int

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)


Points = Tuple[Point, ...]


def translate_points(points: Iterable[Point], offset: Optional[Point]) -> Points:
    if offset is None:
        return tuple(points)
    return tuple(p + offset for p in points)
