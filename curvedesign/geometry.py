"""Plane geometry primitives shared by the curve editors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Point:
    """A point or vector in the plane."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Point(self.x * factor, self.y * factor)

    def __rmul__(self, factor: float) -> Point:
        return self.__mul__(factor)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def is_null(self) -> bool:
        """True when both coordinates are zero."""
        return self.x == 0 and self.y == 0


class MouseButton(Enum):
    """Mouse buttons an editor reacts to."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


def distance(a: Point, b: Point) -> float:
    """Distance between two points."""
    return (a - b).length()