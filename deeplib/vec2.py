"""Two-component vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector supporting arithmetic with vectors and scalars."""

    x: float = 0
    y: float = 0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x + other.x, self.y + other.y)
        if isinstance(other, Real):
            return Vec2(self.x + other, self.y + other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x - other.x, self.y - other.y)
        if isinstance(other, Real):
            return Vec2(self.x - other, self.y - other)
        return NotImplemented

    def __mul__(self, value):
        if isinstance(value, Real):
            return Vec2(self.x * value, self.y * value)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, value):
        if isinstance(value, Real):
            return Vec2(self.x / value, self.y / value)
        return NotImplemented

    def __neg__(self) -> Vec2:
        return self.inverted()

    def xy(self) -> Vec2:
        return Vec2(self.x, self.y)

    def yx(self) -> Vec2:
        return Vec2(self.y, self.x)

    def length(self) -> float:
        """Euclidean magnitude."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def scale(self, scalar) -> Vec2:
        return self * scalar

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; raises ZeroDivisionError for the zero vector."""
        length = self.length()
        return Vec2(self.x / length, self.y / length)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def inverted(self) -> Vec2:
        return self.scale(-1)