"""Three-component vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector supporting arithmetic with vectors and scalars."""

    x: float = 0
    y: float = 0
    z: float = 0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, Real):
            return Vec3(self.x + other, self.y + other, self.z + other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Real):
            return Vec3(self.x - other, self.y - other, self.z - other)
        return NotImplemented

    def __mul__(self, value):
        if isinstance(value, Real):
            return Vec3(self.x * value, self.y * value, self.z * value)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, value):
        if isinstance(value, Real):
            return Vec3(self.x / value, self.y / value, self.z / value)
        return NotImplemented

    def __neg__(self) -> Vec3:
        return self.inverted()

    def xyz(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)

    def xzy(self) -> Vec3:
        return Vec3(self.x, self.z, self.y)

    def yxz(self) -> Vec3:
        return Vec3(self.y, self.x, self.z)

    def yzx(self) -> Vec3:
        return Vec3(self.y, self.z, self.x)

    def zxy(self) -> Vec3:
        return Vec3(self.z, self.x, self.y)

    def zyx(self) -> Vec3:
        return Vec3(self.z, self.y, self.x)

    def length(self) -> float:
        """Euclidean magnitude."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def scale(self, scalar) -> Vec3:
        return self * scalar

    def normalized(self) -> Vec3:
        """Unit vector in the same direction; raises ZeroDivisionError for the zero vector."""
        length = self.length()
        return Vec3(self.x / length, self.y / length, self.z / length)

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def inverted(self) -> Vec3:
        return self.scale(-1)