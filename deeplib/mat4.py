"""Row-major 4x4 matrix with common 3D transforms."""

from __future__ import annotations

import math
from typing import Iterator

from deeplib.maths import deg_to_rad
from deeplib.vec3 import Vec3

EPSILON = 0.000001

_IDENTITY = (
    1, 0, 0, 0,
    0, 1, 0, 0,
    0, 0, 1, 0,
    0, 0, 0, 1,
)


class Mat4:
    """A mutable 4x4 matrix stored as 16 values in row-major order.

    Indexing accepts either a flat index ``0..15`` or a ``(row, column)`` pair.
    Missing constructor arguments take their value from the identity matrix.
    """

    X1, Y1, Z1, W1 = 0, 1, 2, 3
    X2, Y2, Z2, W2 = 4, 5, 6, 7
    X3, Y3, Z3, W3 = 8, 9, 10, 11
    X4, Y4, Z4, W4 = 12, 13, 14, 15

    __slots__ = ("_data",)

    def __init__(self, *args):
        if len(args) > 16:
            raise TypeError(f"Mat4 takes at most 16 values, got {len(args)}")
        self._data = list(args) + list(_IDENTITY[len(args):])

    @staticmethod
    def _flat(index) -> int:
        if isinstance(index, tuple):
            row, column = index
            if not (0 <= row < 4 and 0 <= column < 4):
                raise IndexError("matrix index out of range")
            return row * 4 + column
        if not -16 <= index < 16:
            raise IndexError("matrix index out of range")
        return index

    def __getitem__(self, index):
        return self._data[self._flat(index)]

    def __setitem__(self, index, value):
        self._data[self._flat(index)] = value

    def __iter__(self) -> Iterator:
        return iter(self._data)

    def __len__(self) -> int:
        return 16

    def __repr__(self) -> str:
        return f"Mat4({', '.join(repr(v) for v in self._data)})"

    def __eq__(self, other):
        if not isinstance(other, Mat4):
            return NotImplemented
        if any(isinstance(v, float) for v in self._data + other._data):
            return all(abs(a - b) <= EPSILON for a, b in zip(self._data, other._data))
        return self._data == other._data

    __hash__ = None

    def __mul__(self, other):
        if not isinstance(other, Mat4):
            return NotImplemented
        a, b = self._data, other._data
        return Mat4(
            *(
                sum(a[row * 4 + k] * b[k * 4 + column] for k in range(4))
                for row in range(4)
                for column in range(4)
            )
        )

    def translate(self, vec: Vec3) -> Mat4:
        return self * Mat4(
            1, 0, 0, vec.x,
            0, 1, 0, vec.y,
            0, 0, 1, vec.z,
            0, 0, 0, 1,
        )

    def scale(self, vec: Vec3) -> Mat4:
        return self * Mat4(
            vec.x, 0, 0, 0,
            0, vec.y, 0, 0,
            0, 0, vec.z, 0,
            0, 0, 0, 1,
        )

    def rotate_x(self, degrees) -> Mat4:
        rad = deg_to_rad(degrees)
        c, s = math.cos(rad), math.sin(rad)
        return self * Mat4(
            1, 0, 0, 0,
            0, c, -s, 0,
            0, s, c, 0,
            0, 0, 0, 1,
        )

    def rotate_y(self, degrees) -> Mat4:
        rad = deg_to_rad(degrees)
        c, s = math.cos(rad), math.sin(rad)
        return self * Mat4(
            c, 0, s, 0,
            0, 1, 0, 0,
            -s, 0, c, 0,
            0, 0, 0, 1,
        )

    def rotate_z(self, degrees) -> Mat4:
        rad = deg_to_rad(degrees)
        c, s = math.cos(rad), math.sin(rad)
        return self * Mat4(
            c, -s, 0, 0,
            s, c, 0, 0,
            0, 0, 1, 0,
            0, 0, 0, 1,
        )

    def transpose(self) -> Mat4:
        d = self._data
        return Mat4(*(d[column * 4 + row] for row in range(4) for column in range(4)))

    @classmethod
    def perspective(cls, fov, aspect_ratio, z_near, z_far) -> Mat4:
        """Perspective projection; ``fov`` is in radians."""
        tan_half_fov = math.tan(fov / 2.0)
        zr = z_far - z_near
        return cls(
            1 / (aspect_ratio * tan_half_fov), 0, 0, 0,
            0, 1 / tan_half_fov, 0, 0,
            0, 0, -(z_far + z_near) / zr, -(2 * z_far * z_near) / zr,
            0, 0, -1, 0,
        )