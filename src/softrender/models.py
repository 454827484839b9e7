# models.py
from __future__ import annotations

from collections.abc import Iterator
import math

import numpy as np

from softrender.errors import DegenerateVectorError
from softrender.types import COLOR, MAT3

# Lengths below this are treated as zero by normalize()
NORMALIZE_EPSILON = 1e-12


class Vector3:
    __slots__ = ["x", "y", "z"]

    def __init__(self, x: float, y: float, z: float) -> None:
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Vector3 is immutable (cannot set {name!r})")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __repr__(self) -> str:
        return f"Vector3({self.x!r}, {self.y!r}, {self.z!r})"

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vector3:  # Handles: scalar * vector
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector3:
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def length(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def normalize(self) -> Vector3:
        """Return the unit vector; raises DegenerateVectorError for zero length."""
        length = self.length()
        if length < NORMALIZE_EPSILON:
            raise DegenerateVectorError(f"cannot normalize {self!r}")
        return self / length

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def midpoint(self, other: Vector3) -> Vector3:
        return Vector3(
            (self.x + other.x) / 2,
            (self.y + other.y) / 2,
            (self.z + other.z) / 2,
        )


def midpoint(a: Vector3, b: Vector3) -> Vector3:
    return a.midpoint(b)


def cross(a: Vector3, b: Vector3) -> Vector3:
    return a.cross(b)


def normalize(v: Vector3) -> Vector3:
    return v.normalize()


class Triangle:
    """One flat-colored facet. Vertex order fixes the barycentric winding."""

    __slots__ = ["v1", "v2", "v3", "color"]

    def __init__(self, v1: Vector3, v2: Vector3, v3: Vector3, color: COLOR) -> None:
        self.v1 = v1
        self.v2 = v2
        self.v3 = v3
        self.color = color

    def __iter__(self) -> Iterator[Vector3]:
        yield self.v1
        yield self.v2
        yield self.v3

    def __repr__(self) -> str:
        return f"Triangle({self.v1!r}, {self.v2!r}, {self.v3!r}, color={self.color!r})"


Mesh = list[Triangle]


class Matrix3:
    """
    3x3 linear transform stored row-major in a float64 numpy array.

    ``a.compose(b)`` is the product ``a @ b``: applying the result to a
    vector applies ``b`` first and then ``a``.
    """

    __slots__ = ["values"]

    def __init__(self, values: MAT3 | list[float]) -> None:
        arr = np.asarray(values, dtype=np.float64)
        if arr.size != 9:
            raise ValueError(f"Matrix3 needs 9 values, got {arr.size}")
        self.values = arr.reshape(3, 3)

    @classmethod
    def identity(cls) -> Matrix3:
        return cls(np.eye(3, dtype=np.float64))

    def apply(self, v: Vector3) -> Vector3:
        m = self.values
        return Vector3(
            v.x * m[0, 0] + v.y * m[0, 1] + v.z * m[0, 2],
            v.x * m[1, 0] + v.y * m[1, 1] + v.z * m[1, 2],
            v.x * m[2, 0] + v.y * m[2, 1] + v.z * m[2, 2],
        )

    def compose(self, other: Matrix3) -> Matrix3:
        return Matrix3(self.values @ other.values)

    def __matmul__(self, other: Matrix3) -> Matrix3:
        return self.compose(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix3):
            return NotImplemented
        return bool(np.array_equal(self.values, other.values))

    def __repr__(self) -> str:
        return f"Matrix3({self.values.ravel().tolist()!r})"
