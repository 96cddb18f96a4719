"""
Geometric Primitives for edge glyphs and DMP data.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Union, TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt

@dataclass(frozen=True)
class Vector:
    """
    A vector in 3D space representing direction and magnitude.
    """
    x: float
    y: float
    z: float = 0.0

    @classmethod
    def from_any(cls, value: VectorLike, allow_2d: bool = True) -> Vector:
        """
        Accepts a Vector, a numpy array or any 2/3 element sequence.

        With ``allow_2d=False`` only 3 component sequences are accepted; a
        Vector is always taken as is.
        """
        if isinstance(value, Vector):
            return value
        arr = np.asarray(value, dtype=np.float64).reshape(-1)
        if arr.shape[0] == 2 and allow_2d:
            return cls(float(arr[0]), float(arr[1]))
        if arr.shape[0] != 3:
            expected = "2 or 3" if allow_2d else "3"
            raise ValueError(f"Expected {expected} components, got {arr.shape[0]}.")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        if scalar == 0.0: raise ZeroDivisionError
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y, self.z)

    def is_zero(self) -> bool:
        """Exact comparison, no tolerance."""
        return self.x == 0.0 and self.y == 0.0 and self.z == 0.0

    def unit(self) -> Vector:
        mag = self.magnitude
        if mag == 0.0:
            raise ValueError("Cannot normalize a zero-length vector.")
        return self / mag

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def tangents(self) -> tuple[Vector, Vector]:
        """
        Two unit vectors perpendicular to this (unit) vector and to each other.

        The first tangent is built by crossing against the coordinate axis
        in which this vector has the smallest component, which keeps the
        construction away from near-parallel cross products. The second is
        ``self x first`` so that ``first x second == self``.
        """
        components = (abs(self.x), abs(self.y), abs(self.z))
        axis = components.index(min(components))
        helper = (Vector(1.0, 0.0, 0.0), Vector(0.0, 1.0, 0.0), Vector(0.0, 0.0, 1.0))[axis]
        first = helper.cross(self).unit()
        second = self.cross(first)
        return first, second

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])


@dataclass(frozen=True)
class Point2D:
    """A point in the XY plane (rotation centers, translations)."""
    x: float = 0.0
    y: float = 0.0


# Anything that can stand in for a 3D vector at the public API
VectorLike = Union[Vector, Sequence[float], "npt.NDArray[np.float64]"]
