"""
Edge Orientation
================
Frames and end disks used to place glyphs (cylinders, cones, tubes) along
foam edges.

Functions:
    edge_rotation: Orthonormal frame whose third column follows an edge.
    edge_transform: 4x4 object-to-world matrix built from ``edge_rotation``.
    perpendicular_end: 12 and 3 o'clock axes of a disk orthogonal to a normal.
    angled_end: Same, for the disk bisecting two consecutive segments.

Classes:
    Disk: Octagonal approximation of a circle in 3D, used for stream tubes.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
import logging
import math
from typing import Optional, TYPE_CHECKING

import numpy as np

from foamvis.model.geometry_primitives import Vector, VectorLike

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

COS_45 = math.sqrt(0.5)


def edge_rotation(
    begin: VectorLike,
    end: VectorLike,
    frame: Optional[npt.NDArray[np.float64]] = None
) -> npt.NDArray[np.float64]:
    """
    Rotation that maps the Z axis onto the direction from `begin` to `end`.

    Args:
        begin: Start point of the edge.
        end: End point of the edge.
        frame: Optional (3, 3) array written in place. When omitted a new
            identity matrix is used.

    Returns:
        The frame, with columns [right, up, forward]. `forward` is the unit
        edge direction and right x up == forward.

    Notes:
        When `begin == end` (exact comparison) the frame is returned
        untouched. Callers must accept a stale frame for collapsed edges.
    """
    if frame is None:
        frame = np.identity(3, dtype=np.float64)
    elif frame.shape != (3, 3):
        raise ValueError(f"Expected a (3, 3) frame, got {frame.shape}.")
    elif not np.issubdtype(frame.dtype, np.floating):
        raise ValueError(f"Expected a floating point frame, got {frame.dtype}.")

    direction = Vector.from_any(end, allow_2d=False) - Vector.from_any(begin, allow_2d=False)
    if direction.is_zero():
        logger.debug(f"Zero-length edge at {begin}, frame left unchanged.")
        return frame

    forward = direction.unit()
    right, up = forward.tangents()
    frame[:, 0] = right.to_array()
    frame[:, 1] = up.to_array()
    frame[:, 2] = forward.to_array()
    return frame


def edge_transform(
    begin: VectorLike,
    end: VectorLike,
    origin: Optional[VectorLike] = None
) -> npt.NDArray[np.float64]:
    """
    Homogeneous object-to-world matrix for a glyph built along +Z.

    The glyph origin is placed at `origin` (defaults to `begin`).
    """
    matrix = np.identity(4, dtype=np.float64)
    matrix[:3, :3] = edge_rotation(begin, end)
    translation = Vector.from_any(begin if origin is None else origin)
    matrix[:3, 3] = translation.to_array()
    return matrix


def perpendicular_end(normal: VectorLike) -> tuple[Vector, Vector]:
    """
    Axes of a disk orthogonal to `normal`.

    The 12 o'clock axis is the projection of +X onto the plane through the
    origin with the given normal (+Y when the normal is along X); the
    3 o'clock axis is 12 o'clock x normal.

    Raises:
        ValueError: If `normal` is the zero vector.
    """
    n = Vector.from_any(normal).unit()
    reference = Vector(1.0, 0.0, 0.0)
    projected = reference - n * n.dot(reference)
    if projected.magnitude < 1e-9:
        reference = Vector(0.0, 1.0, 0.0)
        projected = reference - n * n.dot(reference)
    twelve_oclock = projected.unit()
    three_oclock = twelve_oclock.cross(n)
    return twelve_oclock, three_oclock


def perpendicular_end_between(begin: VectorLike, end: VectorLike) -> tuple[Vector, Vector]:
    """Disk axes orthogonal to the segment `begin` -> `end`."""
    return perpendicular_end(Vector.from_any(end) - Vector.from_any(begin))


def angled_end(
    before: VectorLike,
    p: VectorLike,
    after: VectorLike
) -> tuple[Vector, Vector]:
    """Disk axes at `p`, bisecting the segments before->p and p->after."""
    p = Vector.from_any(p)
    first_normal = (p - Vector.from_any(before)).unit()
    second_normal = (Vector.from_any(after) - p).unit()
    return perpendicular_end(first_normal + second_normal)


class DiskVertex(IntEnum):
    """
    Octagon vertices, clockwise starting at 12 o'clock::

                  V0
             V7        V1
          V6      o       V2
             V5        V3
                  V4
    """
    VERTEX0 = 0
    VERTEX1 = 1
    VERTEX2 = 2
    VERTEX3 = 3
    VERTEX4 = 4
    VERTEX5 = 5
    VERTEX6 = 6
    VERTEX7 = 7


@dataclass(frozen=True)
class Disk:
    """
    A zero-height polygonal disk (octagon) in 3D.

    Built from a center, the unit 12 o'clock and 3 o'clock directions and a
    radius. The stored axes are already scaled by the radius.
    """
    center: Vector
    twelve_oclock: Vector
    three_oclock: Vector
    radius: float

    COUNT = 8

    @classmethod
    def create(
        cls,
        center: VectorLike,
        twelve_oclock: Vector,
        three_oclock: Vector,
        radius: float
    ) -> Disk:
        return cls(
            center=Vector.from_any(center),
            twelve_oclock=twelve_oclock * radius,
            three_oclock=three_oclock * radius,
            radius=radius,
        )

    def vertex(self, index: int) -> Vector:
        c, t, r = self.center, self.twelve_oclock, self.three_oclock
        if index == DiskVertex.VERTEX0:
            return c + t
        if index == DiskVertex.VERTEX1:
            return c + t * COS_45 + r * COS_45
        if index == DiskVertex.VERTEX2:
            return c + r
        if index == DiskVertex.VERTEX3:
            return c - t * COS_45 + r * COS_45
        if index == DiskVertex.VERTEX4:
            return c - t
        if index == DiskVertex.VERTEX5:
            return c - t * COS_45 - r * COS_45
        if index == DiskVertex.VERTEX6:
            return c - r
        if index == DiskVertex.VERTEX7:
            return c + t * COS_45 - r * COS_45
        raise IndexError(f"Disk has no vertex {index}.")

    def vertices(self) -> npt.NDArray[np.float64]:
        """(8, 3) array of the octagon vertices."""
        return np.array([self.vertex(i).to_array() for i in range(self.COUNT)])

    @staticmethod
    def next_vertex_index(index: int) -> DiskVertex:
        return DiskVertex((index + 1) % Disk.COUNT)

    def normal(self) -> Vector:
        return self.three_oclock.cross(self.twelve_oclock).unit()

    def vertex_normal(self, index: int) -> Vector:
        """Radial direction at a vertex."""
        return (self.vertex(index) - self.center).unit()

    def circumference(self) -> float:
        """Perimeter of the octagon."""
        total = 0.0
        for i in range(self.COUNT):
            edge = self.vertex(self.next_vertex_index(i)) - self.vertex(i)
            total += edge.magnitude
        return total
