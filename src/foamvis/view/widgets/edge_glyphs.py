"""
Edge Glyphs (PyVista)
Builds meshes that represent foam edges: cylinders, arrow heads and tubes.
Each glyph is created along +Z and moved into place with the edge frame.
"""
from __future__ import annotations

from enum import Enum
import logging
from typing import Optional, Sequence

import numpy as np
import pyvista as pv

from foamvis.config import ARROW_BASE_RADIUS, ARROW_HEIGHT, EDGE_RADIUS, QUADRIC_SLICES
from foamvis.model.document import Edge
from foamvis.model.edge_frame import Disk, angled_end, edge_transform, perpendicular_end_between
from foamvis.model.geometry_primitives import Vector, VectorLike

logger = logging.getLogger(__name__)


class ArrowPosition(str, Enum):
    BASE_MIDDLE = "base_middle"  # cone base at the middle of the edge
    TOP_END = "top_end"  # cone apex at the end of the edge


class EdgeGlyphs:
    @staticmethod
    def cylinder(
        begin: VectorLike,
        end: VectorLike,
        radius: float = EDGE_RADIUS,
        resolution: int = QUADRIC_SLICES
    ) -> Optional[pv.PolyData]:
        """Open cylinder from `begin` to `end`. None for a zero-length edge."""
        b, e = Vector.from_any(begin), Vector.from_any(end)
        length = (e - b).magnitude
        if length == 0.0:
            return None
        local = pv.Cylinder(
            center=(0.0, 0.0, length / 2.0),
            direction=(0.0, 0.0, 1.0),
            radius=radius,
            height=length,
            resolution=resolution,
            capping=False,
        )
        return local.transform(edge_transform(b, e), inplace=False)

    @staticmethod
    def arrow_head(
        begin: VectorLike,
        end: VectorLike,
        position: ArrowPosition = ArrowPosition.TOP_END,
        base_radius: float = ARROW_BASE_RADIUS,
        height: float = ARROW_HEIGHT,
        resolution: int = QUADRIC_SLICES
    ) -> Optional[pv.PolyData]:
        """Capped cone pointing from `begin` toward `end`."""
        b, e = Vector.from_any(begin), Vector.from_any(end)
        direction = e - b
        if direction.is_zero():
            return None
        if position is ArrowPosition.BASE_MIDDLE:
            origin = (b + e) / 2.0
        else:
            origin = e - direction.unit() * height
        local = pv.Cone(
            center=(0.0, 0.0, height / 2.0),
            direction=(0.0, 0.0, 1.0),
            height=height,
            radius=base_radius,
            resolution=resolution,
            capping=True,
        )
        return local.transform(edge_transform(b, e, origin), inplace=False)

    @staticmethod
    def tube_disks(points: Sequence[VectorLike], radius: float = EDGE_RADIUS) -> list[Disk]:
        """
        One disk per polyline point: perpendicular at the ends, bisecting
        the two neighbouring segments inside.
        """
        pts = EdgeGlyphs._distinct(points)
        if len(pts) < 2:
            return []

        disks = []
        last = len(pts) - 1
        for i, p in enumerate(pts):
            if i == 0:
                twelve, three = perpendicular_end_between(pts[0], pts[1])
            elif i == last:
                twelve, three = perpendicular_end_between(pts[last - 1], pts[last])
            else:
                try:
                    twelve, three = angled_end(pts[i - 1], p, pts[i + 1])
                except ValueError:
                    # segments fold back onto each other
                    twelve, three = perpendicular_end_between(pts[i - 1], p)
            disks.append(Disk.create(p, twelve, three, radius))
        return disks

    @staticmethod
    def tube(points: Sequence[VectorLike], radius: float = EDGE_RADIUS) -> Optional[pv.PolyData]:
        """Octagonal tube through a polyline, made of quads between disks."""
        disks = EdgeGlyphs.tube_disks(points, radius)
        if not disks:
            return None

        vertices = np.vstack([disk.vertices() for disk in disks])
        faces: list[int] = []
        for d in range(len(disks) - 1):
            a0 = d * Disk.COUNT
            b0 = (d + 1) * Disk.COUNT
            for i in range(Disk.COUNT):
                j = Disk.next_vertex_index(i)
                faces.extend([4, a0 + i, a0 + j, b0 + j, b0 + i])
        return pv.PolyData(vertices, np.array(faces, dtype=np.int_))

    @staticmethod
    def edges_to_polydata(edges: Sequence[Edge], radius: float = EDGE_RADIUS) -> pv.DataSet:
        """All edges as cylinders in a single mesh."""
        meshes = []
        for edge in edges:
            mesh = EdgeGlyphs.cylinder(edge.begin, edge.end, radius)
            if mesh is None:
                logger.debug(f"Skipping zero-length edge at {edge.begin}.")
                continue
            meshes.append(mesh)
        if not meshes:
            return pv.PolyData()
        return pv.merge(meshes)

    @staticmethod
    def _distinct(points: Sequence[VectorLike]) -> list[Vector]:
        """Drops consecutive repeated points."""
        result: list[Vector] = []
        for p in points:
            v = Vector.from_any(p)
            if not result or not (v - result[-1]).is_zero():
                result.append(v)
        return result

