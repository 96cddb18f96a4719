"""
Foam Document (Data Model)
==========================
The explicit per-document context. Everything a dialog or viewer needs is
reached through this object, which is passed in rather than looked up
globally.

Classes:
    Edge: A straight foam edge between two points.
    FoamDocument: The container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Mapping, Optional

from foamvis.model.affine_map import AffineMap, AffineMapNames
from foamvis.model.constraint_rotation import ConstraintRotation, ConstraintRotationNames
from foamvis.model.geometry_primitives import Vector
from foamvis.model.histogram_height import AttributeHistogramHeight, HistogramHeight
from foamvis.model.results import ValueResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge:
    begin: Vector
    end: Vector

    @property
    def length(self) -> float:
        return (self.end - self.begin).magnitude

    def label(self) -> str:
        b, e = self.begin, self.end
        return f"({b.x:g}, {b.y:g}, {b.z:g}) -> ({e.x:g}, {e.y:g}, {e.z:g})"


def cube_edges(size: float = 1.0) -> list[Edge]:
    """The 12 edges of an axis-aligned cube with a corner at the origin."""
    corners = [Vector(x * size, y * size, z * size)
               for x in (0, 1) for y in (0, 1) for z in (0, 1)]
    edges = []
    for i, a in enumerate(corners):
        for b in corners[i + 1:]:
            # neighbours differ in exactly one coordinate
            if sum(1 for d in (a.x - b.x, a.y - b.y, a.z - b.z) if d != 0) == 1:
                edges.append(Edge(a, b))
    return edges


@dataclass
class FoamDocument:
    name: str = "Untitled"
    edges: list[Edge] = field(default_factory=list)

    # Parsed DMP variables (name -> value)
    variables: dict[str, float] = field(default_factory=dict)

    affine_names: AffineMapNames = field(default_factory=AffineMapNames)
    affine_map: Optional[AffineMap] = None
    constraint_rotation_names: ConstraintRotationNames = field(default_factory=ConstraintRotationNames)
    constraint_rotation: Optional[ConstraintRotation] = None

    histogram_height: HistogramHeight = field(default_factory=HistogramHeight)
    attribute_histogram_height: AttributeHistogramHeight = field(default_factory=AttributeHistogramHeight)

    def add_edge(self, begin: Vector, end: Vector) -> Edge:
        edge = Edge(begin, end)
        self.edges.append(edge)
        return edge

    def set_variables(self, variables: Mapping[str, float]) -> list[ValueResult]:
        """
        Stores the DMP variables and resolves the configured names.

        Only names that are in use are resolved; groups not in use have no
        resolved value. Returns the results of the resolutions that were
        attempted.
        """
        self.variables = {k: float(v) for k, v in variables.items()}
        results: list[ValueResult] = []

        if not self.affine_names.is_empty():
            result = self.affine_names.resolve(self.variables)
            self.affine_map = result.value if result.ok else None
            results.append(result)
        else:
            self.affine_map = None

        if self.constraint_rotation_names.rotation_used():
            result = self.constraint_rotation_names.resolve(self.variables)
            self.constraint_rotation = result.value if result.ok else None
            results.append(result)
        else:
            self.constraint_rotation = None

        logger.debug(f"Resolved {sum(r.ok for r in results)}/{len(results)} DMP parameter sets.")
        return results

    def reset(self) -> None:
        """Clear all data for a new document"""
        self.name = "Untitled"
        self.edges = []
        self.variables = {}
        self.affine_names = AffineMapNames()
        self.affine_map = None
        self.constraint_rotation_names = ConstraintRotationNames()
        self.constraint_rotation = None
        self.histogram_height = HistogramHeight()
        self.attribute_histogram_height = AttributeHistogramHeight()
        logger.info("Foam document has been reset.")
