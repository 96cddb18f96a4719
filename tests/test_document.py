from __future__ import annotations

from foamvis.model.affine_map import AffineMapNames
from foamvis.model.constraint_rotation import ConstraintRotationNames
from foamvis.model.document import FoamDocument, cube_edges
from foamvis.model.geometry_primitives import Point2D, Vector


def test_cube_has_twelve_unit_edges() -> None:
    edges = cube_edges(2.0)

    assert len(edges) == 12
    assert all(edge.length == 2.0 for edge in edges)


def test_set_variables_resolves_names_in_use() -> None:
    document = FoamDocument(
        affine_names=AffineMapNames.from_names("ox", "oy", "oa"),
        constraint_rotation_names=ConstraintRotationNames(3, "cx", "cy", "ca"),
    )

    results = document.set_variables({"ox": 1, "oy": 2, "oa": 0.5, "cx": 3, "cy": 4, "ca": 1.2})

    assert all(r.ok for r in results)
    assert (document.affine_map.x, document.affine_map.y, document.affine_map.angle) == (1.0, 2.0, 0.5)
    assert document.constraint_rotation.center == Point2D(3.0, 4.0)
    assert document.constraint_rotation.constraint_index == 3


def test_set_variables_skips_unused_names() -> None:
    document = FoamDocument()

    assert document.set_variables({"a": 1.0}) == []
    assert document.affine_map is None
    assert document.constraint_rotation is None


def test_failed_resolution_clears_previous_value() -> None:
    document = FoamDocument(constraint_rotation_names=ConstraintRotationNames(1, "cx", "cy", "ca"))
    document.set_variables({"cx": 1, "cy": 1, "ca": 1})
    assert document.constraint_rotation is not None

    results = document.set_variables({"cx": 1})

    assert not results[0].ok
    assert document.constraint_rotation is None


def test_reset_clears_everything() -> None:
    document = FoamDocument(name="foam", edges=cube_edges())
    document.add_edge(Vector(0, 0, 0), Vector(1, 1, 1))
    document.histogram_height.set_value(9)

    document.reset()

    assert document.name == "Untitled"
    assert document.edges == []
    assert document.histogram_height.value == 0


def test_names_no_longer_in_use_clear_resolved_values() -> None:
    document = FoamDocument(
        affine_names=AffineMapNames.from_names("ox", "oy", "oa"),
        constraint_rotation_names=ConstraintRotationNames(3, "cx", "cy", "ca"),
    )
    variables = {"ox": 1, "oy": 2, "oa": 0.5, "cx": 3, "cy": 4, "ca": 1.2}
    document.set_variables(variables)
    assert document.affine_map is not None
    assert document.constraint_rotation is not None

    document.affine_names = AffineMapNames()
    document.constraint_rotation_names = ConstraintRotationNames(3)

    assert document.set_variables(variables) == []
    assert document.affine_map is None
    assert document.constraint_rotation is None
