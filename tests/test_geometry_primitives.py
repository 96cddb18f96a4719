from __future__ import annotations

import numpy as np
import pytest

from foamvis.model.geometry_primitives import Vector


def test_planar_sequence_defaults_to_z_zero() -> None:
    assert Vector.from_any((1, 2)) == Vector(1.0, 2.0, 0.0)


def test_planar_sequence_can_be_refused() -> None:
    with pytest.raises(ValueError, match="Expected 3 components"):
        Vector.from_any(np.array([1.0, 2.0]), allow_2d=False)


def test_vector_passes_through_unchanged() -> None:
    v = Vector(1.0, 2.0)

    assert Vector.from_any(v, allow_2d=False) is v


@pytest.mark.parametrize("axis", [(1, 0, 0), (0, 1, 0), (0, 0, 1), (1, 2, 3)])
def test_tangents_complete_a_right_handed_basis(axis) -> None:
    forward = Vector.from_any(axis).unit()

    first, second = forward.tangents()

    assert first.dot(forward) == pytest.approx(0.0, abs=1e-12)
    assert second.dot(first) == pytest.approx(0.0, abs=1e-12)
    assert first.cross(second).to_array() == pytest.approx(forward.to_array())
