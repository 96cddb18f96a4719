from __future__ import annotations

import dataclasses

import pytest

from foamvis.model.constraint_rotation import ConstraintRotation, ConstraintRotationNames
from foamvis.model.geometry_primitives import Point2D
from foamvis.model.results import ValueStatus


def test_rotation_is_a_plain_value() -> None:
    rotation = ConstraintRotation(center=Point2D(3.0, 4.0), angle=1.2, constraint_index=7)

    assert rotation.center == Point2D(3.0, 4.0)
    assert (rotation.center.x, rotation.center.y) == (3.0, 4.0)
    assert rotation.angle == 1.2
    assert rotation.constraint_index == 7
    # reading twice does not change anything
    assert rotation.angle == 1.2
    with pytest.raises(dataclasses.FrozenInstanceError):
        rotation.angle = 0.0  # type: ignore[misc]


def test_rotation_defaults() -> None:
    rotation = ConstraintRotation()

    assert rotation.angle == 0.0
    assert rotation.center == Point2D(0.0, 0.0)


def test_names_usage_flags() -> None:
    names = ConstraintRotationNames()
    assert not names.constraint_used()
    assert not names.rotation_used()

    names.constraint_index = 0
    names.x_name = "cx"
    assert names.constraint_used()
    assert names.rotation_used()


@pytest.mark.parametrize("text", ["7 cx cy theta", "7,cx,cy,theta", "  7  cx cy   theta "])
def test_parse_command_line_argument(text: str) -> None:
    result = ConstraintRotationNames.parse(text)

    assert result.ok
    assert result.value == ConstraintRotationNames(7, "cx", "cy", "theta")


@pytest.mark.parametrize("text", ["", "7 cx cy", "7 cx cy theta extra", "seven cx cy theta", "-1 cx cy theta"])
def test_parse_rejects_malformed_argument(text: str) -> None:
    result = ConstraintRotationNames.parse(text)

    assert result.status is ValueStatus.INVALID_VALUE
    assert result.value is None
    assert result.message


def test_resolve_builds_rotation() -> None:
    names = ConstraintRotationNames(7, "cx", "cy", "theta")

    result = names.resolve({"cx": 3.0, "cy": 4.0, "theta": 1.2})

    assert result.ok
    assert result.value == ConstraintRotation(Point2D(3.0, 4.0), 1.2, 7)


def test_resolve_reports_missing_variables() -> None:
    names = ConstraintRotationNames(7, "cx", "cy", "theta")

    result = names.resolve({"cx": 3.0})

    assert not result.ok
    assert "cy" in result.message and "theta" in result.message


def test_resolve_without_constraint_index_is_invalid() -> None:
    names = ConstraintRotationNames(None, "cx", "cy", "theta")

    assert not names.resolve({"cx": 1.0, "cy": 1.0, "theta": 1.0}).ok
