"""
Constraint Rotation
===================
A constraint that moves (translates and rotates) through the foam.

The rotation (in radians) follows the left-hand rule: around a Z axis pointing
toward the viewer a positive angle is clockwise, and zero is the positive Y
axis.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Mapping, Optional

from foamvis.model.geometry_primitives import Point2D
from foamvis.model.results import ValueResult

logger = logging.getLogger(__name__)


@dataclass
class ConstraintRotationNames:
    """
    Names of the DMP variables that store the rotation center and angle,
    and the number of the constraint they apply to.
    """
    constraint_index: Optional[int] = None
    x_name: str = ""
    y_name: str = ""
    angle_name: str = ""

    def constraint_used(self) -> bool:
        return self.constraint_index is not None

    def rotation_used(self) -> bool:
        return self.x_name != ""

    @classmethod
    def parse(cls, text: str) -> ValueResult[ConstraintRotationNames]:
        """
        Parses ``"<constraint> <xName> <yName> <angleName>"``.

        Commas are accepted as separators as well as whitespace.
        """
        tokens = text.replace(",", " ").split()
        if len(tokens) != 4:
            return ValueResult.invalid(
                "--constraint-rotation needs four parameters.")
        try:
            index = int(tokens[0])
        except ValueError:
            return ValueResult.invalid(
                f"Constraint number must be an integer, got '{tokens[0]}'.")
        if index < 0:
            return ValueResult.invalid(
                f"Constraint number must not be negative, got {index}.")
        return ValueResult.success(cls(
            constraint_index=index,
            x_name=tokens[1],
            y_name=tokens[2],
            angle_name=tokens[3],
        ))

    def resolve(self, variables: Mapping[str, float]) -> ValueResult[ConstraintRotation]:
        """Builds the rotation from parsed DMP variable values."""
        if not self.constraint_used():
            return ValueResult.invalid("No constraint index set.")
        missing = [
            name for name in (self.x_name, self.y_name, self.angle_name)
            if name not in variables
        ]
        if missing:
            logger.warning(f"DMP variables {missing} not found for constraint {self.constraint_index}.")
            return ValueResult.invalid(f"Variables not found: {', '.join(missing)}.")
        return ValueResult.success(ConstraintRotation(
            center=Point2D(float(variables[self.x_name]), float(variables[self.y_name])),
            angle=float(variables[self.angle_name]),
            constraint_index=self.constraint_index,
        ))


@dataclass(frozen=True)
class ConstraintRotation:
    center: Point2D = field(default_factory=Point2D)
    angle: float = 0.0
    constraint_index: Optional[int] = None
