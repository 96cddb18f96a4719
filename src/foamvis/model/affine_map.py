"""
Affine Parameters
=================
Position of a foam object read from a DMP file: an (x, y) offset and a
rotation angle, together with the names of the DMP variables that store them.

Classes:
    AffineMapNames: The three DMP variable names (x, y, angle).
    AffineMap: The three values (x, y, angle).
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Mapping

from foamvis.model.results import ValueResult

logger = logging.getLogger(__name__)

X_INDEX = 0
Y_INDEX = 1
ANGLE_INDEX = 2
SIZE = 3


def _check_index(i: int) -> None:
    if not 0 <= i < SIZE:
        raise IndexError(f"Affine map index {i} out of range 0..{SIZE - 1}.")


@dataclass
class AffineMapNames:
    """Names of the DMP variables holding x, y and the angle."""
    _names: list[str] = field(default_factory=lambda: [""] * SIZE)

    def __post_init__(self) -> None:
        if len(self._names) != SIZE:
            raise ValueError(f"Expected {SIZE} names, got {len(self._names)}.")

    @classmethod
    def from_names(cls, x: str, y: str, angle: str) -> AffineMapNames:
        return cls([x, y, angle])

    def __len__(self) -> int:
        return SIZE

    def size(self) -> int:
        return SIZE

    def is_empty(self) -> bool:
        return self.x == ""

    @property
    def x(self) -> str:
        return self._names[X_INDEX]

    @property
    def y(self) -> str:
        return self._names[Y_INDEX]

    @property
    def angle(self) -> str:
        return self._names[ANGLE_INDEX]

    def set(self, i: int, name: str) -> None:
        _check_index(i)
        self._names[i] = name

    def get(self, i: int) -> str:
        _check_index(i)
        return self._names[i]

    def resolve(self, variables: Mapping[str, float]) -> ValueResult[AffineMap]:
        """
        Look the three names up in the parsed DMP variables.

        Returns an invalid result naming the first missing variable.
        """
        affine_map = AffineMap()
        for i, name in enumerate(self._names):
            if name not in variables:
                logger.warning(f"DMP variable '{name}' not found for affine map.")
                return ValueResult.invalid(f"Variable '{name}' not found.")
            affine_map.set(i, float(variables[name]))
        return ValueResult.success(affine_map)


@dataclass
class AffineMap:
    """The x, y offset and the rotation angle (radians) of a foam object."""
    _values: list[float] = field(default_factory=lambda: [0.0] * SIZE)

    def __post_init__(self) -> None:
        if len(self._values) != SIZE:
            raise ValueError(f"Expected {SIZE} values, got {len(self._values)}.")

    @classmethod
    def from_values(cls, x: float, y: float, angle: float) -> AffineMap:
        return cls([x, y, angle])

    def __len__(self) -> int:
        return SIZE

    def size(self) -> int:
        return SIZE

    @property
    def x(self) -> float:
        return self._values[X_INDEX]

    @property
    def y(self) -> float:
        return self._values[Y_INDEX]

    @property
    def angle(self) -> float:
        return self._values[ANGLE_INDEX]

    def set(self, i: int, value: float) -> None:
        _check_index(i)
        self._values[i] = value

    def get(self, i: int) -> float:
        _check_index(i)
        return self._values[i]
