"""
Result values for operations that may receive invalid user input.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

from foamvis.errors import InvalidValueError

T = TypeVar("T")


class ValueStatus(str, Enum):
    OK = "ok"
    INVALID_VALUE = "invalid_value"


@dataclass(frozen=True)
class ValueResult(Generic[T]):
    """Outcome of parsing or resolving a value."""
    status: ValueStatus
    value: Optional[T] = None
    message: str = ""

    @classmethod
    def success(cls, value: T) -> ValueResult[T]:
        return cls(status=ValueStatus.OK, value=value)

    @classmethod
    def invalid(cls, message: str) -> ValueResult[T]:
        return cls(status=ValueStatus.INVALID_VALUE, message=message)

    @property
    def ok(self) -> bool:
        return self.status is ValueStatus.OK

    def unwrap(self) -> T:
        if not self.ok:
            raise InvalidValueError(self.message)
        return self.value
