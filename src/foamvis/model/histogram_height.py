"""
Histogram Height Settings
=========================
State edited by the histogram height dialogs. The dialogs only forward user
actions here; the objects have no knowledge of Qt.

Classes:
    HistogramHeight: Fixed value or maximum value, plus log scale.
    AttributeHistogramHeight: Height taken from all time steps, the current
        time step, or a user value.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging

from foamvis.config import HISTOGRAM_VALUE_MAX, HISTOGRAM_VALUE_MIN
from foamvis.model.results import ValueResult

logger = logging.getLogger(__name__)


def parse_height(text: str) -> ValueResult[int]:
    """Parse a histogram height typed by the user."""
    stripped = text.strip()
    try:
        value = int(stripped)
    except ValueError:
        return ValueResult.invalid(f"'{text}' is not an integer.")
    if not HISTOGRAM_VALUE_MIN <= value <= HISTOGRAM_VALUE_MAX:
        return ValueResult.invalid(
            f"{value} is outside [{HISTOGRAM_VALUE_MIN}, {HISTOGRAM_VALUE_MAX}].")
    return ValueResult.success(value)


class HeightState(str, Enum):
    MAX_VALUE = "max_value"
    VALUE = "value"


@dataclass
class HistogramHeight:
    state: HeightState = HeightState.VALUE
    value: int = 0
    max_value: int = 0
    log_scale: bool = False

    def toggle_max_value(self) -> None:
        self.state = HeightState.MAX_VALUE
        self.value = self.max_value

    def toggle_value(self) -> None:
        self.state = HeightState.VALUE

    def set_value(self, value: int) -> None:
        """Sets the value and selects the VALUE state."""
        self.value = value
        self.state = HeightState.VALUE

    def set_max_value(self, max_value: int) -> None:
        self.max_value = max_value
        if self.state is HeightState.MAX_VALUE:
            self.value = max_value

    def set_log_scale(self, log_scale: bool) -> None:
        self.log_scale = log_scale

    def edit_value(self, text: str) -> ValueResult[int]:
        """
        Applies a typed value. Invalid text keeps the previous value.
        """
        result = parse_height(text)
        if result.ok:
            self.value = result.value
        else:
            logger.warning(f"Histogram height rejected: {result.message}")
        return result


class AttributeHeight(str, Enum):
    MAXIMUM_TIME_STEPS = "maximum_time_steps"
    CURRENT_TIME_STEP = "current_time_step"
    OTHER_VALUE = "other_value"


@dataclass
class AttributeHistogramHeight:
    height: AttributeHeight = AttributeHeight.MAXIMUM_TIME_STEPS
    other_value: int = 0

    def select(self, height: AttributeHeight) -> None:
        self.height = height

    def edit_other_value(self, text: str) -> ValueResult[int]:
        result = parse_height(text)
        if result.ok:
            self.other_value = result.value
        else:
            logger.warning(f"Attribute histogram height rejected: {result.message}")
        return result
