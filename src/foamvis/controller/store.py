from __future__ import annotations

from dataclasses import replace
import logging
from typing import Mapping, Optional

from PySide6.QtCore import QObject, Signal

from foamvis.model.constraint_rotation import ConstraintRotationNames
from foamvis.model.document import FoamDocument
from foamvis.model.histogram_height import AttributeHistogramHeight, HistogramHeight
from foamvis.model.results import ValueResult

logger = logging.getLogger(__name__)


class Store(QObject):
    """
    Owns one FoamDocument and announces its changes.

    Widgets translate toolkit events into calls on the store; listeners get
    plain Python payloads (documents, row numbers, row lists).
    """
    document_changed = Signal(object)
    histogram_height_changed = Signal(object)
    attribute_histogram_height_changed = Signal(object)
    constraint_rotation_changed = Signal(object)
    current_edge_changed = Signal(int, int)
    edge_selection_changed = Signal(object, object)

    def __init__(self, document: Optional[FoamDocument] = None) -> None:
        super().__init__()
        self.document = document if document is not None else FoamDocument()
        self._current_edge = -1
        self._selected_edges: set[int] = set()

    # ---- edges ----

    def current_edge(self) -> int:
        return self._current_edge

    def selected_edges(self) -> list[int]:
        return sorted(self._selected_edges)

    def set_current_edge(self, current: int, previous: int) -> None:
        self._current_edge = current
        self.current_edge_changed.emit(current, previous)

    def update_edge_selection(self, selected: list[int], deselected: list[int]) -> None:
        self._selected_edges.difference_update(deselected)
        self._selected_edges.update(selected)
        self.edge_selection_changed.emit(list(selected), list(deselected))

    # ---- DMP parameters ----

    def set_constraint_rotation_names(self, names: ConstraintRotationNames) -> None:
        self.document.constraint_rotation_names = names
        if self.document.variables:
            self.set_variables(self.document.variables)

    def set_variables(self, variables: Mapping[str, float]) -> list[ValueResult]:
        results = self.document.set_variables(variables)
        self.constraint_rotation_changed.emit(self.document.constraint_rotation)
        self.document_changed.emit(self.document)
        return results

    # ---- histogram height ----

    def set_histogram_height(self, height: HistogramHeight) -> None:
        """Replaces the histogram height, e.g. with the result of an accepted dialog."""
        self.document.histogram_height = replace(height)
        logger.debug(f"Histogram height set to {height}.")
        self.histogram_height_changed.emit(self.document.histogram_height)

    def set_attribute_histogram_height(self, height: AttributeHistogramHeight) -> None:
        self.document.attribute_histogram_height = replace(height)
        logger.debug(f"Attribute histogram height set to {height}.")
        self.attribute_histogram_height_changed.emit(self.document.attribute_histogram_height)
