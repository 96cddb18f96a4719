"""
3D Edge Viewer (PyVista Wrapper)
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QStringListModel, Qt
from PySide6.QtWidgets import QAbstractItemView, QSplitter, QVBoxLayout, QWidget

from pyvistaqt import QtInteractor
import pyvista as pv

from foamvis.config import EDGE_RADIUS
from foamvis.controller.store import Store
from foamvis.model.document import FoamDocument
from foamvis.view.widgets.edge_glyphs import ArrowPosition, EdgeGlyphs
from foamvis.view.widgets.list_view_signal import ListViewSignal

logger = logging.getLogger(__name__)

EDGE_COLOR = "#4A6FA5"
SELECTED_COLOR = "#E4572E"


class EdgeViewer(QWidget):
    """Edge list on the left, PyVista scene on the right."""

    def __init__(self, store: Store, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.store = store

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        splitter = QSplitter(Qt.Horizontal, self)
        layout.addWidget(splitter)

        self.edge_list = ListViewSignal(splitter)
        self.edge_list.setSelectionMode(QAbstractItemView.ExtendedSelection)
        self._model = QStringListModel(self)
        self.edge_list.setModel(self._model)

        self.plotter: QtInteractor = QtInteractor(splitter)
        self.plotter.set_background("white")
        splitter.addWidget(self.edge_list)
        splitter.addWidget(self.plotter)
        splitter.setStretchFactor(1, 4)

        self._edge_actor: Optional[pv.Actor] = None
        self._highlight_actors: list[pv.Actor] = []

        # list view -> store -> scene
        self.edge_list.current_row_changed.connect(self.store.set_current_edge)
        self.edge_list.rows_selection_changed.connect(self.store.update_edge_selection)
        self.store.edge_selection_changed.connect(self._on_selection_changed)
        self.store.document_changed.connect(self.update_scene)

    def update_scene(self, document: Optional[FoamDocument] = None) -> None:
        document = document if document is not None else self.store.document
        logger.info(f"Updating edge scene ({len(document.edges)} edges).")
        self._model.setStringList([edge.label() for edge in document.edges])

        if self._edge_actor is not None:
            self.plotter.remove_actor(self._edge_actor)
            self._edge_actor = None

        mesh = EdgeGlyphs.edges_to_polydata(document.edges)
        if mesh.n_points > 0:
            self._edge_actor = self.plotter.add_mesh(mesh, color=EDGE_COLOR, smooth_shading=True)
        self._draw_highlights()
        self.plotter.reset_camera()

    def _on_selection_changed(self, selected: list[int], deselected: list[int]) -> None:
        self._draw_highlights()

    def _draw_highlights(self) -> None:
        for actor in self._highlight_actors:
            self.plotter.remove_actor(actor)
        self._highlight_actors = []

        edges = self.store.document.edges
        for row in self.store.selected_edges():
            if row >= len(edges):
                continue
            edge = edges[row]
            for mesh in (
                EdgeGlyphs.cylinder(edge.begin, edge.end, radius=EDGE_RADIUS * 1.5),
                EdgeGlyphs.arrow_head(edge.begin, edge.end, ArrowPosition.TOP_END),
            ):
                if mesh is not None:
                    self._highlight_actors.append(self.plotter.add_mesh(mesh, color=SELECTED_COLOR))
        self.plotter.render()

    def close_plotter(self) -> None:
        self.plotter.close()
