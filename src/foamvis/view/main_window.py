"""
Main Application Window
=======================
The primary GUI container that holds the Menu Bar, the edge viewer and the
status line.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects global actions (dialogs, reset) to the store.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtWidgets import QMainWindow
from PySide6.QtGui import QAction, QCloseEvent

from foamvis.controller.store import Store
from foamvis.model.constraint_rotation import ConstraintRotation
from foamvis.view.dialogs.attribute_histogram_height_dialog import AttributeHistogramHeightDialog
from foamvis.view.dialogs.histogram_height_dialog import HistogramHeightDialog
from foamvis.view.widgets.edge_viewer import EdgeViewer

logger = logging.getLogger(__name__)

VISIBLE_APP_NAME = "FoamVis"


class MainWindow(QMainWindow):
    def __init__(self, store: Store) -> None:
        super().__init__()
        self.store = store
        self.setWindowTitle(f"{VISIBLE_APP_NAME} - [{self.store.document.name}]")
        self.resize(1200, 800)

        self.viewer = EdgeViewer(self.store, self)
        self.setCentralWidget(self.viewer)

        # Created once, reloaded from the store every time they are shown
        self.histogram_height_dialog = HistogramHeightDialog(self)
        self.attribute_height_dialog = AttributeHistogramHeightDialog(self)

        self._create_actions()
        self._create_menus()

        self.store.constraint_rotation_changed.connect(self.on_constraint_rotation_changed)
        self.store.current_edge_changed.connect(self.on_current_edge_changed)

        self.viewer.update_scene()
        self.on_constraint_rotation_changed(self.store.document.constraint_rotation)

    def _create_actions(self) -> None:
        self.act_new = QAction("New", self)
        self.act_new.triggered.connect(self.on_file_new)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

        self.act_histogram_height = QAction("Histogram Height...", self)
        self.act_histogram_height.triggered.connect(self.on_histogram_height)

        self.act_attribute_height = QAction("Attribute Histogram Height...", self)
        self.act_attribute_height.triggered.connect(self.on_attribute_histogram_height)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self.act_new)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

        view_menu = menu_bar.addMenu("&View")
        view_menu.addAction(self.act_histogram_height)
        view_menu.addAction(self.act_attribute_height)

    # --- SLOTS ---
    def on_file_new(self) -> None:
        self.store.document.reset()
        self.store.document_changed.emit(self.store.document)
        self.on_constraint_rotation_changed(None)

    def on_histogram_height(self) -> None:
        height = self.histogram_height_dialog.run(self.store.document.histogram_height)
        if height is not None:
            self.store.set_histogram_height(height)

    def on_attribute_histogram_height(self) -> None:
        height = self.attribute_height_dialog.run(self.store.document.attribute_histogram_height)
        if height is not None:
            self.store.set_attribute_histogram_height(height)

    def on_current_edge_changed(self, current: int, previous: int) -> None:
        edges = self.store.document.edges
        if 0 <= current < len(edges):
            edge = edges[current]
            self.statusBar().showMessage(f"Edge {current}: length {edge.length:.4g}")

    def on_constraint_rotation_changed(self, rotation: Optional[ConstraintRotation]) -> None:
        if rotation is None:
            self.statusBar().clearMessage()
            return
        self.statusBar().showMessage(
            f"Constraint {rotation.constraint_index}: center "
            f"({rotation.center.x:g}, {rotation.center.y:g}), angle {rotation.angle:g} rad"
        )

    def closeEvent(self, event: QCloseEvent, /) -> None:
        self.viewer.close_plotter()
        super().closeEvent(event)
