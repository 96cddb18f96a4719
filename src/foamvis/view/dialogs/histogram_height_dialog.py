"""
Modal Dialog for the histogram height.
"""
from __future__ import annotations

from dataclasses import replace
import logging
from typing import Optional

from PySide6.QtGui import QIntValidator
from PySide6.QtWidgets import (
    QButtonGroup, QCheckBox, QDialog, QDialogButtonBox, QGridLayout, QLabel,
    QRadioButton, QVBoxLayout, QWidget
)

from foamvis.config import HISTOGRAM_VALUE_MAX, HISTOGRAM_VALUE_MIN
from foamvis.model.histogram_height import HeightState, HistogramHeight
from foamvis.view.widgets.line_edit_focus import LineEditFocus

logger = logging.getLogger(__name__)


class HistogramHeightDialog(QDialog):
    """
    Chooses between the maximum bin value and a typed height. Typing in the
    value field selects the "Value" option.

    The dialog edits its own copy of the settings; the caller decides what
    to do with it once the dialog is accepted.
    """

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Histogram Height")
        self._height = HistogramHeight()

        layout = QVBoxLayout(self)
        grid = QGridLayout()
        layout.addLayout(grid)

        self.radio_max_value = QRadioButton("Max value", self)
        self.radio_value = QRadioButton("Value", self)
        self._group = QButtonGroup(self)
        self._group.addButton(self.radio_max_value)
        self._group.addButton(self.radio_value)

        self.label_max_value = QLabel(self)
        self.line_edit_value = LineEditFocus(self)
        self.line_edit_value.setValidator(
            QIntValidator(HISTOGRAM_VALUE_MIN, HISTOGRAM_VALUE_MAX, self))
        self.check_box_log_scale = QCheckBox("Log scale", self)

        grid.addWidget(self.radio_max_value, 0, 0)
        grid.addWidget(self.label_max_value, 0, 1)
        grid.addWidget(self.radio_value, 1, 0)
        grid.addWidget(self.line_edit_value, 1, 1)
        grid.addWidget(self.check_box_log_scale, 2, 0, 1, 2)

        buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

        self._load()

        self.radio_max_value.toggled.connect(self._on_toggled_max_value)
        self.radio_value.toggled.connect(self._on_toggled_value)
        self.check_box_log_scale.toggled.connect(self._on_toggled_log_scale)
        self.line_edit_value.editingFinished.connect(self._on_editing_finished)
        self.line_edit_value.focus_in.connect(self._on_focus_in)

    def set_histogram_height(self, height: HistogramHeight) -> None:
        """Starts editing a copy of `height`."""
        self._height = replace(height)
        self._load()

    def histogram_height(self) -> HistogramHeight:
        return replace(self._height)

    def run(self, height: HistogramHeight) -> Optional[HistogramHeight]:
        """Shows the dialog modally. Returns the edited copy, or None on Cancel."""
        self.set_histogram_height(height)
        if self.exec() == QDialog.DialogCode.Accepted:
            return self.histogram_height()
        return None

    def _load(self) -> None:
        """Mirror the edited copy into the widgets without echoing signals back."""
        height = self._height
        widgets = (self.radio_max_value, self.radio_value,
                   self.check_box_log_scale, self.line_edit_value)
        for widget in widgets:
            widget.blockSignals(True)
        try:
            self.label_max_value.setText(str(height.max_value))
            checked = self.radio_max_value if height.state is HeightState.MAX_VALUE else self.radio_value
            checked.setChecked(True)
            self.line_edit_value.setText(str(height.value))
            self.check_box_log_scale.setChecked(height.log_scale)
        finally:
            for widget in widgets:
                widget.blockSignals(False)

    def _on_toggled_max_value(self, checked: bool) -> None:
        if checked:
            self._height.toggle_max_value()
            self._load()

    def _on_toggled_value(self, checked: bool) -> None:
        if checked:
            self._height.toggle_value()
            self.line_edit_value.setFocus()

    def _on_toggled_log_scale(self, checked: bool) -> None:
        self._height.set_log_scale(checked)

    def _on_focus_in(self) -> None:
        self.radio_value.setChecked(True)

    def _on_editing_finished(self) -> None:
        result = self._height.edit_value(self.line_edit_value.text())
        if not result.ok:
            logger.debug(result.message)
            self._load()
