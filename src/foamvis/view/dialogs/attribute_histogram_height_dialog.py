"""
Modal Dialog for the height of an attribute histogram
"""
from __future__ import annotations

from dataclasses import replace
from typing import Optional

from PySide6.QtGui import QIntValidator
from PySide6.QtWidgets import (
    QButtonGroup, QDialog, QDialogButtonBox, QGridLayout, QRadioButton,
    QVBoxLayout, QWidget
)

from foamvis.config import HISTOGRAM_VALUE_MAX, HISTOGRAM_VALUE_MIN
from foamvis.model.histogram_height import AttributeHeight, AttributeHistogramHeight
from foamvis.view.widgets.line_edit_focus import LineEditFocus

LABELS: dict[AttributeHeight, str] = {
    AttributeHeight.MAXIMUM_TIME_STEPS: "Maximum over all time steps",
    AttributeHeight.CURRENT_TIME_STEP: "Current time step",
    AttributeHeight.OTHER_VALUE: "Other value",
}


class AttributeHistogramHeightDialog(QDialog):
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Attribute Histogram Height")
        self._height = AttributeHistogramHeight()

        layout = QVBoxLayout(self)
        grid = QGridLayout()
        layout.addLayout(grid)

        self._group = QButtonGroup(self)
        self.radios: dict[AttributeHeight, QRadioButton] = {}
        for row, height in enumerate(AttributeHeight):
            radio = QRadioButton(LABELS[height], self)
            self._group.addButton(radio)
            self.radios[height] = radio
            grid.addWidget(radio, row, 0)
            radio.toggled.connect(
                lambda checked, h=height: checked and self._height.select(h))

        self.line_edit_other_value = LineEditFocus(self)
        self.line_edit_other_value.setValidator(
            QIntValidator(HISTOGRAM_VALUE_MIN, HISTOGRAM_VALUE_MAX, self))
        grid.addWidget(self.line_edit_other_value, len(self.radios) - 1, 1)

        buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

        self._load()
        self.line_edit_other_value.focus_in.connect(
            lambda: self.radios[AttributeHeight.OTHER_VALUE].setChecked(True))
        self.line_edit_other_value.editingFinished.connect(self._on_editing_finished)

    def set_attribute_histogram_height(self, height: AttributeHistogramHeight) -> None:
        self._height = replace(height)
        self._load()

    def attribute_histogram_height(self) -> AttributeHistogramHeight:
        return replace(self._height)

    def run(self, height: AttributeHistogramHeight) -> Optional[AttributeHistogramHeight]:
        """Shows the dialog modally. Returns the edited copy, or None on Cancel."""
        self.set_attribute_histogram_height(height)
        if self.exec() == QDialog.DialogCode.Accepted:
            return self.attribute_histogram_height()
        return None

    def _load(self) -> None:
        radio = self.radios[self._height.height]
        radio.blockSignals(True)
        radio.setChecked(True)
        radio.blockSignals(False)
        self.line_edit_other_value.setText(str(self._height.other_value))

    def _on_editing_finished(self) -> None:
        result = self._height.edit_other_value(self.line_edit_other_value.text())
        if not result.ok:
            self.line_edit_other_value.setText(str(self._height.other_value))
