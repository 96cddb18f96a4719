from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtGui import QFocusEvent
from PySide6.QtWidgets import QLineEdit, QWidget


class LineEditFocus(QLineEdit):
    """A QLineEdit that announces when it receives keyboard focus."""
    focus_in = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

    def focusInEvent(self, event: QFocusEvent) -> None:
        super().focusInEvent(event)
        self.focus_in.emit()
