"""
A QListView that fires signals when the current item and the selection change.
"""
from __future__ import annotations

from PySide6.QtCore import QItemSelection, QModelIndex, Signal
from PySide6.QtWidgets import QListView, QWidget


def selection_rows(selection: QItemSelection) -> list[int]:
    """Sorted, unique rows covered by a selection."""
    return sorted({index.row() for index in selection.indexes()})


class ListViewSignal(QListView):
    """
    Forwards current-item and selection changes as row numbers so that
    listeners never handle QModelIndex or QItemSelection objects.
    """
    current_row_changed = Signal(int, int)  # (current, previous), -1 if none
    rows_selection_changed = Signal(object, object)  # (selected rows, deselected rows)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

    def selected_rows(self) -> list[int]:
        return sorted({index.row() for index in self.selectedIndexes()})

    def currentChanged(self, current: QModelIndex, previous: QModelIndex) -> None:
        super().currentChanged(current, previous)
        self.current_row_changed.emit(current.row(), previous.row())

    def selectionChanged(self, selected: QItemSelection, deselected: QItemSelection) -> None:
        super().selectionChanged(selected, deselected)
        self.rows_selection_changed.emit(selection_rows(selected), selection_rows(deselected))
