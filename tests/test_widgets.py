from __future__ import annotations

import pytest

pytest.importorskip("PySide6.QtWidgets")

from PySide6.QtCore import QEvent, QItemSelectionModel, QStringListModel, QTimer  # noqa: E402
from PySide6.QtGui import QFocusEvent  # noqa: E402

from foamvis.controller.store import Store  # noqa: E402
from foamvis.model.histogram_height import (  # noqa: E402
    AttributeHeight, AttributeHistogramHeight, HeightState, HistogramHeight
)
from foamvis.view.dialogs.attribute_histogram_height_dialog import AttributeHistogramHeightDialog  # noqa: E402
from foamvis.view.dialogs.histogram_height_dialog import HistogramHeightDialog  # noqa: E402
from foamvis.view.widgets.line_edit_focus import LineEditFocus  # noqa: E402
from foamvis.view.widgets.list_view_signal import ListViewSignal  # noqa: E402


def test_line_edit_announces_focus(qt_app) -> None:
    edit = LineEditFocus()
    calls: list[bool] = []
    edit.focus_in.connect(lambda: calls.append(True))

    edit.focusInEvent(QFocusEvent(QEvent.Type.FocusIn))

    assert calls == [True]


def test_list_view_forwards_rows(qt_app) -> None:
    view = ListViewSignal()
    model = QStringListModel(["a", "b", "c"])
    view.setModel(model)
    current: list[tuple[int, int]] = []
    selections: list[tuple[list[int], list[int]]] = []
    view.current_row_changed.connect(lambda c, p: current.append((c, p)))
    view.rows_selection_changed.connect(lambda s, d: selections.append((s, d)))

    view.selectionModel().select(model.index(2, 0), QItemSelectionModel.SelectionFlag.Select)
    view.setCurrentIndex(model.index(1, 0))

    assert current[-1] == (1, -1)
    assert selections[0] == ([2], [])
    assert 1 in view.selected_rows()


def test_histogram_dialog_edits_a_copy(qt_app) -> None:
    original = HistogramHeight(value=10, max_value=500)
    dialog = HistogramHeightDialog()
    dialog.set_histogram_height(original)

    dialog.radio_max_value.setChecked(True)
    assert dialog.line_edit_value.text() == "500"

    dialog.radio_value.setChecked(True)
    dialog.line_edit_value.setText("42")
    dialog._on_editing_finished()
    dialog.check_box_log_scale.setChecked(True)

    height = dialog.histogram_height()
    assert height == HistogramHeight(HeightState.VALUE, 42, 500, True)
    assert original == HistogramHeight(value=10, max_value=500)


def test_histogram_dialog_invalid_text_restores_value(qt_app) -> None:
    dialog = HistogramHeightDialog()
    dialog.set_histogram_height(HistogramHeight(value=7))

    dialog.line_edit_value.setText("abc")
    dialog._on_editing_finished()

    assert dialog.histogram_height().value == 7
    assert dialog.line_edit_value.text() == "7"


def test_histogram_dialog_focus_selects_value(qt_app) -> None:
    dialog = HistogramHeightDialog()
    dialog.set_histogram_height(HistogramHeight(state=HeightState.MAX_VALUE))

    dialog.line_edit_value.focusInEvent(QFocusEvent(QEvent.Type.FocusIn))

    assert dialog.radio_value.isChecked()
    assert dialog.histogram_height().state is HeightState.VALUE


def test_histogram_dialog_cancel_keeps_store(qt_app) -> None:
    store = Store()
    store.set_histogram_height(HistogramHeight(max_value=500))
    before = store.document.histogram_height
    dialog = HistogramHeightDialog()

    def edit_then_cancel() -> None:
        dialog.radio_max_value.setChecked(True)
        dialog.check_box_log_scale.setChecked(True)
        dialog.reject()

    QTimer.singleShot(0, edit_then_cancel)
    result = dialog.run(store.document.histogram_height)

    assert result is None
    assert store.document.histogram_height == before
    assert store.document.histogram_height == HistogramHeight(max_value=500)


def test_histogram_dialog_ok_returns_edits(qt_app) -> None:
    dialog = HistogramHeightDialog()

    def edit_then_accept() -> None:
        dialog.check_box_log_scale.setChecked(True)
        dialog.accept()

    QTimer.singleShot(0, edit_then_accept)
    result = dialog.run(HistogramHeight(value=3))

    assert result == HistogramHeight(value=3, log_scale=True)


def test_histogram_dialog_is_reusable(qt_app) -> None:
    dialog = HistogramHeightDialog()
    dialog.set_histogram_height(HistogramHeight(value=1, log_scale=True))
    dialog.check_box_log_scale.setChecked(False)

    dialog.set_histogram_height(HistogramHeight(value=2))

    assert dialog.line_edit_value.text() == "2"
    assert not dialog.check_box_log_scale.isChecked()
    assert dialog.histogram_height() == HistogramHeight(value=2)


def test_attribute_dialog_selection(qt_app) -> None:
    dialog = AttributeHistogramHeightDialog()
    assert dialog.radios[AttributeHeight.MAXIMUM_TIME_STEPS].isChecked()

    dialog.radios[AttributeHeight.CURRENT_TIME_STEP].setChecked(True)

    assert dialog.attribute_histogram_height().height is AttributeHeight.CURRENT_TIME_STEP


def test_attribute_dialog_cancel_keeps_store(qt_app) -> None:
    store = Store()
    dialog = AttributeHistogramHeightDialog()

    def edit_then_cancel() -> None:
        dialog.radios[AttributeHeight.OTHER_VALUE].setChecked(True)
        dialog.line_edit_other_value.setText("33")
        dialog._on_editing_finished()
        dialog.reject()

    QTimer.singleShot(0, edit_then_cancel)
    result = dialog.run(store.document.attribute_histogram_height)

    assert result is None
    assert store.document.attribute_histogram_height == AttributeHistogramHeight()


def test_attribute_dialog_ok_returns_edits(qt_app) -> None:
    dialog = AttributeHistogramHeightDialog()

    def edit_then_accept() -> None:
        dialog.line_edit_other_value.focusInEvent(QFocusEvent(QEvent.Type.FocusIn))
        dialog.line_edit_other_value.setText("33")
        dialog._on_editing_finished()
        dialog.accept()

    QTimer.singleShot(0, edit_then_accept)
    result = dialog.run(AttributeHistogramHeight())

    assert result == AttributeHistogramHeight(AttributeHeight.OTHER_VALUE, 33)
