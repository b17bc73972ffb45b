# tests/test_widgets.py
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PyQt6.QtWidgets")

from shift_wage.ui.widgets.custom_time_edit import CustomTimeEdit
from shift_wage.ui.main_window import MainWindow


@pytest.fixture(scope="module")
def app():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


def test_time_edit_reformats_user_text(app):
    edit = CustomTimeEdit()
    received = []
    edit.timeTextChanged.connect(received.append)

    edit.time_edit.textEdited.emit("0930")
    assert edit.text() == "09:30"
    assert edit.time_edit.cursorPosition() == 5

    edit.clear()
    assert edit.text() == ""
    assert received == ["09:30", ""]


def test_editing_inputs_clears_shown_result(app):
    window = MainWindow()
    window.rate_edit.setText("1000")
    window.start_time_edit.setText("09:00")
    window.end_time_edit.setText("17:00")
    window.calculate_wage()
    assert "Total pay: 8000" in window.result_label.text()

    window.start_time_edit.time_edit.textEdited.emit("08")
    assert window.result_label.text() == ""

    window.calculate_wage()
    assert window.result_label.text() != ""
    window.rate_edit.textEdited.emit("1200")
    assert window.result_label.text() == ""
