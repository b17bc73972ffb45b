# src/shift_wage/ui/widgets/custom_time_edit.py
"""A time input widget with a clear button that reformats text to HH:MM as the user types."""

from PyQt6.QtWidgets import QLineEdit, QPushButton, QHBoxLayout, QWidget
from PyQt6.QtCore import Qt, pyqtSignal

from ...utils.time_utils import format_time_input


class CustomTimeEdit(QWidget):
    """
    A line edit for 24-hour times. Every user edit (typing, deleting or
    pasting) is passed through format_time_input, so the field only ever
    holds digits with a colon after the hour.
    """
    timeTextChanged = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        # Times always read left to right
        self.setLayoutDirection(Qt.LayoutDirection.LeftToRight)
        self.init_ui()

    def init_ui(self):
        """Initializes the UI components of the custom widget."""
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)

        self.time_edit = QLineEdit()
        self.time_edit.setPlaceholderText("HH:MM")
        self.time_edit.setMaxLength(5)
        self.time_edit.setAlignment(Qt.AlignmentFlag.AlignLeft)
        # textEdited only fires for user changes, so setText() below does not recurse
        self.time_edit.textEdited.connect(self.reformat)

        self.clear_button = QPushButton("X")
        self.clear_button.setFixedSize(20, 20)
        self.clear_button.setFlat(True)
        self.clear_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.clear_button.setStyleSheet("font-weight: bold; border: none;")
        self.clear_button.clicked.connect(self.clear)

        layout.addWidget(self.time_edit)
        layout.addWidget(self.clear_button)

    def reformat(self, text: str):
        formatted, cursor = format_time_input(text)
        if formatted != text:
            self.time_edit.setText(formatted)
        self.time_edit.setCursorPosition(cursor)
        self.timeTextChanged.emit(formatted)

    def text(self) -> str:
        """Returns the raw field text, trimmed. Validation is left to the wage service."""
        return self.time_edit.text().strip()

    def setText(self, text: str):
        formatted, _ = format_time_input(text)
        self.time_edit.setText(formatted)

    def clear(self):
        """Clears the time text."""
        self.time_edit.clear()
        self.timeTextChanged.emit("")
