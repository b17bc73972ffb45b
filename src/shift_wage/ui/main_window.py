# src/shift_wage/ui/main_window.py
"""Main application window: a single form that collects a rate and shift times and shows the pay."""
import logging
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QFormLayout,
    QPushButton, QLabel, QLineEdit, QMessageBox, QStatusBar
)
from PyQt6.QtCore import Qt

from ..config import config
from ..services.wage_service import (
    wage_service, WageBreakdown, WageServiceError, InvalidTimeFormatError, InvalidRateError
)
from ..utils.time_utils import hours_to_hhmm
from .widgets.custom_time_edit import CustomTimeEdit


class MainWindow(QMainWindow):
    """Wage calculator window. All calculation is delegated to wage_service."""

    def __init__(self):
        super().__init__()
        self.logger = logging.getLogger(__name__)

        self.setWindowTitle("Shift Wage Calculator")
        self.setGeometry(100, 100, 420, 360)
        self.init_ui()
        self.set_defaults()

    def init_ui(self):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout(central_widget)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(15)

        title_label = QLabel("Shift Wage Calculator")
        title_label.setStyleSheet("font-size: 16px; font-weight: bold;")
        layout.addWidget(title_label)

        form_layout = QFormLayout()
        form_layout.setLabelAlignment(Qt.AlignmentFlag.AlignRight)

        self.rate_edit = QLineEdit()
        self.rate_edit.setPlaceholderText("e.g. 1000")
        form_layout.addRow("Hourly rate:", self.rate_edit)

        self.start_time_edit = CustomTimeEdit()
        form_layout.addRow("Start time:", self.start_time_edit)

        self.end_time_edit = CustomTimeEdit()
        form_layout.addRow("End time:", self.end_time_edit)

        layout.addLayout(form_layout)

        button_layout = QHBoxLayout()
        self.calculate_button = QPushButton("Calculate")
        self.calculate_button.setDefault(True)
        self.calculate_button.clicked.connect(self.calculate_wage)
        button_layout.addStretch()
        button_layout.addWidget(self.calculate_button)
        layout.addLayout(button_layout)

        self.result_label = QLabel()
        self.result_label.setTextFormat(Qt.TextFormat.RichText)
        self.result_label.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)
        self.result_label.setStyleSheet("font-size: 14px;")
        layout.addWidget(self.result_label)

        # A shown result goes stale as soon as any input changes
        self.rate_edit.textEdited.connect(self.result_label.clear)
        self.start_time_edit.timeTextChanged.connect(self.result_label.clear)
        self.end_time_edit.timeTextChanged.connect(self.result_label.clear)
        layout.addStretch()

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

    def set_defaults(self):
        """Prefill the form from settings."""
        self.rate_edit.setText(str(config.settings.get("default_hourly_rate", "") or ""))
        self.start_time_edit.setText(config.settings.get("default_start_time", "") or "")
        self.end_time_edit.setText(config.settings.get("default_end_time", "") or "")

    def calculate_wage(self):
        rate_input = self.rate_edit.text()
        start_input = self.start_time_edit.text()
        end_input = self.end_time_edit.text()

        try:
            breakdown = wage_service.compute_wage(rate_input, start_input, end_input)
        except InvalidTimeFormatError as e:
            self.result_label.clear()
            QMessageBox.warning(self, "Invalid time", str(e))
            (self.start_time_edit if e.field == "start" else self.end_time_edit).time_edit.setFocus()
            return
        except InvalidRateError as e:
            self.result_label.clear()
            QMessageBox.warning(self, "Invalid hourly rate", str(e))
            self.rate_edit.setFocus()
            return
        except WageServiceError as e:
            self.result_label.clear()
            QMessageBox.warning(self, "Calculation error", str(e))
            return
        except Exception as e:
            self.logger.error(f"Unexpected error while calculating wage: {e}", exc_info=True)
            QMessageBox.critical(self, "Error", f"An unexpected error occurred: {e}")
            return

        self.show_breakdown(breakdown)
        self.status_bar.showMessage(f"Calculated {start_input} - {end_input}", 5000)

    def show_breakdown(self, breakdown: WageBreakdown):
        self.result_label.setText(
            f"Normal hours: {breakdown.normal_hours:.2f} h ({hours_to_hhmm(breakdown.normal_hours)})<br>"
            f"Night hours: {breakdown.night_hours:.2f} h ({hours_to_hhmm(breakdown.night_hours)})<br>"
            f"Total pay: {breakdown.total_pay}<br>"
            f"<strong>Thank you for your hard work!</strong>"
        )
