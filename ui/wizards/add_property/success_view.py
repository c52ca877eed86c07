# -*- coding: utf-8 -*-
"""Confirmation shown once a property has been created."""

from typing import Any, Dict

from PyQt5.QtWidgets import QLabel, QVBoxLayout, QWidget
from PyQt5.QtCore import Qt, pyqtSignal

from app.config import Config
from ui.components.action_button import ActionButton


def success_message(summary: Dict[str, Any]) -> str:
    unit_count = summary["unit_count"]
    return (f'"{summary["title"]}" has been successfully created with '
            f'{unit_count} unit{"s" if unit_count != 1 else ""}.')


class SuccessView(QWidget):
    """Replaces the wizard steps after a successful submission."""

    view_properties_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(40, 40, 40, 40)
        layout.setSpacing(16)
        layout.setAlignment(Qt.AlignCenter)

        icon = QLabel("✓")
        icon.setAlignment(Qt.AlignCenter)
        icon.setStyleSheet(f"color: {Config.SUCCESS_COLOR}; font-size: 48px;")
        layout.addWidget(icon)

        title = QLabel("Property Listed!")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet("font-size: 20px; font-weight: 600;")
        layout.addWidget(title)

        self.message_label = QLabel()
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setWordWrap(True)
        layout.addWidget(self.message_label)

        self.reference_label = QLabel()
        self.reference_label.setAlignment(Qt.AlignCenter)
        self.reference_label.setStyleSheet(f"color: {Config.SECONDARY_COLOR}; font-size: 11px;")
        layout.addWidget(self.reference_label)

        self.btn_view = ActionButton("View My Properties", variant="primary", width=200)
        self.btn_view.clicked.connect(self.view_properties_requested.emit)
        layout.addWidget(self.btn_view, 0, Qt.AlignCenter)

    def set_summary(self, summary: Dict[str, Any], property_id: str = None):
        self.message_label.setText(success_message(summary))
        reference = summary["reference_number"]
        if property_id:
            reference = f"{reference} · {property_id}"
        self.reference_label.setText(reference)
