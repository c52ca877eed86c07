# -*- coding: utf-8 -*-
"""
Details Step - Step 1 of the Add Property wizard.

Title, property type, address, city and description.
"""

from PyQt5.QtWidgets import (
    QLabel, QLineEdit, QComboBox, QTextEdit, QGridLayout, QVBoxLayout, QWidget
)

from models.property_draft import PropertyType
from services.wizard.step_validator import PropertyStepValidator, StepValidationResult
from ui.wizards.framework import BaseStep
from ui.wizards.add_property.property_context import PropertyWizardContext


class DetailsStep(BaseStep):
    """Step 1: Property Details."""

    STEP_INDEX = PropertyStepValidator.STEP_DETAILS

    def __init__(self, context: PropertyWizardContext, parent=None):
        super().__init__(context, parent)

    def setup_ui(self):
        heading = QLabel("Property Details")
        heading.setStyleSheet("font-size: 16px; font-weight: 600;")
        self.main_layout.addWidget(heading)
        self.main_layout.addWidget(QLabel("Basic information about your property"))

        grid = QGridLayout()
        grid.setHorizontalSpacing(16)
        grid.setVerticalSpacing(6)

        self.title_input = QLineEdit()
        self.title_input.setPlaceholderText("e.g. Sunset Apartments")
        self.title_input.textChanged.connect(lambda text: self._on_field_changed("title", text))
        grid.addWidget(self._field("Property Title *", self.title_input, "title"), 0, 0, 1, 2)

        self.type_combo = QComboBox()
        for property_type in PropertyType:
            self.type_combo.addItem(property_type.label, property_type.value)
        self.type_combo.currentIndexChanged.connect(self._on_type_changed)
        grid.addWidget(self._field("Property Type *", self.type_combo), 1, 0, 1, 2)

        self.address_input = QLineEdit()
        self.address_input.setPlaceholderText("e.g. KG 123 St")
        self.address_input.textChanged.connect(lambda text: self._on_field_changed("address", text))
        grid.addWidget(self._field("Address *", self.address_input, "address"), 2, 0)

        self.city_input = QLineEdit()
        self.city_input.setPlaceholderText("e.g. Kigali")
        self.city_input.textChanged.connect(lambda text: self._on_field_changed("city", text))
        grid.addWidget(self._field("City *", self.city_input, "city"), 2, 1)

        self.description_input = QTextEdit()
        self.description_input.setPlaceholderText("Describe your property…")
        self.description_input.setFixedHeight(90)
        self.description_input.textChanged.connect(
            lambda: self._on_field_changed("description", self.description_input.toPlainText())
        )
        grid.addWidget(self._field("Description", self.description_input), 3, 0, 1, 2)

        self.main_layout.addLayout(grid)
        self.main_layout.addStretch()

    def _field(self, label: str, widget: QWidget, field_key: str = None) -> QWidget:
        box = QWidget()
        layout = QVBoxLayout(box)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)
        layout.addWidget(QLabel(label))
        layout.addWidget(widget)
        if field_key:
            layout.addWidget(self.create_error_label(field_key))
        return box

    def _on_field_changed(self, key: str, value: str):
        if getattr(self.context.draft, key) == value:
            return
        self.context.set_field(key, value)
        self.refresh_validation()

    def _on_type_changed(self, index: int):
        value = self.type_combo.itemData(index)
        if value is None:
            return
        property_type = PropertyType(value)
        if property_type != self.context.draft.property_type:
            self.context.set_field("property_type", property_type)

    def populate_data(self):
        draft = self.context.draft
        for widget, value in (
            (self.title_input, draft.title),
            (self.address_input, draft.address),
            (self.city_input, draft.city),
        ):
            if widget.text() != value:
                widget.setText(value)
        if self.description_input.toPlainText() != draft.description:
            self.description_input.setPlainText(draft.description)
        self.type_combo.setCurrentIndex(self.type_combo.findData(draft.property_type.value))

    def validate(self) -> StepValidationResult:
        return PropertyStepValidator.validate_step(self.STEP_INDEX, self.context.draft)

    def get_step_title(self) -> str:
        return PropertyStepValidator.get_step_name(self.STEP_INDEX)
