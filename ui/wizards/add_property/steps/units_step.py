# -*- coding: utf-8 -*-
"""
Units Step - Step 3 of the Add Property wizard.

One card per unit (name, max guests) with its pricing plans. Cards are
rebuilt after structural edits (add/remove); value edits only update the
draft so the focused input is kept.
"""

from decimal import Decimal

from PyQt5.QtWidgets import (
    QLabel, QLineEdit, QSpinBox, QDoubleSpinBox, QComboBox, QFrame,
    QHBoxLayout, QVBoxLayout, QWidget, QScrollArea
)
from PyQt5.QtCore import Qt

from app.config import Config
from models.property_draft import RentalType, UnitDraft, PricingPlanDraft
from services.exceptions import ValidationException
from services.wizard.step_validator import PropertyStepValidator, StepValidationResult
from ui.components.action_button import ActionButton
from ui.error_handler import ErrorHandler
from ui.wizards.framework import BaseStep
from ui.wizards.add_property.property_context import PropertyWizardContext

MAX_GUESTS_LIMIT = 100
MAX_PRICE = 100_000_000


class UnitsStep(BaseStep):
    """Step 3: Add Units & Pricing."""

    STEP_INDEX = PropertyStepValidator.STEP_UNITS

    def __init__(self, context: PropertyWizardContext, parent=None):
        super().__init__(context, parent)

    def setup_ui(self):
        header = QHBoxLayout()
        titles = QVBoxLayout()
        heading = QLabel("Units & Pricing")
        heading.setStyleSheet("font-size: 16px; font-weight: 600;")
        titles.addWidget(heading)
        titles.addWidget(QLabel("Add rentable units and their pricing plans"))
        header.addLayout(titles)
        header.addStretch()

        self.btn_add_unit = ActionButton("+ Add Unit", variant="primary", width=130)
        self.btn_add_unit.clicked.connect(self.add_unit)
        header.addWidget(self.btn_add_unit)
        self.main_layout.addLayout(header)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QScrollArea.NoFrame)
        cards_host = QWidget()
        self.cards_layout = QVBoxLayout(cards_host)
        self.cards_layout.setContentsMargins(0, 0, 0, 0)
        self.cards_layout.setSpacing(16)
        self.cards_layout.setAlignment(Qt.AlignTop)
        scroll.setWidget(cards_host)
        self.main_layout.addWidget(scroll, 1)

    # =========================================================================
    # Structural edits
    # =========================================================================

    def add_unit(self):
        self.context.add_unit()
        self._rebuild()

    def remove_unit(self, index: int):
        try:
            self.context.remove_unit(index)
        except ValidationException as e:
            ErrorHandler.show_warning(self, e.message, "Cannot Remove Unit")
            return
        self._rebuild()

    def add_plan(self, unit_index: int):
        self.context.add_plan(unit_index)
        self._rebuild()

    def remove_plan(self, unit_index: int, plan_index: int):
        try:
            self.context.remove_plan(unit_index, plan_index)
        except ValidationException as e:
            ErrorHandler.show_warning(self, e.message, "Cannot Remove Plan")
            return
        self._rebuild()

    def _rebuild(self):
        self.populate_data()
        self.refresh_validation()

    # =========================================================================
    # Value edits
    # =========================================================================

    def _on_unit_changed(self, index: int, field_key: str, value):
        self.context.update_unit(index, field_key, value)
        self.refresh_validation()

    def _on_plan_changed(self, unit_index: int, plan_index: int, field_key: str, value):
        self.context.update_plan(unit_index, plan_index, field_key, value)
        self.refresh_validation()

    def _on_price_changed(self, unit_index: int, plan_index: int, value: float):
        self._on_plan_changed(unit_index, plan_index, "price", Decimal(f"{value:.2f}"))

    def _on_rental_type_changed(self, unit_index: int, plan_index: int, combo: QComboBox,
                                stay_suffix: QLabel):
        rental_type = RentalType(combo.currentData())
        stay_suffix.setText(f"{rental_type.stay_unit}(s)")
        self._on_plan_changed(unit_index, plan_index, "rental_type", rental_type)

    # =========================================================================
    # Rendering
    # =========================================================================

    def populate_data(self):
        while self.cards_layout.count():
            item = self.cards_layout.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()

        self._error_labels.clear()
        units = self.context.draft.units
        for index, unit in enumerate(units):
            self.cards_layout.addWidget(self._create_unit_card(index, unit, len(units)))

    def _create_unit_card(self, index: int, unit: UnitDraft, unit_count: int) -> QFrame:
        card = QFrame()
        card.setObjectName("unitCard")
        card.setStyleSheet(f"""
            QFrame#unitCard {{
                border: 1px solid {Config.BORDER_COLOR};
                border-radius: 10px;
                background-color: white;
            }}
        """)
        layout = QVBoxLayout(card)
        layout.setContentsMargins(16, 12, 16, 12)
        layout.setSpacing(8)

        top = QHBoxLayout()
        title = QLabel(f"Unit {index + 1}")
        title.setStyleSheet("font-weight: 600;")
        top.addWidget(title)
        top.addStretch()
        btn_remove = ActionButton("Remove unit", variant="danger", height=28)
        btn_remove.setEnabled(unit_count > 1)
        btn_remove.clicked.connect(lambda _=False, i=index: self.remove_unit(i))
        top.addWidget(btn_remove)
        layout.addLayout(top)

        fields = QHBoxLayout()
        name_box = QVBoxLayout()
        name_box.addWidget(QLabel("Unit Name *"))
        name_input = QLineEdit(unit.unit_name)
        name_input.setObjectName(f"unitName{index}")
        name_input.setPlaceholderText("e.g. Unit 1A – Ground Floor")
        name_input.textChanged.connect(
            lambda text, i=index: self._on_unit_changed(i, "unit_name", text)
        )
        name_box.addWidget(name_input)
        name_box.addWidget(self.create_error_label(f"units[{index}].unit_name"))
        fields.addLayout(name_box, 3)

        guests_box = QVBoxLayout()
        guests_box.addWidget(QLabel("Max Guests"))
        guests_input = QSpinBox()
        guests_input.setRange(1, MAX_GUESTS_LIMIT)
        guests_input.setValue(unit.max_guests)
        guests_input.valueChanged.connect(
            lambda value, i=index: self._on_unit_changed(i, "max_guests", value)
        )
        guests_box.addWidget(guests_input)
        guests_box.addStretch()
        fields.addLayout(guests_box, 1)
        layout.addLayout(fields)

        plans_header = QHBoxLayout()
        plans_header.addWidget(QLabel("Pricing Plans"))
        plans_header.addStretch()
        btn_add_plan = ActionButton("+ Add Plan", variant="outline", height=28)
        btn_add_plan.clicked.connect(lambda _=False, i=index: self.add_plan(i))
        plans_header.addWidget(btn_add_plan)
        layout.addLayout(plans_header)

        plan_count = len(unit.pricing_plans)
        for plan_index, plan in enumerate(unit.pricing_plans):
            layout.addWidget(self._create_plan_row(index, plan_index, plan, plan_count))

        return card

    def _create_plan_row(self, unit_index: int, plan_index: int, plan: PricingPlanDraft,
                         plan_count: int) -> QWidget:
        row = QWidget()
        outer = QVBoxLayout(row)
        outer.setContentsMargins(0, 0, 0, 0)
        outer.setSpacing(2)
        layout = QHBoxLayout()
        layout.setSpacing(8)

        type_combo = QComboBox()
        for rental_type in RentalType:
            type_combo.addItem(rental_type.label, rental_type.value)
        type_combo.setCurrentIndex(type_combo.findData(plan.rental_type.value))
        layout.addWidget(type_combo, 2)

        price_input = QDoubleSpinBox()
        price_input.setObjectName(f"planPrice{unit_index}_{plan_index}")
        price_input.setPrefix("$ ")
        price_input.setDecimals(2)
        price_input.setRange(0, MAX_PRICE)
        price_input.setValue(float(plan.price))
        price_input.valueChanged.connect(
            lambda value, u=unit_index, p=plan_index: self._on_price_changed(u, p, value)
        )
        layout.addWidget(price_input, 2)

        stay_input = QSpinBox()
        stay_input.setPrefix("min ")
        stay_input.setRange(1, 365)
        stay_input.setValue(plan.minimum_stay)
        stay_input.valueChanged.connect(
            lambda value, u=unit_index, p=plan_index: self._on_plan_changed(u, p, "minimum_stay", value)
        )
        layout.addWidget(stay_input, 1)

        stay_suffix = QLabel(f"{plan.rental_type.stay_unit}(s)")
        layout.addWidget(stay_suffix)

        type_combo.currentIndexChanged.connect(
            lambda _=0, u=unit_index, p=plan_index, c=type_combo, s=stay_suffix:
                self._on_rental_type_changed(u, p, c, s)
        )

        btn_remove = ActionButton("✕", variant="danger", width=32, height=28)
        btn_remove.setEnabled(plan_count > 1)
        btn_remove.clicked.connect(
            lambda _=False, u=unit_index, p=plan_index: self.remove_plan(u, p)
        )
        layout.addWidget(btn_remove)

        outer.addLayout(layout)
        outer.addWidget(self.create_error_label(f"units[{unit_index}].pricing_plans[{plan_index}].price"))
        return row

    def validate(self) -> StepValidationResult:
        return PropertyStepValidator.validate_step(self.STEP_INDEX, self.context.draft)

    def get_step_title(self) -> str:
        return PropertyStepValidator.get_step_name(self.STEP_INDEX)
