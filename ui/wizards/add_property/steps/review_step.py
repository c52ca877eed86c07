# -*- coding: utf-8 -*-
"""
Review Step - Step 4 of the Add Property wizard.

Read-only summary of the whole draft with shortcuts back to each section.
"""

from PyQt5.QtWidgets import (
    QLabel, QFrame, QGridLayout, QHBoxLayout, QVBoxLayout, QWidget, QScrollArea
)
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QPixmap

from app.config import Config
from services.pricing_calculator import nightly_plan, quote_stay
from services.wizard.step_validator import PropertyStepValidator, StepValidationResult
from ui.components.action_button import ActionButton
from ui.wizards.framework import BaseStep
from ui.wizards.add_property.property_context import PropertyWizardContext

REVIEW_THUMBNAIL_SIZE = 72


class ReviewStep(BaseStep):
    """Step 4: Review & Submit."""

    STEP_INDEX = PropertyStepValidator.STEP_REVIEW

    # Emitted with the index of the step the user wants to edit
    edit_requested = pyqtSignal(int)

    def __init__(self, context: PropertyWizardContext, parent=None):
        super().__init__(context, parent)

    def setup_ui(self):
        heading = QLabel("Review & Submit")
        heading.setStyleSheet("font-size: 16px; font-weight: 600;")
        self.main_layout.addWidget(heading)
        self.main_layout.addWidget(QLabel("Check everything before publishing your listing"))

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QScrollArea.NoFrame)
        content = QWidget()
        self.content_layout = QVBoxLayout(content)
        self.content_layout.setContentsMargins(0, 0, 0, 0)
        self.content_layout.setSpacing(12)
        self.content_layout.setAlignment(Qt.AlignTop)
        scroll.setWidget(content)
        self.main_layout.addWidget(scroll, 1)

    def populate_data(self):
        while self.content_layout.count():
            item = self.content_layout.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()

        summary = self.context.get_summary()
        self.content_layout.addWidget(self._create_details_section(summary))
        self.content_layout.addWidget(self._create_images_section(summary))
        self.content_layout.addWidget(self._create_units_section(summary))

    # =========================================================================
    # Sections
    # =========================================================================

    def _create_section(self, title: str, step_index: int):
        frame = QFrame()
        frame.setObjectName("reviewSection")
        frame.setStyleSheet(f"""
            QFrame#reviewSection {{
                border: 1px solid {Config.BORDER_COLOR};
                border-radius: 10px;
                background-color: white;
            }}
        """)
        layout = QVBoxLayout(frame)
        layout.setContentsMargins(16, 12, 16, 12)
        layout.setSpacing(8)

        header = QHBoxLayout()
        label = QLabel(title)
        label.setStyleSheet("font-weight: 600;")
        header.addWidget(label)
        header.addStretch()
        btn_edit = ActionButton("Edit", variant="outline", width=70, height=28)
        btn_edit.clicked.connect(lambda _=False, i=step_index: self.edit_requested.emit(i))
        header.addWidget(btn_edit)
        layout.addLayout(header)
        return frame, layout

    def _create_details_section(self, summary) -> QFrame:
        frame, layout = self._create_section("Property", PropertyStepValidator.STEP_DETAILS)

        grid = QGridLayout()
        grid.setHorizontalSpacing(24)
        rows = (
            ("Title", summary["title"]),
            ("Type", summary["type"]),
            ("Address", summary["address"]),
            ("City", summary["city"]),
            ("Images", summary["images"]),
            ("Units", summary["units_label"]),
        )
        for row, (name, value) in enumerate(rows):
            name_label = QLabel(name)
            name_label.setStyleSheet(f"color: {Config.SECONDARY_COLOR};")
            grid.addWidget(name_label, row, 0)
            grid.addWidget(QLabel(value), row, 1)
        layout.addLayout(grid)

        if summary["description"].strip():
            description = QLabel(summary["description"])
            description.setWordWrap(True)
            layout.addWidget(description)
        return frame

    def _create_images_section(self, summary) -> QFrame:
        frame, layout = self._create_section(
            f"Images ({summary['images']})", PropertyStepValidator.STEP_IMAGES
        )
        previews = self.context.previews
        if not previews:
            layout.addWidget(QLabel("No photos added"))
            return frame

        strip = QHBoxLayout()
        strip.setSpacing(8)
        for preview in previews:
            thumb = QLabel()
            thumb.setFixedSize(REVIEW_THUMBNAIL_SIZE, REVIEW_THUMBNAIL_SIZE)
            thumb.setAlignment(Qt.AlignCenter)
            thumb.setToolTip(preview.source.name)
            pixmap = QPixmap(str(preview.thumbnail_path)) if preview.is_available else QPixmap()
            if pixmap.isNull():
                thumb.setText("?")
            else:
                thumb.setPixmap(pixmap.scaled(REVIEW_THUMBNAIL_SIZE, REVIEW_THUMBNAIL_SIZE,
                                              Qt.KeepAspectRatio, Qt.SmoothTransformation))
            strip.addWidget(thumb)
        strip.addStretch()
        layout.addLayout(strip)
        return frame

    def _create_units_section(self, summary) -> QFrame:
        frame, layout = self._create_section(
            f"Units ({summary['unit_count']})", PropertyStepValidator.STEP_UNITS
        )
        for unit, unit_summary in zip(self.context.draft.units, summary["units"]):
            name = QLabel(f"{unit_summary['name']} · up to {unit_summary['max_guests']} guests")
            name.setStyleSheet("font-weight: 600;")
            layout.addWidget(name)
            for plan_label in unit_summary["plans"]:
                layout.addWidget(QLabel(f"   {plan_label}"))

            plan = nightly_plan(unit)
            if plan is not None and plan.price > 0:
                quote = quote_stay(unit, max(plan.minimum_stay, 1))
                hint = QLabel(
                    f"   Guests pay ${quote.total} for {quote.nights} night"
                    f"{'s' if quote.nights != 1 else ''} incl. ${quote.service_fee} service fee"
                )
                hint.setStyleSheet(f"color: {Config.SECONDARY_COLOR}; font-size: 11px;")
                layout.addWidget(hint)
        return frame

    def validate(self) -> StepValidationResult:
        return PropertyStepValidator.validate_step(self.STEP_INDEX, self.context.draft)

    def get_step_title(self) -> str:
        return PropertyStepValidator.get_step_name(self.STEP_INDEX)
