# -*- coding: utf-8 -*-
"""
Images Step - Step 2 of the Add Property wizard.

Optional photo upload with a thumbnail grid; each thumbnail can be removed.
"""

from typing import List

from PyQt5.QtWidgets import (
    QLabel, QWidget, QGridLayout, QVBoxLayout, QFileDialog, QScrollArea
)
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPixmap

from app.config import Config
from services.wizard.image_manager import ImagePreview
from services.wizard.step_validator import PropertyStepValidator, StepValidationResult
from ui.components.action_button import ActionButton
from ui.wizards.framework import BaseStep
from ui.wizards.add_property.property_context import PropertyWizardContext
from utils.logger import get_logger

logger = get_logger(__name__)

THUMBNAIL_COLUMNS = 4
THUMBNAIL_SIZE = 140


class ImagesStep(BaseStep):
    """Step 2: Upload Images."""

    STEP_INDEX = PropertyStepValidator.STEP_IMAGES

    def __init__(self, context: PropertyWizardContext, parent=None):
        super().__init__(context, parent)

    def setup_ui(self):
        heading = QLabel("Property Images")
        heading.setStyleSheet("font-size: 16px; font-weight: 600;")
        self.main_layout.addWidget(heading)
        self.main_layout.addWidget(QLabel("Upload photos of your property (optional but recommended)"))

        self.btn_add = ActionButton("Add Images…", variant="outline", width=160)
        self.btn_add.clicked.connect(self._choose_files)
        self.main_layout.addWidget(self.btn_add)

        hint = QLabel(f"JPG, PNG — max {Config.MAX_IMAGE_SIZE_MB} MB per image")
        hint.setStyleSheet(f"color: {Config.SECONDARY_COLOR}; font-size: 11px;")
        self.main_layout.addWidget(hint)

        self.count_label = QLabel()
        self.main_layout.addWidget(self.count_label)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QScrollArea.NoFrame)
        grid_host = QWidget()
        self.grid = QGridLayout(grid_host)
        self.grid.setSpacing(12)
        self.grid.setAlignment(Qt.AlignTop | Qt.AlignLeft)
        scroll.setWidget(grid_host)
        self.main_layout.addWidget(scroll, 1)

    def _choose_files(self):
        files, _ = QFileDialog.getOpenFileNames(
            self, "Select property images", "", Config.IMAGE_FILE_FILTER
        )
        if files:
            self.add_files(files)

    def add_files(self, files: List[str]):
        previews = self.context.add_images(files)
        failed = [p.source.name for p in previews if not p.is_available]
        if failed:
            logger.warning(f"No preview for: {', '.join(failed)}")
        self.populate_data()

    def remove_image(self, index: int):
        self.context.remove_image(index)
        self.populate_data()

    def populate_data(self):
        while self.grid.count():
            item = self.grid.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()

        previews = self.context.previews
        for index, preview in enumerate(previews):
            row, column = divmod(index, THUMBNAIL_COLUMNS)
            self.grid.addWidget(self._create_thumbnail_widget(index, preview), row, column)

        count = len(previews)
        self.count_label.setText(f"{count} photo{'s' if count != 1 else ''} selected")

    def _create_thumbnail_widget(self, index: int, preview: ImagePreview) -> QWidget:
        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        thumb = QLabel()
        thumb.setFixedSize(THUMBNAIL_SIZE, THUMBNAIL_SIZE)
        thumb.setAlignment(Qt.AlignCenter)
        thumb.setStyleSheet(f"border: 1px solid {Config.BORDER_COLOR}; border-radius: 6px;")
        pixmap = QPixmap(str(preview.thumbnail_path)) if preview.is_available else QPixmap()
        if not pixmap.isNull():
            thumb.setPixmap(pixmap.scaled(THUMBNAIL_SIZE, THUMBNAIL_SIZE,
                                          Qt.KeepAspectRatio, Qt.SmoothTransformation))
        else:
            thumb.setWordWrap(True)
            thumb.setText(f"{preview.source.name}\n{preview.error or ''}")
        thumb.setToolTip(preview.source.name)
        layout.addWidget(thumb)

        btn_remove = ActionButton("Remove", variant="danger", width=THUMBNAIL_SIZE, height=28)
        btn_remove.clicked.connect(lambda _=False, i=index: self.remove_image(i))
        layout.addWidget(btn_remove)
        return container

    def validate(self) -> StepValidationResult:
        return PropertyStepValidator.validate_step(self.STEP_INDEX, self.context.draft)

    def get_step_title(self) -> str:
        return PropertyStepValidator.get_step_name(self.STEP_INDEX)
