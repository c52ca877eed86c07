# -*- coding: utf-8 -*-
"""
Base Step - Abstract base class for wizard steps.

All wizard steps should inherit from this class and implement:
- setup_ui(): Create the step's UI
- validate(): Validate step data
- populate_data(): Refresh the UI from the context
"""

from typing import Dict, Optional
from abc import ABCMeta, abstractmethod

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel
from PyQt5.QtCore import pyqtSignal

from app.config import Config
from services.wizard.step_validator import StepValidationResult


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseStep(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizard steps.

    Provides common functionality for:
    - UI setup and lifecycle
    - Validation signalling for the Next button
    - Inline field error labels
    """

    # Signals
    validation_changed = pyqtSignal(bool)

    def __init__(self, context: 'WizardContext', parent: Optional[QWidget] = None):
        """
        Initialize the step.

        Args:
            context: The wizard context for data sharing
            parent: Parent widget
        """
        super().__init__(parent)
        self.context = context
        self._is_initialized = False
        self._error_labels: Dict[str, QLabel] = {}

        # Main layout
        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(20, 20, 20, 20)
        self.main_layout.setSpacing(16)

    def initialize(self):
        """
        Initialize the step (called once).

        This method is called the first time the step is shown.
        """
        if not self._is_initialized:
            self.setup_ui()
            self._is_initialized = True

    def on_show(self):
        """Called when the step is shown."""
        if not self._is_initialized:
            self.initialize()
        self.populate_data()
        self.refresh_validation()

    def on_hide(self):
        """Called when the step is hidden (moving to another step)."""
        pass

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def setup_ui(self):
        """
        Setup the step's UI.

        This method is called once during initialization.
        """
        pass

    @abstractmethod
    def validate(self) -> StepValidationResult:
        """Validate the step's data."""
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def populate_data(self):
        """Populate the step's UI with data from context."""
        pass

    def get_step_title(self) -> str:
        """Get the step's title. Default: the class name."""
        return self.__class__.__name__

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def refresh_validation(self):
        """Re-run validation and notify listeners (enables/disables Next)."""
        self.validation_changed.emit(self.validate().is_valid)

    def create_error_label(self, field_key: str) -> QLabel:
        """Create a hidden inline error label bound to a field key."""
        label = QLabel()
        label.setStyleSheet(f"color: {Config.ERROR_COLOR}; font-size: 11px;")
        label.setWordWrap(True)
        label.hide()
        self._error_labels[field_key] = label
        return label

    def show_field_errors(self, result: StepValidationResult):
        """Show messages for failing fields and hide the rest."""
        for key, label in self._error_labels.items():
            message = result.field_errors.get(key)
            label.setText(message or "")
            label.setVisible(bool(message))

    def clear_field_errors(self):
        for label in self._error_labels.values():
            label.hide()
