# -*- coding: utf-8 -*-
"""
Base Wizard - Abstract base class for all wizards.

Provides unified wizard UI with:
- Header with title and progress
- Step container
- Inline error area
- Navigation buttons (Cancel, Back, Next/Submit)
- A completion page shown instead of the steps after submission
"""

from typing import List, Optional
from abc import ABCMeta, abstractmethod

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel,
    QFrame, QStackedWidget, QProgressBar
)
from PyQt5.QtCore import pyqtSignal
from PyQt5.QtGui import QFont

from app.config import Config
from services.wizard.step_validator import StepValidationResult
from .base_step import BaseStep
from .wizard_context import WizardContext
from .step_navigator import StepNavigator
from ui.components.action_button import ActionButton
from utils.logger import get_logger

logger = get_logger(__name__)


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseWizard(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizards.

    Subclasses must implement:
    - create_steps(): Create and return list of wizard steps
    - create_context(): Create and return wizard context
    - on_submit(): Start the final submission
    """

    # Signals
    wizard_completed = pyqtSignal(dict)  # Emitted with context.to_dict()
    wizard_cancelled = pyqtSignal()

    PAGE_STEPS = 0
    PAGE_COMPLETION = 1

    def __init__(self, parent: Optional[QWidget] = None):
        """Initialize the wizard."""
        super().__init__(parent)
        self._busy = False
        self._current_step_valid = False

        # Initialize context and steps
        self.context = self.create_context()
        self.steps = self.create_steps()

        # Create navigator
        self.navigator = StepNavigator(self.context, self.steps)

        # Connect navigator signals
        self.navigator.step_changed.connect(self._on_step_changed)
        self.navigator.validation_failed.connect(self._on_validation_failed)
        for step in self.steps:
            step.validation_changed.connect(self._on_step_validation_changed)

        # Setup UI
        self._setup_ui()

        # Show first step
        self.navigator.reset()

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def create_steps(self) -> List[BaseStep]:
        """Create and return list of wizard steps."""
        pass

    @abstractmethod
    def create_context(self) -> WizardContext:
        """Create and return wizard context."""
        pass

    @abstractmethod
    def on_submit(self):
        """
        Start the final submission.

        Called when the user presses Submit on the last step and it
        validates. Implementations call set_busy() while the request is in
        flight and finish with show_completion() or show_inline_error().
        """
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def get_wizard_title(self) -> str:
        """Get wizard title. Override to customize."""
        return "Wizard"

    def get_submit_button_text(self) -> str:
        """Get submit button text. Override to customize."""
        return "Submit"

    def create_completion_view(self) -> QWidget:
        """Widget shown after a successful submission. Override to customize."""
        return QLabel("Done")

    def on_cancel(self) -> bool:
        """
        Handle wizard cancellation.

        Returns:
            True if cancellation should proceed, False to prevent
        """
        return True

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        """Setup the wizard UI."""
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)
        self.setWindowTitle(self.get_wizard_title())

        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(0, 0, 0, 0)
        root_layout.setSpacing(0)

        self.page_stack = QStackedWidget()
        root_layout.addWidget(self.page_stack)

        # Steps page
        steps_page = QWidget()
        main_layout = QVBoxLayout(steps_page)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        main_layout.addWidget(self._create_header())

        separator = QFrame()
        separator.setFrameShape(QFrame.HLine)
        separator.setStyleSheet(f"background-color: {Config.BORDER_COLOR};")
        separator.setFixedHeight(1)
        main_layout.addWidget(separator)

        self.step_container = QStackedWidget()
        for step in self.steps:
            self.step_container.addWidget(step)
        main_layout.addWidget(self.step_container, 1)

        self.error_label = QLabel()
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(f"""
            QLabel {{
                color: {Config.ERROR_COLOR};
                background-color: #f8d7da;
                border: 1px solid #f5c2c7;
                border-radius: 6px;
                padding: 8px 12px;
                margin: 0 20px;
            }}
        """)
        self.error_label.hide()
        main_layout.addWidget(self.error_label)

        main_layout.addWidget(self._create_footer())
        self.page_stack.addWidget(steps_page)

        # Completion page
        self.completion_view = self.create_completion_view()
        self.page_stack.addWidget(self.completion_view)

    def _create_header(self) -> QWidget:
        """Create wizard header with title and progress."""
        header = QWidget()
        header.setStyleSheet(f"QWidget {{ background-color: {Config.BACKGROUND_COLOR}; }}")

        layout = QVBoxLayout(header)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.title_label = QLabel(self.get_wizard_title())
        title_font = QFont()
        title_font.setPointSize(14)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        layout.addWidget(self.title_label)

        progress_layout = QHBoxLayout()
        progress_layout.setSpacing(8)

        self.progress_label = QLabel()
        progress_layout.addWidget(self.progress_label)

        self.progress_bar = QProgressBar()
        self.progress_bar.setMaximum(100)
        self.progress_bar.setValue(0)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(6)
        self.progress_bar.setStyleSheet(f"""
            QProgressBar {{
                border: none;
                background-color: #e9ecef;
                border-radius: 3px;
            }}
            QProgressBar::chunk {{
                background-color: {Config.PRIMARY_COLOR};
                border-radius: 3px;
            }}
        """)
        progress_layout.addWidget(self.progress_bar, 1)

        layout.addLayout(progress_layout)
        return header

    def _create_footer(self) -> QWidget:
        """Create wizard footer with navigation buttons."""
        footer = QWidget()
        footer.setStyleSheet(f"QWidget {{ background-color: {Config.BACKGROUND_COLOR}; }}")

        layout = QHBoxLayout(footer)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.btn_cancel = ActionButton("Cancel", variant="secondary", width=110)
        self.btn_cancel.clicked.connect(self._handle_cancel)
        layout.addWidget(self.btn_cancel)

        layout.addStretch()

        self.btn_previous = ActionButton("Back", variant="secondary", width=110)
        self.btn_previous.clicked.connect(self._handle_previous)
        layout.addWidget(self.btn_previous)

        self.btn_next = ActionButton("Next", variant="primary", width=140)
        self.btn_next.clicked.connect(self._handle_next)
        layout.addWidget(self.btn_next)

        return footer

    # =========================================================================
    # State helpers for subclasses
    # =========================================================================

    @property
    def is_busy(self) -> bool:
        return self._busy

    def set_busy(self, busy: bool, text: str = "Submitting…"):
        """Lock navigation while a request is in flight."""
        self._busy = busy
        if busy:
            self.btn_next.setText(text)
        self._update_navigation_buttons()

    def show_inline_error(self, message: str):
        self.error_label.setText(message)
        self.error_label.show()

    def clear_inline_error(self):
        self.error_label.clear()
        self.error_label.hide()

    def show_completion(self):
        self.page_stack.setCurrentIndex(self.PAGE_COMPLETION)

    # =========================================================================
    # Navigation Handlers
    # =========================================================================

    def _handle_previous(self):
        if self._busy:
            return
        self.clear_inline_error()
        self.navigator.previous_step()

    def _handle_next(self):
        if self._busy:
            return
        if self.navigator.is_last_step():
            self._handle_submit()
        else:
            self.navigator.next_step()

    def _handle_cancel(self):
        if self._busy:
            return
        if self.on_cancel():
            self.wizard_cancelled.emit()
            self.close()

    def _handle_submit(self):
        result = self.navigator.validate_current()
        if not result.is_valid:
            self._on_validation_failed(result)
            return
        self.clear_inline_error()
        self.on_submit()

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def _on_step_changed(self, old_index: int, new_index: int):
        self.step_container.setCurrentIndex(new_index)
        self.clear_inline_error()
        self._update_progress()
        self._update_navigation_buttons()

    def _on_step_validation_changed(self, is_valid: bool):
        if self.sender() is self.navigator.get_current_step():
            self._current_step_valid = is_valid
            if is_valid:
                self.navigator.get_current_step().clear_field_errors()
            self._update_navigation_buttons()

    def _update_progress(self):
        current = self.navigator.current_index + 1
        total = len(self.steps)
        title = self.navigator.get_step_title(self.navigator.current_index)

        self.progress_label.setText(f"Step {current} of {total} · {title}")
        self.progress_bar.setValue(int(self.navigator.get_progress_percentage()))

    def _update_navigation_buttons(self):
        self.btn_previous.setEnabled(self.navigator.can_go_previous() and not self._busy)
        self.btn_cancel.setEnabled(not self._busy)
        self.btn_next.setEnabled(self._current_step_valid and not self._busy)

        if self._busy:
            return
        if self.navigator.is_last_step():
            self.btn_next.setText(self.get_submit_button_text())
        else:
            self.btn_next.setText("Next")

    def _on_validation_failed(self, result: StepValidationResult):
        step = self.navigator.get_current_step()
        if step is not None:
            step.show_field_errors(result)
        self.show_inline_error(
            "\n".join(f"• {error}" for error in result.errors) or "Please check the form."
        )
