# -*- coding: utf-8 -*-
"""
Step Navigator - Linear, forward-gated navigation between wizard steps.

Handles:
- Step progression (next/previous), one step at a time
- Validation before moving forward
- Progress tracking
- Step show/hide lifecycle
"""

from typing import Callable, Optional, Sequence

from PyQt5.QtCore import QObject, pyqtSignal

from services.wizard.step_validator import StepValidationResult
from .wizard_context import WizardContext
from utils.logger import get_logger

logger = get_logger(__name__)

StepValidatorFn = Callable[[int, WizardContext], StepValidationResult]


class StepNavigator(QObject):
    """
    Manages navigation between wizard steps.

    Moving forward requires the current step to validate; moving back never
    validates and never loses data. There is no skipping: forward moves go
    exactly one step at a time.

    Steps are usually BaseStep widgets, but any object works; on_show(),
    on_hide(), validate() and get_step_title() are used when present.
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_index, new_index
    validation_failed = pyqtSignal(object)  # StepValidationResult

    def __init__(self, context: WizardContext, steps: Sequence,
                 validator: Optional[StepValidatorFn] = None):
        """
        Initialize the navigator.

        Args:
            context: Wizard context
            steps: Ordered wizard steps
            validator: validator(step_index, context) used instead of
                step.validate() when given
        """
        super().__init__()
        self.context = context
        self.steps = list(steps)
        self.validator = validator
        self.current_index = 0
        self.context.current_step_index = 0

    def get_current_step(self):
        """Get the current step."""
        if 0 <= self.current_index < len(self.steps):
            return self.steps[self.current_index]
        return None

    def get_step_count(self) -> int:
        """Get total number of steps."""
        return len(self.steps)

    def is_last_step(self) -> bool:
        return self.current_index == len(self.steps) - 1

    def can_go_next(self) -> bool:
        """Check if there is a next step (validity is checked on the move)."""
        return self.current_index < len(self.steps) - 1

    def can_go_previous(self) -> bool:
        """Check if we can navigate to the previous step."""
        return self.current_index > 0

    def validate_current(self) -> StepValidationResult:
        """Validate the current step without navigating."""
        if self.validator is not None:
            return self.validator(self.current_index, self.context)
        step = self.get_current_step()
        if step is not None and hasattr(step, "validate"):
            return step.validate()
        return StepValidationResult(is_valid=True, errors=[], warnings=[])

    def next_step(self) -> bool:
        """
        Advance one step if the current step is valid.

        Returns:
            True if navigation happened; False (no-op) otherwise
        """
        if not self.can_go_next():
            logger.debug(f"Cannot go next: already at last step ({self.current_index})")
            return False

        result = self.validate_current()
        if not result.is_valid:
            logger.info(f"Step {self.current_index} blocked: {result.errors}")
            self.validation_failed.emit(result)
            return False

        self.context.mark_step_completed(self.current_index)

        logger.info(f"Navigating: Step {self.current_index} → {self.current_index + 1}")
        return self._navigate_to(self.current_index + 1)

    def previous_step(self) -> bool:
        """Go back one step; never validates."""
        if not self.can_go_previous():
            logger.debug(f"Cannot go previous: already at first step ({self.current_index})")
            return False

        logger.info(f"Navigating back: Step {self.current_index} → {self.current_index - 1}")
        return self._navigate_to(self.current_index - 1)

    def goto_step(self, index: int) -> bool:
        """
        Jump back to an earlier step (e.g. "edit" links on a review page).

        Forward jumps are refused; use next_step().
        """
        if index < 0 or index >= len(self.steps):
            return False
        if index == self.current_index:
            return True
        if index > self.current_index:
            logger.warning(f"Refused forward jump {self.current_index} → {index}")
            return False
        return self._navigate_to(index)

    def _navigate_to(self, new_index: int) -> bool:
        old_index = self.current_index

        current_step = self.get_current_step()
        if hasattr(current_step, "on_hide"):
            current_step.on_hide()

        self.current_index = new_index
        self.context.current_step_index = new_index

        new_step = self.get_current_step()
        if hasattr(new_step, "on_show"):
            new_step.on_show()

        self.step_changed.emit(old_index, new_index)
        logger.debug(f"Step {new_index} ({self.get_step_title(new_index)}) is now active")
        return True

    def get_step_title(self, index: int) -> str:
        step = self.steps[index]
        if hasattr(step, "get_step_title"):
            return step.get_step_title()
        return str(step)

    def reset(self):
        """Show the first step."""
        if self.current_index != 0:
            self._navigate_to(0)
            return
        first = self.get_current_step()
        if hasattr(first, "on_show"):
            first.on_show()
        self.step_changed.emit(0, 0)

    def get_progress_percentage(self) -> float:
        """
        Get current progress as percentage.

        Returns:
            Progress percentage (0.0 to 100.0)
        """
        if len(self.steps) <= 1:
            return 100.0 if self.steps else 0.0
        return (self.current_index / (len(self.steps) - 1)) * 100.0
