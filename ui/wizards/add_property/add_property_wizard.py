# -*- coding: utf-8 -*-
"""
Add Property Wizard.

Multi-step wizard for landlords listing a new property.

Steps:
1. Property Details - Title, type, address, city, description
2. Upload Images - Optional photos with thumbnail previews
3. Add Units - Units with one or more pricing plans each
4. Review & Submit - Summary, then submission to the backend
"""

from typing import List, Optional

from PyQt5.QtCore import pyqtSignal

from services.api_client import get_property_client
from services.exceptions import WizardStateException
from services.wizard.step_validator import PropertyStepValidator
from services.wizard.submission import SubmissionHandler, SubmissionOutcome, SubmissionState
from ui.error_handler import ErrorHandler
from ui.wizards.framework import BaseWizard, BaseStep
from ui.wizards.add_property.property_context import PropertyWizardContext
from ui.wizards.add_property.steps import DetailsStep, ImagesStep, UnitsStep, ReviewStep
from ui.wizards.add_property.submission_worker import SubmissionWorker
from ui.wizards.add_property.success_view import SuccessView
from utils.logger import get_logger

logger = get_logger(__name__)


class AddPropertyWizard(BaseWizard):
    """
    Add Property wizard.

    Submission runs on a SubmissionWorker thread; the wizard stays on the
    Review step with navigation locked until the outcome arrives.
    """

    # Emitted with every SubmissionOutcome, successful or not
    submission_finished = pyqtSignal(object)
    view_properties_requested = pyqtSignal()

    def __init__(self, client=None, parent=None):
        """
        Args:
            client: Object with create_property(draft) -> property_id;
                defaults to get_property_client()
            parent: Parent widget
        """
        self.submission_handler = SubmissionHandler(client or get_property_client())
        self._worker: Optional[SubmissionWorker] = None
        super().__init__(parent)

        self.review_step.edit_requested.connect(self._on_edit_requested)
        self.completion_view.view_properties_requested.connect(self.view_properties_requested.emit)
        logger.info(f"Add Property wizard opened: {self.context.reference_number}")

    def create_context(self) -> PropertyWizardContext:
        return PropertyWizardContext()

    def create_steps(self) -> List[BaseStep]:
        self.review_step = ReviewStep(self.context, self)
        return [
            DetailsStep(self.context, self),
            ImagesStep(self.context, self),
            UnitsStep(self.context, self),
            self.review_step
        ]

    def create_completion_view(self) -> SuccessView:
        return SuccessView(self)

    def get_wizard_title(self) -> str:
        return "Add Property"

    def get_submit_button_text(self) -> str:
        return "Submit Property"

    # =========================================================================
    # Submission
    # =========================================================================

    def on_submit(self):
        if self.submission_handler.is_submitting:
            logger.warning("Submit ignored: submission already in flight")
            return
        if self.submission_handler.state == SubmissionState.FAILED:
            self.submission_handler.retry()

        self.set_busy(True)
        self._worker = SubmissionWorker(self.submission_handler, self.context, self)
        self._worker.submission_finished.connect(self._on_submission_finished)
        self._worker.submission_refused.connect(self._on_submission_refused)
        self._worker.start()

    def _on_submission_finished(self, outcome: SubmissionOutcome):
        self.set_busy(False)

        if outcome.success:
            self.completion_view.set_summary(self.context.get_summary(), outcome.property_id)
            self.show_completion()
            self.wizard_completed.emit(self.context.to_dict())
        else:
            self.show_inline_error(outcome.error_message or "Submission failed.")

        self.submission_finished.emit(outcome)

    def _on_submission_refused(self, error: WizardStateException):
        self.set_busy(False)
        message = ErrorHandler.handle(error, self, context="property")
        self.submission_finished.emit(SubmissionOutcome(success=False, error_message=message))

    # =========================================================================
    # Navigation / lifecycle
    # =========================================================================

    def _on_edit_requested(self, step_index: int):
        if self.is_busy:
            return
        self.navigator.goto_step(step_index)

    def on_cancel(self) -> bool:
        if self.context.has_user_input():
            confirmed = ErrorHandler.confirm(
                self,
                "Discard this property? Everything you entered will be lost.",
                "Discard Property"
            )
            if not confirmed:
                return False
        self.context.discard()
        return True

    def closeEvent(self, event):
        if self._worker is not None and self._worker.isRunning():
            self._worker.wait()
        self.context.discard()
        super().closeEvent(event)

    @property
    def current_step_name(self) -> str:
        return PropertyStepValidator.get_step_name(self.navigator.current_index)
