# -*- coding: utf-8 -*-
"""Background thread running one SubmissionHandler.submit() call."""

from PyQt5.QtCore import QThread, pyqtSignal

from services.exceptions import WizardStateException
from services.wizard.submission import SubmissionHandler
from utils.logger import get_logger

logger = get_logger(__name__)


class SubmissionWorker(QThread):
    """Runs the submission off the UI thread and reports the outcome."""

    submission_finished = pyqtSignal(object)  # SubmissionOutcome
    submission_refused = pyqtSignal(object)  # WizardStateException

    def __init__(self, handler: SubmissionHandler, context, parent=None):
        super().__init__(parent)
        self.handler = handler
        self.context = context

    def run(self):
        try:
            outcome = self.handler.submit(self.context)
        except WizardStateException as e:
            logger.warning(f"Submission refused: {e}")
            self.submission_refused.emit(e)
            return
        self.submission_finished.emit(outcome)
