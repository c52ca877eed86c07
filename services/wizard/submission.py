# -*- coding: utf-8 -*-
"""
Submission handling for the Add Property wizard.

State machine:
    EDITING --submit()--> SUBMITTING --> SUCCESS
                                     +-> FAILED --retry()--> EDITING

Only one submission may be in flight. A failure leaves the draft and the
wizard's step untouched so the user can correct and resubmit.
"""

import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from services.error_mapper import map_exception
from services.exceptions import (
    ApiException, NetworkException, ValidationException, WizardStateException
)
from services.wizard.step_validator import PropertyStepValidator
from utils.logger import get_logger

logger = get_logger(__name__)


class SubmissionState(Enum):
    """Submission lifecycle state."""
    EDITING = "editing"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class SubmissionOutcome:
    """Result of one submit() call."""
    success: bool
    property_id: Optional[str] = None
    error_message: Optional[str] = None
    errors: List[str] = field(default_factory=list)


class SubmissionHandler:
    """
    Validates the final draft and hands it to the property client.

    The client only needs create_property(draft) -> property_id; see
    PropertyApiClient and MockPropertyClient.
    """

    def __init__(self, client):
        self.client = client
        self._state = SubmissionState.EDITING
        self._lock = threading.Lock()
        self.last_outcome: Optional[SubmissionOutcome] = None

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def is_submitting(self) -> bool:
        return self._state == SubmissionState.SUBMITTING

    def submit(self, context) -> SubmissionOutcome:
        """
        Submit the context's draft.

        Args:
            context: PropertyWizardContext at the Review step

        Returns:
            SubmissionOutcome; on success the context is completed

        Raises:
            WizardStateException: a submission is already in flight, the
                draft was already submitted, a failed submission was not
                reset with retry(), or the session was discarded
        """
        with self._lock:
            if self._state == SubmissionState.SUBMITTING:
                raise WizardStateException("A submission is already in progress",
                                           state=self._state.value)
            if self._state == SubmissionState.SUCCESS:
                raise WizardStateException("This property has already been submitted",
                                           state=self._state.value)
            if self._state == SubmissionState.FAILED:
                raise WizardStateException("Call retry() before resubmitting",
                                           state=self._state.value)
            context.ensure_editable()
            self._state = SubmissionState.SUBMITTING

        draft = context.draft
        logger.info(f"Submitting {context.reference_number}: "
                    f"{len(draft.units)} units, {draft.plan_count} plans, {len(draft.images)} images")

        try:
            validation = PropertyStepValidator.validate_all(draft)
            if not validation.is_valid:
                raise ValidationException(
                    "The listing is incomplete",
                    errors=validation.errors,
                    context="property"
                )
            property_id = self.client.create_property(draft)

        except (ApiException, NetworkException, ValidationException) as e:
            logger.error(f"Submission of {context.reference_number} failed: {e}")
            errors = e.errors if isinstance(e, ValidationException) else []
            return self._finish(SubmissionOutcome(
                success=False,
                error_message=map_exception(e, context="property"),
                errors=errors,
            ), SubmissionState.FAILED)

        except Exception as e:
            logger.error(f"Unexpected submission error: {e}", exc_info=True)
            return self._finish(SubmissionOutcome(
                success=False,
                error_message=map_exception(e, context="property"),
            ), SubmissionState.FAILED)

        context.complete(property_id)
        return self._finish(SubmissionOutcome(success=True, property_id=property_id),
                            SubmissionState.SUCCESS)

    def retry(self):
        """Return from FAILED to EDITING."""
        if self._state != SubmissionState.FAILED:
            raise WizardStateException(f"Cannot retry from state {self._state.value}",
                                       state=self._state.value)
        self._state = SubmissionState.EDITING
        logger.debug("Submission reset for retry")

    def _finish(self, outcome: SubmissionOutcome, state: SubmissionState) -> SubmissionOutcome:
        self.last_outcome = outcome
        self._state = state
        logger.info(f"Submission finished: {state.value}")
        return outcome
