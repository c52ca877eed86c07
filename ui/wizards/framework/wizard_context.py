# -*- coding: utf-8 -*-
"""
Wizard Context - Base class for wizard session state.

Provides:
- Session identity and reference number
- Lifecycle status (draft -> completed | discarded)
- Step completion tracking
- Serialization of the base fields
"""

from typing import Dict, Any
from datetime import datetime
from abc import ABC, abstractmethod
import uuid

from services.exceptions import WizardStateException


class WizardContext(ABC):
    """
    Base class for wizard context.

    Subclasses hold the data being composed and implement:
    - to_dict(): Serialize context to dictionary
    - from_dict(): Restore context from dictionary
    """

    STATUS_DRAFT = "draft"
    STATUS_COMPLETED = "completed"
    STATUS_DISCARDED = "discarded"

    def __init__(self):
        self.wizard_id: str = str(uuid.uuid4())
        self.status: str = self.STATUS_DRAFT
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = self.created_at
        self.current_step_index: int = 0
        self.reference_number: str = self._generate_reference_number()
        self.completed_steps: set = set()

    def _generate_reference_number(self) -> str:
        """
        Generate a reference number for the wizard session.

        Format: {PREFIX}-{YYYYMMDDHHMMSS}-{SHORT_UUID}
        """
        timestamp = self.created_at.strftime("%Y%m%d%H%M%S")
        return f"{self._get_reference_prefix()}-{timestamp}-{self.wizard_id[:4].upper()}"

    def _get_reference_prefix(self) -> str:
        """Get the prefix for reference number. Override in subclasses."""
        return "WIZ"

    @property
    def is_editable(self) -> bool:
        return self.status == self.STATUS_DRAFT

    def ensure_editable(self):
        """Raise if the session data may no longer change."""
        if not self.is_editable:
            raise WizardStateException(
                f"Wizard session is {self.status}; its data can no longer change",
                state=self.status
            )

    def touch(self):
        self.updated_at = datetime.now()

    def mark_step_completed(self, step_index: int):
        """Mark a step as completed."""
        self.completed_steps.add(step_index)
        self.touch()

    def is_step_completed(self, step_index: int) -> bool:
        """Check if a step is completed."""
        return step_index in self.completed_steps

    def mark_completed(self):
        self.status = self.STATUS_COMPLETED
        self.touch()

    def mark_discarded(self):
        self.status = self.STATUS_DISCARDED
        self.touch()

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize context to dictionary.

        Subclasses should call super().to_dict() and add their own fields.
        """
        return {
            "wizard_id": self.wizard_id,
            "reference_number": self.reference_number,
            "status": self.status,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "current_step_index": self.current_step_index,
            "completed_steps": sorted(self.completed_steps),
        }

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WizardContext':
        """Restore context from dictionary."""

    @classmethod
    def _restore_base_fields(cls, context: 'WizardContext', data: Dict[str, Any]):
        """Helper method to restore base fields from dictionary."""
        context.wizard_id = data.get("wizard_id", context.wizard_id)
        context.reference_number = data.get("reference_number", context.reference_number)
        context.status = data.get("status", cls.STATUS_DRAFT)
        context.current_step_index = data.get("current_step_index", 0)
        context.completed_steps = set(data.get("completed_steps", []))

        if "created_at" in data:
            context.created_at = datetime.fromisoformat(data["created_at"])
        if "updated_at" in data:
            context.updated_at = datetime.fromisoformat(data["updated_at"])
