# -*- coding: utf-8 -*-
"""
Step validation service for the Add Property wizard.

Validates draft data for each step without UI coupling.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from models.property_draft import PropertyDraft


@dataclass
class StepValidationResult:
    """Result of step validation."""
    is_valid: bool
    errors: List[str]
    warnings: List[str] = None
    field_errors: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if self.warnings is None:
            self.warnings = []

    def add_error(self, message: str, field_key: str = None):
        """Add an error message, optionally tied to a form field."""
        self.errors.append(message)
        self.is_valid = False
        if field_key and field_key not in self.field_errors:
            self.field_errors[field_key] = message

    def add_warning(self, message: str):
        """Add a warning message."""
        self.warnings.append(message)

    def has_warnings(self) -> bool:
        """Check if there are any warnings."""
        return len(self.warnings) > 0

    def merge(self, other: "StepValidationResult"):
        """Fold another result into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        for key, message in other.field_errors.items():
            self.field_errors.setdefault(key, message)
        if not other.is_valid:
            self.is_valid = False


class PropertyStepValidator:
    """Validates wizard step data based on the property draft."""

    # Step constants
    STEP_DETAILS = 0
    STEP_IMAGES = 1
    STEP_UNITS = 2
    STEP_REVIEW = 3

    STEP_NAMES = [
        "Property Details",
        "Upload Images",
        "Add Units",
        "Review & Submit",
    ]

    @staticmethod
    def validate_step(step_index: int, draft: PropertyDraft) -> StepValidationResult:
        """
        Validate the draft for leaving the given step.

        Args:
            step_index: Current step index
            draft: PropertyDraft being edited

        Returns:
            StepValidationResult; field_errors keys are "title", "address",
            "city", "units", "units[i].unit_name" and
            "units[i].pricing_plans[j].price".
        """
        if step_index == PropertyStepValidator.STEP_DETAILS:
            return PropertyStepValidator.validate_details(draft)

        elif step_index == PropertyStepValidator.STEP_IMAGES:
            # Images are optional
            return PropertyStepValidator._ok()

        elif step_index == PropertyStepValidator.STEP_UNITS:
            return PropertyStepValidator.validate_units(draft)

        elif step_index == PropertyStepValidator.STEP_REVIEW:
            return PropertyStepValidator.validate_all(draft)

        # Unknown step
        return PropertyStepValidator._ok()

    @staticmethod
    def validate_details(draft: PropertyDraft) -> StepValidationResult:
        result = PropertyStepValidator._ok()
        if not draft.title.strip():
            result.add_error("Property title is required", "title")
        if not draft.address.strip():
            result.add_error("Address is required", "address")
        if not draft.city.strip():
            result.add_error("City is required", "city")
        return result

    @staticmethod
    def validate_units(draft: PropertyDraft) -> StepValidationResult:
        result = PropertyStepValidator._ok()
        if not draft.units:
            result.add_error("Add at least one unit", "units")
            return result

        for i, unit in enumerate(draft.units):
            if not unit.unit_name.strip():
                result.add_error(f"Unit {i + 1}: name is required", f"units[{i}].unit_name")
            for j, plan in enumerate(unit.pricing_plans):
                if not plan.price > 0:
                    result.add_error(
                        f"{unit.display_name(i)}, plan {j + 1}: price must be greater than 0",
                        f"units[{i}].pricing_plans[{j}].price"
                    )
        return result

    @staticmethod
    def validate_all(draft: PropertyDraft) -> StepValidationResult:
        """Final validation before submission."""
        result = PropertyStepValidator.validate_details(draft)
        result.merge(PropertyStepValidator.validate_units(draft))
        return result

    @staticmethod
    def get_step_name(step_index: int) -> str:
        """Get display name for step."""
        if 0 <= step_index < len(PropertyStepValidator.STEP_NAMES):
            return PropertyStepValidator.STEP_NAMES[step_index]
        return ""

    @staticmethod
    def _ok() -> StepValidationResult:
        return StepValidationResult(is_valid=True, errors=[], warnings=[])
