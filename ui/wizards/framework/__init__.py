# -*- coding: utf-8 -*-
"""
Wizard Framework - Base classes for multi-step wizards.

Provides base classes and utilities for creating multi-step wizards
with consistent navigation, validation, and state management.
"""

from services.wizard.step_validator import StepValidationResult
from .wizard_context import WizardContext
from .step_navigator import StepNavigator
from .base_step import BaseStep
from .base_wizard import BaseWizard

__all__ = [
    'BaseWizard',
    'BaseStep',
    'StepValidationResult',
    'WizardContext',
    'StepNavigator'
]
