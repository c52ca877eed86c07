# -*- coding: utf-8 -*-
"""
Add Property Wizard Package.

This package contains:
- PropertyWizardContext: Wizard context holding the PropertyDraft
- AddPropertyWizard: Main wizard class
- Steps: Details, Images, Units, Review
"""

from .property_context import PropertyWizardContext
from .add_property_wizard import AddPropertyWizard

__all__ = [
    'PropertyWizardContext',
    'AddPropertyWizard'
]
