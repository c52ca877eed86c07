# -*- coding: utf-8 -*-
"""
Landlord Listings UI Components
"""

from .action_button import ActionButton

__all__ = [
    "ActionButton",
]
