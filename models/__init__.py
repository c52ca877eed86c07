# -*- coding: utf-8 -*-
"""
Landlord Listings Data Models
"""

from .property_draft import (
    PropertyType,
    RentalType,
    PricingPlanDraft,
    UnitDraft,
    PropertyDraft,
)

__all__ = [
    "PropertyType",
    "RentalType",
    "PricingPlanDraft",
    "UnitDraft",
    "PropertyDraft",
]
