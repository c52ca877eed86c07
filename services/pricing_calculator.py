# -*- coding: utf-8 -*-
"""
Stay pricing for a unit's pricing plans.

A guest's total is nights x nightly rate plus a service fee rounded to
whole currency units.
"""

from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

from models.property_draft import PricingPlanDraft, RentalType, UnitDraft


@dataclass
class StayQuote:
    """Price breakdown for a stay."""
    nights: int
    nightly_rate: Decimal
    minimum_stay: int
    subtotal: Decimal
    service_fee: Decimal
    total: Decimal
    errors: List[str] = field(default_factory=list)

    @property
    def is_bookable(self) -> bool:
        return not self.errors


def nightly_plan(unit: UnitDraft) -> Optional[PricingPlanDraft]:
    """The unit's DAILY plan, else its first plan, else None."""
    for plan in unit.pricing_plans:
        if plan.rental_type == RentalType.DAILY:
            return plan
    return unit.pricing_plans[0] if unit.pricing_plans else None


def quote_stay(unit: UnitDraft, nights: int, fee_rate: Decimal = None) -> StayQuote:
    """
    Quote a stay of the given number of nights in a unit.

    Args:
        unit: Unit whose nightly plan is used
        nights: Number of nights (check-out minus check-in)
        fee_rate: Service fee rate; defaults to Config.SERVICE_FEE_RATE
    """
    if fee_rate is None:
        from app.config import Config
        fee_rate = Config.SERVICE_FEE_RATE

    plan = nightly_plan(unit)
    rate = plan.price if plan else Decimal("0")
    minimum_stay = plan.minimum_stay if plan and plan.rental_type == RentalType.DAILY else 1

    subtotal = rate * max(nights, 0)
    service_fee = (subtotal * fee_rate).quantize(Decimal("1"), rounding=ROUND_HALF_UP)

    errors = []
    if nights <= 0:
        errors.append("Check-out must be after check-in.")
    elif nights < minimum_stay:
        errors.append(f"Minimum stay is {minimum_stay} night{'s' if minimum_stay > 1 else ''}.")

    return StayQuote(
        nights=nights,
        nightly_rate=rate,
        minimum_stay=minimum_stay,
        subtotal=subtotal,
        service_fee=service_fee,
        total=subtotal + service_fee,
        errors=errors,
    )
