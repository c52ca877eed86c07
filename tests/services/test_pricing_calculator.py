# -*- coding: utf-8 -*-
"""
Tests for stay quotes.
"""
from decimal import Decimal

from models.property_draft import PricingPlanDraft, RentalType, UnitDraft
from services.pricing_calculator import nightly_plan, quote_stay


def _unit(*plans):
    return UnitDraft(unit_name="A", pricing_plans=tuple(plans))


def test_quote_adds_rounded_service_fee():
    unit = _unit(PricingPlanDraft(RentalType.DAILY, Decimal("45"), 2))
    quote = quote_stay(unit, 3, fee_rate=Decimal("0.08"))
    assert quote.subtotal == Decimal("135")
    assert quote.service_fee == Decimal("11")  # 10.80 rounds half up
    assert quote.total == Decimal("146")
    assert quote.is_bookable


def test_fee_rounds_half_up():
    unit = _unit(PricingPlanDraft(RentalType.DAILY, Decimal("25"), 1))
    assert quote_stay(unit, 1, fee_rate=Decimal("0.1")).service_fee == Decimal("3")  # 2.5


def test_default_fee_rate_comes_from_config():
    unit = _unit(PricingPlanDraft(RentalType.DAILY, Decimal("100"), 1))
    assert quote_stay(unit, 1).service_fee == Decimal("8")


def test_minimum_stay_enforced():
    unit = _unit(PricingPlanDraft(RentalType.DAILY, Decimal("45"), 3))
    quote = quote_stay(unit, 2)
    assert not quote.is_bookable
    assert quote.errors == ["Minimum stay is 3 nights."]


def test_zero_nights_rejected():
    unit = _unit(PricingPlanDraft(RentalType.DAILY, Decimal("45"), 3))
    quote = quote_stay(unit, 0)
    assert quote.errors == ["Check-out must be after check-in."]
    assert quote.total == Decimal("0")


def test_daily_plan_preferred():
    daily = PricingPlanDraft(RentalType.DAILY, Decimal("40"), 2)
    unit = _unit(PricingPlanDraft(RentalType.MONTHLY, Decimal("900"), 1), daily)
    assert nightly_plan(unit) is daily


def test_without_daily_plan_first_plan_is_used_and_no_minimum():
    unit = _unit(PricingPlanDraft(RentalType.MONTHLY, Decimal("900"), 6))
    quote = quote_stay(unit, 1)
    assert quote.nightly_rate == Decimal("900")
    assert quote.minimum_stay == 1
    assert quote.is_bookable


def test_unit_without_plans():
    assert nightly_plan(UnitDraft(pricing_plans=())) is None
    assert quote_stay(UnitDraft(pricing_plans=()), 2).total == Decimal("0")
