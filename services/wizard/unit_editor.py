# -*- coding: utf-8 -*-
"""
Unit/plan editing for property drafts.

Every operation takes a PropertyDraft and returns a new one. Only the
tuple that contains the edited element is rebuilt; untouched units and
plans are carried over as the same objects. Elements are addressed by
index, never by value, so equal-valued entries stay distinct.
"""

from dataclasses import replace
from typing import Any, Tuple, TypeVar

from models.property_draft import PropertyDraft, UnitDraft, PricingPlanDraft
from services.exceptions import ValidationException
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

# Minimum counts enforced at the data layer
MIN_UNITS = 1
MIN_PLANS_PER_UNIT = 1


class UnitPlanEditor:
    """Add/remove/update units and their pricing plans."""

    UNIT_FIELDS = ("unit_name", "max_guests")
    PLAN_FIELDS = ("rental_type", "price", "minimum_stay")

    @staticmethod
    def new_unit() -> UnitDraft:
        return UnitDraft(pricing_plans=(UnitPlanEditor.new_plan(),))

    @staticmethod
    def new_plan() -> PricingPlanDraft:
        return PricingPlanDraft()

    # =========================================================================
    # Units
    # =========================================================================

    @staticmethod
    def add_unit(draft: PropertyDraft) -> PropertyDraft:
        """Append a new unit with one default pricing plan."""
        units = draft.units + (UnitPlanEditor.new_unit(),)
        logger.debug(f"Unit added (total {len(units)})")
        return replace(draft, units=units)

    @staticmethod
    def remove_unit(draft: PropertyDraft, index: int) -> PropertyDraft:
        """
        Remove the unit at index.

        Raises:
            IndexError: index out of range
            ValidationException: the draft would be left without units
        """
        _check_index(draft.units, index, "unit")
        if len(draft.units) <= MIN_UNITS:
            raise ValidationException(
                "A property must keep at least one unit",
                field="units"
            )
        units = _without(draft.units, index)
        logger.debug(f"Unit {index} removed (total {len(units)})")
        return replace(draft, units=units)

    @staticmethod
    def replace_units(draft: PropertyDraft, units) -> PropertyDraft:
        """
        Swap in a whole unit list.

        Raises:
            ValidationException: fewer than one unit, or a unit without plans
        """
        units = tuple(units)
        if len(units) < MIN_UNITS:
            raise ValidationException(
                "A property must keep at least one unit",
                field="units"
            )
        for index, unit in enumerate(units):
            if len(unit.pricing_plans) < MIN_PLANS_PER_UNIT:
                raise ValidationException(
                    "A unit must keep at least one pricing plan",
                    field=f"units[{index}].pricing_plans"
                )
        logger.debug(f"Units replaced (total {len(units)})")
        return replace(draft, units=units)

    @staticmethod
    def update_unit(draft: PropertyDraft, index: int, field_key: str, value: Any) -> PropertyDraft:
        """Replace one scalar field (unit_name or max_guests) of a unit."""
        if field_key not in UnitPlanEditor.UNIT_FIELDS:
            raise KeyError(f"Unit has no editable field '{field_key}'")
        _check_index(draft.units, index, "unit")
        unit = replace(draft.units[index], **{field_key: value})
        return replace(draft, units=_with(draft.units, index, unit))

    # =========================================================================
    # Pricing plans
    # =========================================================================

    @staticmethod
    def add_plan(draft: PropertyDraft, unit_index: int) -> PropertyDraft:
        """Append a default pricing plan to a unit."""
        _check_index(draft.units, unit_index, "unit")
        unit = draft.units[unit_index]
        unit = replace(unit, pricing_plans=unit.pricing_plans + (UnitPlanEditor.new_plan(),))
        logger.debug(f"Plan added to unit {unit_index} (total {len(unit.pricing_plans)})")
        return replace(draft, units=_with(draft.units, unit_index, unit))

    @staticmethod
    def remove_plan(draft: PropertyDraft, unit_index: int, plan_index: int) -> PropertyDraft:
        """
        Remove one pricing plan from a unit.

        Raises:
            IndexError: unit or plan index out of range
            ValidationException: the unit would be left without plans
        """
        _check_index(draft.units, unit_index, "unit")
        unit = draft.units[unit_index]
        _check_index(unit.pricing_plans, plan_index, "pricing plan")
        if len(unit.pricing_plans) <= MIN_PLANS_PER_UNIT:
            raise ValidationException(
                "A unit must keep at least one pricing plan",
                field=f"units[{unit_index}].pricing_plans"
            )
        unit = replace(unit, pricing_plans=_without(unit.pricing_plans, plan_index))
        logger.debug(f"Plan {plan_index} removed from unit {unit_index}")
        return replace(draft, units=_with(draft.units, unit_index, unit))

    @staticmethod
    def update_plan(draft: PropertyDraft, unit_index: int, plan_index: int,
                    field_key: str, value: Any) -> PropertyDraft:
        """Replace one scalar field of a single pricing plan."""
        if field_key not in UnitPlanEditor.PLAN_FIELDS:
            raise KeyError(f"Pricing plan has no editable field '{field_key}'")
        _check_index(draft.units, unit_index, "unit")
        unit = draft.units[unit_index]
        _check_index(unit.pricing_plans, plan_index, "pricing plan")
        plan = replace(unit.pricing_plans[plan_index], **{field_key: value})
        unit = replace(unit, pricing_plans=_with(unit.pricing_plans, plan_index, plan))
        return replace(draft, units=_with(draft.units, unit_index, unit))


def _check_index(items: Tuple, index: int, what: str):
    # Negative indices are caller bugs, not Python-style offsets
    if not 0 <= index < len(items):
        raise IndexError(f"{what} index {index} out of range (0-{len(items) - 1})")


def _without(items: Tuple[T, ...], index: int) -> Tuple[T, ...]:
    return items[:index] + items[index + 1:]


def _with(items: Tuple[T, ...], index: int, item: T) -> Tuple[T, ...]:
    return items[:index] + (item,) + items[index + 1:]
