# -*- coding: utf-8 -*-
"""
Tests for the property draft models.
"""
import json
from decimal import Decimal
from pathlib import Path

import pytest

from models.property_draft import (
    PropertyDraft, PropertyType, RentalType, UnitDraft, PricingPlanDraft
)


class TestDefaults:

    def test_fresh_draft_has_one_empty_unit(self):
        draft = PropertyDraft()
        assert draft.title == ""
        assert draft.property_type == PropertyType.APARTMENT
        assert draft.images == ()
        assert len(draft.units) == 1
        assert draft.units[0].unit_name == ""
        assert len(draft.units[0].pricing_plans) == 1

    def test_default_plan(self):
        plan = PricingPlanDraft()
        assert plan.rental_type == RentalType.MONTHLY
        assert plan.price == Decimal("0")
        assert plan.minimum_stay == 1

    def test_fresh_drafts_compare_equal(self):
        assert PropertyDraft() == PropertyDraft()


class TestWithField:

    def test_replaces_only_one_field(self):
        draft = PropertyDraft(address="KG 123 St", city="Kigali")
        updated = draft.with_field("title", "Sunset")
        assert updated.title == "Sunset"
        assert updated.address == "KG 123 St"
        assert updated.city == "Kigali"
        assert updated.units is draft.units
        assert draft.title == ""

    def test_unknown_field_raises(self):
        with pytest.raises(KeyError):
            PropertyDraft().with_field("rooms", 3)

    def test_field_names(self):
        assert PropertyDraft.field_names() == (
            "title", "property_type", "address", "city", "description", "images", "units"
        )


class TestLabels:

    def test_plan_display_label(self):
        assert PricingPlanDraft(RentalType.MONTHLY, Decimal("100"), 3).display_label == "$100/mo · min 3"
        assert PricingPlanDraft(RentalType.DAILY, Decimal("45"), 1).display_label == "$45/night"
        assert PricingPlanDraft(RentalType.YEARLY, Decimal("9500"), 1).display_label == "$9500/yr"

    def test_unit_display_name_falls_back_to_position(self):
        assert UnitDraft(unit_name="  ").display_name(1) == "Unit 2"
        assert UnitDraft(unit_name="Loft").display_name(0) == "Loft"

    def test_plan_count(self, complete_draft):
        assert complete_draft.plan_count == 3


class TestSerialization:

    def test_round_trip_through_json(self):
        units = tuple(
            UnitDraft(
                unit_name=f"Unit {u}",
                max_guests=u + 1,
                pricing_plans=(
                    PricingPlanDraft(RentalType.DAILY, Decimal(f"{u}0.50"), u + 1),
                    PricingPlanDraft(RentalType.YEARLY, Decimal("1200"), 1),
                ),
            )
            for u in range(1, 4)
        )
        draft = PropertyDraft(
            title="Hilltop",
            property_type=PropertyType.VILLA,
            address="12 Ridge Rd",
            city="Musanze",
            images=(Path("/photos/a.jpg"), Path("/photos/b.png")),
            units=units,
        )

        restored = PropertyDraft.from_dict(json.loads(json.dumps(draft.to_dict())))

        assert restored == draft
        assert [u.unit_name for u in restored.units] == ["Unit 1", "Unit 2", "Unit 3"]
        assert restored.units[2].pricing_plans[0].price == Decimal("30.50")

    def test_unit_dict_uses_pricing_plans_key(self):
        data = UnitDraft(unit_name="A").to_dict()
        assert "pricingPlans" in data
        assert data["pricingPlans"][0]["price"] == "0"

    def test_unit_from_dict_accepts_snake_case_plans(self):
        unit = UnitDraft.from_dict({
            "unit_name": "A",
            "pricing_plans": [{"rental_type": "DAILY", "price": "20", "minimum_stay": 2}],
        })
        assert unit.pricing_plans == (PricingPlanDraft(RentalType.DAILY, Decimal("20"), 2),)


class TestSubmissionFields:

    def test_units_are_json_encoded(self, complete_draft):
        fields = complete_draft.to_submission_fields()
        units = json.loads(fields["units"])
        assert [u["unit_name"] for u in units] == ["Unit 1A", "Unit 2B"]
        assert units[0]["pricingPlans"][0] == {
            "rental_type": "DAILY", "price": "45", "minimum_stay": 2
        }
        assert fields["property_type"] == "APARTMENT"

    def test_blank_description_is_omitted(self, complete_draft):
        draft = complete_draft.with_field("description", "   ")
        assert "description" not in draft.to_submission_fields()

    def test_text_fields_are_trimmed(self, complete_draft):
        draft = complete_draft.with_field("title", "  Sunset Apartments ")
        assert draft.to_submission_fields()["title"] == "Sunset Apartments"
