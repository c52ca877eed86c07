# -*- coding: utf-8 -*-
"""
Property draft entity models.

A PropertyDraft is the unsaved listing composed by the Add Property wizard.
Drafts are immutable: every edit produces a new draft that reuses the
untouched units and plans.
"""

import json
from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Tuple


class PropertyType(Enum):
    """Kind of property being listed."""
    HOUSE = "HOUSE"
    APARTMENT = "APARTMENT"
    ROOM = "ROOM"
    VILLA = "VILLA"
    STUDIO = "STUDIO"
    COMMERCIAL = "COMMERCIAL"
    LAND = "LAND"
    DUPLEX = "DUPLEX"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class RentalType(Enum):
    """Billing period of a pricing plan."""
    DAILY = "DAILY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def price_suffix(self) -> str:
        """Short suffix used after a price, e.g. $100/mo."""
        return {"DAILY": "night", "MONTHLY": "mo", "YEARLY": "yr"}[self.value]

    @property
    def stay_unit(self) -> str:
        """Unit in which the minimum stay is counted."""
        return {"DAILY": "night", "MONTHLY": "month", "YEARLY": "year"}[self.value]


@dataclass(frozen=True)
class PricingPlanDraft:
    """One price/term offering of a unit."""

    rental_type: RentalType = RentalType.MONTHLY
    price: Decimal = Decimal("0")
    minimum_stay: int = 1

    @property
    def display_label(self) -> str:
        """Summary label, e.g. "$100/mo · min 3"."""
        text = f"${self.price}/{self.rental_type.price_suffix}"
        if self.minimum_stay > 1:
            text += f" · min {self.minimum_stay}"
        return text

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "rental_type": self.rental_type.value,
            "price": str(self.price),
            "minimum_stay": self.minimum_stay,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PricingPlanDraft":
        """Create PricingPlanDraft from dictionary."""
        return cls(
            rental_type=RentalType(data.get("rental_type", RentalType.MONTHLY.value)),
            price=Decimal(str(data.get("price", "0"))),
            minimum_stay=int(data.get("minimum_stay", 1)),
        )


@dataclass(frozen=True)
class UnitDraft:
    """A rentable sub-unit of the property with its pricing plans."""

    unit_name: str = ""
    max_guests: int = 2
    pricing_plans: Tuple[PricingPlanDraft, ...] = field(
        default_factory=lambda: (PricingPlanDraft(),)
    )

    def display_name(self, index: int) -> str:
        """Name shown in summaries; falls back to "Unit N" (1-based)."""
        return self.unit_name.strip() or f"Unit {index + 1}"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "unit_name": self.unit_name,
            "max_guests": self.max_guests,
            "pricingPlans": [plan.to_dict() for plan in self.pricing_plans],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "UnitDraft":
        """Create UnitDraft from dictionary."""
        plans = data.get("pricingPlans")
        if plans is None:
            plans = data.get("pricing_plans", [])
        return cls(
            unit_name=data.get("unit_name", ""),
            max_guests=int(data.get("max_guests", 2)),
            pricing_plans=tuple(PricingPlanDraft.from_dict(p) for p in plans),
        )


@dataclass(frozen=True)
class PropertyDraft:
    """
    In-progress property listing.

    Sequence order is display order for images and submission order for
    units and plans. Unit names need not be unique.
    """

    title: str = ""
    property_type: PropertyType = PropertyType.APARTMENT
    address: str = ""
    city: str = ""
    description: str = ""
    images: Tuple[Path, ...] = ()
    units: Tuple[UnitDraft, ...] = field(default_factory=lambda: (UnitDraft(),))

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(cls.__dataclass_fields__)

    def with_field(self, key: str, value: Any) -> "PropertyDraft":
        """Return a copy with one attribute replaced."""
        if key not in self.__dataclass_fields__:
            raise KeyError(f"PropertyDraft has no field '{key}'")
        return replace(self, **{key: value})

    @property
    def plan_count(self) -> int:
        return sum(len(unit.pricing_plans) for unit in self.units)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "title": self.title,
            "property_type": self.property_type.value,
            "address": self.address,
            "city": self.city,
            "description": self.description,
            "images": [str(path) for path in self.images],
            "units": [unit.to_dict() for unit in self.units],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PropertyDraft":
        """Create PropertyDraft from dictionary."""
        return cls(
            title=data.get("title", ""),
            property_type=PropertyType(data.get("property_type", PropertyType.APARTMENT.value)),
            address=data.get("address", ""),
            city=data.get("city", ""),
            description=data.get("description", ""),
            images=tuple(Path(p) for p in data.get("images", [])),
            units=tuple(UnitDraft.from_dict(u) for u in data.get("units", [])),
        )

    def to_submission_fields(self) -> Dict[str, str]:
        """
        Scalar multipart fields for the property-creation endpoint.

        Units travel as a JSON string; image files are attached separately.
        """
        fields = {
            "title": self.title.strip(),
            "property_type": self.property_type.value,
            "address": self.address.strip(),
            "city": self.city.strip(),
            "units": json.dumps([unit.to_dict() for unit in self.units]),
        }
        if self.description.strip():
            fields["description"] = self.description.strip()
        return fields
