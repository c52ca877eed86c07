# -*- coding: utf-8 -*-
"""
Shared fixtures for the test suite.
"""
import os
import sys
from decimal import Decimal
from pathlib import Path

import pytest

# Headless Qt (must be set before QApplication is created)
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from PyQt5.QtGui import QImage, QColor

from models.property_draft import PropertyDraft, UnitDraft, PricingPlanDraft, RentalType


def _write_png(path: Path, width: int = 640, height: int = 480) -> Path:
    image = QImage(width, height, QImage.Format_RGB32)
    image.fill(QColor("#3d8bfd"))
    assert image.save(str(path), "PNG")
    return path


@pytest.fixture
def make_png(qapp, tmp_path):
    """Factory writing real PNG files into tmp_path."""
    def factory(name: str = "photo.png", width: int = 640, height: int = 480) -> Path:
        return _write_png(tmp_path / name, width, height)
    return factory


@pytest.fixture
def broken_image(tmp_path):
    """A file with an image extension that cannot be decoded."""
    path = tmp_path / "broken.jpg"
    path.write_bytes(b"not really a jpeg")
    return path


@pytest.fixture
def preview_dir(tmp_path):
    return tmp_path / "previews"


@pytest.fixture
def complete_draft():
    """A draft that passes every step's validation."""
    return PropertyDraft(
        title="Sunset Apartments",
        address="KG 123 St",
        city="Kigali",
        description="Quiet street, close to the market.",
        units=(
            UnitDraft(
                unit_name="Unit 1A",
                max_guests=3,
                pricing_plans=(
                    PricingPlanDraft(RentalType.DAILY, Decimal("45"), 2),
                    PricingPlanDraft(RentalType.MONTHLY, Decimal("900"), 1),
                ),
            ),
            UnitDraft(
                unit_name="Unit 2B",
                pricing_plans=(PricingPlanDraft(RentalType.YEARLY, Decimal("9500"), 1),),
            ),
        ),
    )
