# -*- coding: utf-8 -*-
"""Add Property wizard steps."""

from .details_step import DetailsStep
from .images_step import ImagesStep
from .units_step import UnitsStep
from .review_step import ReviewStep

__all__ = [
    'DetailsStep',
    'ImagesStep',
    'UnitsStep',
    'ReviewStep'
]
