# -*- coding: utf-8 -*-
"""
Landlord Listings Application Core Module
"""

from .config import Config

__all__ = ["Config"]
