# -*- coding: utf-8 -*-
"""
Landlord Listings Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "PropertyApiClient",
    "MockPropertyClient",
    "get_property_client",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name in ("PropertyApiClient", "get_property_client"):
        from . import api_client
        return getattr(api_client, name)
    elif name == "MockPropertyClient":
        from .mock_property_client import MockPropertyClient
        return MockPropertyClient
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
