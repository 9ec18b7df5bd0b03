# -*- coding: utf-8 -*-
"""
FleetDesk Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "RentalApiClient",
    "EntityLookupService",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "RentalApiClient":
        from .api_client import RentalApiClient
        return RentalApiClient
    elif name == "EntityLookupService":
        from .entity_service import EntityLookupService
        return EntityLookupService
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
