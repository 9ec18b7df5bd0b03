# -*- coding: utf-8 -*-
"""Vehicle wizard engine: steps, hydration, field rules, submission."""

from .validators import vehicle_steps
from .hydration import VehicleHydration
from .resolvers import build_vehicle_resolver, MAKES, MODELS, POLICIES
from .submission import VehicleTransformer, vehicle_submitter

__all__ = [
    'vehicle_steps',
    'VehicleHydration',
    'build_vehicle_resolver',
    'MAKES',
    'MODELS',
    'POLICIES',
    'VehicleTransformer',
    'vehicle_submitter',
]
