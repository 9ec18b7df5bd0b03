# -*- coding: utf-8 -*-
"""Vehicle wizard (add and edit fleet vehicles)."""

from .vehicle_wizard import VehicleWizard

__all__ = ['VehicleWizard']
