# -*- coding: utf-8 -*-
"""
FleetDesk Data Models
"""

from .customer import Customer
from .vehicle import Vehicle
from .inspector import Inspector
from .option import OptionItem, InsurancePolicy, name_of

__all__ = [
    "Customer",
    "Vehicle",
    "Inspector",
    "OptionItem",
    "InsurancePolicy",
    "name_of",
]
