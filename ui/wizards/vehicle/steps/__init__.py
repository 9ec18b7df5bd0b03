# -*- coding: utf-8 -*-
"""
Vehicle Wizard Steps Package.

- Step 1: Vehicle Details
- Step 2: Pricing Fee
- Step 3: Expiration Dates
- Step 4: Vehicle Pricing
- Step 5: Additional Details
"""

from .vehicle_details_step import VehicleDetailsStep
from .pricing_fee_step import PricingFeeStep
from .expiration_dates_step import ExpirationDatesStep
from .vehicle_pricing_step import VehiclePricingStep
from .additional_details_step import AdditionalDetailsStep

__all__ = [
    'VehicleDetailsStep',
    'PricingFeeStep',
    'ExpirationDatesStep',
    'VehiclePricingStep',
    'AdditionalDetailsStep',
]
