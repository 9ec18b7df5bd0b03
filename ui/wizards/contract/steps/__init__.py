# -*- coding: utf-8 -*-
"""
Contract Wizard Steps Package.

- Step 1: Customer Details
- Step 2: Vehicle Details
- Step 3: Contract Details
- Step 4: Pricing Terms
- Step 5: Vehicle Inspection
- Step 6: Summary
"""

from .customer_step import CustomerStep
from .vehicle_step import VehicleStep
from .contract_details_step import ContractDetailsStep
from .pricing_step import PricingStep
from .inspection_step import InspectionStep
from .summary_step import SummaryStep

__all__ = [
    'CustomerStep',
    'VehicleStep',
    'ContractDetailsStep',
    'PricingStep',
    'InspectionStep',
    'SummaryStep',
]
