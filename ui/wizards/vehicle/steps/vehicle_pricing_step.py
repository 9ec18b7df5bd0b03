# -*- coding: utf-8 -*-
"""
Vehicle Pricing Step - purchase price and depreciation.
"""

from ui.wizards.framework import BaseStep


class VehiclePricingStep(BaseStep):
    """Step 4."""

    def setup_ui(self):
        self.add_number("carPricing", "field.car_pricing")
        self.add_date("acquisitionDate", "field.acquisition_date")
        self.add_date("operationDate", "field.operation_date")
        self.add_number("depreciationRate", "field.depreciation_rate")
        self.add_number("depreciationYears", "field.depreciation_years")
