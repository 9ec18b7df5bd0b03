# -*- coding: utf-8 -*-
"""
Vehicle Details Step - identity, make/model and registration data.
"""

from services.wizard.vehicle import MAKES, MODELS
from services.wizard.vehicle.resolvers import BRANCHES, COLORS
from ui.wizards.framework import BaseStep


class VehicleDetailsStep(BaseStep):
    """Step 1: the model list follows the selected make."""

    def setup_ui(self):
        self.add_choice("make", "field.make", source=MAKES)
        self.add_choice("model", "field.model", source=MODELS)
        self.add_text("makeYear", "field.make_year")
        self.add_choice("color", "field.color", source=COLORS)
        self.add_text("ageRange", "field.age_range")
        self.add_text("serialNumber", "field.serial_number")
        self.add_text("plateNumber", "field.plate_number")
        self.add_number("mileage", "field.mileage")
        self.add_text("yearOfManufacture", "field.year_of_manufacture")
        self.add_text("carClass", "field.car_class")
        self.add_text("plateRegistrationType", "field.plate_registration_type")
        self.add_number("expectedSalePrice", "field.expected_sale_price")
        self.add_choice("branchId", "field.branch", source=BRANCHES)
        self.add_text("chassisNumber", "field.chassis_number")
        self.add_number("vehicleLoadCapacity", "field.vehicle_load_capacity")
        self.add_text("technicalNumber", "field.technical_number")
