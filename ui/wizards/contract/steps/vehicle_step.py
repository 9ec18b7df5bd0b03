# -*- coding: utf-8 -*-
"""
Vehicle Details Step - search and pick an available vehicle.
"""

from services.wizard.contract import VEHICLES
from ui.wizards.framework import BaseStep

VEHICLE_ROWS = (
    ("vehiclePlate", "field.vehicle_plate"),
    ("vehicleSerialNumber", "field.vehicle_serial_number"),
    ("vehiclePlateRegistrationType", "field.plate_registration_type"),
    ("vehicleMakeYear", "field.make_year"),
    ("vehicleMake", "field.vehicle_make"),
    ("vehicleModel", "field.vehicle_model"),
    ("vehicleColor", "field.color"),
    ("vehicleMileage", "field.mileage"),
    ("vehicleStatus", "field.vehicle_status"),
    ("vehicleDailyRentRate", "field.daily_rental_rate"),
    ("vehicleHourlyDelayRate", "field.hourly_delay_rate"),
    ("vehiclePermittedDailyKm", "field.permitted_daily_km"),
    ("vehicleExcessKmRate", "field.excess_km_rate"),
)


class VehicleStep(BaseStep):
    """Step 2: the vehicle picker; the vehicle's data is filled from the pick."""

    def setup_ui(self):
        self.picker = self.add_picker("selectedVehicleId", "field.vehicle", VEHICLES)
        for key, label_key in VEHICLE_ROWS:
            self.add_text(key, label_key, read_only=True)

    def refresh(self):
        plate = self.navigator.value("vehiclePlate", "")
        make = self.navigator.value("vehicleMake", "")
        self.picker.set_selection_text(f"{plate} {make}".strip())
