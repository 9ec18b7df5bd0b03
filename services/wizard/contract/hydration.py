# -*- coding: utf-8 -*-
"""
Contract FieldSet hydration (create defaults and edit mapping).
"""

from datetime import date
from typing import Any, Dict, Tuple

from app.config import Config
from services.wizard.contract.validators import contract_steps
from services.wizard.hydration import HydrationStrategy, pick, text, number, number_text
from services.wizard.pricing import (
    DURATION, add_on_catalog, end_date_for, rental_days_for,
)
from utils.datetime_utils import to_date_isoformat


class ContractHydration(HydrationStrategy):
    """Initial FieldSet of the contract wizard."""

    @property
    def fields(self) -> Tuple[str, ...]:
        return contract_steps().all_fields

    def defaults(self, today: date) -> Dict[str, Any]:
        start = today.isoformat()
        duration_type = Config.DEFAULT_DURATION_TYPE
        days = rental_days_for(duration_type, "1", "0", 0)

        values = {
            # Customer details
            "selectedCustomerId": "",
            "customerName": "",
            "customerIdType": "",
            "customerIdNumber": "",
            "customerClassification": "",
            "customerAddress": "",
            "customerMobile": "",
            "customerStatus": "",
            "customerStatusId": "",
            "customerNationality": "",
            "customerDateOfBirth": "",
            "customerLicenseType": "",

            # Vehicle details
            "selectedVehicleId": "",
            "vehiclePlate": "",
            "vehicleSerialNumber": "",
            "vehiclePlateRegistrationType": "",
            "vehicleMakeYear": "",
            "vehicleMake": "",
            "vehicleModel": "",
            "vehicleColor": "",
            "vehicleMileage": 0,
            "vehicleStatus": "",
            "vehicleDailyRentRate": 0,
            "vehicleHourlyDelayRate": 0,
            "vehiclePermittedDailyKm": 0,
            "vehicleExcessKmRate": 0,

            # Contract details
            "startDate": start,
            "endDate": end_date_for(start, days),
            "durationType": duration_type,
            "durationInDays": "1" if duration_type == DURATION else "0",
            "totalFees": "0",
            "contractNumber": "",
            "statusId": "",

            # Pricing & terms
            "dailyRentalRate": "0",
            "hourlyDelayRate": "0",
            "currentKm": "0",
            "rentalDays": str(days or 0),
            "permittedDailyKm": "0",
            "excessKmRate": "0",
            "paymentMethod": Config.DEFAULT_PAYMENT_METHOD,
            "totalAmount": 0.0,
            "depositAmount": "0",
            "membershipEnabled": False,

            # Inspection
            "selectedInspector": "",
            "inspectorName": "",
        }
        for _, key, _, _ in add_on_catalog():
            values[key] = False
        return values

    def map_record(self, record: Dict[str, Any], today: date) -> Dict[str, Any]:
        duration_type = text(pick(record, "duration_type", default=Config.DEFAULT_DURATION_TYPE))
        enabled_add_ons = _add_on_ids(pick(record, "add_ons", default=[]))

        values = {
            # Customer details
            "selectedCustomerId": text(pick(record, "selected_customer_id", "customer.id")),
            "customerName": text(pick(record, "customer.name", "customer_name")),
            "customerIdType": text(pick(record, "customer.id_type", "customer_id_type")),
            "customerIdNumber": text(pick(record, "customer.id_number", "customer_id_number")),
            "customerClassification": text(pick(record, "customer.classification",
                                                "customer_classification")),
            "customerAddress": text(pick(record, "customer.address", "customer_address")),
            "customerMobile": text(pick(record, "customer.mobile_number", "customer.mobile",
                                        "customer_mobile")),
            "customerStatus": text(pick(record, "customer.status", "customer_status")),
            "customerStatusId": text(pick(record, "customer.status_id", "customer_status_id")),
            "customerNationality": text(pick(record, "customer.nationality",
                                             "customer_nationality")),
            "customerDateOfBirth": to_date_isoformat(pick(record, "customer.date_of_birth",
                                                          "customer_date_of_birth")),
            "customerLicenseType": text(pick(record, "customer.license_type",
                                             "customer_license_type")),

            # Vehicle details
            "selectedVehicleId": text(pick(record, "selected_vehicle_id", "vehicle.id")),
            "vehiclePlate": text(pick(record, "vehicle.plate_number", "vehicle_plate")),
            "vehicleSerialNumber": text(pick(record, "vehicle.serial_number",
                                             "vehicle_serial_number")),
            "vehiclePlateRegistrationType": text(pick(
                record, "vehicle.plate_registration_type", "vehicle_plate_registration_type",
                default=Config.DEFAULT_PLATE_REGISTRATION_TYPE)),
            "vehicleMakeYear": text(pick(record, "vehicle.make_year", "vehicle_make_year")),
            "vehicleMake": text(pick(record, "vehicle.make", "vehicle_make")),
            "vehicleModel": text(pick(record, "vehicle.model", "vehicle_model")),
            "vehicleColor": text(pick(record, "vehicle.color", "vehicle_color")),
            "vehicleMileage": number(pick(record, "vehicle.mileage", "vehicle_mileage", default=0)),
            "vehicleStatus": text(pick(record, "vehicle.status", "vehicle_status",
                                       default=Config.DEFAULT_VEHICLE_STATUS)),
            "vehicleDailyRentRate": number(pick(record, "vehicle_daily_rent_rate",
                                                "vehicle.daily_rental_rate",
                                                "daily_rental_rate", default=0)),
            "vehicleHourlyDelayRate": number(pick(record, "vehicle_hourly_delay_rate",
                                                  "hourly_delay_rate", default=0)),
            "vehiclePermittedDailyKm": number(pick(record, "vehicle_permitted_daily_km",
                                                   "permitted_daily_km", default=0)),
            "vehicleExcessKmRate": number(pick(record, "vehicle_excess_km_rate",
                                               "excess_km_rate", default=0)),

            # Contract details
            "startDate": to_date_isoformat(pick(record, "start_date")),
            "endDate": to_date_isoformat(pick(record, "end_date")),
            "durationType": duration_type,
            "durationInDays": number_text(pick(record, "duration_in_days", default=None),
                                          "1" if duration_type == DURATION else "0"),
            "totalFees": number_text(pick(record, "total_fees", default=None)),
            "contractNumber": text(pick(record, "contract_number")),
            "statusId": text(pick(record, "status_id", "status.id")),

            # Pricing & terms
            "dailyRentalRate": number_text(pick(record, "daily_rental_rate", default=None)),
            "hourlyDelayRate": number_text(pick(record, "hourly_delay_rate", default=None)),
            "currentKm": number_text(pick(record, "current_km", default=None)),
            "rentalDays": number_text(pick(record, "rental_days", default=None), "1"),
            "permittedDailyKm": number_text(pick(record, "permitted_daily_km", default=None)),
            "excessKmRate": number_text(pick(record, "excess_km_rate", default=None)),
            "paymentMethod": text(pick(record, "payment_method", default=Config.DEFAULT_PAYMENT_METHOD)),
            "totalAmount": number(pick(record, "total_amount", default=0)),
            "depositAmount": number_text(pick(record, "deposit", "deposit_amount", default=None)),
            "membershipEnabled": bool(pick(record, "membership_enabled", default=False)),

            # Inspection
            "selectedInspector": text(pick(record, "selected_inspector_id", "inspector.id")),
            "inspectorName": text(pick(record, "inspector_name", "inspector.name")),
        }
        for addon_id, key, _, _ in add_on_catalog():
            values[key] = addon_id in enabled_add_ons
        return values


def _add_on_ids(value: Any) -> set:
    """Add-ons arrive as ids or as ``{"id": ...}`` rows."""
    ids = set()
    for item in value or []:
        if isinstance(item, dict):
            item = item.get("id") or item.get("add_on_id")
        if item:
            ids.add(str(item))
    return ids
