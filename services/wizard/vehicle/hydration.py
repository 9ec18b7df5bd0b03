# -*- coding: utf-8 -*-
"""
Vehicle FieldSet hydration (create defaults and edit mapping).

Persisted vehicles are flat rows with ``*_id`` columns plus nested
relations (``make``, ``model``, ``color``, ``status``, ``owner``,
``actual_user``, ``insurance_policy``) carrying at least a ``name``.
"""

from datetime import date
from typing import Any, Dict, Tuple

from app.config import Config
from services.wizard.hydration import HydrationStrategy, pick, text, number_text, snake_key
from services.wizard.vehicle.validators import (
    ADDITIONAL_DERIVED_FIELDS, DETAIL_TEXT_FIELDS, EXPIRATION_FIELDS, PRICING_GRID,
    vehicle_steps,
)
from utils.datetime_utils import to_date_isoformat


class VehicleHydration(HydrationStrategy):
    """Initial FieldSet of the vehicle wizard."""

    @property
    def fields(self) -> Tuple[str, ...]:
        return vehicle_steps().all_fields

    def defaults(self, today: date) -> Dict[str, Any]:
        values: Dict[str, Any] = {key: "" for key in DETAIL_TEXT_FIELDS}
        values.update({
            "mileage": "",
            "expectedSalePrice": "",
            "vehicleLoadCapacity": "",
            "plateRegistrationType": Config.DEFAULT_PLATE_REGISTRATION_TYPE,
            "branchId": Config.DEFAULT_BRANCH_ID,
        })
        values.update({key: "0" for key, _ in PRICING_GRID})
        values.update({key: "" for key in EXPIRATION_FIELDS})
        values.update({
            "carPricing": "0",
            "acquisitionDate": "",
            "operationDate": "",
            "depreciationRate": "0",
            "depreciationYears": "0",
        })
        values.update({
            "carStatus": "",
            "ownerName": "",
            "actualUser": "",
            "insuranceCompany": "",
            "insuranceType": "",
        })
        values.update({key: "" for key in ADDITIONAL_DERIVED_FIELDS})
        return values

    def map_record(self, record: Dict[str, Any], today: date) -> Dict[str, Any]:
        values = {
            # Vehicle details
            "make": text(pick(record, "make_id", "make.id", "make")),
            "model": text(pick(record, "model_id", "model.id", "model")),
            "makeYear": text(pick(record, "make_year")),
            "color": text(pick(record, "color_id", "color.id", "color")),
            "ageRange": text(pick(record, "age_range")),
            "serialNumber": text(pick(record, "serial_number")),
            "plateNumber": text(pick(record, "plate_number")),
            "mileage": number_text(pick(record, "mileage", default=None), ""),
            "yearOfManufacture": text(pick(record, "year_of_manufacture")),
            "carClass": text(pick(record, "car_class")),
            "plateRegistrationType": text(pick(record, "plate_registration_type",
                                               default=Config.DEFAULT_PLATE_REGISTRATION_TYPE)),
            "expectedSalePrice": number_text(pick(record, "expected_sale_price", default=None), ""),
            "branchId": text(pick(record, "branch_id", "branch.id")),
            "chassisNumber": text(pick(record, "chassis_number")),
            "vehicleLoadCapacity": number_text(pick(record, "vehicle_load_capacity",
                                                    default=None), ""),
            "technicalNumber": text(pick(record, "technical_number")),

            # Vehicle pricing & depreciation
            "carPricing": number_text(pick(record, "car_pricing", default=None)),
            "acquisitionDate": to_date_isoformat(pick(record, "acquisition_date")),
            "operationDate": to_date_isoformat(pick(record, "operation_date")),
            "depreciationRate": number_text(pick(record, "depreciation_rate", default=None)),
            "depreciationYears": number_text(pick(record, "depreciation_years", default=None)),

            # Additional details
            "carStatus": text(pick(record, "status_id", "status.id")),
            "ownerName": text(pick(record, "owner_id", "owner.id")),
            "ownerId": text(pick(record, "owner.code", "owner_code")),
            "actualUser": text(pick(record, "actual_user_id", "actual_user.id")),
            "userId": text(pick(record, "actual_user.code", "actual_user_code")),
            "insuranceCompany": text(pick(record, "insurance_policy.policy_company",
                                          "insurance_company")),
            "insuranceType": text(pick(record, "insurance_policy_id", "insurance_policy.id")),
            "policyNumber": text(pick(record, "insurance_policy.policy_number", "policy_number")),
            "insuranceValue": number_text(pick(record, "insurance_value",
                                               "insurance_policy.policy_amount",
                                               default=None), ""),
            "deductiblePremium": number_text(pick(record, "insurance_policy.deductible_premium",
                                                  "deductible_premium", default=None), ""),
        }

        # Rate grid: camelCase key <-> snake_case column
        for key, _ in PRICING_GRID:
            values[key] = number_text(pick(record, snake_key(key), default=None))
        for key in EXPIRATION_FIELDS:
            values[key] = to_date_isoformat(pick(record, snake_key(key)))
        return values

