# -*- coding: utf-8 -*-
"""
Vehicle submission payload.

The body is split into the sections the backend stores separately; amounts
are clamped to the column range and counts truncated to integers.
"""

from typing import Any, Dict

from app.config import Config
from services.wizard.hydration import snake_key
from services.wizard.submission import (
    EntitySubmitter, SubmissionTransformer, clamp, date_or_none, empty_to_none,
    to_int, to_number,
)
from services.wizard.vehicle.validators import EXPIRATION_FIELDS, PRICING_GRID


def _amount(value: Any) -> float:
    return clamp(to_number(value), Config.MAX_AMOUNT)


class VehicleTransformer(SubmissionTransformer):
    """FieldSet -> ``POST /api/add-vehicle`` / ``PUT /api/vehicles/{id}`` body."""

    missing_branch_key = "error.submission.vehicle_no_branch"

    def build_payload(self, values: Dict[str, Any], mode: str,
                      branch_id: str) -> Dict[str, Any]:
        vehicle = {
            "make_id": values.get("make"),
            "model_id": values.get("model"),
            "make_year": values.get("makeYear"),
            "color_id": values.get("color"),
            "age_range": values.get("ageRange"),
            "serial_number": values.get("serialNumber"),
            "plate_number": values.get("plateNumber"),
            "mileage": to_int(values.get("mileage")),
            "year_of_manufacture": values.get("yearOfManufacture"),
            "car_class": values.get("carClass"),
            "plate_registration_type": values.get("plateRegistrationType"),
            "expected_sale_price": _amount(values.get("expectedSalePrice")),
            "branch_id": empty_to_none(values.get("branchId")) or branch_id,
            "chassis_number": values.get("chassisNumber"),
            "vehicle_load_capacity": to_number(values.get("vehicleLoadCapacity")),
            "technical_number": values.get("technicalNumber"),
        }

        pricing = {}
        for key, integer in PRICING_GRID:
            if integer:
                pricing[snake_key(key)] = to_int(values.get(key))
            else:
                pricing[snake_key(key)] = _amount(values.get(key))

        expirations = {snake_key(key): date_or_none(values.get(key)) for key in EXPIRATION_FIELDS}

        depreciation = {
            "car_pricing": _amount(values.get("carPricing")),
            "acquisition_date": date_or_none(values.get("acquisitionDate")),
            "operation_date": date_or_none(values.get("operationDate")),
            "depreciation_rate": clamp(to_number(values.get("depreciationRate")), 100.0),
            "depreciation_years": to_int(values.get("depreciationYears")),
        }

        additional_details = {
            "status_id": empty_to_none(values.get("carStatus")),
            "owner_id": empty_to_none(values.get("ownerName")),
            "owner_code": empty_to_none(values.get("ownerId")),
            "actual_user_id": empty_to_none(values.get("actualUser")),
            "actual_user_code": empty_to_none(values.get("userId")),
            "insurance_policy_id": empty_to_none(values.get("insuranceType")),
            "policy_number": empty_to_none(values.get("policyNumber")),
            "insurance_value": _amount(values.get("insuranceValue")),
            "deductible_premium": _amount(values.get("deductiblePremium")),
        }

        return {
            "vehicle": vehicle,
            "pricing": pricing,
            "expirations": expirations,
            "depreciation": depreciation,
            "additional_details": additional_details,
            "branch_id": branch_id,
        }


def vehicle_submitter(client) -> EntitySubmitter:
    """Submitter bound to the vehicle endpoints of ``client``."""
    return EntitySubmitter(client.create_vehicle, client.update_vehicle,
                           failure_key="error.submission.vehicle_failed")
