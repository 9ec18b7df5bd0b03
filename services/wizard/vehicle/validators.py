# -*- coding: utf-8 -*-
"""
Vehicle wizard steps and their validators.
"""

from services.validation import (
    SchemaValidator, Required, Numeric, DateValue, NotBeforeField,
)
from services.wizard.step_validator import StepValidator
from services.wizard.steps import StepDefinition, StepSequence

# Step ids
VEHICLE_DETAILS = "vehicle-details"
PRICING_FEE = "pricing-fee"
EXPIRATION_DATES = "expiration-dates"
VEHICLE_PRICING = "vehicle-pricing"
ADDITIONAL_DETAILS = "additional-details"

DETAIL_TEXT_FIELDS = (
    "make", "model", "makeYear", "color", "ageRange", "serialNumber", "plateNumber",
    "yearOfManufacture", "carClass", "plateRegistrationType", "branchId",
    "chassisNumber", "technicalNumber",
)

# (rate grid field, integer?)
PRICING_GRID = (
    ("dailyRentalRate", False),
    ("dailyMinimumRate", False),
    ("dailyHourlyDelayRate", False),
    ("dailyPermittedKm", True),
    ("dailyExcessKmRate", False),
    ("dailyOpenKmRate", False),
    ("monthlyRentalRate", False),
    ("monthlyMinimumRate", False),
    ("monthlyHourlyDelayRate", False),
    ("monthlyPermittedKm", True),
    ("monthlyExcessKmRate", False),
    ("monthlyOpenKmRate", False),
    ("hourlyRentalRate", False),
    ("hourlyPermittedKm", True),
    ("hourlyExcessKmRate", False),
)

EXPIRATION_FIELDS = (
    "formLicenseExpiration", "insurancePolicyExpiration",
    "periodicInspectionEnd", "operatingCardExpiration",
)

# Filled from the selected owner / actual user / insurance policy
ADDITIONAL_DERIVED_FIELDS = (
    "ownerId", "userId", "policyNumber", "insuranceValue", "deductiblePremium",
)


def vehicle_details_validator() -> StepValidator:
    messages = {
        "make": "validation.vehicle.make_required",
        "model": "validation.vehicle.model_required",
        "branchId": "validation.vehicle.branch_required",
    }
    schema = SchemaValidator({key: [Required(messages.get(key))] for key in DETAIL_TEXT_FIELDS})
    for key in ("mileage", "expectedSalePrice", "vehicleLoadCapacity"):
        schema.add_rule(key, Required())
        schema.add_rule(key, Numeric(min_value=0, exclusive_min=True, allow_commas=True))
    return StepValidator(schema)


def pricing_fee_validator() -> StepValidator:
    return StepValidator(SchemaValidator({
        key: [Required(), Numeric(min_value=0, integer=integer, allow_commas=True)]
        for key, integer in PRICING_GRID
    }))


def expiration_dates_validator() -> StepValidator:
    return StepValidator(SchemaValidator({
        key: [Required(), DateValue()] for key in EXPIRATION_FIELDS
    }))


def vehicle_pricing_validator() -> StepValidator:
    return StepValidator(SchemaValidator({
        "carPricing": [
            Required(),
            Numeric(min_value=1, allow_commas=True,
                    message_key="validation.vehicle.car_pricing"),
        ],
        "acquisitionDate": [Required(), DateValue()],
        "operationDate": [
            Required(),
            DateValue(),
            NotBeforeField("acquisitionDate", "validation.vehicle.operation_before_acquisition"),
        ],
        "depreciationRate": [
            Required(),
            Numeric(min_value=0, max_value=100,
                    message_key="validation.vehicle.depreciation_rate"),
        ],
        "depreciationYears": [Required(), Numeric(min_value=0, integer=True)],
    }))


def additional_details_validator() -> StepValidator:
    return StepValidator(SchemaValidator({
        "carStatus": [Required()],
        "ownerName": [Required("validation.vehicle.owner_required")],
        "actualUser": [Required("validation.vehicle.actual_user_required")],
        "insuranceCompany": [Required()],
        "insuranceType": [Required("validation.vehicle.policy_required")],
    }))


def vehicle_steps() -> StepSequence:
    """The five vehicle steps, in order."""
    return StepSequence([
        StepDefinition(VEHICLE_DETAILS, "vehicle.step.vehicle_details",
                       vehicle_details_validator()),
        StepDefinition(PRICING_FEE, "vehicle.step.pricing_fee", pricing_fee_validator()),
        StepDefinition(EXPIRATION_DATES, "vehicle.step.expiration_dates",
                       expiration_dates_validator()),
        StepDefinition(VEHICLE_PRICING, "vehicle.step.vehicle_pricing",
                       vehicle_pricing_validator()),
        StepDefinition(ADDITIONAL_DETAILS, "vehicle.step.additional_details",
                       additional_details_validator(), ADDITIONAL_DERIVED_FIELDS),
    ])
