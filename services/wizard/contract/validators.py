# -*- coding: utf-8 -*-
"""
Contract wizard steps and their validators.
"""

from typing import Optional

from app.config import Config
from services.validation import (
    SchemaValidator, FieldRule, Required, Numeric, DateValue, NotInPast,
    AfterField, OneOf, MinField, When, to_decimal,
)
from services.wizard.pricing import (
    CENT, DURATION, FEES, add_on_fields, compute_total, amount_text,
)
from services.wizard.step_validator import StepValidator
from services.wizard.steps import StepDefinition, StepSequence

# Step ids
CUSTOMER_DETAILS = "customer-details"
VEHICLE_DETAILS = "vehicle-details"
CONTRACT_DETAILS = "contract-details"
PRICING_TERMS = "pricing-terms"
VEHICLE_INSPECTION = "vehicle-inspection"
SUMMARY = "summary"

CUSTOMER_FIELDS = (
    "customerName", "customerIdType", "customerIdNumber", "customerClassification",
    "customerAddress", "customerMobile", "customerStatus", "customerStatusId",
    "customerNationality", "customerDateOfBirth", "customerLicenseType",
)

VEHICLE_FIELDS = (
    "vehiclePlate", "vehicleSerialNumber", "vehiclePlateRegistrationType",
    "vehicleMakeYear", "vehicleMake", "vehicleModel", "vehicleColor",
    "vehicleMileage", "vehicleStatus", "vehicleDailyRentRate",
    "vehicleHourlyDelayRate", "vehiclePermittedDailyKm", "vehicleExcessKmRate",
)

# Pricing-step keys seeded from the selected vehicle
PRICING_SEED_FIELDS = (
    "dailyRentalRate", "hourlyDelayRate", "permittedDailyKm", "excessKmRate", "currentKm",
)


class DepositMatchesTotal(FieldRule):
    """
    The deposit must equal the computed contract total.

    Switched by ``Config.ENFORCE_DEPOSIT_EQUALS_TOTAL``.
    """

    message_key = "validation.contract.deposit_mismatch"

    def __init__(self, message_key: Optional[str] = None):
        super().__init__(message_key)
        self.references = ("dailyRentalRate", "rentalDays", "membershipEnabled") + add_on_fields()

    def check(self, key, record, context):
        if not Config.ENFORCE_DEPOSIT_EQUALS_TOTAL:
            return None
        deposit = to_decimal(record.get(key), allow_commas=True)
        if deposit is None:
            return None
        total = compute_total(record)
        if deposit.quantize(CENT) != total:
            return self.message(total=amount_text(total))
        return None


def customer_details_validator() -> StepValidator:
    return StepValidator(SchemaValidator({
        "selectedCustomerId": [Required("validation.contract.customer_required")],
    }))


def vehicle_details_validator() -> StepValidator:
    return StepValidator(SchemaValidator({
        "selectedVehicleId": [Required("validation.contract.vehicle_required")],
        "vehiclePlate": [Required("validation.contract.plate_required")],
        "vehicleSerialNumber": [Required("validation.contract.serial_required")],
        "vehiclePlateRegistrationType": [Required()],
        "vehicleMakeYear": [Required()],
        "vehicleMake": [Required()],
        "vehicleModel": [Required()],
        "vehicleColor": [Required()],
        "vehicleMileage": [Required(), Numeric(min_value=0)],
        "vehicleStatus": [Required()],
        "vehicleDailyRentRate": [Required(), Numeric(min_value=0)],
    }))


def contract_details_validator() -> StepValidator:
    return StepValidator(SchemaValidator({
        "startDate": [
            Required("validation.contract.start_required"),
            DateValue(),
            NotInPast(message_key="validation.contract.start_in_past"),
        ],
        "endDate": [
            Required("validation.contract.end_required"),
            DateValue(),
            AfterField("startDate", "validation.contract.end_after_start"),
        ],
        "durationType": [Required(), OneOf(Config.DURATION_TYPES)],
        "durationInDays": [When("durationType", DURATION, [
            Required("validation.contract.duration_required"),
            Numeric(min_value=1, integer=True,
                    message_key="validation.contract.duration_min"),
        ])],
        "totalFees": [When("durationType", FEES, [
            Required("validation.contract.fees_required"),
            Numeric(min_value=0, exclusive_min=True, allow_commas=True),
            MinField("vehicleDailyRentRate", allow_commas=True,
                     message_key="validation.contract.fees_below_rate"),
        ])],
    }), depends_on=("vehicleDailyRentRate",))


def pricing_terms_validator() -> StepValidator:
    return StepValidator(SchemaValidator({
        "dailyRentalRate": [Required(), Numeric(min_value=0, allow_commas=True)],
        "hourlyDelayRate": [Required(), Numeric(min_value=0, allow_commas=True)],
        "currentKm": [Required(), Numeric(min_value=0, allow_commas=True)],
        "rentalDays": [
            Required(),
            Numeric(min_value=1, integer=True, message_key="validation.contract.rental_days"),
        ],
        "permittedDailyKm": [Required(), Numeric(min_value=0, integer=True, allow_commas=True)],
        "excessKmRate": [Required(), Numeric(min_value=0, allow_commas=True)],
        "paymentMethod": [Required(), OneOf(Config.PAYMENT_METHODS)],
        "totalAmount": [Required(), Numeric(min_value=0)],
        "depositAmount": [
            Required("validation.contract.deposit_required"),
            Numeric(min_value=0, allow_commas=True,
                    message_key="validation.contract.deposit_number"),
            DepositMatchesTotal(),
        ],
    }))


def vehicle_inspection_validator() -> StepValidator:
    return StepValidator(SchemaValidator({
        "selectedInspector": [Required("validation.contract.inspector_required")],
        "inspectorName": [Required()],
    }))


def contract_steps() -> StepSequence:
    """The six contract steps, in order."""
    return StepSequence([
        StepDefinition(CUSTOMER_DETAILS, "contract.step.customer_details",
                       customer_details_validator(), CUSTOMER_FIELDS),
        StepDefinition(VEHICLE_DETAILS, "contract.step.vehicle_details",
                       vehicle_details_validator(), VEHICLE_FIELDS),
        StepDefinition(CONTRACT_DETAILS, "contract.step.contract_details",
                       contract_details_validator(), ("contractNumber", "statusId")),
        StepDefinition(PRICING_TERMS, "contract.step.pricing_terms",
                       pricing_terms_validator(), add_on_fields() + ("membershipEnabled",)),
        StepDefinition(VEHICLE_INSPECTION, "contract.step.vehicle_inspection",
                       vehicle_inspection_validator()),
        StepDefinition(SUMMARY, "contract.step.summary", StepValidator()),
    ])
