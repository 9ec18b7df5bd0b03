# -*- coding: utf-8 -*-
"""
Tests for the vehicle wizard step validators.
"""
from datetime import date

import pytest

from services.translation_manager import tr
from services.validation import ValidationContext
from services.wizard.vehicle import VehicleHydration, vehicle_steps
from services.wizard.vehicle.validators import (
    EXPIRATION_FIELDS, PRICING_GRID, additional_details_validator,
    expiration_dates_validator, pricing_fee_validator, vehicle_details_validator,
    vehicle_pricing_validator,
)

TODAY = date(2026, 3, 10)


@pytest.fixture
def ctx():
    return ValidationContext(today=TODAY)


@pytest.fixture
def values():
    values = VehicleHydration().create(TODAY)
    values.update({
        "make": "mk-1", "model": "md-1", "makeYear": "2024", "color": "co-1",
        "ageRange": "0-1", "serialNumber": "SN-9", "plateNumber": "KSA 1",
        "yearOfManufacture": "2024", "carClass": "Sedan", "branchId": "br-1",
        "chassisNumber": "CH-1", "technicalNumber": "T-1",
        "mileage": "12,000", "expectedSalePrice": "55000", "vehicleLoadCapacity": "5",
    })
    return values


class TestVehicleDetails:

    def test_complete_details_pass(self, values, ctx):
        assert vehicle_details_validator().validate(values, ctx).is_valid

    def test_missing_make_and_branch(self, values, ctx):
        values.update({"make": "", "branchId": ""})
        errors = vehicle_details_validator().validate(values, ctx).field_errors
        assert errors["make"] == tr("validation.vehicle.make_required")
        assert errors["branchId"] == tr("validation.vehicle.branch_required")

    def test_measures_must_be_positive(self, values, ctx):
        values.update({"mileage": "0", "vehicleLoadCapacity": "abc"})
        errors = vehicle_details_validator().validate(values, ctx).field_errors
        assert errors["mileage"] == tr("validation.greater_than", min="0")
        assert errors["vehicleLoadCapacity"] == tr("validation.number")


class TestPricingGrid:

    def test_zero_grid_is_valid(self, values, ctx):
        assert pricing_fee_validator().validate(values, ctx).is_valid

    def test_every_grid_cell_is_required(self, values, ctx):
        values.update({key: "" for key, _ in PRICING_GRID})
        errors = pricing_fee_validator().validate(values, ctx).field_errors
        assert set(errors) == {key for key, _ in PRICING_GRID}

    def test_km_allowances_are_whole_numbers(self, values, ctx):
        values.update({"dailyPermittedKm": "250.5", "dailyRentalRate": "150.5"})
        errors = pricing_fee_validator().validate(values, ctx).field_errors
        assert errors == {"dailyPermittedKm": tr("validation.integer")}

    def test_negative_rate_rejected(self, values, ctx):
        values["monthlyRentalRate"] = "-1"
        errors = pricing_fee_validator().validate(values, ctx).field_errors
        assert errors["monthlyRentalRate"] == tr("validation.min", min="0")


class TestExpirationDates:

    def test_dates_required(self, values, ctx):
        errors = expiration_dates_validator().validate(values, ctx).field_errors
        assert set(errors) == set(EXPIRATION_FIELDS)

    def test_dates_accepted(self, values, ctx):
        values.update({key: "2027-01-01" for key in EXPIRATION_FIELDS})
        assert expiration_dates_validator().validate(values, ctx).is_valid

    def test_bad_date_rejected(self, values, ctx):
        values.update({key: "2027-01-01" for key in EXPIRATION_FIELDS})
        values["operatingCardExpiration"] = "not a date"
        errors = expiration_dates_validator().validate(values, ctx).field_errors
        assert errors == {"operatingCardExpiration": tr("validation.date")}


class TestVehiclePricing:

    @pytest.fixture
    def priced(self, values):
        values.update({
            "carPricing": "85,000", "acquisitionDate": "2026-01-01",
            "operationDate": "2026-01-15", "depreciationRate": "20", "depreciationYears": "5",
        })
        return values

    def test_valid(self, priced, ctx):
        assert vehicle_pricing_validator().validate(priced, ctx).is_valid

    def test_car_price_must_be_positive(self, priced, ctx):
        priced["carPricing"] = "0"
        errors = vehicle_pricing_validator().validate(priced, ctx).field_errors
        assert errors["carPricing"] == tr("validation.vehicle.car_pricing")

    def test_operation_not_before_acquisition(self, priced, ctx):
        priced["operationDate"] = "2025-12-31"
        errors = vehicle_pricing_validator().validate(priced, ctx).field_errors
        assert errors["operationDate"] == tr("validation.vehicle.operation_before_acquisition")

    def test_same_day_operation_allowed(self, priced, ctx):
        priced["operationDate"] = priced["acquisitionDate"]
        assert vehicle_pricing_validator().validate(priced, ctx).is_valid

    def test_depreciation_bounds(self, priced, ctx):
        priced.update({"depreciationRate": "101", "depreciationYears": "2.5"})
        errors = vehicle_pricing_validator().validate(priced, ctx).field_errors
        assert errors["depreciationRate"] == tr("validation.vehicle.depreciation_rate")
        assert errors["depreciationYears"] == tr("validation.integer")


class TestAdditionalDetails:

    def test_required_selections(self, values, ctx):
        errors = additional_details_validator().validate(values, ctx).field_errors
        assert errors["ownerName"] == tr("validation.vehicle.owner_required")
        assert errors["actualUser"] == tr("validation.vehicle.actual_user_required")
        assert errors["insuranceType"] == tr("validation.vehicle.policy_required")
        assert errors["carStatus"] == tr("validation.required")


class TestVehicleSequence:

    def test_five_steps_own_every_field(self):
        steps = vehicle_steps()
        assert len(steps) == 5
        fields = VehicleHydration().fields
        assert all(steps.owner_of(key) is not None for key in fields)
