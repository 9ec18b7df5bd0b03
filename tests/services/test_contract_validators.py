# -*- coding: utf-8 -*-
"""
Tests for the contract step validators and the step sequence.
"""
from datetime import date

import pytest

from app.config import Config
from services.exceptions import WizardStateError
from services.translation_manager import tr
from services.validation import ValidationContext, SchemaValidator, Required, AfterField
from services.wizard.contract import ContractHydration, contract_steps
from services.wizard.contract.validators import (
    contract_details_validator, pricing_terms_validator, vehicle_details_validator,
    CONTRACT_DETAILS, PRICING_TERMS,
)
from services.wizard.step_validator import StepValidator
from services.wizard.steps import StepDefinition, StepSequence

TODAY = date(2026, 3, 10)


@pytest.fixture
def ctx():
    return ValidationContext(today=TODAY)


@pytest.fixture
def values():
    """A create-mode FieldSet."""
    return ContractHydration().create(TODAY)


class TestContractDetails:
    """Duration vs fees terms and the schedule dates."""

    def test_defaults_are_valid(self, values, ctx):
        assert contract_details_validator().validate(values, ctx).is_valid

    def test_duration_mode_requires_days_and_ignores_fees(self, values, ctx):
        values.update({"durationType": "duration", "durationInDays": "", "totalFees": ""})
        errors = contract_details_validator().validate(values, ctx).field_errors
        assert errors == {"durationInDays": tr("validation.contract.duration_required")}

    def test_fees_mode_requires_fees_and_ignores_days(self, values, ctx):
        values.update({"durationType": "fees", "durationInDays": "", "totalFees": ""})
        errors = contract_details_validator().validate(values, ctx).field_errors
        assert errors == {"totalFees": tr("validation.contract.fees_required")}

    def test_fees_must_cover_one_day(self, values, ctx):
        values.update({"durationType": "fees", "totalFees": "100", "vehicleDailyRentRate": 150.0})
        errors = contract_details_validator().validate(values, ctx).field_errors
        assert errors["totalFees"] == tr("validation.contract.fees_below_rate")

    def test_duration_must_be_positive_whole_days(self, values, ctx):
        values.update({"durationInDays": "0"})
        errors = contract_details_validator().validate(values, ctx).field_errors
        assert errors["durationInDays"] == tr("validation.contract.duration_min")

    def test_start_date_in_past(self, values, ctx):
        values.update({"startDate": "2026-03-09", "endDate": "2026-03-12"})
        errors = contract_details_validator().validate(values, ctx).field_errors
        assert errors == {"startDate": tr("validation.contract.start_in_past")}

    def test_persisted_past_start_date_fails_when_editing(self, values):
        values.update({"startDate": "2026-01-01", "endDate": "2026-01-05"})
        edit = ValidationContext(today=TODAY, mode="edit")
        errors = contract_details_validator().validate(values, edit).field_errors
        assert errors == {"startDate": tr("validation.contract.start_in_past")}

    def test_end_must_follow_start(self, values, ctx):
        values.update({"endDate": values["startDate"]})
        errors = contract_details_validator().validate(values, ctx).field_errors
        assert errors["endDate"] == tr("validation.contract.end_after_start")


class TestPricingTerms:
    """Deposit and pricing inputs."""

    def _priced(self, values, deposit):
        values.update({
            "dailyRentalRate": "100",
            "rentalDays": "3",
            "totalAmount": 300.0,
            "depositAmount": deposit,
        })
        return values

    def test_deposit_equal_to_total_passes(self, values, ctx):
        result = pricing_terms_validator().validate(self._priced(values, "300"), ctx)
        assert result.is_valid, result.field_errors

    def test_deposit_one_cent_short_fails(self, values, ctx):
        result = pricing_terms_validator().validate(self._priced(values, "299.99"), ctx)
        assert result.field_errors == {
            "depositAmount": tr("validation.contract.deposit_mismatch", total="300"),
        }

    def test_deposit_with_thousands_separator(self, values, ctx):
        values.update({"dailyRentalRate": "1,000", "rentalDays": "2", "totalAmount": 2000.0,
                       "depositAmount": "2,000"})
        assert pricing_terms_validator().validate(values, ctx).is_valid

    def test_deposit_rule_can_be_switched_off(self, values, ctx, monkeypatch):
        monkeypatch.setattr(Config, "ENFORCE_DEPOSIT_EQUALS_TOTAL", False)
        assert pricing_terms_validator().validate(self._priced(values, "50"), ctx).is_valid

    def test_add_ons_count_towards_the_total(self, values, ctx):
        self._priced(values, "340")
        values["addOnCarDelivery"] = True
        assert pricing_terms_validator().validate(values, ctx).is_valid

    def test_rental_days_must_be_whole(self, values, ctx):
        values.update({"rentalDays": "1.5"})
        errors = pricing_terms_validator().validate(values, ctx).field_errors
        assert "rentalDays" in errors

    def test_unknown_payment_method(self, values, ctx):
        values.update({"paymentMethod": "cheque"})
        errors = pricing_terms_validator().validate(values, ctx).field_errors
        assert "paymentMethod" in errors


VEHICLE = {
    "selectedVehicleId": "ve-1",
    "vehiclePlate": "ABC 123",
    "vehicleSerialNumber": "SN-1",
    "vehiclePlateRegistrationType": "Private",
    "vehicleMakeYear": "2024",
    "vehicleMake": "Toyota",
    "vehicleModel": "Camry",
    "vehicleColor": "White",
    "vehicleMileage": 12000,
    "vehicleStatus": "Available",
    "vehicleDailyRentRate": 150.0,
}


class TestVehicleDetails:
    """The selected vehicle must carry its full description."""

    def test_complete_vehicle_passes(self, values, ctx):
        values.update(VEHICLE)
        assert vehicle_details_validator().validate(values, ctx).is_valid

    def test_selected_vehicle_needs_plate_and_serial(self, values, ctx):
        values.update(VEHICLE)
        values.update({"vehiclePlate": "", "vehicleSerialNumber": ""})
        errors = vehicle_details_validator().validate(values, ctx).field_errors
        assert errors == {
            "vehiclePlate": tr("validation.contract.plate_required"),
            "vehicleSerialNumber": tr("validation.contract.serial_required"),
        }

    @pytest.mark.parametrize("key", [
        "vehiclePlateRegistrationType", "vehicleMakeYear", "vehicleMake", "vehicleModel",
        "vehicleColor", "vehicleStatus",
    ])
    def test_description_fields_are_required(self, values, ctx, key):
        values.update(VEHICLE)
        values[key] = ""
        errors = vehicle_details_validator().validate(values, ctx).field_errors
        assert errors == {key: tr("validation.required")}

    def test_mileage_and_daily_rate_are_required(self, values, ctx):
        values.update(VEHICLE)
        values.update({"vehicleMileage": None, "vehicleDailyRentRate": None})
        errors = vehicle_details_validator().validate(values, ctx).field_errors
        assert set(errors) == {"vehicleMileage", "vehicleDailyRentRate"}


class TestStepSequence:
    """Ownership and dependency checks of the contract steps."""

    def test_six_steps_in_order(self):
        steps = contract_steps()
        assert steps.ids == [
            "customer-details", "vehicle-details", "contract-details",
            "pricing-terms", "vehicle-inspection", "summary",
        ]
        assert steps.index_of(PRICING_TERMS) == 3

    def test_every_key_has_one_owner(self):
        steps = contract_steps()
        assert steps.owner_of("depositAmount") == steps.index_of(PRICING_TERMS)
        assert steps.owner_of("vehicleDailyRentRate") == 1
        assert steps.owner_of("statusId") == steps.index_of(CONTRACT_DETAILS)

    def test_hydration_covers_every_step_key(self, values):
        assert set(values) == set(contract_steps().all_fields)

    def test_duplicate_owner_is_rejected(self):
        first = StepDefinition("a", "x", StepValidator(SchemaValidator({"name": [Required()]})))
        second = StepDefinition("b", "y", StepValidator(), ("name",))
        with pytest.raises(WizardStateError):
            StepSequence([first, second])

    def test_undeclared_reference_is_rejected(self):
        first = StepDefinition("a", "x", StepValidator(SchemaValidator({"start": [Required()]})))
        second = StepDefinition("b", "y", StepValidator(
            SchemaValidator({"end": [AfterField("start")]})))
        with pytest.raises(WizardStateError):
            StepSequence([first, second])

    def test_declared_reference_is_accepted(self):
        first = StepDefinition("a", "x", StepValidator(SchemaValidator({"start": [Required()]})))
        second = StepDefinition("b", "y", StepValidator(
            SchemaValidator({"end": [AfterField("start")]}), depends_on=("start",)))
        assert len(StepSequence([first, second])) == 2

    def test_aggregate_reports_first_failing_step(self, values, ctx):
        result = contract_steps().aggregate().validate(values, ctx)
        assert not result.is_valid
        assert result.step_index == 0
        assert "selectedCustomerId" in result.field_errors
