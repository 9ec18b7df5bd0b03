# -*- coding: utf-8 -*-
"""
Tests for the submission transformers and the entity submitter.
"""
from datetime import date

import pytest

from app.config import Config
from services.exceptions import SubmissionException
from services.translation_manager import tr
from services.wizard.contract import ContractHydration, ContractTransformer, contract_submitter
from services.wizard.submission import (
    EntitySubmitter, SubmissionRequest, clamp, date_or_none, empty_to_none, to_int, to_number,
)
from services.wizard.vehicle import VehicleHydration, VehicleTransformer, vehicle_submitter

TODAY = date(2026, 3, 10)


class TestCoercion:
    """Lenient numeric coercion."""

    @pytest.mark.parametrize("value", ["", None, "abc", "NaN", float("nan"), "inf"])
    def test_unparseable_numbers_become_zero(self, value):
        assert to_number(value) == 0.0
        assert to_int(value) == 0

    def test_thousands_separators(self):
        assert to_number("12,500.75") == 12500.75
        assert to_int("1,234.9") == 1234

    def test_clamp(self):
        assert clamp(5.0, 100.0) == 5.0
        assert clamp(500.0, 100.0) == 100.0
        assert clamp(-1.0, 100.0, lower=0.0) == 0.0

    def test_optional_values(self):
        assert empty_to_none("  ") is None
        assert empty_to_none("x") == "x"
        assert date_or_none("") is None
        assert date_or_none("2026-03-10T08:00:00Z") == "2026-03-10"


class TestContractTransformer:
    """FieldSet -> contract payload."""

    @pytest.fixture
    def values(self):
        values = ContractHydration().create(TODAY)
        values.update({
            "selectedCustomerId": "cu-1",
            "selectedVehicleId": "ve-1",
            "selectedInspector": "in-1",
            "inspectorName": "Khalid Inspector",
            "dailyRentalRate": "150",
            "rentalDays": "5",
            "durationInDays": "5",
            "totalAmount": 750.0,
            "depositAmount": "750",
            "addOnGps": True,
        })
        return values

    def test_create_payload(self, values):
        request = ContractTransformer().transform(values, "create", branch_id="br-1")
        payload = request.payload

        assert not request.is_update
        assert payload["selected_vehicle_id"] == "ve-1"
        assert payload["daily_rental_rate"] == 150.0
        assert payload["rental_days"] == 5
        assert payload["total_amount"] == 750.0
        assert payload["deposit"] == 750.0
        assert payload["duration_in_days"] == 5
        assert "total_fees" not in payload
        assert payload["add_ons"] == ["gps"]
        assert payload["branch_id"] == "br-1"
        assert "status_id" not in payload

    def test_fees_mode_sends_fees_only(self, values):
        values.update({"durationType": "fees", "totalFees": "1,200"})
        payload = ContractTransformer().transform(values, "create", branch_id="br-1").payload
        assert payload["total_fees"] == 1200.0
        assert "duration_in_days" not in payload

    def test_nan_and_text_become_zero(self, values):
        values.update({"currentKm": "NaN", "excessKmRate": "abc"})
        payload = ContractTransformer().transform(values, "create", branch_id="br-1").payload
        assert payload["current_km"] == 0.0
        assert payload["excess_km_rate"] == 0.0

    def test_blank_references_become_null(self, values):
        values.update({"selectedCustomerId": "", "contractNumber": ""})
        payload = ContractTransformer().transform(values, "create", branch_id="br-1").payload
        assert payload["selected_customer_id"] is None
        assert payload["contract_number"] is None

    def test_missing_branch(self, values):
        with pytest.raises(SubmissionException) as excinfo:
            ContractTransformer().transform(values, "create", branch_id="")
        assert excinfo.value.message == tr("error.submission.contract_no_branch")

    def test_edit_requires_entity_id(self, values):
        with pytest.raises(SubmissionException):
            ContractTransformer().transform(values, "edit", entity_id=None, branch_id="br-1")

    def test_edit_payload(self, values):
        values["statusId"] = "cs-2"
        request = ContractTransformer().transform(values, "edit", entity_id="ct-9",
                                                  branch_id="br-1")
        assert request.is_update
        assert request.entity_id == "ct-9"
        assert request.payload["status_id"] == "cs-2"

    def test_transform_does_not_touch_the_fieldset(self, values):
        before = dict(values)
        ContractTransformer().transform(values, "create", branch_id="br-1")
        assert values == before


class TestVehicleTransformer:
    """FieldSet -> sectioned vehicle payload."""

    @pytest.fixture
    def values(self):
        values = VehicleHydration().create(TODAY)
        values.update({
            "make": "mk-1", "model": "md-1", "color": "co-1", "plateNumber": "ABC 123",
            "mileage": "12,000", "expectedSalePrice": "999999999999",
            "dailyRentalRate": "150", "dailyPermittedKm": "300.7",
            "formLicenseExpiration": "2027-01-31",
            "carPricing": "80000", "depreciationRate": "250", "depreciationYears": "5",
            "ownerName": "ow-1", "ownerId": "OWN-1", "insuranceType": "po-1",
            "branchId": "",
        })
        return values

    def test_sections(self, values):
        payload = VehicleTransformer().transform(values, "create", branch_id="br-1").payload
        assert set(payload) == {"vehicle", "pricing", "expirations", "depreciation",
                                "additional_details", "branch_id"}

    def test_vehicle_section(self, values):
        vehicle = VehicleTransformer().transform(values, "create", branch_id="br-1").payload["vehicle"]
        assert vehicle["make_id"] == "mk-1"
        assert vehicle["mileage"] == 12000
        assert vehicle["expected_sale_price"] == Config.MAX_AMOUNT
        assert vehicle["branch_id"] == "br-1"

    def test_pricing_grid(self, values):
        pricing = VehicleTransformer().transform(values, "create", branch_id="br-1").payload["pricing"]
        assert pricing["daily_rental_rate"] == 150.0
        assert pricing["daily_permitted_km"] == 300
        assert pricing["monthly_rental_rate"] == 0.0
        assert len(pricing) == 15

    def test_dates_and_depreciation(self, values):
        payload = VehicleTransformer().transform(values, "create", branch_id="br-1").payload
        assert payload["expirations"]["form_license_expiration"] == "2027-01-31"
        assert payload["expirations"]["operating_card_expiration"] is None
        assert payload["depreciation"]["depreciation_rate"] == 100.0
        assert payload["depreciation"]["depreciation_years"] == 5

    def test_additional_details(self, values):
        details = VehicleTransformer().transform(values, "create",
                                                 branch_id="br-1").payload["additional_details"]
        assert details["owner_id"] == "ow-1"
        assert details["owner_code"] == "OWN-1"
        assert details["actual_user_id"] is None
        assert details["insurance_policy_id"] == "po-1"

    def test_missing_branch(self, values):
        with pytest.raises(SubmissionException) as excinfo:
            VehicleTransformer().transform(values, "create", branch_id=None)
        assert excinfo.value.message == tr("error.submission.vehicle_no_branch")


class TestEntitySubmitter:
    """One create or update call per request."""

    def test_create(self, client):
        data = contract_submitter(client).submit(SubmissionRequest({"a": 1}))
        assert data["id"] == "ct-new"
        assert client.calls == [("create_contract", None, {"a": 1})]

    def test_update(self, client):
        vehicle_submitter(client).submit(SubmissionRequest({"a": 1}, entity_id="ve-7"))
        assert client.calls == [("update_vehicle", "ve-7", {"a": 1})]

    def test_server_error_is_surfaced(self, client):
        client.success, client.error = False, "Plate already registered"
        with pytest.raises(SubmissionException) as excinfo:
            vehicle_submitter(client).submit(SubmissionRequest({}))
        assert excinfo.value.message == "Plate already registered"

    def test_failure_without_message(self):
        submitter = EntitySubmitter(lambda payload: {"success": False},
                                    lambda entity_id, payload: None,
                                    failure_key="error.submission.contract_failed")
        with pytest.raises(SubmissionException) as excinfo:
            submitter.submit(SubmissionRequest({}))
        assert excinfo.value.message == tr("error.submission.contract_failed")
