# -*- coding: utf-8 -*-
"""
Tests for EntityLookupService.

Lookups degrade to empty lists; they never raise.
"""
import pytest

from models import Customer, InsurancePolicy, Vehicle
from services.entity_service import EntityLookupService


def ok(data):
    return {"success": True, "data": data, "error": None}


def failed(error="boom"):
    return {"success": False, "data": None, "error": error}


class FakeApi:
    """Returns canned envelopes per endpoint method."""

    def __init__(self, **answers):
        self.answers = answers
        self.calls = []

    def __getattr__(self, name):
        if name not in self.answers:
            raise AttributeError(name)

        def call(*args):
            self.calls.append((name, args))
            return self.answers[name]
        return call


POLICIES = ok({"policies": [
    {"id": "po-1", "policy_company": "Tawuniya", "policy_number": "TW-100",
     "policy_amount": "50000", "deductible_premium": 500},
    {"id": "po-2", "policy_company": "Bupa", "policy_number": "BU-200"},
    {"id": "po-3", "policy_company": "Tawuniya", "policy_number": "TW-300"},
    {"id": "po-4", "policy_company": "Tawuniya", "policy_number": ""},
]})


class TestSearches:

    def test_search_customers(self):
        api = FakeApi(search_customers=ok({"customers": [
            {"id": 7, "name": "Sara Ahmed", "status": {"id": "st-1", "name": "Active"},
             "mobile_number": "0550000001"},
        ]}))
        customers = EntityLookupService(api).search_customers("Sara")

        assert customers == [Customer.from_dict(api.answers["search_customers"]["data"]["customers"][0])]
        assert customers[0].id == "7"
        assert customers[0].status == "Active"
        assert customers[0].status_id == "st-1"
        assert customers[0].mobile == "0550000001"

    def test_blank_query_skips_the_call(self):
        api = FakeApi(search_customers=ok({"customers": [{"id": 1}]}))
        assert EntityLookupService(api).search_customers("  ") == []
        assert api.calls == []

    def test_vehicle_search_keeps_rentable_only(self):
        api = FakeApi(search_vehicles=ok({"vehicles": [
            {"id": "ve-1", "plate_number": "ABC 123", "status": {"name": "Available"},
             "daily_rental_rate": "150", "daily_permitted_km": 300},
            {"id": "ve-2", "plate_number": "XYZ 987", "status": {"name": "Rented"}},
            {"id": "ve-3", "plate_number": "NEW 1"},
        ]}))
        vehicles = EntityLookupService(api).search_vehicles("A")

        assert [v.id for v in vehicles] == ["ve-1", "ve-3"]
        assert isinstance(vehicles[0], Vehicle)
        assert vehicles[0].daily_rental_rate == 150.0
        assert vehicles[0].permitted_daily_km == 300

    def test_failed_envelope_degrades_to_empty(self):
        api = FakeApi(search_vehicles=failed(), get_inspectors=failed())
        service = EntityLookupService(api)
        assert service.search_vehicles("A") == []
        assert service.get_inspectors() == []

    def test_list_payload_accepted(self):
        api = FakeApi(get_inspectors=ok([{"id": "in-1", "full_name": "Khalid"}, "junk"]))
        inspectors = EntityLookupService(api).get_inspectors()
        assert [(i.id, i.name) for i in inspectors] == [("in-1", "Khalid")]


class TestReferenceLists:

    def test_owner_codes(self):
        api = FakeApi(get_owners=ok({"owners": [{"id": "ow-1", "name": "Fleet Co", "code": "OWN-1"}]}))
        owner = EntityLookupService(api).get_owners()[0]
        assert (owner.id, owner.label, owner.code) == ("ow-1", "Fleet Co", "OWN-1")

    def test_inactive_branches_dropped(self):
        api = FakeApi(get_branches=ok({"branches": [
            {"id": "br-1", "name": "Riyadh"},
            {"id": "br-2", "name": "Closed", "is_active": False},
        ]}))
        assert [b.id for b in EntityLookupService(api).get_branches()] == ["br-1"]

    def test_models_need_a_make(self):
        api = FakeApi(get_vehicle_models=ok({"models": [{"id": "md-1", "name": "Camry"}]}))
        service = EntityLookupService(api)
        assert service.get_models("") == []
        assert [m.label for m in service.get_models("mk-1")] == ["Camry"]
        assert api.calls == [("get_vehicle_models", ("mk-1",))]


class TestInsurance:

    def test_companies_are_distinct_names(self):
        companies = EntityLookupService(FakeApi(get_insurance_policies=POLICIES)).get_insurance_companies()
        assert [(c.id, c.label) for c in companies] == [("Tawuniya", "Tawuniya"), ("Bupa", "Bupa")]

    def test_policies_for_company(self):
        policies = EntityLookupService(FakeApi(get_insurance_policies=POLICIES)) \
            .get_policies_for_company("Tawuniya")
        assert [p.id for p in policies] == ["po-1", "po-3"]
        assert isinstance(policies[0], InsurancePolicy)
        assert policies[0].insurance_value == 50000.0

    def test_no_company_no_policies(self):
        assert EntityLookupService(FakeApi()).get_policies_for_company("") == []
