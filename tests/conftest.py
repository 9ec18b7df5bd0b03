# -*- coding: utf-8 -*-
"""
Shared fixtures: a hand-driven fetch dispatcher, a fixed clock, fake
lookups and a fake API client.
"""
import os
import sys
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

# Run Qt headless when no display is available
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from models import Customer, Vehicle, Inspector, OptionItem, InsurancePolicy
from services.wizard.fetch_dispatcher import FetchDispatcher, FetchRequest

TODAY = date(2026, 3, 10)


class DeferredDispatcher(FetchDispatcher):
    """
    Records dispatched calls; tests decide when (and in which order) they land.

    Abandoned requests are dropped on resolve, as the Qt dispatcher does.
    """

    def __init__(self):
        self.requests: List[FetchRequest] = []
        self.dispatched: List[str] = []

    def dispatch(self, label, fn, on_success, on_error):
        request = FetchRequest(label, fn, on_success, on_error)
        self.requests.append(request)
        self.dispatched.append(label)
        return request

    def cancel_all(self):
        for request in self.requests:
            request.abandoned = True

    def pending(self, label: Optional[str] = None) -> List[FetchRequest]:
        return [r for r in self.requests
                if not r.abandoned and (label is None or r.label == label)]

    def resolve(self, request: FetchRequest, result: Any = None, use_result: bool = False):
        """Run ``request`` (or deliver ``result`` when ``use_result``)."""
        self.requests.remove(request)
        if request.abandoned:
            return
        if use_result:
            request.on_success(result)
            return
        try:
            value = request.fn()
        except Exception as e:
            request.on_error(e)
            return
        request.on_success(value)

    def fail(self, request: FetchRequest, error: Exception):
        self.requests.remove(request)
        if not request.abandoned:
            request.on_error(error)

    def run_all(self):
        """Resolve everything pending, including requests issued meanwhile."""
        while self.pending():
            self.resolve(self.pending()[0])


class FakeLookups:
    """In-memory stand-in for EntityLookupService."""

    def __init__(self):
        self.customers = [
            Customer(id="cu-1", name="Sara Ahmed", id_type="National ID", id_number="1020304050",
                     mobile="0550000001", status="Active", status_id="st-1",
                     nationality="Saudi", license_type="Private"),
            Customer(id="cu-2", name="Omar Black", id_type="Iqama", id_number="2233445566",
                     mobile="0550000002", status="Blacklisted", status_id="st-9"),
        ]
        self.vehicles = [
            Vehicle(id="ve-1", plate_number="ABC 123", serial_number="SN-1", make_year="2024",
                    make="Toyota", model="Camry", color="White", mileage=12000,
                    status="Available", daily_rental_rate=150.0, hourly_delay_rate=20.0,
                    permitted_daily_km=300, excess_km_rate=0.5),
            Vehicle(id="ve-2", plate_number="XYZ 987", serial_number="SN-2", make_year="2023",
                    make="Hyundai", model="Elantra", color="Gray", mileage=30000,
                    status="Available", daily_rental_rate=100.0, hourly_delay_rate=15.0,
                    permitted_daily_km=250, excess_km_rate=0.4),
        ]
        self.inspectors = [Inspector(id="in-1", name="Khalid Inspector")]
        self.makes = [OptionItem(id="mk-1", label="Toyota"), OptionItem(id="mk-2", label="Hyundai")]
        self.models = {
            "mk-1": [OptionItem(id="md-1", label="Camry"), OptionItem(id="md-2", label="Corolla")],
            "mk-2": [OptionItem(id="md-3", label="Elantra")],
        }
        self.policies = [
            InsurancePolicy(id="po-1", company="Tawuniya", name="Comprehensive",
                            policy_number="TW-100", insurance_value=50000, deductible_premium=500),
            InsurancePolicy(id="po-2", company="Bupa", name="Third party",
                            policy_number="BU-200", insurance_value=20000, deductible_premium=250.5),
        ]
        self.calls: List[tuple] = []

    def search_customers(self, query):
        self.calls.append(("customers", query))
        return [c for c in self.customers if query.lower() in c.name.lower()]

    def search_vehicles(self, query):
        self.calls.append(("vehicles", query))
        return [v for v in self.vehicles if query.lower() in v.plate_number.lower()]

    def get_inspectors(self):
        return list(self.inspectors)

    def get_makes(self):
        return list(self.makes)

    def get_models(self, make_id):
        self.calls.append(("models", make_id))
        return list(self.models.get(make_id, []))

    def get_colors(self):
        return [OptionItem(id="co-1", label="White")]

    def get_branches(self):
        return [OptionItem(id="br-1", label="Riyadh")]

    def get_vehicle_statuses(self):
        return [OptionItem(id="vs-1", label="Available")]

    def get_owners(self):
        return [OptionItem(id="ow-1", label="Fleet Co", code="OWN-1")]

    def get_actual_users(self):
        return [OptionItem(id="au-1", label="Driver One", code="USR-1")]

    def get_insurance_companies(self):
        return [OptionItem(id=p.company, label=p.company) for p in self.policies]

    def get_policies_for_company(self, company):
        self.calls.append(("policies", company))
        return [p for p in self.policies if p.company == company]


class FakeClient:
    """Create/update endpoints answering with the backend envelope."""

    def __init__(self, success: bool = True, error: Optional[str] = None):
        self.success = success
        self.error = error
        self.calls: List[tuple] = []

    def _answer(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if self.success:
            return {"success": True, "data": data, "error": None}
        return {"success": False, "data": None, "error": self.error}

    def create_contract(self, payload):
        self.calls.append(("create_contract", None, payload))
        return self._answer({"id": "ct-new", **payload})

    def update_contract(self, contract_id, payload):
        self.calls.append(("update_contract", contract_id, payload))
        return self._answer({"id": contract_id, **payload})

    def create_vehicle(self, payload):
        self.calls.append(("create_vehicle", None, payload))
        return self._answer({"id": "ve-new"})

    def update_vehicle(self, vehicle_id, payload):
        self.calls.append(("update_vehicle", vehicle_id, payload))
        return self._answer({"id": vehicle_id})


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def dispatcher():
    return DeferredDispatcher()


@pytest.fixture
def lookups():
    return FakeLookups()


@pytest.fixture
def client():
    return FakeClient()


@pytest.fixture(autouse=True)
def english():
    """Messages are asserted in English."""
    from services.translation_manager import set_language
    set_language("en")
    yield


@pytest.fixture
def contract_session(qapp, dispatcher, lookups, client):
    """Factory for a started contract session without widgets."""
    from services.wizard.contract import (
        ContractHydration, ContractTransformer, build_contract_resolver,
        contract_steps, contract_submitter,
    )
    from services.wizard.hydration import CREATE, EDIT
    from ui.wizards.contract.contract_context import ContractContext
    from ui.wizards.framework.step_navigator import StepNavigator

    def build(record=None, entity_id=None, branch_id="br-1", on_saved=None, clock=None):
        mode = EDIT if entity_id else CREATE
        values = ContractHydration().hydrate(mode, record, TODAY)
        context = ContractContext(values, mode=mode, entity_id=entity_id, branch_id=branch_id)
        resolver = build_contract_resolver(context, dispatcher, lookups)
        navigator = StepNavigator(
            context, contract_steps(), resolver, ContractTransformer(),
            contract_submitter(client), dispatcher, clock=clock or (lambda: TODAY), on_saved=on_saved,
        )
        navigator.start()
        dispatcher.run_all()
        return navigator

    return build


def fill_contract(navigator, lookups, days="5", deposit="750"):
    """Enter a complete, valid contract (vehicle ve-1 at 150/day)."""
    navigator.select_entity("selectedCustomerId", lookups.customers[0])
    navigator.select_entity("selectedVehicleId", lookups.vehicles[0])
    navigator.set_field("durationInDays", days)
    navigator.set_field("depositAmount", deposit)
    navigator.set_field("selectedInspector", "in-1")
