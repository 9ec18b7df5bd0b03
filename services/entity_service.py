# -*- coding: utf-8 -*-
"""
Entity lookup service - turns API envelopes into typed option lists.

Lookups are assistive: a failed envelope degrades to an empty list with a
logged warning and never raises.
"""

from typing import Any, Callable, Dict, List, Optional

from app.config import Config
from models import Customer, Vehicle, Inspector, OptionItem, InsurancePolicy
from services.api_client import RentalApiClient, get_api_client
from utils.logger import get_logger

logger = get_logger(__name__)


class EntityLookupService:
    """Search and option-list lookups used by the wizards' field resolvers."""

    def __init__(self, client: Optional[RentalApiClient] = None):
        self._client = client

    @property
    def client(self) -> RentalApiClient:
        if self._client is None:
            self._client = get_api_client()
        return self._client

    def _rows(self, envelope: Dict[str, Any], key: str, what: str) -> List[dict]:
        """Extract ``data[key]`` from an envelope, or [] on failure."""
        if not envelope or not envelope.get("success"):
            error = (envelope or {}).get("error") or "unknown error"
            logger.warning(f"Failed to load {what}: {error}")
            return []
        data = envelope.get("data")
        if isinstance(data, list):
            return [row for row in data if isinstance(row, dict)]
        if isinstance(data, dict):
            rows = data.get(key) or []
            return [row for row in rows if isinstance(row, dict)]
        logger.warning(f"Unexpected {what} payload: {type(data).__name__}")
        return []

    def _options(self, envelope, key: str, what: str,
                 factory: Callable[[dict], Any]) -> List[Any]:
        return [factory(row) for row in self._rows(envelope, key, what)]

    # ==================== Searches ====================

    def search_customers(self, query: str) -> List[Customer]:
        if not query.strip():
            return []
        envelope = self.client.search_customers(query, Config.SEARCH_RESULT_LIMIT)
        return self._options(envelope, "customers", "customers", Customer.from_dict)

    def search_vehicles(self, query: str) -> List[Vehicle]:
        """Search vehicles, keeping only rentable ones."""
        if not query.strip():
            return []
        envelope = self.client.search_vehicles(query, Config.SEARCH_RESULT_LIMIT)
        vehicles = self._options(envelope, "vehicles", "vehicles", Vehicle.from_dict)
        return [v for v in vehicles if v.is_rentable(Config.RENTABLE_VEHICLE_STATUSES)]

    def get_inspectors(self) -> List[Inspector]:
        return self._options(self.client.get_inspectors(), "inspectors",
                             "inspectors", Inspector.from_dict)

    # ==================== Reference lists ====================

    def get_customer_statuses(self) -> List[OptionItem]:
        return self._options(self.client.get_customer_statuses(Config.OPTION_PAGE_SIZE),
                             "statuses", "customer statuses", OptionItem.from_dict)

    def get_makes(self) -> List[OptionItem]:
        return self._options(self.client.get_vehicle_makes(), "makes",
                             "vehicle makes", OptionItem.from_dict)

    def get_models(self, make_id: str) -> List[OptionItem]:
        if not make_id:
            return []
        return self._options(self.client.get_vehicle_models(make_id), "models",
                             "vehicle models", OptionItem.from_dict)

    def get_colors(self) -> List[OptionItem]:
        return self._options(self.client.get_vehicle_colors(), "colors",
                             "vehicle colors", OptionItem.from_dict)

    def get_vehicle_statuses(self) -> List[OptionItem]:
        return self._options(self.client.get_vehicle_statuses(Config.OPTION_PAGE_SIZE),
                             "statuses", "vehicle statuses", OptionItem.from_dict)

    def get_owners(self) -> List[OptionItem]:
        return self._options(
            self.client.get_owners(Config.OPTION_PAGE_SIZE), "owners", "owners",
            lambda row: OptionItem.from_dict(row, code_key="code"))

    def get_actual_users(self) -> List[OptionItem]:
        return self._options(
            self.client.get_actual_users(Config.OPTION_PAGE_SIZE), "actualUsers",
            "actual users", lambda row: OptionItem.from_dict(row, code_key="code"))

    def get_branches(self) -> List[OptionItem]:
        rows = self._rows(self.client.get_branches(), "branches", "branches")
        return [OptionItem.from_dict(row) for row in rows if row.get("is_active", True)]

    def get_insurance_policies(self) -> List[InsurancePolicy]:
        return self._options(self.client.get_insurance_policies(), "policies",
                             "insurance policies", InsurancePolicy.from_dict)

    def get_insurance_companies(self) -> List[OptionItem]:
        """Distinct policy companies; the company name doubles as the option id."""
        companies = []
        for policy in self.get_insurance_policies():
            if policy.company and policy.company not in companies:
                companies.append(policy.company)
        return [OptionItem(id=name, label=name) for name in companies]

    def get_policies_for_company(self, company: str) -> List[InsurancePolicy]:
        if not company:
            return []
        return [p for p in self.get_insurance_policies()
                if p.company == company and p.id and p.policy_number]
