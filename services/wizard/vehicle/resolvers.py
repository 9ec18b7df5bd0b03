# -*- coding: utf-8 -*-
"""
Vehicle field rules: make/model and insurance cascades, owner and policy expansions.
"""

from models import InsurancePolicy
from services.entity_service import EntityLookupService
from services.wizard.fetch_dispatcher import FetchDispatcher
from services.wizard.field_resolver import (
    CascadeRule, FieldResolver, OptionSource, SelectionExpansion,
)
from services.wizard.pricing import amount_text

# Option sources
MAKES = "makes"
MODELS = "models"
COLORS = "colors"
BRANCHES = "branches"
CAR_STATUSES = "carStatuses"
OWNERS = "owners"
ACTUAL_USERS = "actualUsers"
INSURANCE_COMPANIES = "insuranceCompanies"
POLICIES = "policies"


def _policy_cluster(policy: InsurancePolicy):
    return {
        "policyNumber": policy.policy_number,
        "insuranceValue": amount_text(policy.insurance_value),
        "deductiblePremium": amount_text(policy.deductible_premium),
    }


def vehicle_expansions():
    return [
        SelectionExpansion(
            trigger="ownerName",
            source=OWNERS,
            expand=lambda owner: {"ownerId": owner.code},
            defaults={"ownerId": ""},
        ),
        SelectionExpansion(
            trigger="actualUser",
            source=ACTUAL_USERS,
            expand=lambda user: {"userId": user.code},
            defaults={"userId": ""},
        ),
        SelectionExpansion(
            trigger="insuranceType",
            source=POLICIES,
            expand=_policy_cluster,
            defaults={"policyNumber": "", "insuranceValue": "", "deductiblePremium": ""},
        ),
    ]


def build_vehicle_resolver(store, dispatcher: FetchDispatcher,
                           lookups: EntityLookupService) -> FieldResolver:
    """Field resolver for one vehicle session."""
    return FieldResolver(
        store,
        dispatcher,
        option_sources=[
            OptionSource(MAKES, lookups.get_makes),
            OptionSource(COLORS, lookups.get_colors),
            OptionSource(BRANCHES, lookups.get_branches),
            OptionSource(CAR_STATUSES, lookups.get_vehicle_statuses),
            OptionSource(OWNERS, lookups.get_owners),
            OptionSource(ACTUAL_USERS, lookups.get_actual_users),
            OptionSource(INSURANCE_COMPANIES, lookups.get_insurance_companies),
        ],
        expansions=vehicle_expansions(),
        cascades=[
            CascadeRule("make", "model", MODELS, lookups.get_models),
            CascadeRule("insuranceCompany", "insuranceType", POLICIES,
                        lookups.get_policies_for_company),
        ],
    )
