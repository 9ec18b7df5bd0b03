# -*- coding: utf-8 -*-
"""
Additional Details Step - status, owner, actual user and insurance.

Picking an owner or actual user fills its code; picking an insurance
company loads its policies, and picking a policy fills the policy data.
"""

from services.wizard.vehicle import POLICIES
from services.wizard.vehicle.resolvers import (
    ACTUAL_USERS, CAR_STATUSES, INSURANCE_COMPANIES, OWNERS,
)
from ui.wizards.framework import BaseStep


class AdditionalDetailsStep(BaseStep):
    """Step 5."""

    def setup_ui(self):
        self.add_choice("carStatus", "field.car_status", source=CAR_STATUSES)
        self.add_choice("ownerName", "field.owner", source=OWNERS)
        self.add_text("ownerId", "field.owner_code", read_only=True)
        self.add_choice("actualUser", "field.actual_user", source=ACTUAL_USERS)
        self.add_text("userId", "field.user_code", read_only=True)

        self.add_section("vehicle.section.insurance")
        self.add_choice("insuranceCompany", "field.insurance_company",
                        source=INSURANCE_COMPANIES)
        self.add_choice("insuranceType", "field.insurance_policy", source=POLICIES)
        self.add_text("policyNumber", "field.policy_number", read_only=True)
        self.add_text("insuranceValue", "field.insurance_value", read_only=True)
        self.add_text("deductiblePremium", "field.deductible_premium", read_only=True)
