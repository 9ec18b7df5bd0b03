# -*- coding: utf-8 -*-
"""
Contract submission payload.
"""

from typing import Any, Dict

from app.config import Config
from services.wizard.pricing import DURATION, FEES, add_on_catalog
from services.wizard.submission import (
    EntitySubmitter, SubmissionTransformer, empty_to_none, to_int, to_number,
)


class ContractTransformer(SubmissionTransformer):
    """FieldSet -> ``POST /api/contracts`` / ``PUT /api/contracts/{id}`` body."""

    missing_branch_key = "error.submission.contract_no_branch"

    def build_payload(self, values: Dict[str, Any], mode: str,
                      branch_id: str) -> Dict[str, Any]:
        duration_type = values.get("durationType") or Config.DEFAULT_DURATION_TYPE
        payload = {
            # Contract details
            "start_date": values.get("startDate"),
            "end_date": values.get("endDate"),
            "contract_number": empty_to_none(values.get("contractNumber")),
            "duration_type": duration_type,

            # Relations
            "selected_customer_id": empty_to_none(values.get("selectedCustomerId")),
            "selected_vehicle_id": values.get("selectedVehicleId"),
            "selected_inspector_id": empty_to_none(values.get("selectedInspector")),
            "inspector_name": values.get("inspectorName") or "",

            # Pricing & terms
            "daily_rental_rate": to_number(values.get("dailyRentalRate")),
            "hourly_delay_rate": to_number(values.get("hourlyDelayRate")),
            "current_km": to_number(values.get("currentKm")),
            "rental_days": to_int(values.get("rentalDays")),
            "permitted_daily_km": to_int(values.get("permittedDailyKm")),
            "excess_km_rate": to_number(values.get("excessKmRate")),
            "payment_method": values.get("paymentMethod") or Config.DEFAULT_PAYMENT_METHOD,
            "total_amount": to_number(values.get("totalAmount")),
            "deposit": to_number(values.get("depositAmount")),
            "add_ons": [addon_id for addon_id, key, _, _ in add_on_catalog()
                        if values.get(key)],
            "membership_enabled": bool(values.get("membershipEnabled")),

            "branch_id": branch_id,
        }

        # Only the active term is sent
        if duration_type == DURATION:
            payload["duration_in_days"] = to_int(values.get("durationInDays"))
        elif duration_type == FEES:
            payload["total_fees"] = to_number(values.get("totalFees"))

        if mode == "edit":
            payload["status_id"] = empty_to_none(values.get("statusId"))

        return payload


def contract_submitter(client) -> EntitySubmitter:
    """Submitter bound to the contract endpoints of ``client``."""
    return EntitySubmitter(client.create_contract, client.update_contract,
                           failure_key="error.submission.contract_failed")
