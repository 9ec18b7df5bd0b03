# -*- coding: utf-8 -*-
"""
Contract Context - session state of the contract wizard.

Adds the price breakdown and the review summary on top of WizardContext.
"""

from typing import Any, Dict, List, Tuple

from services.translation_manager import tr
from services.wizard.pricing import PriceBreakdown, amount_text, price_breakdown
from ui.wizards.framework import WizardContext

# (section translation key, [(label translation key, FieldSet key)])
SUMMARY_SECTIONS = (
    ("contract.summary.customer", [
        ("field.customer_name", "customerName"),
        ("field.customer_id_number", "customerIdNumber"),
        ("field.customer_mobile", "customerMobile"),
    ]),
    ("contract.summary.vehicle", [
        ("field.vehicle_plate", "vehiclePlate"),
        ("field.vehicle_make", "vehicleMake"),
        ("field.vehicle_model", "vehicleModel"),
    ]),
    ("contract.summary.term", [
        ("field.start_date", "startDate"),
        ("field.end_date", "endDate"),
        ("field.rental_days", "rentalDays"),
    ]),
    ("contract.summary.payment", [
        ("field.payment_method", "paymentMethod"),
        ("field.deposit_amount", "depositAmount"),
    ]),
    ("contract.summary.inspection", [
        ("field.inspector_name", "inspectorName"),
    ]),
)


class ContractContext(WizardContext):
    """Context for the contract wizard."""

    def price_breakdown(self) -> PriceBreakdown:
        return price_breakdown(self.values)

    def get_summary(self) -> List[Tuple[str, List[Tuple[str, Any]]]]:
        """
        Translated review sections.

        Returns:
            [(section title, [(label, value), ...]), ...]
        """
        summary = []
        for section_key, rows in SUMMARY_SECTIONS:
            summary.append((
                tr(section_key),
                [(tr(label_key), self.get_value(key, "")) for label_key, key in rows],
            ))

        breakdown = self.price_breakdown()
        pricing_rows = [
            (tr("contract.summary.base", days=breakdown.rental_days,
                rate=amount_text(breakdown.daily_rate)), amount_text(breakdown.base)),
        ]
        for addon_id, price in breakdown.add_ons:
            pricing_rows.append((tr(f"addon.{addon_id}"), amount_text(price)))
        if breakdown.discount:
            pricing_rows.append((tr("contract.summary.discount"), f"-{amount_text(breakdown.discount)}"))
        pricing_rows.append((tr("field.total_amount"), amount_text(breakdown.total)))
        summary.append((tr("contract.summary.pricing"), pricing_rows))
        return summary

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["price_breakdown"] = self.price_breakdown().to_dict()
        return data
