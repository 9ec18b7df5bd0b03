# -*- coding: utf-8 -*-
"""
Pricing Terms Step - rates, add-ons, membership, total and deposit.
"""

from PyQt5.QtWidgets import QLabel

from app.config import Config
from services.translation_manager import tr
from services.wizard.pricing import add_on_catalog, amount_text
from ui.wizards.framework import BaseStep


class PricingStep(BaseStep):
    """Step 4: pricing. The total is derived and shown read-only."""

    def setup_ui(self):
        self.add_number("dailyRentalRate", "field.daily_rental_rate")
        self.add_number("hourlyDelayRate", "field.hourly_delay_rate")
        self.add_number("currentKm", "field.current_km")
        self.add_number("rentalDays", "field.rental_days", read_only=True)
        self.add_number("permittedDailyKm", "field.permitted_daily_km")
        self.add_number("excessKmRate", "field.excess_km_rate")
        self.add_choice("paymentMethod", "field.payment_method", options=[
            (method, tr(f"payment.{method}")) for method in Config.PAYMENT_METHODS
        ])

        self.add_section("contract.section.add_ons")
        for _addon_id, key, label_key, price in add_on_catalog():
            field = self.add_toggle(key, label_key)
            field.label.setText(f"{tr(label_key)} ({amount_text(price)} {Config.CURRENCY})")
        self.add_toggle("membershipEnabled", "field.membership")

        self.add_section("contract.section.payment")
        self.add_number("totalAmount", "field.total_amount", read_only=True)
        self.add_number("depositAmount", "field.deposit_amount")

        self.breakdown_label = QLabel("")
        self.breakdown_label.setWordWrap(True)
        self.main_layout.addWidget(self.breakdown_label)

    def refresh(self):
        breakdown = self.navigator.context.price_breakdown()
        self.fields["totalAmount"].set_value(amount_text(self.navigator.value("totalAmount")))
        lines = [tr("contract.summary.base", days=breakdown.rental_days,
                    rate=amount_text(breakdown.daily_rate)) + f": {amount_text(breakdown.base)}"]
        if breakdown.add_ons:
            lines.append(f"{tr('contract.section.add_ons')}: {amount_text(breakdown.add_ons_total)}")
        if breakdown.discount:
            lines.append(f"{tr('contract.summary.discount')}: -{amount_text(breakdown.discount)}")
        lines.append(f"{tr('field.total_amount')}: {amount_text(breakdown.total)} {Config.CURRENCY}")
        self.breakdown_label.setText("\n".join(lines))
