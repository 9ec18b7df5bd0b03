# -*- coding: utf-8 -*-
"""
Contract Details Step - start date and contract term.

In duration mode the user enters a number of days; in fees mode the days
follow from the fees and the vehicle's daily rate. The end date and the
rental days are derived either way.
"""

from services.translation_manager import tr
from services.wizard.pricing import DURATION, FEES
from ui.wizards.framework import BaseStep


class ContractDetailsStep(BaseStep):
    """Step 3: contract term."""

    def setup_ui(self):
        if self.navigator.context.is_edit:
            self.add_text("contractNumber", "field.contract_number", read_only=True)
        self.add_date("startDate", "field.start_date")
        self.add_choice("durationType", "field.duration_type", options=[
            (DURATION, tr("contract.duration_type.duration")),
            (FEES, tr("contract.duration_type.fees")),
        ])
        self.duration_field = self.add_number("durationInDays", "field.duration_in_days")
        self.fees_field = self.add_number("totalFees", "field.total_fees")
        self.add_date("endDate", "field.end_date", read_only=True)

    def refresh(self):
        fees_mode = self.navigator.value("durationType") == FEES
        self.duration_field.setVisible(not fees_mode)
        self.fees_field.setVisible(fees_mode)
