# -*- coding: utf-8 -*-
"""
Customer Details Step - search and pick the renting customer.
"""

from services.wizard.contract import CUSTOMERS
from ui.wizards.framework import BaseStep

# (FieldSet key, label translation key)
CUSTOMER_ROWS = (
    ("customerName", "field.customer_name"),
    ("customerIdType", "field.customer_id_type"),
    ("customerIdNumber", "field.customer_id_number"),
    ("customerClassification", "field.customer_classification"),
    ("customerMobile", "field.customer_mobile"),
    ("customerAddress", "field.customer_address"),
    ("customerNationality", "field.customer_nationality"),
    ("customerDateOfBirth", "field.customer_date_of_birth"),
    ("customerLicenseType", "field.customer_license_type"),
    ("customerStatus", "field.customer_status"),
)


class CustomerStep(BaseStep):
    """Step 1: the customer picker and the customer's details (read-only)."""

    def setup_ui(self):
        self.picker = self.add_picker("selectedCustomerId", "field.customer", CUSTOMERS)
        for key, label_key in CUSTOMER_ROWS:
            self.add_text(key, label_key, read_only=True)

    def refresh(self):
        self.picker.set_selection_text(self.navigator.value("customerName", ""))
