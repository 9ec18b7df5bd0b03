# -*- coding: utf-8 -*-
"""
Expiration Dates Step - licence, insurance, inspection and operating card.
"""

from services.wizard.hydration import snake_key
from services.wizard.vehicle.validators import EXPIRATION_FIELDS
from ui.wizards.framework import BaseStep


class ExpirationDatesStep(BaseStep):
    """Step 3."""

    def setup_ui(self):
        for key in EXPIRATION_FIELDS:
            self.add_date(key, f"field.{snake_key(key)}")
