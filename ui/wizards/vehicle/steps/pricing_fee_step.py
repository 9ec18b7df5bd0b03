# -*- coding: utf-8 -*-
"""
Pricing Fee Step - daily, monthly and hourly rate grid.
"""

from services.wizard.hydration import snake_key
from services.wizard.vehicle.validators import PRICING_GRID
from ui.wizards.framework import BaseStep

SECTIONS = (
    ("vehicle.section.daily", "daily"),
    ("vehicle.section.monthly", "monthly"),
    ("vehicle.section.hourly", "hourly"),
)


class PricingFeeStep(BaseStep):
    """Step 2: one section per rental period."""

    def setup_ui(self):
        for section_key, prefix in SECTIONS:
            self.add_section(section_key)
            for key, _integer in PRICING_GRID:
                if key.startswith(prefix):
                    self.add_number(key, f"field.{snake_key(key)}")
