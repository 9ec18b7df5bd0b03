# -*- coding: utf-8 -*-
"""
Vehicle Wizard.

Multi-step wizard for adding and editing fleet vehicles.

Steps:
1. Vehicle Details - Make/model, identity and registration
2. Pricing Fee - Daily, monthly and hourly rates
3. Expiration Dates - Licence, insurance, inspection, operating card
4. Vehicle Pricing - Purchase price and depreciation
5. Additional Details - Status, owner, user and insurance policy
"""

from typing import List

from PyQt5.QtCore import pyqtSignal

from services.translation_manager import tr
from services.wizard.vehicle import (
    VehicleHydration, VehicleTransformer, build_vehicle_resolver, vehicle_steps,
    vehicle_submitter,
)
from ui.wizards.framework import BaseWizard, BaseStep
from ui.wizards.vehicle.steps import (
    VehicleDetailsStep,
    PricingFeeStep,
    ExpirationDatesStep,
    VehiclePricingStep,
    AdditionalDetailsStep,
)


class VehicleWizard(BaseWizard):
    """Vehicle Wizard (create and edit)."""

    vehicle_saved = pyqtSignal(dict)
    vehicle_cancelled = pyqtSignal()

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.wizard_completed.connect(self.vehicle_saved.emit)
        self.wizard_cancelled.connect(self.vehicle_cancelled.emit)

    def create_sequence(self):
        return vehicle_steps()

    def create_hydration(self):
        return VehicleHydration()

    def create_resolver(self, context, dispatcher):
        return build_vehicle_resolver(context, dispatcher, self.lookups)

    def create_transformer(self):
        return VehicleTransformer()

    def create_submitter(self, client):
        return vehicle_submitter(client)

    def create_step_pages(self, navigator) -> List[BaseStep]:
        pages = (VehicleDetailsStep, PricingFeeStep, ExpirationDatesStep,
                 VehiclePricingStep, AdditionalDetailsStep)
        return [page(navigator, definition) for page, definition in zip(pages, navigator.steps)]

    def get_wizard_title(self) -> str:
        if self.context.is_edit:
            return tr("vehicle.wizard.edit_title")
        return tr("vehicle.wizard.title")

    def get_submit_button_text(self) -> str:
        if self.context.is_edit:
            return tr("button.save")
        return tr("vehicle.wizard.submit")
