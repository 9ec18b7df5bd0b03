# -*- coding: utf-8 -*-
"""
Contract Wizard.

Multi-step wizard for creating and editing rental contracts.

Steps:
1. Customer Details - Search and select the customer
2. Vehicle Details - Search and select an available vehicle
3. Contract Details - Start date and contract term
4. Pricing Terms - Rates, add-ons, total and deposit
5. Vehicle Inspection - Assign the inspector
6. Summary - Review and submit
"""

from typing import List

from PyQt5.QtCore import pyqtSignal

from services.translation_manager import tr
from services.wizard.contract import (
    ContractHydration, ContractTransformer, build_contract_resolver, contract_steps,
    contract_submitter,
)
from ui.wizards.framework import BaseWizard, BaseStep
from ui.wizards.contract.contract_context import ContractContext
from ui.wizards.contract.steps import (
    CustomerStep,
    VehicleStep,
    ContractDetailsStep,
    PricingStep,
    InspectionStep,
    SummaryStep,
)


class ContractWizard(BaseWizard):
    """
    Contract Wizard.

    Guides branch staff through a rental contract:
    - Customer and vehicle selection
    - Contract term and pricing
    - Inspector assignment
    - Review and submission
    """

    # Aliases for BaseWizard signals
    contract_saved = pyqtSignal(dict)
    contract_cancelled = pyqtSignal()

    def __init__(self, *args, **kwargs):
        """Initialize the wizard (see BaseWizard for arguments)."""
        super().__init__(*args, **kwargs)
        self.wizard_completed.connect(self.contract_saved.emit)
        self.wizard_cancelled.connect(self.contract_cancelled.emit)

    def create_sequence(self):
        return contract_steps()

    def create_hydration(self):
        return ContractHydration()

    def create_context(self, values, mode, entity_id, branch_id) -> ContractContext:
        return ContractContext(values, mode=mode, entity_id=entity_id, branch_id=branch_id)

    def create_resolver(self, context, dispatcher):
        return build_contract_resolver(context, dispatcher, self.lookups)

    def create_transformer(self):
        return ContractTransformer()

    def create_submitter(self, client):
        return contract_submitter(client)

    def create_step_pages(self, navigator) -> List[BaseStep]:
        """Create and return list of wizard steps."""
        pages = (CustomerStep, VehicleStep, ContractDetailsStep,
                 PricingStep, InspectionStep, SummaryStep)
        return [page(navigator, definition) for page, definition in zip(pages, navigator.steps)]

    def get_wizard_title(self) -> str:
        if self.context.is_edit:
            return tr("contract.wizard.edit_title")
        return tr("contract.wizard.title")

    def get_submit_button_text(self) -> str:
        if self.context.is_edit:
            return tr("button.save")
        return tr("contract.wizard.submit")
