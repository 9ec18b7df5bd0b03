# -*- coding: utf-8 -*-
"""Contract wizard (create and edit rental contracts)."""

from .contract_wizard import ContractWizard
from .contract_context import ContractContext

__all__ = ['ContractWizard', 'ContractContext']
