# -*- coding: utf-8 -*-
"""Contract wizard engine: steps, hydration, field rules, submission."""

from .validators import contract_steps, DepositMatchesTotal
from .hydration import ContractHydration
from .resolvers import build_contract_resolver, CUSTOMERS, VEHICLES, INSPECTORS
from .submission import ContractTransformer, contract_submitter

__all__ = [
    'contract_steps',
    'DepositMatchesTotal',
    'ContractHydration',
    'build_contract_resolver',
    'CUSTOMERS',
    'VEHICLES',
    'INSPECTORS',
    'ContractTransformer',
    'contract_submitter',
]
