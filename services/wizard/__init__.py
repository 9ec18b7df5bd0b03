# -*- coding: utf-8 -*-
"""
Wizard engine: step validation, field rules, hydration and submission.

Nothing in this package depends on widgets; the UI framework under
``ui.wizards.framework`` drives it.
"""

from .step_validator import StepValidationResult, StepValidator, AggregateValidator
from .steps import StepDefinition, StepSequence
from .fetch_dispatcher import FetchDispatcher, ImmediateDispatcher, QtFetchDispatcher
from .field_resolver import (
    FieldResolver, OptionSource, SearchSource, SelectionExpansion, CascadeRule, Derivation,
    VALUES_CHANGED, OPTIONS_CHANGED, LOADING_CHANGED, SELECTION_REFUSED, REVALIDATE,
)
from .hydration import HydrationStrategy, CREATE, EDIT
from .submission import SubmissionTransformer, SubmissionRequest, EntitySubmitter

__all__ = [
    'StepValidationResult',
    'StepValidator',
    'AggregateValidator',
    'StepDefinition',
    'StepSequence',
    'FetchDispatcher',
    'ImmediateDispatcher',
    'QtFetchDispatcher',
    'FieldResolver',
    'OptionSource',
    'SearchSource',
    'SelectionExpansion',
    'CascadeRule',
    'Derivation',
    'VALUES_CHANGED',
    'OPTIONS_CHANGED',
    'LOADING_CHANGED',
    'SELECTION_REFUSED',
    'REVALIDATE',
    'HydrationStrategy',
    'CREATE',
    'EDIT',
    'SubmissionTransformer',
    'SubmissionRequest',
    'EntitySubmitter',
]
