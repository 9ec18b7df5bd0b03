# -*- coding: utf-8 -*-
"""
Wizard Framework - shared shell for the multi-step wizards.

Provides base classes for creating multi-step wizards with consistent
navigation, validation, and state management.
"""

from .base_wizard import BaseWizard
from .base_step import BaseStep
from .wizard_context import WizardContext
from .step_navigator import StepNavigator, WizardState

__all__ = [
    'BaseWizard',
    'BaseStep',
    'WizardContext',
    'StepNavigator',
    'WizardState',
]
