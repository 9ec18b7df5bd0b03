# -*- coding: utf-8 -*-
"""
FleetDesk UI Components
"""

from .toggle_switch import ToggleSwitch
from .step_indicator import StepIndicator
from .form_fields import (
    FormField, TextField, NumberField, DateField, ChoiceField, ToggleField, SearchPicker,
)

__all__ = [
    "ToggleSwitch",
    "StepIndicator",
    "FormField",
    "TextField",
    "NumberField",
    "DateField",
    "ChoiceField",
    "ToggleField",
    "SearchPicker",
]
