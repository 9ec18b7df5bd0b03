# -*- coding: utf-8 -*-
"""
Step validation service for the wizards.

Validates the FieldSet for one step, or for every step at once, without
UI coupling.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from services.validation import ValidationContext, ValidationStrategy, SchemaValidator
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class StepValidationResult:
    """Result of step validation."""
    is_valid: bool
    errors: List[str]
    warnings: List[str] = None
    field_errors: Dict[str, str] = field(default_factory=dict)
    step_index: Optional[int] = None

    def __post_init__(self):
        if self.warnings is None:
            self.warnings = []

    def add_error(self, message: str, field_name: Optional[str] = None):
        """Add an error message, optionally attributed to a field."""
        self.errors.append(message)
        if field_name and field_name not in self.field_errors:
            self.field_errors[field_name] = message
        self.is_valid = False

    def add_warning(self, message: str):
        """Add a warning message."""
        self.warnings.append(message)

    def has_errors(self) -> bool:
        """Check if there are any errors."""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if there are any warnings."""
        return len(self.warnings) > 0

    @classmethod
    def from_field_errors(cls, field_errors: Dict[str, str],
                          step_index: Optional[int] = None) -> 'StepValidationResult':
        return cls(
            is_valid=not field_errors,
            errors=list(field_errors.values()),
            field_errors=dict(field_errors),
            step_index=step_index,
        )


class StepValidator:
    """
    Validates the fields owned by one step.

    Args:
        strategy: Validation strategy over the FieldSet (usually a SchemaValidator)
        depends_on: Keys owned by other steps that the strategy may read
    """

    def __init__(self, strategy: Optional[ValidationStrategy] = None,
                 depends_on: Iterable[str] = ()):
        self.strategy = strategy or SchemaValidator()
        self.depends_on: Tuple[str, ...] = tuple(depends_on)

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(getattr(self.strategy, "fields", ()))

    @property
    def references(self) -> Tuple[str, ...]:
        return tuple(getattr(self.strategy, "references", ()))

    def validate(self, values: Dict[str, Any], context: ValidationContext,
                 step_index: Optional[int] = None) -> StepValidationResult:
        field_errors = self.strategy.validate(values, context)
        return StepValidationResult.from_field_errors(field_errors, step_index)


class AggregateValidator:
    """Runs every step validator; used as the final guard before submission."""

    def __init__(self, validators: List[StepValidator]):
        self.validators = list(validators)

    def validate(self, values: Dict[str, Any],
                 context: ValidationContext) -> StepValidationResult:
        """
        Validate all steps.

        Returns:
            A merged result whose ``step_index`` is the first failing step
        """
        merged = StepValidationResult(is_valid=True, errors=[])
        for index, validator in enumerate(self.validators):
            result = validator.validate(values, context, index)
            if result.is_valid:
                continue
            if merged.step_index is None:
                merged.step_index = index
            for key, message in result.field_errors.items():
                merged.add_error(message, key)
        if not merged.is_valid:
            logger.debug(
                f"Aggregate validation failed at step {merged.step_index}: "
                f"{list(merged.field_errors)}"
            )
        return merged

    def first_invalid_step(self, values: Dict[str, Any],
                           context: ValidationContext) -> Optional[int]:
        for index, validator in enumerate(self.validators):
            if not validator.validate(values, context, index).is_valid:
                return index
        return None
