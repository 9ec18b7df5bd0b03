# -*- coding: utf-8 -*-
"""
Step descriptors and the fixed step sequence of a wizard.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from services.exceptions import WizardStateError
from services.translation_manager import tr
from services.wizard.step_validator import AggregateValidator, StepValidator


@dataclass(frozen=True)
class StepDefinition:
    """
    One wizard step.

    Attributes:
        id: Stable step id (e.g. "pricing-terms")
        name_key: Translation key of the display name
        validator: Validator for the fields this step owns
        fields: Keys owned by the step in addition to the validated ones
    """
    id: str
    name_key: str
    validator: StepValidator
    fields: Tuple[str, ...] = ()

    @property
    def display_name(self) -> str:
        return tr(self.name_key)

    @property
    def owned_fields(self) -> Tuple[str, ...]:
        return tuple(dict.fromkeys(self.validator.fields + self.fields))


class StepSequence:
    """
    Ordered, fixed-length list of steps.

    Construction fails with WizardStateError when two steps own the same key
    or a validator reads a key of another step without declaring it.
    """

    def __init__(self, steps: Sequence[StepDefinition]):
        if not steps:
            raise WizardStateError("A wizard needs at least one step")
        self._steps: Tuple[StepDefinition, ...] = tuple(steps)
        self._owners: Dict[str, int] = {}
        self._check_ids()
        self._check_ownership()
        self._check_references()

    def _check_ids(self):
        ids = [step.id for step in self._steps]
        duplicates = {step_id for step_id in ids if ids.count(step_id) > 1}
        if duplicates:
            raise WizardStateError(f"Duplicate step ids: {sorted(duplicates)}")

    def _check_ownership(self):
        for index, step in enumerate(self._steps):
            for key in step.owned_fields:
                if key in self._owners:
                    other = self._steps[self._owners[key]].id
                    raise WizardStateError(
                        f"Field '{key}' is owned by both '{other}' and '{step.id}'"
                    )
                self._owners[key] = index

    def _check_references(self):
        for step in self._steps:
            declared = set(step.owned_fields) | set(step.validator.depends_on)
            undeclared = [key for key in step.validator.references if key not in declared]
            if undeclared:
                raise WizardStateError(
                    f"Step '{step.id}' reads undeclared fields: {undeclared}"
                )

    def __len__(self) -> int:
        return len(self._steps)

    def __getitem__(self, index: int) -> StepDefinition:
        return self._steps[index]

    def __iter__(self) -> Iterator[StepDefinition]:
        return iter(self._steps)

    @property
    def ids(self) -> List[str]:
        return [step.id for step in self._steps]

    @property
    def all_fields(self) -> Tuple[str, ...]:
        return tuple(self._owners.keys())

    def index_of(self, step_id: str) -> int:
        for index, step in enumerate(self._steps):
            if step.id == step_id:
                return index
        raise KeyError(step_id)

    def owner_of(self, key: str) -> Optional[int]:
        return self._owners.get(key)

    def aggregate(self) -> AggregateValidator:
        return AggregateValidator([step.validator for step in self._steps])
