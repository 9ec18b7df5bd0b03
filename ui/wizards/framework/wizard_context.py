# -*- coding: utf-8 -*-
"""
Wizard Context - the state container of one wizard session.

Holds:
- The FieldSet (flat key -> value mapping shared by every step)
- The hydrated baseline (for dirty tracking)
- Touched fields and per-field errors
- Step position and completion
"""

from typing import Any, Dict, Iterable, List, Optional, Set
from datetime import datetime
import uuid

from services.wizard.hydration import CREATE, EDIT


class WizardContext:
    """
    Session state owned by the step navigator.

    Steps never hold the FieldSet; they read and write through the
    navigator, which writes here.
    """

    def __init__(self, values: Dict[str, Any], mode: str = CREATE,
                 entity_id: Optional[str] = None, branch_id: Optional[str] = None):
        """
        Initialize the session state.

        Args:
            values: The hydrated FieldSet (defines the set of known keys)
            mode: "create" or "edit"
            entity_id: Id of the record being edited
            branch_id: Branch of the signed-in user
        """
        self.wizard_id: str = str(uuid.uuid4())
        self.status: str = "draft"  # draft, submitting, completed, cancelled
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = datetime.now()
        self.mode = mode
        self.entity_id = entity_id
        self.branch_id = branch_id

        self._values: Dict[str, Any] = dict(values)
        self.baseline: Dict[str, Any] = dict(values)
        self.touched: Set[str] = set()
        self.errors: Dict[str, str] = {}

        self.current_step_index: int = 0
        self.completed_steps: set = set()

    @property
    def is_edit(self) -> bool:
        return self.mode == EDIT

    # =========================================================================
    # FieldSet
    # =========================================================================

    @property
    def values(self) -> Dict[str, Any]:
        """Copy of the FieldSet."""
        return dict(self._values)

    @property
    def keys(self) -> List[str]:
        return list(self._values.keys())

    def get_value(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set_value(self, key: str, value: Any) -> bool:
        """Write one key. Returns True when the value changed."""
        return bool(self.update_values({key: value}))

    def update_values(self, updates: Dict[str, Any]) -> List[str]:
        """
        Write several keys at once.

        Raises:
            KeyError: a key is not part of the FieldSet

        Returns:
            The keys whose value changed
        """
        unknown = [key for key in updates if key not in self._values]
        if unknown:
            raise KeyError(f"Unknown FieldSet keys: {unknown}")
        changed = []
        for key, value in updates.items():
            if self._values[key] != value or type(self._values[key]) is not type(value):
                self._values[key] = value
                changed.append(key)
        if changed:
            self.updated_at = datetime.now()
        return changed

    # =========================================================================
    # Touched / errors
    # =========================================================================

    def touch(self, keys: Iterable[str]):
        self.touched.update(keys)

    def is_touched(self, key: str) -> bool:
        return key in self.touched

    def set_errors(self, errors: Dict[str, str], scope: Optional[Iterable[str]] = None):
        """
        Replace the errors of ``scope`` (all keys when None) with ``errors``.
        """
        if scope is None:
            self.errors = dict(errors)
            return
        for key in scope:
            self.errors.pop(key, None)
        self.errors.update(errors)

    def clear_error(self, key: str) -> bool:
        return self.errors.pop(key, None) is not None

    def error_for(self, key: str) -> Optional[str]:
        return self.errors.get(key)

    # =========================================================================
    # Steps
    # =========================================================================

    def mark_step_completed(self, step_index: int):
        """Mark a step as completed."""
        self.completed_steps.add(step_index)
        self.updated_at = datetime.now()

    def is_step_completed(self, step_index: int) -> bool:
        """Check if a step is completed."""
        return step_index in self.completed_steps

    # =========================================================================
    # Dirty tracking
    # =========================================================================

    def dirty_fields(self) -> List[str]:
        return [key for key, value in self._values.items()
                if self.baseline.get(key) != value]

    def is_dirty(self) -> bool:
        return bool(self.dirty_fields())

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the session (diagnostics and the completion signal)."""
        return {
            "wizard_id": self.wizard_id,
            "status": self.status,
            "mode": self.mode,
            "entity_id": self.entity_id,
            "branch_id": self.branch_id,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "current_step_index": self.current_step_index,
            "completed_steps": sorted(self.completed_steps),
            "values": self.values,
        }
