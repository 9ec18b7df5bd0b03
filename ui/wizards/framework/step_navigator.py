# -*- coding: utf-8 -*-
"""
Step Navigator - the wizard state machine.

Handles:
- Field writes and their side effects (through the field resolver)
- Step progression (next/back/jump) against the step validators
- The final aggregate check and the single create/update call
- Closing the session and abandoning in-flight fetches
"""

from datetime import date
from enum import Enum
from functools import partial
from typing import Any, Callable, Dict, List, Optional, Tuple

from PyQt5.QtCore import QObject, pyqtSignal

from services.error_mapper import map_exception
from services.exceptions import SubmissionException, WizardStateError
from services.validation import ValidationContext
from services.wizard.fetch_dispatcher import FetchDispatcher
from services.wizard.field_resolver import (
    FieldResolver, VALUES_CHANGED, OPTIONS_CHANGED, LOADING_CHANGED,
    SELECTION_REFUSED, REVALIDATE,
)
from services.wizard.step_validator import StepValidationResult
from services.wizard.steps import StepSequence
from services.wizard.submission import EntitySubmitter, SubmissionTransformer
from .wizard_context import WizardContext
from utils.logger import get_session_logger


class WizardState(Enum):
    EDITING = "editing"
    SUBMITTING = "submitting"
    CLOSED = "closed"


class StepNavigator(QObject):
    """
    Owns one wizard session: the context, the current step and the state.

    Responsibilities:
    - Validate before moving forward, never before moving back
    - Route every field write through the field resolver
    - Guard submission against re-entry
    - Emit signals for UI updates
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_index, new_index
    fields_changed = pyqtSignal(list)  # keys
    errors_changed = pyqtSignal(dict)  # key -> message
    validation_failed = pyqtSignal(object)  # StepValidationResult
    options_changed = pyqtSignal(str)  # option source
    loading_changed = pyqtSignal(str, bool)
    selection_refused = pyqtSignal(str, str)  # trigger, message
    state_changed = pyqtSignal(str)
    submission_started = pyqtSignal()
    submission_succeeded = pyqtSignal(object)  # envelope data
    submission_failed = pyqtSignal(str)  # user-facing message
    closed = pyqtSignal()

    def __init__(self, context: WizardContext, steps: StepSequence,
                 resolver: FieldResolver, transformer: SubmissionTransformer,
                 submitter: EntitySubmitter, dispatcher: FetchDispatcher,
                 clock: Optional[Callable[[], date]] = None,
                 on_saved: Optional[Callable[[Any], None]] = None,
                 parent: Optional[QObject] = None):
        """
        Initialize the navigator.

        Args:
            context: Session state (hydrated FieldSet)
            steps: The fixed step sequence
            resolver: Field resolver writing into ``context``
            transformer: FieldSet -> submission request
            submitter: Performs the create/update call
            dispatcher: Runs the submission call off the UI thread
            clock: Returns "today"; evaluated on every validation
            on_saved: Called once with the saved entity after a successful submit
        """
        super().__init__(parent)
        self.context = context
        self.log = get_session_logger(__name__, context.wizard_id)
        self.steps = steps
        self.resolver = resolver
        self.transformer = transformer
        self.submitter = submitter
        self.dispatcher = dispatcher
        self.clock = clock or date.today
        self.on_saved = on_saved
        self.state = WizardState.EDITING
        self._saved_notified = False

        missing = [key for key in steps.all_fields if key not in context.keys]
        if missing:
            raise WizardStateError(f"FieldSet is missing step keys: {missing}")

        resolver.on(VALUES_CHANGED, self._on_values_changed)
        resolver.on(OPTIONS_CHANGED, self.options_changed.emit)
        resolver.on(LOADING_CHANGED, self.loading_changed.emit)
        resolver.on(SELECTION_REFUSED, self._on_selection_refused)
        resolver.on(REVALIDATE, self.revalidate_field)

    def start(self):
        """Load the option lists the steps need."""
        self._require_open("start")
        self.resolver.prime()

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def current_index(self) -> int:
        return self.context.current_step_index

    @property
    def values(self) -> Dict[str, Any]:
        return self.context.values

    def value(self, key: str, default: Any = None) -> Any:
        return self.context.get_value(key, default)

    def get_step_count(self) -> int:
        """Get total number of steps."""
        return len(self.steps)

    def is_last_step(self) -> bool:
        return self.current_index == len(self.steps) - 1

    def can_go_previous(self) -> bool:
        return self.state == WizardState.EDITING and self.current_index > 0

    def can_jump_to(self, index: int) -> bool:
        """Only visited-behind steps or previously completed steps are reachable."""
        if self.state != WizardState.EDITING:
            return False
        if index < 0 or index >= len(self.steps):
            return False
        return index <= self.current_index or self.context.is_step_completed(index)

    def reachable_steps(self) -> List[int]:
        return [index for index in range(len(self.steps)) if self.can_jump_to(index)]

    def progress(self) -> Tuple[int, int]:
        """(completed steps, total steps)"""
        return len(self.context.completed_steps), len(self.steps)

    def get_progress_percentage(self) -> float:
        completed, total = self.progress()
        return (completed / total) * 100.0 if total else 0.0

    def options(self, source: str) -> List[Any]:
        return self.resolver.options(source)

    def is_loading(self, source: str) -> bool:
        return self.resolver.is_loading(source)

    def is_dirty(self) -> bool:
        return self.context.is_dirty()

    def validation_context(self) -> ValidationContext:
        """Built per run so date rules measure against the current day."""
        return ValidationContext(
            today=self.clock(),
            mode=self.context.mode,
        )

    # =========================================================================
    # Field writes
    # =========================================================================

    def set_field(self, key: str, value: Any) -> bool:
        """
        Write one FieldSet key and run its side effects.

        Returns:
            True when the value changed

        Raises:
            WizardStateError: the session is closed
            KeyError: ``key`` is not part of the FieldSet
        """
        if not self._accepts_edits("set_field"):
            return False
        changed = self.context.set_value(key, value)
        self.context.touch([key])
        if self.context.clear_error(key):
            self.errors_changed.emit(dict(self.context.errors))
        if not changed:
            return False
        self.fields_changed.emit([key])
        self.resolver.field_changed(key)
        return True

    def select_entity(self, trigger: str, entity) -> bool:
        """Pick an entity for ``trigger`` and expand its dependent fields."""
        if not self._accepts_edits("select_entity"):
            return False
        self.context.touch([trigger])
        if self.context.clear_error(trigger):
            self.errors_changed.emit(dict(self.context.errors))
        return self.resolver.select_entity(trigger, entity)

    def search(self, source: str, text: str):
        if not self._accepts_edits("search"):
            return
        self.resolver.search(source, text)

    def revalidate_field(self, key: str):
        """Re-check one field that was already shown to the user."""
        if self.state == WizardState.CLOSED:
            return
        if not (self.context.is_touched(key) or self.context.error_for(key)):
            return
        owner = self.steps.owner_of(key)
        if owner is None:
            return
        result = self.steps[owner].validator.validate(
            self.context.values, self.validation_context(), owner
        )
        message = result.field_errors.get(key)
        before = self.context.error_for(key)
        self.context.set_errors({key: message} if message else {}, scope=[key])
        if before != message:
            self.log.debug(f"Revalidated '{key}': {message or 'ok'}")
            self.errors_changed.emit(dict(self.context.errors))

    # =========================================================================
    # Navigation
    # =========================================================================

    def validate_step(self, index: Optional[int] = None) -> StepValidationResult:
        if index is None:
            index = self.current_index
        return self.steps[index].validator.validate(
            self.context.values, self.validation_context(), index
        )

    def next_step(self) -> bool:
        """
        Validate the current step and advance (submit from the last step).

        Returns:
            True if the step passed validation
        """
        if not self._accepts_edits("next_step"):
            return False

        index = self.current_index
        step = self.steps[index]
        result = self.validate_step(index)
        if not result.is_valid:
            self.log.warning(f"Step '{step.id}' validation failed: {list(result.field_errors)}")
            self.context.touch(step.owned_fields)
            self.context.set_errors(result.field_errors, scope=step.owned_fields)
            self.errors_changed.emit(dict(self.context.errors))
            self.validation_failed.emit(result)
            return False

        self.context.mark_step_completed(index)
        if any(self.context.error_for(key) for key in step.owned_fields):
            self.context.set_errors({}, scope=step.owned_fields)
            self.errors_changed.emit(dict(self.context.errors))

        if self.is_last_step():
            return self.submit()

        self.log.info(f"Navigating: Step {index} → {index + 1}")
        return self._navigate_to(index + 1)

    def previous_step(self) -> bool:
        """Go back one step. Never validates."""
        if not self._accepts_edits("previous_step"):
            return False
        if self.current_index == 0:
            self.log.debug("Cannot go previous: already at first step")
            return False
        self.log.info(f"Navigating back: Step {self.current_index} → {self.current_index - 1}")
        return self._navigate_to(self.current_index - 1)

    def goto_step(self, index: int) -> bool:
        """Jump to an earlier step or to one already completed."""
        if not self._accepts_edits("goto_step"):
            return False
        if not self.can_jump_to(index):
            self.log.debug(f"Step {index} is not reachable from {self.current_index}")
            return False
        if index == self.current_index:
            return True
        self.log.info(f"Jumping: Step {self.current_index} → {index}")
        return self._navigate_to(index)

    def _navigate_to(self, new_index: int) -> bool:
        old_index = self.current_index
        self.context.current_step_index = new_index
        self.step_changed.emit(old_index, new_index)
        return True

    # =========================================================================
    # Submission
    # =========================================================================

    def submit(self) -> bool:
        """
        Check every step, build the request and send it.

        A submit while one is in flight is ignored.

        Returns:
            True if the request was dispatched

        Raises:
            WizardStateError: the session is closed
        """
        self._require_open("submit")
        if self.state == WizardState.SUBMITTING:
            self.log.warning("Submit ignored: a submission is already in flight")
            return False

        result = self.steps.aggregate().validate(self.context.values, self.validation_context())
        if not result.is_valid:
            failing = result.step_index
            self.log.warning(
                f"Submission blocked: step '{self.steps[failing].id}' is invalid "
                f"({list(result.field_errors)})"
            )
            self.context.touch(result.field_errors.keys())
            self.context.set_errors(result.field_errors)
            self.errors_changed.emit(dict(self.context.errors))
            if failing != self.current_index:
                self._navigate_to(failing)
            self.validation_failed.emit(result)
            return False

        try:
            request = self.transformer.transform(
                self.context.values,
                self.context.mode,
                entity_id=self.context.entity_id,
                branch_id=self.context.branch_id,
            )
        except SubmissionException as e:
            message = map_exception(e, "submit")
            self.log.error(f"Submission not sent: {e.message}")
            self.submission_failed.emit(message)
            return False

        self._set_state(WizardState.SUBMITTING)
        self.context.status = "submitting"
        self.submission_started.emit()
        self.log.info(
            f"Submitting {'update of ' + str(request.entity_id) if request.is_update else 'new record'}"
        )
        self.dispatcher.dispatch(
            "submit",
            partial(self.submitter.submit, request),
            self._on_submit_succeeded,
            self._on_submit_failed,
        )
        return True

    def _on_submit_succeeded(self, data):
        if self.state != WizardState.SUBMITTING:
            self.log.debug("Ignoring submission result: session no longer submitting")
            return
        self.log.info("Submission succeeded")
        self.context.status = "completed"
        self._close_session()
        if self.on_saved is not None and not self._saved_notified:
            self._saved_notified = True
            self.on_saved(data)
        self.submission_succeeded.emit(data)
        self.closed.emit()

    def _on_submit_failed(self, error: Exception):
        if self.state != WizardState.SUBMITTING:
            self.log.debug(f"Ignoring submission error: session no longer submitting ({error})")
            return
        message = map_exception(error, "submit")
        self.log.error(f"Submission failed: {error}")
        self.context.status = "draft"
        self._set_state(WizardState.EDITING)
        self.submission_failed.emit(message)

    # =========================================================================
    # Closing
    # =========================================================================

    def close(self):
        """Close the session; in-flight fetches are abandoned."""
        if self.state == WizardState.CLOSED:
            return
        if self.context.status != "completed":
            self.context.status = "cancelled"
        self.log.info(f"Closing wizard session {self.context.wizard_id}")
        self._close_session()
        self.closed.emit()

    def _close_session(self):
        self.resolver.close()
        self._set_state(WizardState.CLOSED)

    # =========================================================================
    # Internals
    # =========================================================================

    def _set_state(self, state: WizardState):
        if self.state != state:
            self.state = state
            self.state_changed.emit(state.value)

    def _require_open(self, action: str):
        if self.state == WizardState.CLOSED:
            raise WizardStateError(f"Cannot {action}: the wizard session is closed",
                                   state=self.state.value)

    def _accepts_edits(self, action: str) -> bool:
        self._require_open(action)
        if self.state == WizardState.SUBMITTING:
            self.log.debug(f"Ignoring {action} while submitting")
            return False
        return True

    def _on_values_changed(self, keys: List[str]):
        cleared = [key for key in keys if self.context.clear_error(key)]
        if cleared:
            self.errors_changed.emit(dict(self.context.errors))
        self.fields_changed.emit(list(keys))

    def _on_selection_refused(self, trigger: str, message: str):
        self.context.set_errors({trigger: message}, scope=[trigger])
        self.errors_changed.emit(dict(self.context.errors))
        self.selection_refused.emit(trigger, message)
