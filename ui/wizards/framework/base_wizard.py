# -*- coding: utf-8 -*-
"""
Base Wizard - Abstract base class for all wizards.

Provides unified wizard UI with:
- Header with title and step indicator
- Step container
- Navigation buttons (Back, Next/Submit, Cancel)
- Inline validation and submission feedback
- Dirty-close confirmation
"""

from datetime import date
from typing import Any, Callable, Dict, List, Optional
from abc import ABCMeta, abstractmethod

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFrame, QStackedWidget,
    QScrollArea,
)
from PyQt5.QtCore import pyqtSignal
from PyQt5.QtGui import QFont

from app.config import Config
from services.entity_service import EntityLookupService
from services.api_client import get_api_client
from services.translation_manager import tr, get_layout_direction
from services.wizard.fetch_dispatcher import FetchDispatcher, QtFetchDispatcher
from services.wizard.field_resolver import FieldResolver
from services.wizard.hydration import CREATE, EDIT, HydrationStrategy
from services.wizard.step_validator import StepValidationResult
from services.wizard.steps import StepSequence
from services.wizard.submission import EntitySubmitter, SubmissionTransformer
from ui.components.step_indicator import StepIndicator
from ui.error_handler import ErrorHandler
from .base_step import BaseStep
from .step_navigator import StepNavigator, WizardState
from .wizard_context import WizardContext
from utils.logger import get_logger

logger = get_logger(__name__)


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseWizard(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizards.

    Create vs edit is decided by ``entity_id``: with an id the session is
    hydrated from ``record`` and submits an update.

    Subclasses must implement:
    - create_sequence(): The step sequence
    - create_hydration(): Hydration strategy for the FieldSet
    - create_resolver(): Field rules writing into the context
    - create_transformer() / create_submitter(): Submission
    - create_step_pages(): One page per step
    """

    # Signals
    wizard_completed = pyqtSignal(dict)  # Emitted after a successful submit
    wizard_cancelled = pyqtSignal()

    def __init__(self, record: Optional[Dict[str, Any]] = None,
                 entity_id: Optional[str] = None,
                 branch_id: Optional[str] = None,
                 on_saved: Optional[Callable[[Any], None]] = None,
                 lookups: Optional[EntityLookupService] = None,
                 client=None,
                 dispatcher: Optional[FetchDispatcher] = None,
                 clock: Optional[Callable[[], date]] = None,
                 parent: Optional[QWidget] = None):
        """
        Initialize the wizard.

        Args:
            record: Persisted record to edit (wire shape)
            entity_id: Id of the edited record; None for create
            branch_id: Branch of the signed-in user
            on_saved: List-refresh callback, called once after a successful submit
            lookups: Entity lookups for the field resolver
            client: API client used for the create/update call
            dispatcher: Fetch dispatcher (a QtFetchDispatcher by default)
            clock: Returns "today"
        """
        super().__init__(parent)
        self.client = client or get_api_client()
        self.lookups = lookups or EntityLookupService(self.client)
        self.dispatcher = dispatcher or QtFetchDispatcher(self)
        clock = clock or date.today

        mode = EDIT if entity_id else CREATE
        sequence = self.create_sequence()
        values = self.create_hydration().hydrate(mode, record, clock())
        self.context = self.create_context(
            values, mode, entity_id,
            branch_id if branch_id is not None else Config.DEFAULT_BRANCH_ID,
        )
        resolver = self.create_resolver(self.context, self.dispatcher)

        # Create navigator
        self.navigator = StepNavigator(
            self.context, sequence, resolver,
            self.create_transformer(), self.create_submitter(self.client),
            self.dispatcher, clock=clock, on_saved=on_saved, parent=self,
        )
        self.steps: List[BaseStep] = self.create_step_pages(self.navigator)

        # Connect navigator signals
        self.navigator.step_changed.connect(self._on_step_changed)
        self.navigator.validation_failed.connect(self._on_validation_failed)
        self.navigator.selection_refused.connect(self._on_selection_refused)
        self.navigator.submission_started.connect(self._on_submission_started)
        self.navigator.submission_failed.connect(self._on_submission_failed)
        self.navigator.submission_succeeded.connect(self._on_submission_succeeded)
        self.navigator.state_changed.connect(lambda _state: self._update_navigation_buttons())

        # Setup UI
        self._setup_ui()

        logger.info(f"Opened {type(self).__name__} in {mode} mode")
        self.navigator.start()
        self._show_step(self.navigator.current_index)

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def create_sequence(self) -> StepSequence:
        pass

    @abstractmethod
    def create_hydration(self) -> HydrationStrategy:
        pass

    @abstractmethod
    def create_resolver(self, context: WizardContext,
                        dispatcher: FetchDispatcher) -> FieldResolver:
        pass

    @abstractmethod
    def create_transformer(self) -> SubmissionTransformer:
        pass

    @abstractmethod
    def create_submitter(self, client) -> EntitySubmitter:
        pass

    @abstractmethod
    def create_step_pages(self, navigator: StepNavigator) -> List[BaseStep]:
        """
        Create one page per step, in sequence order.

        Returns:
            List of BaseStep instances
        """
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def create_context(self, values: Dict[str, Any], mode: str, entity_id: Optional[str],
                       branch_id: Optional[str]) -> WizardContext:
        """Create the session state. Override to add wizard-specific queries."""
        return WizardContext(values, mode=mode, entity_id=entity_id, branch_id=branch_id)

    def get_wizard_title(self) -> str:
        """Get wizard title. Override to customize."""
        return tr("wizard.title")

    def get_submit_button_text(self) -> str:
        """Get submit button text. Override to customize."""
        return tr("button.submit")

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        """Setup the wizard UI."""
        self.setWindowTitle(self.get_wizard_title())
        self.setMinimumSize(Config.WIZARD_MIN_WIDTH, Config.WIZARD_MIN_HEIGHT)
        self.setLayoutDirection(get_layout_direction())

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        main_layout.addWidget(self._create_header())

        separator = QFrame()
        separator.setFrameShape(QFrame.HLine)
        separator.setStyleSheet(f"background-color: {Config.BORDER_COLOR};")
        separator.setFixedHeight(1)
        main_layout.addWidget(separator)

        # Step container
        self.step_container = QStackedWidget()
        for step in self.steps:
            scroll = QScrollArea()
            scroll.setWidgetResizable(True)
            scroll.setFrameShape(QFrame.NoFrame)
            scroll.setWidget(step)
            self.step_container.addWidget(scroll)
        main_layout.addWidget(self.step_container, 1)

        main_layout.addWidget(self._create_footer())

    def _create_header(self) -> QWidget:
        """Create wizard header with title and step indicator."""
        header = QWidget()
        header.setStyleSheet(f"background-color: {Config.BACKGROUND_COLOR};")

        layout = QVBoxLayout(header)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.title_label = QLabel(self.get_wizard_title())
        title_font = QFont()
        title_font.setPointSize(14)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        layout.addWidget(self.title_label)

        self.step_indicator = StepIndicator([step.display_name for step in self.navigator.steps])
        self.step_indicator.step_clicked.connect(self.navigator.goto_step)
        layout.addWidget(self.step_indicator)

        self.progress_label = QLabel("")
        layout.addWidget(self.progress_label)
        return header

    def _create_footer(self) -> QWidget:
        """Create wizard footer with navigation buttons."""
        footer = QWidget()
        footer.setStyleSheet(f"background-color: {Config.BACKGROUND_COLOR};")

        layout = QHBoxLayout(footer)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.btn_cancel = QPushButton(tr("button.cancel"))
        self.btn_cancel.clicked.connect(self.close)
        layout.addWidget(self.btn_cancel)

        self.status_label = QLabel("")
        self.status_label.setStyleSheet(f"color: {Config.ERROR_COLOR};")
        self.status_label.setWordWrap(True)
        layout.addWidget(self.status_label, 1)

        self.btn_previous = QPushButton(tr("button.back"))
        self.btn_previous.clicked.connect(self.navigator.previous_step)
        layout.addWidget(self.btn_previous)

        self.btn_next = QPushButton(tr("button.next"))
        self.btn_next.setDefault(True)
        self.btn_next.setStyleSheet(
            f"QPushButton {{ background-color: {Config.PRIMARY_COLOR}; color: white; "
            f"border-radius: 4px; padding: 8px 20px; }}"
            f"QPushButton:disabled {{ background-color: #9BBBD4; }}"
        )
        self.btn_next.clicked.connect(self.navigator.next_step)
        layout.addWidget(self.btn_next)

        return footer

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def _show_step(self, index: int):
        self.steps[index].on_show()
        self.step_container.setCurrentIndex(index)
        self._update_progress()
        self._update_navigation_buttons()

    def _on_step_changed(self, old_index: int, new_index: int):
        """Handle step change."""
        if 0 <= old_index < len(self.steps):
            self.steps[old_index].on_hide()
        self.status_label.setText("")
        self._show_step(new_index)

    def _update_progress(self):
        """Update progress indicator."""
        completed, total = self.navigator.progress()
        self.progress_label.setText(
            tr("wizard.progress", current=self.navigator.current_index + 1,
               total=total, completed=completed)
        )
        self.step_indicator.update_state(
            self.navigator.current_index,
            self.context.completed_steps,
            self.navigator.reachable_steps(),
        )

    def _update_navigation_buttons(self):
        """Update navigation button states."""
        editing = self.navigator.state == WizardState.EDITING
        self.btn_previous.setEnabled(self.navigator.can_go_previous())
        self.btn_next.setEnabled(editing)
        if self.navigator.is_last_step():
            self.btn_next.setText(self.get_submit_button_text())
        else:
            self.btn_next.setText(tr("button.next"))

    def _on_validation_failed(self, result: StepValidationResult):
        """Errors are shown inline; the footer summarises them."""
        self.status_label.setText(tr("validation.check_data", count=len(result.field_errors)))
        self._update_progress()

    def _on_selection_refused(self, trigger: str, message: str):
        ErrorHandler.show_warning(self, message)

    def _on_submission_started(self):
        self.status_label.setText("")
        self.btn_next.setText(tr("button.submitting"))

    def _on_submission_failed(self, message: str):
        self.status_label.setText(message)
        self._update_navigation_buttons()
        ErrorHandler.show_error(self, message)

    def _on_submission_succeeded(self, data):
        self.wizard_completed.emit(self.context.to_dict())
        self.close()

    # =========================================================================
    # Closing
    # =========================================================================

    def confirm_discard(self) -> bool:
        """Ask before throwing away edits."""
        return ErrorHandler.confirm(self, tr("wizard.discard_changes"))

    def closeEvent(self, event):
        """Confirm before closing a dirty session; closing abandons fetches."""
        if self.navigator.state != WizardState.CLOSED:
            if self.navigator.is_dirty() and not self.confirm_discard():
                event.ignore()
                return
            self.navigator.close()
            self.wizard_cancelled.emit()
        event.accept()
