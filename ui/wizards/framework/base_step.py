# -*- coding: utf-8 -*-
"""
Base Step - Abstract base class for wizard step pages.

A step page renders the fields of one StepDefinition. It never holds the
FieldSet: every edit goes to the navigator, and the page redraws from the
navigator's signals.

Subclasses implement:
- setup_ui(): Create the step's fields (usually with the add_* helpers)
"""

from typing import Any, Dict, List, Optional
from abc import ABCMeta, abstractmethod

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QGridLayout, QLabel, QFrame

from app.config import Config
from services.translation_manager import tr
from services.wizard.steps import StepDefinition
from ui.components.form_fields import (
    FormField, TextField, NumberField, DateField, ChoiceField, ToggleField, SearchPicker,
)
from .step_navigator import StepNavigator


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseStep(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizard step pages.

    Provides common functionality for:
    - Building a two-column form of FieldSet-bound fields
    - Forwarding edits to the navigator
    - Refreshing values, options and errors from navigator signals
    """

    COLUMNS = 2

    def __init__(self, navigator: StepNavigator, definition: StepDefinition,
                 parent: Optional[QWidget] = None):
        """
        Initialize the step.

        Args:
            navigator: The session's state machine
            definition: The step this page renders
            parent: Parent widget
        """
        super().__init__(parent)
        self.navigator = navigator
        self.definition = definition
        self.fields: Dict[str, FormField] = {}
        self._option_fields: Dict[str, List[FormField]] = {}
        self._is_initialized = False

        # Main layout
        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(20, 20, 20, 20)
        self.main_layout.setSpacing(16)

        self.form = QFrame()
        self.form.setObjectName("stepForm")
        self.form_layout = QGridLayout(self.form)
        self.form_layout.setHorizontalSpacing(24)
        self.form_layout.setVerticalSpacing(12)
        self._next_cell = 0

        navigator.fields_changed.connect(self._on_fields_changed)
        navigator.errors_changed.connect(self._on_errors_changed)
        navigator.options_changed.connect(self._on_options_changed)
        navigator.loading_changed.connect(self._on_loading_changed)

    def initialize(self):
        """Build the page (called once)."""
        if not self._is_initialized:
            title = QLabel(self.get_step_title())
            title.setStyleSheet("font-size: 14pt; font-weight: 600; background: transparent;")
            self.main_layout.addWidget(title)
            self.main_layout.addWidget(self.form)
            self.setup_ui()
            self.main_layout.addStretch()
            self._is_initialized = True
            for source in self._option_fields:
                self._on_options_changed(source)

    def on_show(self):
        """Called when the step becomes the current one."""
        if not self._is_initialized:
            self.initialize()
        self.populate_data()

    def on_hide(self):
        """Called when the step is hidden (moving to another step)."""
        pass

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def setup_ui(self):
        """
        Setup the step's fields.

        This method is called once during initialization.
        """
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def populate_data(self):
        """Show the current FieldSet values and errors."""
        for key, field in self.fields.items():
            field.set_value(self.navigator.value(key))
        self._on_errors_changed(self.navigator.context.errors)
        self.refresh()

    def refresh(self):
        """Hook for pages that show derived content (visibility, summaries)."""
        pass

    def get_step_title(self) -> str:
        return self.definition.display_name

    # =========================================================================
    # Field helpers
    # =========================================================================

    def add_field(self, field: FormField, span: int = 1) -> FormField:
        """Place ``field`` in the next grid cell and bind it to its key."""
        row, column = divmod(self._next_cell, self.COLUMNS)
        if column + span > self.COLUMNS:
            row, column = row + 1, 0
            self._next_cell = row * self.COLUMNS
        self.form_layout.addWidget(field, row, column, 1, span)
        self._next_cell += span
        self.fields[field.key] = field
        field.edited.connect(self._on_field_edited)
        return field

    def add_text(self, key: str, label_key: str, read_only: bool = False) -> TextField:
        return self.add_field(TextField(key, label_key, read_only=read_only))

    def add_number(self, key: str, label_key: str, read_only: bool = False) -> NumberField:
        return self.add_field(NumberField(key, label_key, read_only=read_only))

    def add_date(self, key: str, label_key: str, read_only: bool = False) -> DateField:
        return self.add_field(DateField(key, label_key, read_only=read_only))

    def add_toggle(self, key: str, label_key: str) -> ToggleField:
        return self.add_field(ToggleField(key, label_key))

    def add_choice(self, key: str, label_key: str, source: Optional[str] = None,
                   options: Optional[List[Any]] = None) -> ChoiceField:
        """
        Drop-down bound to ``key``.

        Args:
            source: Resolver option source feeding the list
            options: Static (id, label) pairs when there is no source
        """
        field = self.add_field(ChoiceField(key, label_key, options=options))
        if source:
            self._option_fields.setdefault(source, []).append(field)
        return field

    def add_picker(self, key: str, label_key: str, source: str) -> SearchPicker:
        """Search-driven entity picker; picking expands the key's cluster."""
        picker = SearchPicker(key, label_key)
        self.add_field(picker, span=self.COLUMNS)
        picker.search_requested.connect(lambda text: self.navigator.search(source, text))
        picker.entity_picked.connect(lambda entity: self._on_entity_picked(picker, entity))
        self._option_fields.setdefault(source, []).append(picker)
        return picker

    def add_section(self, title_key: str):
        """Full-width section caption."""
        row = (self._next_cell + self.COLUMNS - 1) // self.COLUMNS
        label = QLabel(tr(title_key))
        label.setStyleSheet(f"font-weight: 700; color: {Config.PRIMARY_COLOR}; background: transparent;")
        self.form_layout.addWidget(label, row, 0, 1, self.COLUMNS)
        self._next_cell = (row + 1) * self.COLUMNS

    # =========================================================================
    # Signal handlers
    # =========================================================================

    def _on_field_edited(self, key: str, value: Any):
        self.navigator.set_field(key, value)

    def _on_entity_picked(self, picker: SearchPicker, entity):
        if self.navigator.select_entity(picker.key, entity):
            picker.set_selection_text(getattr(entity, "display_name", str(entity.id)))

    def _on_fields_changed(self, keys: List[str]):
        for key in keys:
            field = self.fields.get(key)
            if field is not None:
                field.set_value(self.navigator.value(key))
        if self._is_initialized:
            self.refresh()

    def _on_errors_changed(self, errors: Dict[str, str]):
        for key, field in self.fields.items():
            field.set_error(errors.get(key))

    def _on_options_changed(self, source: str):
        for field in self._option_fields.get(source, []):
            field.set_options(self.navigator.options(source))
            if not isinstance(field, SearchPicker):
                field.set_value(self.navigator.value(field.key))

    def _on_loading_changed(self, source: str, loading: bool):
        for field in self._option_fields.get(source, []):
            field.set_loading(loading)
