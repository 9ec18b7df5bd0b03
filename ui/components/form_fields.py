# -*- coding: utf-8 -*-
"""
Form field widgets bound to one FieldSet key each.

Every field shows a label, an input and an inline error line. User edits
are reported through ``edited(key, value)``; programmatic updates go
through ``set_value`` and never emit ``edited``.
"""

from typing import Any, List, Optional

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QLabel, QLineEdit, QComboBox, QDateEdit, QListWidget,
    QListWidgetItem,
)
from PyQt5.QtCore import Qt, QDate, QTimer, pyqtSignal

from app.config import Config
from services.translation_manager import tr, get_text_alignment
from services.validation import is_blank
from ui.components.toggle_switch import ToggleSwitch
from utils.datetime_utils import parse_date

_INPUT_STYLE = f"""
    QLineEdit, QComboBox, QDateEdit {{
        border: 1px solid {Config.BORDER_COLOR};
        border-radius: 6px;
        padding: 6px 10px;
        background-color: white;
    }}
    QLineEdit[invalid="true"], QComboBox[invalid="true"], QDateEdit[invalid="true"] {{
        border: 1px solid {Config.ERROR_COLOR};
    }}
    QLineEdit:read-only {{
        background-color: {Config.BACKGROUND_COLOR};
        color: #637381;
    }}
"""


class FormField(QWidget):
    """Label + input + error line for one FieldSet key."""

    edited = pyqtSignal(str, object)  # key, value

    def __init__(self, key: str, label_key: str, parent=None):
        super().__init__(parent)
        self.key = key
        self.label_key = label_key

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        self.label = QLabel(tr(label_key))
        self.label.setAlignment(get_text_alignment())
        self.label.setStyleSheet("color: #212B36; font-weight: 600; background: transparent;")
        layout.addWidget(self.label)

        self.input = self.create_input()
        self.input.setStyleSheet(_INPUT_STYLE)
        layout.addWidget(self.input)

        self.error_label = QLabel("")
        self.error_label.setStyleSheet(
            f"color: {Config.ERROR_COLOR}; font-size: 9pt; background: transparent;"
        )
        self.error_label.setWordWrap(True)
        self.error_label.hide()
        layout.addWidget(self.error_label)

    def create_input(self) -> QWidget:
        raise NotImplementedError

    def value(self) -> Any:
        raise NotImplementedError

    def set_value(self, value: Any):
        raise NotImplementedError

    def set_error(self, message: Optional[str]):
        self.error_label.setText(message or "")
        self.error_label.setVisible(bool(message))
        self.input.setProperty("invalid", "true" if message else "false")
        self.input.style().unpolish(self.input)
        self.input.style().polish(self.input)

    def error(self) -> str:
        return self.error_label.text()

    def set_read_only(self, read_only: bool):
        self.input.setEnabled(not read_only)

    def _emit(self, value: Any):
        self.edited.emit(self.key, value)


class TextField(FormField):
    """Free text; also used read-only for derived values."""

    def __init__(self, key: str, label_key: str, read_only: bool = False,
                 placeholder: str = "", parent=None):
        super().__init__(key, label_key, parent)
        if placeholder:
            self.input.setPlaceholderText(placeholder)
        self.set_read_only(read_only)
        self.input.textEdited.connect(self._emit)

    def create_input(self) -> QWidget:
        field = QLineEdit()
        field.setAlignment(get_text_alignment())
        return field

    def value(self) -> str:
        return self.input.text()

    def set_value(self, value: Any):
        text = "" if value is None else str(value)
        if self.input.text() != text:
            self.input.setText(text)

    def set_read_only(self, read_only: bool):
        self.input.setReadOnly(read_only)


class NumberField(TextField):
    """Numeric text input; the FieldSet keeps what the user typed."""

    def create_input(self) -> QWidget:
        field = super().create_input()
        field.setInputMethodHints(Qt.ImhFormattedNumbersOnly)
        return field


class DateField(FormField):
    """
    Calendar date input holding an ISO date string.

    The minimum date is rendered blank and stands for "no date".
    """

    BLANK = QDate(1900, 1, 1)

    def __init__(self, key: str, label_key: str, read_only: bool = False, parent=None):
        self._updating = False
        super().__init__(key, label_key, parent)
        self.set_read_only(read_only)
        self.input.dateChanged.connect(self._on_date_changed)

    def create_input(self) -> QWidget:
        field = QDateEdit()
        field.setCalendarPopup(True)
        field.setDisplayFormat("dd/MM/yyyy")
        field.setMinimumDate(self.BLANK)
        field.setSpecialValueText(" ")
        field.setDate(self.BLANK)
        return field

    def value(self) -> str:
        current = self.input.date()
        if current == self.BLANK:
            return ""
        return current.toString("yyyy-MM-dd")

    def set_value(self, value: Any):
        parsed = parse_date(value)
        target = QDate(parsed.year, parsed.month, parsed.day) if parsed else self.BLANK
        if self.input.date() != target:
            self._updating = True
            self.input.setDate(target)
            self._updating = False

    def _on_date_changed(self, _date: QDate):
        if not self._updating:
            self._emit(self.value())


class ChoiceField(FormField):
    """
    Drop-down of options (objects with ``id`` and ``label``) or (id, label) pairs.

    The FieldSet holds the option id; "" is the empty choice.
    """

    def __init__(self, key: str, label_key: str, options: Optional[List[Any]] = None,
                 placeholder_key: str = "field.select", parent=None):
        super().__init__(key, label_key, parent)
        self._placeholder = tr(placeholder_key)
        self._value: Any = ""
        self._updating = False
        self.set_options(options or [])
        self.input.activated.connect(self._on_activated)

    def create_input(self) -> QWidget:
        return QComboBox()

    def set_options(self, options: List[Any]):
        self._updating = True
        self.input.clear()
        self.input.addItem(self._placeholder, "")
        for option in options:
            if isinstance(option, tuple):
                option_id, label = option
            else:
                option_id = option.id
                label = getattr(option, "label", None) or getattr(option, "display_name", option_id)
            self.input.addItem(str(label), option_id)
        self._updating = False
        self._select(self._value)

    def option_ids(self) -> List[Any]:
        return [self.input.itemData(i) for i in range(1, self.input.count())]

    def value(self) -> Any:
        return self._value

    def set_value(self, value: Any):
        self._value = "" if value is None else value
        self._select(self._value)

    def set_loading(self, loading: bool):
        self.input.setEnabled(not loading)
        if loading:
            self.input.setItemText(0, tr("field.loading"))
        else:
            self.input.setItemText(0, self._placeholder)

    def _select(self, value: Any):
        index = self.input.findData(value) if not is_blank(value) else 0
        self._updating = True
        self.input.setCurrentIndex(index if index >= 0 else 0)
        self._updating = False

    def _on_activated(self, index: int):
        if self._updating:
            return
        self._value = self.input.itemData(index)
        self._emit(self._value)


class ToggleField(FormField):
    """Boolean switch."""

    def __init__(self, key: str, label_key: str, parent=None):
        super().__init__(key, label_key, parent)
        self.input.toggled.connect(self._emit)

    def create_input(self) -> QWidget:
        return ToggleSwitch(checked=False)

    def value(self) -> bool:
        return self.input.isChecked()

    def set_value(self, value: Any):
        self.input.set_checked_silently(bool(value))


class SearchPicker(FormField):
    """
    Search box with a result list for picking an entity.

    Typing is debounced before ``search_requested`` fires; clicking a result
    emits ``entity_picked``. The bound key holds the picked entity's id.
    """

    search_requested = pyqtSignal(str)
    entity_picked = pyqtSignal(object)

    def __init__(self, key: str, label_key: str, placeholder_key: str = "field.search",
                 debounce_ms: Optional[int] = None, parent=None):
        super().__init__(key, label_key, parent)
        self.input.setPlaceholderText(tr(placeholder_key))

        self.results = QListWidget()
        self.results.setMaximumHeight(160)
        self.results.hide()
        self.results.itemClicked.connect(self._on_item_clicked)
        self.layout().insertWidget(2, self.results)

        self.selection_label = QLabel("")
        self.selection_label.setStyleSheet(
            f"color: {Config.PRIMARY_COLOR}; background: transparent;"
        )
        self.layout().insertWidget(3, self.selection_label)

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(Config.SEARCH_DEBOUNCE_MS if debounce_ms is None else debounce_ms)
        self._timer.timeout.connect(self._fire_search)
        self.input.textEdited.connect(lambda _text: self._timer.start())
        self._value: Any = ""

    def create_input(self) -> QWidget:
        field = QLineEdit()
        field.setAlignment(get_text_alignment())
        field.setClearButtonEnabled(True)
        return field

    def value(self) -> Any:
        return self._value

    def set_value(self, value: Any):
        self._value = "" if value is None else value
        if is_blank(self._value):
            self.selection_label.setText("")

    def set_selection_text(self, text: str):
        self.selection_label.setText(text)

    def set_options(self, entities: List[Any]):
        self.results.clear()
        for entity in entities:
            item = QListWidgetItem(getattr(entity, "display_name", None) or str(entity.id))
            item.setData(Qt.UserRole, entity)
            self.results.addItem(item)
        self.results.setVisible(bool(entities))

    def set_loading(self, loading: bool):
        self.input.setProperty("loading", loading)

    def _fire_search(self):
        self.search_requested.emit(self.input.text())

    def _on_item_clicked(self, item: QListWidgetItem):
        entity = item.data(Qt.UserRole)
        self.results.hide()
        self.entity_picked.emit(entity)
