# -*- coding: utf-8 -*-
"""
Hydration Strategy - the initial FieldSet of a wizard session.

Create mode starts from a fixed default record; edit mode maps a fetched
record (snake_case, nested relations) onto the flat FieldSet. Both paths
must define every key of the FieldSet.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Dict, Optional, Tuple

from services.exceptions import WizardStateError
from utils.logger import get_logger

logger = get_logger(__name__)

CREATE = "create"
EDIT = "edit"

_MISSING = object()


def pick(record: Dict[str, Any], *paths: str, default: Any = "") -> Any:
    """
    First non-empty value among dotted ``paths`` of ``record``.

    Examples:
        >>> pick({"customer": {"name": "Ali"}}, "customer.name", "customer_name")
        'Ali'
        >>> pick({}, "start_date")
        ''
    """
    for path in paths:
        current: Any = record
        for part in path.split("."):
            if not isinstance(current, dict):
                current = _MISSING
                break
            current = current.get(part, _MISSING)
        if current is _MISSING or current is None:
            continue
        if isinstance(current, str) and not current.strip():
            continue
        return current
    return default


def text(value: Any, default: str = "") -> str:
    if value is None:
        return default
    if isinstance(value, dict):
        return str(value.get("name") or default)
    return str(value)


def number_text(value: Any, default: str = "0") -> str:
    """Render a stored number as an input string (150.0 -> "150")."""
    if value is None or value == "":
        return default
    try:
        number = float(str(value).replace(",", ""))
    except ValueError:
        return default
    if number.is_integer():
        return str(int(number))
    return str(number)


def snake_key(key: str) -> str:
    """camelCase FieldSet key to its snake_case column ("dailyPermittedKm" -> "daily_permitted_km")."""
    return "".join(f"_{c.lower()}" if c.isupper() else c for c in key)


def number(value: Any, default: float = 0) -> float:
    try:
        return float(value) if value not in (None, "") else default
    except (TypeError, ValueError):
        return default


class HydrationStrategy(ABC):
    """Builds the initial FieldSet for create or edit mode."""

    @property
    @abstractmethod
    def fields(self) -> Tuple[str, ...]:
        """Every key the wizard can read or write."""

    @abstractmethod
    def defaults(self, today: date) -> Dict[str, Any]:
        """The create-mode record."""

    @abstractmethod
    def map_record(self, record: Dict[str, Any], today: date) -> Dict[str, Any]:
        """Map a persisted record (wire shape) to FieldSet keys."""

    def create(self, today: date) -> Dict[str, Any]:
        return self._checked(self.defaults(today), CREATE)

    def from_record(self, record: Optional[Dict[str, Any]], today: date) -> Dict[str, Any]:
        return self._checked(self.map_record(record or {}, today), EDIT)

    def hydrate(self, mode: str, record: Optional[Dict[str, Any]], today: date) -> Dict[str, Any]:
        """Pick the entry point for ``mode``; the two are never mixed."""
        if mode == EDIT:
            return self.from_record(record, today)
        if record:
            logger.warning("Ignoring record passed to a create-mode session")
        return self.create(today)

    def _checked(self, values: Dict[str, Any], mode: str) -> Dict[str, Any]:
        expected = set(self.fields)
        missing = sorted(expected - set(values))
        extra = sorted(set(values) - expected)
        undefined = sorted(k for k, v in values.items() if v is None)
        if missing or extra or undefined:
            raise WizardStateError(
                f"{type(self).__name__} ({mode}) is not total: "
                f"missing={missing} extra={extra} undefined={undefined}"
            )
        return dict(values)
