# -*- coding: utf-8 -*-
"""
Validation Strategy Pattern - declarative field rules for wizard records.

A SchemaValidator maps FieldSet keys to an ordered list of FieldRule objects.
Each rule checks one value (optionally looking at other named fields of the
record) and returns a translated error message or None.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List, Optional, Tuple

from services.translation_manager import tr
from utils.datetime_utils import parse_date


@dataclass
class ValidationContext:
    """
    Per-run information a rule may need beyond the record itself.

    Attributes:
        today: The date "now" is measured against (evaluated at validation time)
        mode: "create" or "edit"
    """
    today: date
    mode: str = "create"


def is_blank(value: Any) -> bool:
    """True for None, empty/whitespace strings and empty collections."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) == 0
    return False


def to_decimal(value: Any, allow_commas: bool = False) -> Optional[Decimal]:
    """
    Parse a FieldSet value as a finite Decimal.

    Returns None for blank or unparseable input (booleans are not numbers).
    """
    if is_blank(value) or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        number = value
    else:
        text = str(value).strip()
        if allow_commas:
            text = text.replace(",", "")
        try:
            number = Decimal(text)
        except (InvalidOperation, ValueError):
            return None
    if not number.is_finite():
        return None
    return number


# ============================================================================
# Field rules
# ============================================================================

class FieldRule(ABC):
    """A single constraint on one FieldSet key."""

    message_key: str = "validation.invalid"
    references: Tuple[str, ...] = ()

    def __init__(self, message_key: Optional[str] = None):
        if message_key:
            self.message_key = message_key

    @abstractmethod
    def check(self, key: str, record: Dict[str, Any],
              context: ValidationContext) -> Optional[str]:
        """Return an error message for ``record[key]`` or None when it passes."""

    def message(self, **kwargs) -> str:
        return tr(self.message_key, **kwargs)


class Required(FieldRule):
    message_key = "validation.required"

    def check(self, key, record, context):
        if is_blank(record.get(key)):
            return self.message()
        return None


class Numeric(FieldRule):
    """
    Numeric value with optional bounds.

    Args:
        min_value: Inclusive lower bound (exclusive when ``exclusive_min``)
        max_value: Inclusive upper bound
        integer: Reject fractional values
        allow_commas: Accept thousands separators ("12,500")
        message_key: Replaces every failure message (format and range)
    """

    message_key = "validation.number"

    def __init__(self, min_value=None, max_value=None, integer: bool = False,
                 allow_commas: bool = False, exclusive_min: bool = False,
                 message_key: Optional[str] = None):
        super().__init__(message_key)
        self.custom_message = message_key is not None
        self.min_value = None if min_value is None else Decimal(str(min_value))
        self.max_value = None if max_value is None else Decimal(str(max_value))
        self.integer = integer
        self.allow_commas = allow_commas
        self.exclusive_min = exclusive_min

    def check(self, key, record, context):
        value = record.get(key)
        if is_blank(value):
            return None
        number = to_decimal(value, self.allow_commas)
        if number is None:
            return self.message()
        if self.custom_message and not self._in_range(number):
            return self.message()
        if self.integer and number != number.to_integral_value():
            return tr("validation.integer")
        if self.min_value is not None:
            if self.exclusive_min and number <= self.min_value:
                return tr("validation.greater_than", min=_fmt(self.min_value))
            if not self.exclusive_min and number < self.min_value:
                return tr("validation.min", min=_fmt(self.min_value))
        if self.max_value is not None and number > self.max_value:
            return tr("validation.max", max=_fmt(self.max_value))
        return None

    def _in_range(self, number: Decimal) -> bool:
        if self.integer and number != number.to_integral_value():
            return False
        if self.min_value is not None:
            if number < self.min_value or (self.exclusive_min and number == self.min_value):
                return False
        return self.max_value is None or number <= self.max_value


class DateValue(FieldRule):
    message_key = "validation.date"

    def check(self, key, record, context):
        value = record.get(key)
        if is_blank(value):
            return None
        if parse_date(value) is None:
            return self.message()
        return None


class NotInPast(FieldRule):
    """Date must be today or later, measured at validation time (edit mode included)."""

    message_key = "validation.date_in_past"

    def check(self, key, record, context):
        value = parse_date(record.get(key))
        if value is None:
            return None
        if value < context.today:
            return self.message()
        return None


class AfterField(FieldRule):
    """Date strictly after the date held in ``other``."""

    message_key = "validation.date_after"

    def __init__(self, other: str, message_key: Optional[str] = None):
        super().__init__(message_key)
        self.other = other
        self.references = (other,)

    def check(self, key, record, context):
        value = parse_date(record.get(key))
        other = parse_date(record.get(self.other))
        if value is None or other is None:
            return None
        if value <= other:
            return self.message()
        return None


class NotBeforeField(AfterField):
    """Date on or after the date held in ``other``."""

    message_key = "validation.date_not_before"

    def check(self, key, record, context):
        value = parse_date(record.get(key))
        other = parse_date(record.get(self.other))
        if value is None or other is None:
            return None
        if value < other:
            return self.message()
        return None


class OneOf(FieldRule):
    message_key = "validation.one_of"

    def __init__(self, choices: Iterable[str], message_key: Optional[str] = None):
        super().__init__(message_key)
        self.choices = tuple(choices)

    def check(self, key, record, context):
        value = record.get(key)
        if is_blank(value):
            return None
        if value not in self.choices:
            return self.message(choices=", ".join(self.choices))
        return None


class MinField(FieldRule):
    """Number at least as large as the (positive) number held in ``other``."""

    message_key = "validation.min_field"

    def __init__(self, other: str, allow_commas: bool = False,
                 message_key: Optional[str] = None):
        super().__init__(message_key)
        self.other = other
        self.allow_commas = allow_commas
        self.references = (other,)

    def check(self, key, record, context):
        value = to_decimal(record.get(key), self.allow_commas)
        bound = to_decimal(record.get(self.other), True)
        if value is None or bound is None or bound <= 0:
            return None
        if value < bound:
            return self.message(min=_fmt(bound))
        return None


class When(FieldRule):
    """
    Apply ``rules`` only while ``record[tag_field] == tag``.

    Two When blocks over the same tag field describe mutually exclusive
    sub-schemas.
    """

    def __init__(self, tag_field: str, tag: Any, rules: List[FieldRule]):
        super().__init__()
        self.tag_field = tag_field
        self.tag = tag
        self.rules = list(rules)
        refs = [tag_field]
        for rule in self.rules:
            refs.extend(rule.references)
        self.references = tuple(dict.fromkeys(refs))

    def check(self, key, record, context):
        if record.get(self.tag_field) != self.tag:
            return None
        for rule in self.rules:
            error = rule.check(key, record, context)
            if error:
                return error
        return None


def _fmt(number: Decimal) -> str:
    if number == number.to_integral_value():
        return str(int(number))
    return str(number.normalize())


# ============================================================================
# Strategies
# ============================================================================

class ValidationStrategy(ABC):
    """
    Abstract base class for validation strategies.

    Each strategy returns a mapping of field name to error message.
    """

    @abstractmethod
    def validate(self, record: Dict[str, Any],
                 context: ValidationContext) -> Dict[str, str]:
        """
        Validate a record.

        Args:
            record: Flat FieldSet values
            context: Validation context (today, mode)

        Returns:
            Mapping of field name to error message (empty when valid)
        """

    def is_valid(self, record: Dict[str, Any], context: ValidationContext) -> bool:
        return len(self.validate(record, context)) == 0


class SchemaValidator(ValidationStrategy):
    """
    Declarative schema: field name -> ordered rules.

    Only the first failing rule of each field is reported.
    """

    def __init__(self, schema: Optional[Dict[str, List[FieldRule]]] = None):
        self.schema: Dict[str, List[FieldRule]] = dict(schema or {})

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(self.schema.keys())

    @property
    def references(self) -> Tuple[str, ...]:
        """Keys read by rules that are not part of this schema."""
        refs = []
        for rules in self.schema.values():
            for rule in rules:
                refs.extend(r for r in rule.references if r not in self.schema)
        return tuple(dict.fromkeys(refs))

    def add_rule(self, field_name: str, rule: FieldRule):
        self.schema.setdefault(field_name, []).append(rule)

    def validate(self, record, context):
        errors: Dict[str, str] = {}
        for key, rules in self.schema.items():
            for rule in rules:
                error = rule.check(key, record, context)
                if error:
                    errors[key] = error
                    break
        return errors
