# -*- coding: utf-8 -*-
"""
Tests for the declarative field rules and the schema validator.
"""
from datetime import date

import pytest

from services.translation_manager import tr
from services.validation import (
    ValidationContext, SchemaValidator, Required, Numeric, DateValue, NotInPast,
    AfterField, NotBeforeField, OneOf, MinField, When, is_blank, to_decimal,
)

TODAY = date(2026, 3, 10)


@pytest.fixture
def ctx():
    return ValidationContext(today=TODAY)


def check(rule, value, ctx, **others):
    record = {"value": value, **others}
    return rule.check("value", record, ctx)


class TestHelpers:
    """is_blank / to_decimal."""

    @pytest.mark.parametrize("value", [None, "", "   ", [], {}])
    def test_blank_values(self, value):
        assert is_blank(value)

    @pytest.mark.parametrize("value", ["0", 0, False, "x"])
    def test_non_blank_values(self, value):
        assert not is_blank(value)

    def test_to_decimal_rejects_nan_and_text(self):
        assert to_decimal("NaN") is None
        assert to_decimal(float("inf")) is None
        assert to_decimal("abc") is None

    def test_to_decimal_commas_only_when_allowed(self):
        assert to_decimal("12,500") is None
        assert to_decimal("12,500", allow_commas=True) == 12500

    def test_booleans_are_not_numbers(self):
        assert to_decimal(True) is None


class TestNumeric:
    """Numeric bounds and integer checks."""

    def test_blank_is_left_to_required(self, ctx):
        assert check(Numeric(min_value=1), "", ctx) is None

    def test_not_a_number(self, ctx):
        assert check(Numeric(), "12a", ctx) == tr("validation.number")

    def test_integer(self, ctx):
        assert check(Numeric(integer=True), "2.5", ctx) == tr("validation.integer")
        assert check(Numeric(integer=True), "2", ctx) is None

    def test_bounds(self, ctx):
        assert check(Numeric(min_value=1), "0", ctx) == tr("validation.min", min="1")
        assert check(Numeric(min_value=0, exclusive_min=True), "0", ctx) == \
            tr("validation.greater_than", min="0")
        assert check(Numeric(max_value=100), "100.5", ctx) == tr("validation.max", max="100")

    def test_custom_message_key(self, ctx):
        rule = Numeric(min_value=1, message_key="validation.contract.rental_days")
        assert check(rule, "x", ctx) == tr("validation.contract.rental_days")
        assert check(rule, "0", ctx) == tr("validation.contract.rental_days")
        assert check(rule, "2", ctx) is None


class TestDates:
    """Date parsing and date comparisons."""

    def test_invalid_date(self, ctx):
        assert check(DateValue(), "2026-02-30", ctx) == tr("validation.date")
        assert check(DateValue(), "2026-02-28", ctx) is None

    def test_not_in_past_uses_context_today(self, ctx):
        assert check(NotInPast(), "2026-03-09", ctx) == tr("validation.date_in_past")
        assert check(NotInPast(), "2026-03-10", ctx) is None

    def test_not_in_past_applies_in_edit_mode(self):
        edit = ValidationContext(today=TODAY, mode="edit")
        assert check(NotInPast(), "2026-01-01", edit) == tr("validation.date_in_past")

    def test_not_in_past_custom_message(self, ctx):
        rule = NotInPast(message_key="validation.contract.start_in_past")
        assert check(rule, "2026-03-09", ctx) == tr("validation.contract.start_in_past")

    def test_after_field_is_strict(self, ctx):
        rule = AfterField("start")
        assert check(rule, "2026-03-10", ctx, start="2026-03-10") == tr("validation.date_after")
        assert check(rule, "2026-03-11", ctx, start="2026-03-10") is None

    def test_not_before_field_allows_same_day(self, ctx):
        rule = NotBeforeField("start")
        assert check(rule, "2026-03-10", ctx, start="2026-03-10") is None
        assert check(rule, "2026-03-09", ctx, start="2026-03-10") == \
            tr("validation.date_not_before")


class TestChoiceAndReferences:
    """OneOf, MinField and When."""

    def test_one_of(self, ctx):
        assert check(OneOf(("cash", "card")), "cheque", ctx) == \
            tr("validation.one_of", choices="cash, card")

    def test_min_field_ignores_missing_bound(self, ctx):
        assert check(MinField("rate"), "10", ctx, rate="") is None
        assert check(MinField("rate"), "10", ctx, rate="20") == tr("validation.min_field", min="20")

    def test_when_applies_only_to_matching_tag(self, ctx):
        rule = When("mode", "a", [Required()])
        assert check(rule, "", ctx, mode="b") is None
        assert check(rule, "", ctx, mode="a") == tr("validation.required")
        assert set(rule.references) == {"mode"}


class TestSchemaValidator:
    """First error per field, references."""

    def test_reports_first_failing_rule_only(self, ctx):
        schema = SchemaValidator({"amount": [Required(), Numeric(min_value=1)]})
        assert schema.validate({"amount": ""}, ctx) == {"amount": tr("validation.required")}

    def test_references_exclude_own_fields(self):
        schema = SchemaValidator({
            "end": [AfterField("start")],
            "start": [Required()],
            "fees": [MinField("rate")],
        })
        assert schema.references == ("rate",)

    def test_add_rule(self, ctx):
        schema = SchemaValidator()
        schema.add_rule("name", Required())
        assert schema.fields == ("name",)
        assert not schema.is_valid({"name": " "}, ctx)
