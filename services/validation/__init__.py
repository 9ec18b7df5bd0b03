# -*- coding: utf-8 -*-
"""Validation services package."""

from .validation_strategy import (
    ValidationContext, ValidationStrategy, SchemaValidator, FieldRule,
    Required, Numeric, DateValue, NotInPast, AfterField, NotBeforeField,
    OneOf, MinField, When, is_blank, to_decimal,
)

__all__ = [
    'ValidationContext', 'ValidationStrategy', 'SchemaValidator', 'FieldRule',
    'Required', 'Numeric', 'DateValue', 'NotInPast', 'AfterField',
    'NotBeforeField', 'OneOf', 'MinField', 'When', 'is_blank', 'to_decimal',
]
