# -*- coding: utf-8 -*-
"""
Date helpers shared by the wizards.

All wizard dates travel as ISO strings (YYYY-MM-DD); these helpers convert
between those strings, ``date`` objects and API timestamps.
"""

from datetime import date, datetime, timedelta
from typing import Optional, Union


def parse_date(value: Union[str, datetime, date, None]) -> Optional[date]:
    """
    Convert an ISO string, datetime or date to a ``date``.

    Args:
        value: ISO string (date-only or full timestamp), datetime, date, or None

    Returns:
        date object, or None when the value is empty or unparseable

    Examples:
        >>> parse_date('2024-01-15T10:30:00.000Z')
        date(2024, 1, 15)
        >>> parse_date('')
        None
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        # Timestamps from the API: keep the date part only
        if 'T' in text:
            text = text.split('T')[0]
        elif ' ' in text:
            text = text.split(' ')[0]
        try:
            return date.fromisoformat(text)
        except ValueError:
            return None

    return None


def to_date_isoformat(value: Union[datetime, date, str, None]) -> str:
    """
    Convert any date-like value to date-only ISO format (YYYY-MM-DD).

    Returns an empty string when the value cannot be read as a date.
    """
    parsed = parse_date(value)
    return parsed.isoformat() if parsed else ""


def add_days(value: Union[str, date, None], days: int) -> str:
    """Return ``value + days`` as an ISO date string, or "" when value is empty."""
    parsed = parse_date(value)
    if parsed is None:
        return ""
    return (parsed + timedelta(days=days)).isoformat()


def days_between(start: Union[str, date, None], end: Union[str, date, None]) -> Optional[int]:
    """Whole days from start to end, or None if either side is missing."""
    first = parse_date(start)
    last = parse_date(end)
    if first is None or last is None:
        return None
    return (last - first).days


def today_isoformat() -> str:
    """
    Get current date in ISO format.

    Returns:
        Current date as ISO string
    """
    return date.today().isoformat()
