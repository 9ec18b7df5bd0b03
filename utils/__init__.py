# -*- coding: utf-8 -*-
"""
FleetDesk Utility Module
"""

from .logger import get_logger, setup_logger
from .datetime_utils import parse_date, to_date_isoformat, add_days

__all__ = [
    "get_logger",
    "setup_logger",
    "parse_date",
    "to_date_isoformat",
    "add_days",
]
