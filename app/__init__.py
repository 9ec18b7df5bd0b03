# -*- coding: utf-8 -*-
"""
FleetDesk Application Core Module
"""

from .config import Config

__all__ = ["Config"]
