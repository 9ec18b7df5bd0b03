# -*- coding: utf-8 -*-
"""
Inspector entity model.
"""

from dataclasses import dataclass


@dataclass
class Inspector:
    """Staff member who inspects the vehicle at hand-over."""

    id: str = ""
    name: str = ""
    email: str = ""

    @property
    def display_name(self) -> str:
        return self.name or self.email

    @classmethod
    def from_dict(cls, data: dict) -> "Inspector":
        """Create Inspector from an API row."""
        return cls(
            id=str(data.get("id") or ""),
            name=str(data.get("name") or data.get("full_name") or ""),
            email=str(data.get("email") or ""),
        )
