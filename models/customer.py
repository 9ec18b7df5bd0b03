# -*- coding: utf-8 -*-
"""
Customer entity model.
"""

from dataclasses import dataclass
from typing import Optional

from models.option import name_of


@dataclass
class Customer:
    """Customer as returned by the customers search endpoint."""

    id: str = ""
    name: str = ""
    id_type: str = ""
    id_number: str = ""
    classification: str = ""
    address: str = ""
    mobile: str = ""
    status: str = ""
    status_id: str = ""
    nationality: str = ""
    date_of_birth: str = ""
    license_type: str = ""

    @property
    def display_name(self) -> str:
        if self.id_number:
            return f"{self.name} ({self.id_type}: {self.id_number})"
        return self.name

    def is_blacklisted(self, blacklisted_status: str) -> bool:
        return bool(self.status) and self.status.lower() == blacklisted_status.lower()

    @classmethod
    def from_dict(cls, data: dict) -> "Customer":
        """Create Customer from an API row."""
        status = data.get("status")
        status_id: Optional[str] = data.get("status_id")
        if isinstance(status, dict):
            status_id = status_id or status.get("id")
        return cls(
            id=str(data.get("id") or ""),
            name=str(data.get("name") or ""),
            id_type=name_of(data.get("id_type")),
            id_number=str(data.get("id_number") or ""),
            classification=name_of(data.get("classification")),
            address=str(data.get("address") or ""),
            mobile=str(data.get("mobile") or data.get("mobile_number") or ""),
            status=name_of(status),
            status_id=str(status_id or ""),
            nationality=name_of(data.get("nationality")),
            date_of_birth=str(data.get("date_of_birth") or ""),
            license_type=name_of(data.get("license_type")),
        )
