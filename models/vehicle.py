# -*- coding: utf-8 -*-
"""
Vehicle entity model (contract-side view used by the vehicle picker).
"""

from dataclasses import dataclass

from models.option import name_of


@dataclass
class Vehicle:
    """Vehicle as returned by the vehicles search endpoint."""

    id: str = ""
    plate_number: str = ""
    serial_number: str = ""
    plate_registration_type: str = "Private"
    make_year: str = ""
    make: str = ""
    model: str = ""
    color: str = ""
    mileage: float = 0
    status: str = ""

    # Rates used to seed the contract pricing step
    daily_rental_rate: float = 0.0
    hourly_delay_rate: float = 0.0
    permitted_daily_km: int = 0
    excess_km_rate: float = 0.0

    @property
    def display_name(self) -> str:
        title = " ".join(p for p in (self.make, self.model, self.make_year) if p)
        return f"{self.plate_number} - {title}" if title else self.plate_number

    def is_rentable(self, statuses) -> bool:
        """Vehicles without a status are treated as available."""
        return not self.status or self.status in statuses

    @classmethod
    def from_dict(cls, data: dict) -> "Vehicle":
        """Create Vehicle from an API row (relations arrive as ``{name}`` objects)."""
        return cls(
            id=str(data.get("id") or ""),
            plate_number=str(data.get("plate_number") or ""),
            serial_number=str(data.get("serial_number") or ""),
            plate_registration_type=str(data.get("plate_registration_type") or "Private"),
            make_year=str(data.get("make_year") or data.get("year_of_manufacture") or ""),
            make=name_of(data.get("make")),
            model=name_of(data.get("model")),
            color=name_of(data.get("color")),
            mileage=_number(data.get("mileage")),
            status=name_of(data.get("status")),
            daily_rental_rate=_number(data.get("daily_rental_rate")),
            hourly_delay_rate=_number(data.get("daily_hourly_delay_rate")
                                      or data.get("hourly_delay_rate")),
            permitted_daily_km=int(_number(data.get("daily_permitted_km")
                                           or data.get("permitted_daily_km"))),
            excess_km_rate=_number(data.get("daily_excess_km_rate")
                                   or data.get("excess_km_rate")),
        )


def _number(value) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0
