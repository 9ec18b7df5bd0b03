# -*- coding: utf-8 -*-
"""
Contract pricing arithmetic.

Amounts are computed with Decimal and rounded to cents. The FieldSet keeps
the user-facing strings; these helpers read them leniently (thousands
separators allowed, unparseable input counts as zero).
"""

import math
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional, Tuple

from app.config import Config
from services.validation import to_decimal
from utils.datetime_utils import add_days

CENT = Decimal("0.01")
ZERO = Decimal("0")

DURATION = "duration"
FEES = "fees"


def money(value: Any) -> Decimal:
    """Parse an amount, treating blank or invalid input as 0."""
    number = to_decimal(value, allow_commas=True)
    if number is None:
        return ZERO.quantize(CENT)
    return number.quantize(CENT, rounding=ROUND_HALF_UP)


def whole_days(value: Any) -> int:
    """Integer part of a day count; blank or invalid input is 0."""
    number = to_decimal(value, allow_commas=True)
    if number is None or number < 0:
        return 0
    return int(number)


def add_on_catalog() -> List[Tuple[str, str, str, Decimal]]:
    """(add-on id, field key, translation key, price) for every contract add-on."""
    return [(addon_id, key, label_key, Decimal(str(price)).quantize(CENT))
            for addon_id, key, label_key, price in Config.CONTRACT_ADD_ONS]


def add_on_fields() -> Tuple[str, ...]:
    return tuple(key for _, key, _, _ in add_on_catalog())


@dataclass
class PriceBreakdown:
    """How the contract total is composed."""
    daily_rate: Decimal
    rental_days: int
    base: Decimal
    add_ons: List[Tuple[str, Decimal]] = field(default_factory=list)
    add_ons_total: Decimal = ZERO
    discount: Decimal = ZERO
    total: Decimal = ZERO

    def to_dict(self) -> Dict[str, Any]:
        return {
            "daily_rate": float(self.daily_rate),
            "rental_days": self.rental_days,
            "base": float(self.base),
            "add_ons": [{"id": a, "price": float(p)} for a, p in self.add_ons],
            "add_ons_total": float(self.add_ons_total),
            "discount": float(self.discount),
            "total": float(self.total),
        }


def price_breakdown(values: Dict[str, Any]) -> PriceBreakdown:
    """
    Compute the contract total from the pricing fields.

    total = daily rate x rental days + enabled add-ons - membership discount,
    never below zero.
    """
    rate = money(values.get("dailyRentalRate"))
    days = whole_days(values.get("rentalDays"))
    base = (rate * days).quantize(CENT)

    enabled = [(addon_id, price) for addon_id, key, _, price in add_on_catalog()
               if values.get(key)]
    add_ons_total = sum((price for _, price in enabled), ZERO).quantize(CENT)

    discount = ZERO.quantize(CENT)
    if values.get("membershipEnabled"):
        discount = Decimal(str(Config.MEMBERSHIP_DISCOUNT)).quantize(CENT)

    total = max(base + add_ons_total - discount, ZERO).quantize(CENT)
    return PriceBreakdown(
        daily_rate=rate,
        rental_days=days,
        base=base,
        add_ons=enabled,
        add_ons_total=add_ons_total,
        discount=discount,
        total=total,
    )


def compute_total(values: Dict[str, Any]) -> Decimal:
    return price_breakdown(values).total


def rental_days_for(duration_type: str, duration_in_days: Any,
                    total_fees: Any, daily_rate: Any) -> Optional[int]:
    """
    Day count implied by the contract terms.

    Duration mode uses the entered days; fees mode buys as many days as the
    fees cover at the vehicle's daily rate, rounded up.

    Returns:
        Number of days, or None when the terms do not determine one
    """
    if duration_type == DURATION:
        days = whole_days(duration_in_days)
        return days if days >= 1 else None
    if duration_type == FEES:
        fees = money(total_fees)
        rate = money(daily_rate)
        if fees <= 0 or rate <= 0:
            return None
        return int(math.ceil(fees / rate))
    return None


def end_date_for(start_date: Any, days: Optional[int]) -> str:
    """ISO end date ``days`` after the start date ("" when undetermined)."""
    if not days:
        return ""
    return add_days(start_date, days)


def amount_text(value: Any) -> str:
    """Render a number the way the pricing inputs hold it ("150", "12.5")."""
    number = to_decimal(value, allow_commas=True)
    if number is None:
        return "0"
    if number == number.to_integral_value():
        return str(int(number))
    return format(number.normalize(), "f")
