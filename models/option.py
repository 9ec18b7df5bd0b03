# -*- coding: utf-8 -*-
"""
Reference option models (makes, models, colors, statuses, owners, ...).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


def name_of(value: Any, default: str = "") -> str:
    """Read a relation that may arrive as ``{"name": ...}`` or as a plain string."""
    if isinstance(value, dict):
        return str(value.get("name") or default)
    if value is None:
        return default
    return str(value)


@dataclass
class OptionItem:
    """
    One entry of a select list.

    ``code`` carries a secondary identifier some lists expose (owner code,
    actual-user code); ``extra`` keeps the remaining raw attributes.
    """

    id: str = ""
    label: str = ""
    code: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {"id": self.id, "label": self.label, "code": self.code, **self.extra}

    @classmethod
    def from_dict(cls, data: dict, label_key: str = "name",
                  code_key: Optional[str] = None) -> "OptionItem":
        """Create OptionItem from an API row."""
        known = {"id", label_key}
        if code_key:
            known.add(code_key)
        return cls(
            id=str(data.get("id") or ""),
            label=str(data.get(label_key) or ""),
            code=str(data.get(code_key) or "") if code_key else "",
            extra={k: v for k, v in data.items() if k not in known},
        )


@dataclass
class InsurancePolicy:
    """Insurance policy; policies are grouped by their ``company`` name."""

    id: str = ""
    company: str = ""
    name: str = ""
    policy_number: str = ""
    policy_type: str = ""
    insurance_value: float = 0.0
    deductible_premium: float = 0.0

    @property
    def label(self) -> str:
        return self.name or self.policy_number

    @classmethod
    def from_dict(cls, data: dict) -> "InsurancePolicy":
        """Create InsurancePolicy from an API row."""
        return cls(
            id=str(data.get("id") or ""),
            company=str(data.get("policy_company") or ""),
            name=str(data.get("name") or ""),
            policy_number=str(data.get("policy_number") or ""),
            policy_type=name_of(data.get("policy_type")),
            insurance_value=_to_float(data.get("policy_amount")),
            deductible_premium=_to_float(data.get("deductible_premium")),
        )


def _to_float(value) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0
