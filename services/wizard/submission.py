# -*- coding: utf-8 -*-
"""
Submission Transformer - FieldSet to request payload, and the create/update call.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from services.exceptions import SubmissionException
from services.translation_manager import tr
from services.validation import is_blank, to_decimal
from utils.datetime_utils import to_date_isoformat
from utils.logger import get_logger

logger = get_logger(__name__)


# ============================================================================
# Coercion helpers
# ============================================================================

def to_number(value: Any, default: float = 0.0) -> float:
    """
    Coerce a currency/quantity input to float.

    Thousands separators are stripped. Anything that does not parse (blank,
    text, NaN, infinity) becomes ``default``.
    """
    number = to_decimal(value, allow_commas=True)
    if number is None:
        return default
    return float(number)


def to_int(value: Any, default: int = 0) -> int:
    """Coerce to int, truncating fractions; unparseable input becomes ``default``."""
    number = to_decimal(value, allow_commas=True)
    if number is None:
        return default
    return int(number)


def clamp(value: float, upper: float, lower: Optional[float] = None) -> float:
    if lower is not None and value < lower:
        return lower
    return min(value, upper)


def empty_to_none(value: Any) -> Any:
    """Blank optional references are sent as null."""
    return None if is_blank(value) else value


def date_or_none(value: Any) -> Optional[str]:
    if is_blank(value):
        return None
    return to_date_isoformat(value) or None


# ============================================================================
# Request
# ============================================================================

@dataclass
class SubmissionRequest:
    """The single create or update call a session ends with."""
    payload: Dict[str, Any]
    entity_id: Optional[str] = None

    @property
    def is_update(self) -> bool:
        return self.entity_id is not None


class SubmissionTransformer(ABC):
    """Maps the final FieldSet to a SubmissionRequest."""

    # Translation key for the "no branch selected" failure
    missing_branch_key = "error.submission.no_branch"

    @abstractmethod
    def build_payload(self, values: Dict[str, Any], mode: str,
                      branch_id: str) -> Dict[str, Any]:
        """Server-shaped payload. Never fed back into the FieldSet."""

    def transform(self, values: Dict[str, Any], mode: str,
                  entity_id: Optional[str] = None,
                  branch_id: Optional[str] = None) -> SubmissionRequest:
        """
        Build the request for ``mode``.

        Raises:
            SubmissionException: no branch, or edit mode without an entity id
        """
        if is_blank(branch_id):
            raise SubmissionException(tr(self.missing_branch_key), field="branch_id")
        if mode == "edit" and is_blank(entity_id):
            raise SubmissionException(tr("error.submission.no_entity"), field="id")
        payload = self.build_payload(dict(values), mode, branch_id)
        return SubmissionRequest(payload=payload,
                                 entity_id=entity_id if mode == "edit" else None)


class EntitySubmitter:
    """
    Sends a SubmissionRequest through the create/update collaborators.

    Args:
        create: payload -> envelope
        update: (entity id, payload) -> envelope
        failure_key: translation key used when the server gives no message
    """

    def __init__(self, create: Callable[[Dict[str, Any]], Dict[str, Any]],
                 update: Callable[[str, Dict[str, Any]], Dict[str, Any]],
                 failure_key: str = "error.submission.failed"):
        self._create = create
        self._update = update
        self._failure_key = failure_key

    def submit(self, request: SubmissionRequest) -> Any:
        """
        Perform the call.

        Returns:
            The envelope's ``data``

        Raises:
            SubmissionException: the envelope reports failure
        """
        if request.is_update:
            logger.info(f"Updating entity {request.entity_id}")
            envelope = self._update(request.entity_id, request.payload)
        else:
            logger.info("Creating entity")
            envelope = self._create(request.payload)

        if not envelope or not envelope.get("success"):
            message = (envelope or {}).get("error") or tr(self._failure_key)
            raise SubmissionException(message, context="submit")
        return envelope.get("data")
