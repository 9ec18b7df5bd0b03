# -*- coding: utf-8 -*-
"""
Maps exceptions to the message shown in the wizard footer and dialogs.

Server-provided envelope errors are shown as they are; transport details
only reach the log.
"""

from services.exceptions import (
    ApiException, NetworkException, SubmissionException, WizardStateError,
)
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


def map_api_error(error: ApiException) -> str:
    """Message for an HTTP error status."""
    if error.field_errors:
        logger.warning(f"API rejected fields ({error.status_code}): {_describe(error.field_errors)}")
    else:
        logger.warning(f"API error in {error.context or 'request'}: {error}")

    if error.server_error:
        return error.server_error
    status = error.status_code or 0
    if status == 404:
        return tr("error.api.not_found")
    if status >= 500:
        return tr("error.api.server")
    return tr("error.api.connection")


def map_network_error(error: NetworkException) -> str:
    logger.warning(f"Network failure in {error.context or 'request'}: {error.message}")
    return tr("error.api.timeout") if error.is_timeout else tr("error.api.connection")


def map_exception(error: Exception, context: str = None) -> str:
    """Map any exception to a user-friendly message.

    Args:
        error: What was raised (or delivered to an error callback)
        context: Operation name recorded on errors that lack one
    """
    if isinstance(error, (ApiException, NetworkException)) and context and not error.context:
        error.context = context

    if isinstance(error, ApiException):
        return map_api_error(error)
    if isinstance(error, NetworkException):
        return map_network_error(error)
    if isinstance(error, SubmissionException):
        # Already human-readable (translated, or the server's own words)
        logger.warning(f"Submission rejected ({error.field or error.context}): {error.message}")
        return error.message or tr("error.submission.failed")
    if isinstance(error, WizardStateError):
        logger.error(f"Wizard state error ({error.state}): {error.message}")
        return tr("error.unexpected")

    logger.error(f"Unexpected error in {context or 'unknown'}: {error!r}")
    return tr("error.unexpected")


def _describe(field_errors: dict) -> str:
    """``{"deposit": ["must be positive"]}`` -> ``deposit: must be positive``"""
    parts = []
    for field, messages in field_errors.items():
        if isinstance(messages, (list, tuple)):
            parts.extend(f"{field}: {message}" for message in messages)
        else:
            parts.append(f"{field}: {messages}")
    return "; ".join(parts)
