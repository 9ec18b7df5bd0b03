# -*- coding: utf-8 -*-
"""Exceptions raised by the API client and the wizard engine."""


class FleetDeskError(Exception):
    """Base class; ``context`` names the operation that failed ("submit", "search", ...)."""

    def __init__(self, message: str, context: str = None):
        super().__init__(message)
        self.message = message
        self.context = context


class ApiException(FleetDeskError):
    """The backend answered with an HTTP error status."""

    def __init__(self, message: str, status_code: int = None,
                 response_data: dict = None, context: str = None):
        super().__init__(message, context)
        self.status_code = status_code
        self.response_data = response_data or {}

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message

    @property
    def server_error(self) -> str:
        """The ``error`` string of a ``{success, data, error}`` envelope, if any."""
        value = self.response_data.get("error") if isinstance(self.response_data, dict) else None
        return value if isinstance(value, str) else ""

    @property
    def field_errors(self) -> dict:
        """Per-field messages of a 400 response (``{"errors": {field: [...]}}``)."""
        errors = self.response_data.get("errors") if isinstance(self.response_data, dict) else None
        return errors if isinstance(errors, dict) else {}


class NetworkException(FleetDeskError):
    """The backend could not be reached (connection refused, timeout, TLS)."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None):
        super().__init__(message, context)
        self.original_error = original_error

    @property
    def is_timeout(self) -> bool:
        text = str(self.original_error or self.message).lower()
        return "timeout" in text or "timed out" in text


class SubmissionException(FleetDeskError):
    """A FieldSet could not be turned into a request, or the server rejected it."""

    def __init__(self, message: str, field: str = None, context: str = None):
        super().__init__(message, context)
        self.field = field


class WizardStateError(FleetDeskError):
    """A wizard operation was invoked in a state that forbids it."""

    def __init__(self, message: str, state: str = None):
        super().__init__(message)
        self.state = state
