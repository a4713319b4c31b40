"""Custom exception hierarchy for orgadmin."""

from __future__ import annotations

from typing import Any


class OrgAdminError(Exception):
    """Base exception for all orgadmin errors."""


class OrgAdminConfigError(OrgAdminError):
    """Invalid or missing configuration."""


class OrgAdminFetchError(OrgAdminError):
    """A backend call did not produce a usable response."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)


class OrgAdminTransportError(OrgAdminFetchError):
    """Network-level failure (connection, timeout, invalid JSON body)."""


class OrgAdminStatusError(OrgAdminFetchError):
    """Backend answered with a non-success HTTP status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        endpoint: str = "",
        payload: Any = None,
    ) -> None:
        self.status_code = status_code
        self.payload = payload
        super().__init__(message, endpoint=endpoint)


class OrgAdminValidationError(OrgAdminError):
    """Registration rejected by the backend.

    The message is the backend's own ``error`` text (e.g. a duplicate
    email), suitable for showing inline on the form.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)
