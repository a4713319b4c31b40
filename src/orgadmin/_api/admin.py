"""Admin account endpoint.

Endpoint:
  - POST /admin/signup
"""

from __future__ import annotations

from pydantic import ValidationError

from orgadmin._constants import ADMIN_SIGNUP_PATH
from orgadmin._transport import Transport
from orgadmin.exceptions import OrgAdminStatusError, OrgAdminTransportError, OrgAdminValidationError
from orgadmin.models.registration import SignupRequest, SignupResponse


def _backend_error_text(exc: OrgAdminStatusError) -> str | None:
    payload = exc.payload
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, str) and error.strip():
            return error.strip()
    return None


async def signup_admin(transport: Transport, request: SignupRequest) -> SignupResponse:
    """Register an admin credential.

    Raises
    ------
    OrgAdminValidationError
        The backend rejected the signup with an ``{"error": ...}`` body
        (e.g. the email is already registered).
    OrgAdminFetchError
        Any other failed call.
    """
    try:
        decoded = await transport.request_json("POST", ADMIN_SIGNUP_PATH, payload=request.model_dump())
    except OrgAdminStatusError as exc:
        message = _backend_error_text(exc)
        if message is None:
            raise
        raise OrgAdminValidationError(message, status_code=exc.status_code) from exc

    if not isinstance(decoded, dict):
        return SignupResponse()
    try:
        return SignupResponse.model_validate(decoded)
    except ValidationError as exc:
        raise OrgAdminTransportError(
            f"Unexpected signup response from {ADMIN_SIGNUP_PATH}: {exc}",
            endpoint=ADMIN_SIGNUP_PATH,
        ) from exc
