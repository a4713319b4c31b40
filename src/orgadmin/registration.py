"""Admin self-registration form logic."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from pydantic import ValidationError

from orgadmin import _constants as msg
from orgadmin._api.admin import signup_admin
from orgadmin._transport import Transport
from orgadmin.config import AdminConfig
from orgadmin.exceptions import OrgAdminError, OrgAdminFetchError, OrgAdminValidationError
from orgadmin.models.registration import RegistrationOutcome, SignupRequest

_logger = logging.getLogger(__name__)

NavigateCallback = Callable[[str], None]


def _first_validation_message(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return msg.MSG_REGISTRATION_FAILED
    text = str(errors[0].get("msg", ""))
    # pydantic prefixes custom validator messages.
    return text.removeprefix("Value error, ") or msg.MSG_REGISTRATION_FAILED


class AdminRegistration:
    """Submits the admin signup form and schedules the post-signup redirect."""

    def __init__(
        self,
        config: AdminConfig,
        transport: Transport,
        *,
        navigate: NavigateCallback | None = None,
    ) -> None:
        self._config = config
        self._transport = transport
        self._navigate = navigate
        self._loading = False

    @property
    def loading(self) -> bool:
        return self._loading

    def _schedule_navigation(self) -> asyncio.TimerHandle | None:
        if self._navigate is None:
            return None
        loop = asyncio.get_running_loop()
        return loop.call_later(
            self._config.signup_redirect_delay,
            self._navigate,
            self._config.signup_redirect_path,
        )

    async def register(self, email: str, password: str) -> RegistrationOutcome:
        """Register an admin account.

        Never raises for backend or input problems; the returned outcome
        carries either the backend's success message (plus the pending
        redirect) or the error text to show on the form.
        """
        try:
            request = SignupRequest(email=email, password=password)
        except ValidationError as exc:
            return RegistrationOutcome(error=_first_validation_message(exc))

        self._loading = True
        try:
            response = await signup_admin(self._transport, request)
        except OrgAdminValidationError as exc:
            _logger.info("Admin signup rejected: %s", exc)
            return RegistrationOutcome(error=str(exc))
        except OrgAdminFetchError as exc:
            _logger.warning("Admin signup failed: %s", exc)
            return RegistrationOutcome(error=msg.MSG_REGISTRATION_FAILED)
        except OrgAdminError as exc:
            _logger.warning("Admin signup failed unexpectedly: %s", exc)
            return RegistrationOutcome(error=msg.MSG_UNEXPECTED_ERROR)
        finally:
            self._loading = False

        return RegistrationOutcome(message=response.message, navigation=self._schedule_navigation())
