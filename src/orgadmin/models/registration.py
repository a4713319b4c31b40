"""Admin self-registration models."""

from __future__ import annotations

import asyncio
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class SignupRequest(BaseModel):
    """Credentials posted to ``/admin/signup``."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
    )

    email: str
    password: str

    @field_validator("email")
    @classmethod
    def _email_shape(cls, value: str) -> str:
        email = value.strip()
        if not email:
            raise ValueError("email must be non-empty")
        local, sep, domain = email.partition("@")
        if not sep or not local or not domain:
            raise ValueError("email must look like name@domain")
        return email

    @field_validator("password")
    @classmethod
    def _password_non_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("password must be non-empty")
        return value


class SignupResponse(BaseModel):
    """Success body of ``/admin/signup``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    message: str = ""

    @field_validator("message", mode="before")
    @classmethod
    def _null_message_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class RegistrationOutcome(BaseModel):
    """What the registration form shows after a submit.

    ``error`` is ``None`` after a successful signup. ``navigation`` is the
    pending redirect scheduled after a success; cancel it to stay on the form.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    message: str | None = None
    error: str | None = None
    navigation: asyncio.TimerHandle | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
