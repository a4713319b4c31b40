"""Client configuration for orgadmin."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from orgadmin._constants import DEFAULT_RECENT_LIMIT, USER_AGENT
from orgadmin.exceptions import OrgAdminConfigError

# Numeric tunables: env var -> (field name, converter).
_NUMERIC_ENV: dict[str, tuple[str, Any]] = {
    "ORGADMIN_REQUEST_TIMEOUT": ("request_timeout", float),
    "ORGADMIN_RECENT_LIMIT": ("recent_limit", int),
    "ORGADMIN_SIGNUP_REDIRECT_DELAY": ("signup_redirect_delay", float),
}


@dataclasses.dataclass(frozen=True)
class AdminConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        Backend base address (e.g. ``"https://api.example.org/api"``).
        A trailing ``/`` is stripped.
    request_timeout : float
        Total timeout in seconds for a single backend request.
    recent_limit : int
        Number of items the dashboard keeps per collection.
    signup_redirect_path : str
        Path the registration form navigates to after a successful signup.
    signup_redirect_delay : float
        Seconds between a successful signup and the navigation.
    user_agent : str
        User-Agent header sent with every request.
    """

    base_url: str
    request_timeout: float = 30.0
    recent_limit: int = DEFAULT_RECENT_LIMIT
    signup_redirect_path: str = "/"
    signup_redirect_delay: float = 1.5
    user_agent: str = USER_AGENT

    def __post_init__(self) -> None:
        base_url = (self.base_url or "").strip().rstrip("/")
        if not base_url:
            raise OrgAdminConfigError("base_url must be set (ORGADMIN_API_BASE_URL)")
        object.__setattr__(self, "base_url", base_url)
        if self.recent_limit < 0:
            raise OrgAdminConfigError(f"recent_limit must be >= 0, got {self.recent_limit}")
        if self.request_timeout <= 0:
            raise OrgAdminConfigError(f"request_timeout must be > 0, got {self.request_timeout}")

    def url_for(self, path: str) -> str:
        """Join *path* onto the base address."""
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self.base_url}{path}"

    @classmethod
    def from_env(cls, **overrides: Any) -> AdminConfig:
        """Create configuration from environment variables.

        Reads ``ORGADMIN_API_BASE_URL`` and the optional ``ORGADMIN_*``
        tunables. Explicit keyword arguments override environment values.

        Raises
        ------
        OrgAdminConfigError
            If no base address is available or a numeric variable is malformed.
        """
        env = os.environ

        config_kwargs: dict[str, Any] = {}
        base_url = env.get("ORGADMIN_API_BASE_URL")
        if base_url is not None:
            config_kwargs["base_url"] = base_url
        redirect_path = env.get("ORGADMIN_SIGNUP_REDIRECT_PATH")
        if redirect_path is not None:
            config_kwargs["signup_redirect_path"] = redirect_path

        for env_key, (field_name, convert) in _NUMERIC_ENV.items():
            val = env.get(env_key)
            if val is None or field_name in overrides:
                continue
            try:
                config_kwargs[field_name] = convert(val)
            except ValueError as exc:
                raise OrgAdminConfigError(f"{env_key} is not a valid number: {val!r}") from exc

        config_kwargs.update(overrides)
        if "base_url" not in config_kwargs:
            raise OrgAdminConfigError("ORGADMIN_API_BASE_URL is not set")

        return cls(**config_kwargs)
