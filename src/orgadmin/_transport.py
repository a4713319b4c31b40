"""JSON-over-HTTP transport for the admin backend."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Protocol

import aiohttp

from orgadmin._redact import redact_for_log
from orgadmin.config import AdminConfig
from orgadmin.exceptions import OrgAdminStatusError, OrgAdminTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles/mocks while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def request_json(self, method: str, path: str, *, payload: Any = None) -> Any:
        ...


def _decode_body(text: str) -> Any:
    """Decode a JSON body; an empty body decodes to ``None``."""
    if not text.strip():
        return None
    return json.loads(text)


class HttpTransport:
    """aiohttp transport that maps HTTP outcomes onto orgadmin exceptions."""

    def __init__(self, config: AdminConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    async def request_json(self, method: str, path: str, *, payload: Any = None) -> Any:
        """Send a request and return the decoded JSON body.

        Raises
        ------
        OrgAdminStatusError
            Non-2xx status. ``payload`` holds the decoded error body when
            the backend sent JSON.
        OrgAdminTransportError
            Connection failure, timeout, an undecodable body, or a 2xx body
            that is not JSON.
        """
        url = self._config.url_for(path)
        headers = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }

        _logger.debug("%s %s payload=%s", method, url, redact_for_log(payload))

        try:
            async with self._http.request(
                method,
                url,
                json=payload,
                headers=headers,
                timeout=self._timeout,
            ) as resp:
                status = resp.status
                text = await resp.text()
        except aiohttp.ClientError as exc:
            raise OrgAdminTransportError(f"Request to {path} failed: {exc}", endpoint=path) from exc
        except asyncio.TimeoutError as exc:
            raise OrgAdminTransportError(f"Request to {path} timed out", endpoint=path) from exc
        except UnicodeDecodeError as exc:
            raise OrgAdminTransportError(f"Undecodable body from {path}: {exc}", endpoint=path) from exc

        _logger.debug("%s %s -> HTTP %d", method, url, status)

        if not 200 <= status < 300:
            try:
                error_body = _decode_body(text)
            except json.JSONDecodeError:
                error_body = None
            raise OrgAdminStatusError(
                f"HTTP {status} from {path}: {text[:200]}",
                status_code=status,
                endpoint=path,
                payload=error_body,
            )

        try:
            return _decode_body(text)
        except json.JSONDecodeError as exc:
            raise OrgAdminTransportError(
                f"Invalid JSON from {path}: {text[:200]}",
                endpoint=path,
            ) from exc
