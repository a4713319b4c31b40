"""Masking of credentials in DEBUG request logs.

The signup form posts an email and a password; nothing else this client
sends is secret.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_MASKED = "<redacted>"
_MAX_DEPTH = 8

# Compared case-insensitively against request body keys.
_CREDENTIAL_KEYS = frozenset({"password", "token", "accesstoken", "refreshtoken", "authorization"})


def _clip(text: str, limit: int) -> str:
    return text if len(text) <= limit else f"{text[:limit]}…<truncated>"


def redact_for_log(value: Any, *, max_string: int = 256, _depth: int = 0) -> Any:
    """Copy *value* with credential fields masked and long strings clipped."""
    if _depth >= _MAX_DEPTH:
        return "<max-depth>"
    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, str):
        return _clip(value, max_string)
    if isinstance(value, (bytes, bytearray)):
        return f"<bytes:{len(value)}b>"

    nested = _depth + 1
    if isinstance(value, Mapping):
        return {
            str(key): _MASKED
            if str(key).lower() in _CREDENTIAL_KEYS
            else redact_for_log(item, max_string=max_string, _depth=nested)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [redact_for_log(item, max_string=max_string, _depth=nested) for item in value]
    return _clip(repr(value), max_string)
