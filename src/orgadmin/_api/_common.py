"""Shared helpers for backend endpoint modules.

It is internal to orgadmin and may change at any time.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar
from urllib.parse import quote

from pydantic import TypeAdapter, ValidationError

from orgadmin._transport import Transport
from orgadmin.exceptions import OrgAdminTransportError

_logger = logging.getLogger(__name__)

T = TypeVar("T")


def record_path(collection_path: str, record_id: str) -> str:
    """Build ``/<collection>/<id>``, rejecting blank identifiers."""
    record_id = str(record_id).strip()
    if not record_id:
        raise ValueError("record id must be non-empty")
    return f"{collection_path}/{quote(record_id, safe='')}"


def parse_list(path: str, decoded: Any, model: type[T]) -> list[T]:
    """Validate a plain JSON array of records.

    List endpoints return the collection as a bare array; anything else
    is treated as a broken response.
    """
    if not isinstance(decoded, list):
        raise OrgAdminTransportError(
            f"Expected a JSON array from {path}, got {type(decoded).__name__}",
            endpoint=path,
        )
    try:
        return TypeAdapter(list[model]).validate_python(decoded)  # type: ignore[valid-type]
    except ValidationError as exc:
        raise OrgAdminTransportError(f"Unexpected record shape from {path}: {exc}", endpoint=path) from exc


async def get_list(transport: Transport, path: str, model: type[T]) -> list[T]:
    """GET a collection and validate every record."""
    decoded = await transport.request_json("GET", path)
    items = parse_list(path, decoded, model)
    _logger.debug("%s returned %d records", path, len(items))
    return items
