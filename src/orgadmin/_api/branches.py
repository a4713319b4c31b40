"""Branch endpoints.

Endpoints:
  - GET /branches
  - POST /branches
  - PUT /branches/{id}
  - DELETE /branches/{id}
"""

from __future__ import annotations

import logging
from typing import Any

from orgadmin._api._common import get_list, record_path
from orgadmin._constants import BRANCHES_PATH
from orgadmin._transport import Transport
from orgadmin.models.branch import Branch, BranchInput

_logger = logging.getLogger(__name__)


def _branch_from_write_response(decoded: Any, data: BranchInput, branch_id: str = "") -> Branch:
    """Pick the stored branch out of a create/update response.

    Backends answer either with the record itself or with an envelope
    like ``{"message": ..., "branch": {...}}``. When neither carries a
    record, the written fields stand in for it.
    """
    record: Any = decoded
    if isinstance(decoded, dict) and isinstance(decoded.get("branch"), dict):
        record = decoded["branch"]
    if isinstance(record, dict) and any(key in record for key in ("_id", "id", "name")):
        branch = Branch.model_validate(record)
        if branch_id and not branch.id:
            branch = branch.model_copy(update={"id": branch_id})
        return branch
    _logger.debug("No branch record in write response; echoing submitted fields")
    return Branch.model_validate({**data.to_payload(), "_id": branch_id})


async def fetch_branches(transport: Transport) -> list[Branch]:
    """Fetch all branches, in backend order."""
    return await get_list(transport, BRANCHES_PATH, Branch)


async def delete_branch(transport: Transport, branch_id: str) -> None:
    """Delete one branch. Success is signalled by status only."""
    await transport.request_json("DELETE", record_path(BRANCHES_PATH, branch_id))


async def create_branch(transport: Transport, data: BranchInput) -> Branch:
    decoded = await transport.request_json("POST", BRANCHES_PATH, payload=data.to_payload())
    return _branch_from_write_response(decoded, data)


async def update_branch(transport: Transport, branch_id: str, data: BranchInput) -> Branch:
    path = record_path(BRANCHES_PATH, branch_id)
    decoded = await transport.request_json("PUT", path, payload=data.to_payload())
    return _branch_from_write_response(decoded, data, branch_id=str(branch_id).strip())
