"""Branch management page state."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable

from orgadmin import _constants as msg
from orgadmin._api.branches import create_branch, delete_branch, fetch_branches, update_branch
from orgadmin._transport import Transport
from orgadmin.exceptions import OrgAdminFetchError, OrgAdminStatusError
from orgadmin.models.branch import Branch, BranchInput
from orgadmin.models.notice import Notice

_logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[Branch | None], bool | Awaitable[bool]]
NoticeCallback = Callable[[Notice], None]


def _failure_text(exc: OrgAdminFetchError, status_text: str, transport_text: str) -> str:
    """Status failures and connection failures read differently to the admin."""
    return status_text if isinstance(exc, OrgAdminStatusError) else transport_text


def _has_id(branch_id: str | None) -> bool:
    return branch_id is not None and bool(str(branch_id).strip())


class BranchListManager:
    """In-memory branch list with delete/create/update against the backend.

    Every backend failure is converted into an error :class:`Notice`; none
    propagates. Local state changes only after the backend reports success,
    and a successful write updates the list in place (no re-fetch).
    """

    def __init__(
        self,
        transport: Transport,
        *,
        confirm: ConfirmCallback | None = None,
        on_notice: NoticeCallback | None = None,
    ) -> None:
        self._transport = transport
        self._confirm = confirm
        self._on_notice = on_notice
        self._branches: list[Branch] = []
        self.notices: list[Notice] = []

    @property
    def branches(self) -> list[Branch]:
        return list(self._branches)

    def _notify(self, notice: Notice) -> None:
        self.notices.append(notice)
        if self._on_notice is not None:
            try:
                self._on_notice(notice)
            except Exception:
                _logger.debug("on_notice callback failed", exc_info=True)

    async def _confirmed(self, branch: Branch | None) -> bool:
        if self._confirm is None:
            return True
        answer = self._confirm(branch)
        if inspect.isawaitable(answer):
            answer = await answer
        return bool(answer)

    def get(self, branch_id: str) -> Branch | None:
        for branch in self._branches:
            if branch.id == branch_id:
                return branch
        return None

    async def list(self) -> list[Branch]:
        """Load the branch list. On failure the list is emptied."""
        try:
            self._branches = await fetch_branches(self._transport)
        except OrgAdminFetchError as exc:
            _logger.warning("Error fetching branches: %s", exc)
            self._branches = []
            self._notify(Notice.error(_failure_text(exc, msg.MSG_FETCH_BRANCHES_FAILED, msg.MSG_FETCH_BRANCHES_ERROR)))
        return self.branches

    async def delete(self, branch_id: str) -> bool:
        """Delete a branch after confirmation.

        Returns ``True`` only when the backend accepted the delete. A
        declined confirmation sends nothing.
        """
        if not _has_id(branch_id):
            _logger.warning("Refusing to delete a branch without an id")
            self._notify(Notice.error(msg.MSG_DELETE_BRANCH_FAILED))
            return False
        if not await self._confirmed(self.get(branch_id)):
            return False
        try:
            await delete_branch(self._transport, branch_id)
        except OrgAdminFetchError as exc:
            _logger.warning("Error deleting branch %s: %s", branch_id, exc)
            self._notify(Notice.error(_failure_text(exc, msg.MSG_DELETE_BRANCH_FAILED, msg.MSG_DELETE_BRANCH_ERROR)))
            return False

        self._branches = [branch for branch in self._branches if branch.id != branch_id]
        self._notify(Notice.info(msg.MSG_BRANCH_DELETED))
        return True

    async def create(self, data: BranchInput) -> Branch | None:
        """Add a branch; the stored record is appended to the list."""
        try:
            branch = await create_branch(self._transport, data)
        except OrgAdminFetchError as exc:
            _logger.warning("Error creating branch: %s", exc)
            self._notify(Notice.error(_failure_text(exc, msg.MSG_SAVE_BRANCH_FAILED, msg.MSG_SAVE_BRANCH_ERROR)))
            return None

        self._branches.append(branch)
        self._notify(Notice.info(msg.MSG_BRANCH_ADDED))
        return branch

    async def update(self, branch_id: str, data: BranchInput) -> Branch | None:
        """Edit a branch; the stored record replaces the old one in place."""
        if not _has_id(branch_id):
            _logger.warning("Refusing to update a branch without an id")
            self._notify(Notice.error(msg.MSG_SAVE_BRANCH_FAILED))
            return None
        try:
            branch = await update_branch(self._transport, branch_id, data)
        except OrgAdminFetchError as exc:
            _logger.warning("Error updating branch %s: %s", branch_id, exc)
            self._notify(Notice.error(_failure_text(exc, msg.MSG_SAVE_BRANCH_FAILED, msg.MSG_SAVE_BRANCH_ERROR)))
            return None

        self._branches = [branch if existing.id == branch_id else existing for existing in self._branches]
        self._notify(Notice.info(msg.MSG_BRANCH_UPDATED))
        return branch
