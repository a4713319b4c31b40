"""High-level async client for the admin backend."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from orgadmin._api import admin as _admin_api
from orgadmin._api import branches as _branches_api
from orgadmin._api.contact_messages import fetch_contact_messages
from orgadmin._api.routes import fetch_routes
from orgadmin._transport import HttpTransport
from orgadmin.branch_list import BranchListManager, ConfirmCallback, NoticeCallback
from orgadmin.config import AdminConfig
from orgadmin.dashboard import DashboardAggregator
from orgadmin.exceptions import OrgAdminError
from orgadmin.models.branch import Branch, BranchInput
from orgadmin.models.contact import ContactMessage
from orgadmin.models.registration import SignupRequest, SignupResponse
from orgadmin.models.route import Route
from orgadmin.registration import AdminRegistration, NavigateCallback

_logger = logging.getLogger(__name__)


class OrgAdminClient:
    """Async client for the organization admin backend.

    Usage::

        async with OrgAdminClient(AdminConfig.from_env()) as client:
            snapshot = await client.dashboard().activate()
            branches = await client.get_branches()
    """

    def __init__(
        self,
        config: AdminConfig,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._transport: HttpTransport | None = None

    @property
    def config(self) -> AdminConfig:
        return self._config

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> OrgAdminClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._config, self._http_session)
        _logger.debug("Client opened for %s", self._config.base_url)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    def _require_transport(self) -> HttpTransport:
        if self._transport is None:
            raise OrgAdminError("Client not initialized. Use 'async with OrgAdminClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Read endpoints
    # ------------------------------------------------------------------

    async def get_contact_messages(self) -> list[ContactMessage]:
        """Fetch all contact requests."""
        return await fetch_contact_messages(self._require_transport())

    async def get_branches(self) -> list[Branch]:
        """Fetch all branches."""
        return await _branches_api.fetch_branches(self._require_transport())

    async def get_routes(self) -> list[Route]:
        """Fetch all routes."""
        return await fetch_routes(self._require_transport())

    # ------------------------------------------------------------------
    # Write endpoints
    # ------------------------------------------------------------------

    async def delete_branch(self, branch_id: str) -> None:
        await _branches_api.delete_branch(self._require_transport(), branch_id)

    async def create_branch(self, data: BranchInput) -> Branch:
        return await _branches_api.create_branch(self._require_transport(), data)

    async def update_branch(self, branch_id: str, data: BranchInput) -> Branch:
        return await _branches_api.update_branch(self._require_transport(), branch_id, data)

    async def signup_admin(self, email: str, password: str) -> SignupResponse:
        """Register an admin credential; see :func:`orgadmin._api.admin.signup_admin`."""
        request = SignupRequest(email=email, password=password)
        return await _admin_api.signup_admin(self._require_transport(), request)

    # ------------------------------------------------------------------
    # Page components
    # ------------------------------------------------------------------

    def dashboard(self) -> DashboardAggregator:
        return DashboardAggregator(self._config, self._require_transport())

    def branch_manager(
        self,
        *,
        confirm: ConfirmCallback | None = None,
        on_notice: NoticeCallback | None = None,
    ) -> BranchListManager:
        return BranchListManager(self._require_transport(), confirm=confirm, on_notice=on_notice)

    def registration(self, *, navigate: NavigateCallback | None = None) -> AdminRegistration:
        return AdminRegistration(self._config, self._require_transport(), navigate=navigate)
