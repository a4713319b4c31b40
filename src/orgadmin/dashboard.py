"""Dashboard aggregation: record counts and recent items per collection."""

from __future__ import annotations

import asyncio
import logging

from orgadmin._api.branches import fetch_branches
from orgadmin._api.contact_messages import fetch_contact_messages
from orgadmin._api.routes import fetch_routes
from orgadmin._transport import Transport
from orgadmin.config import AdminConfig
from orgadmin.exceptions import OrgAdminError, OrgAdminFetchError
from orgadmin.models.dashboard import DashboardSnapshot

_logger = logging.getLogger(__name__)


class DashboardAggregator:
    """Loads the dashboard snapshot for one page activation.

    The three collection reads are dispatched together and joined; the
    snapshot is derived only once all of them have settled. A failure of
    any read publishes the empty snapshot rather than a partial one or a
    previous successful one. Nothing is retried.

    Usage::

        aggregator = client.dashboard()
        snapshot = await aggregator.activate()
    """

    def __init__(self, config: AdminConfig, transport: Transport) -> None:
        self._config = config
        self._transport = transport
        self._snapshot = DashboardSnapshot.empty()
        self._loading = False
        self._active = False
        self._generation = 0
        self.last_error: OrgAdminError | None = None

    @property
    def snapshot(self) -> DashboardSnapshot:
        return self._snapshot

    @property
    def loading(self) -> bool:
        """Whether a load is in flight."""
        return self._loading

    @property
    def active(self) -> bool:
        return self._active

    async def load(self) -> DashboardSnapshot:
        """Fetch all three collections and publish a fresh snapshot.

        Raises
        ------
        OrgAdminFetchError
            The first failed read (in contacts, branches, routes order).
            The published snapshot is already the empty one when this
            propagates.
        """
        generation = self._generation
        self._loading = True
        try:
            results = await asyncio.gather(
                fetch_contact_messages(self._transport),
                fetch_branches(self._transport),
                fetch_routes(self._transport),
                return_exceptions=True,
            )
        finally:
            if generation == self._generation:
                self._loading = False

        if generation != self._generation:
            _logger.debug("Dashboard deactivated while loading; discarding results")
            return self._snapshot

        # Only library errors are a "failed read"; anything else is a bug.
        for result in results:
            if isinstance(result, BaseException) and not isinstance(result, OrgAdminFetchError):
                raise result

        failures = [result for result in results if isinstance(result, OrgAdminFetchError)]
        if failures:
            self._snapshot = DashboardSnapshot.empty()
            raise failures[0]

        contacts, branches, routes = results
        self._snapshot = DashboardSnapshot.from_collections(
            contacts,  # type: ignore[arg-type]
            branches,  # type: ignore[arg-type]
            routes,  # type: ignore[arg-type]
            limit=self._config.recent_limit,
        )
        _logger.debug(
            "Dashboard loaded contacts=%d branches=%d routes=%d",
            self._snapshot.contacts.count,
            self._snapshot.branches.count,
            self._snapshot.routes.count,
        )
        return self._snapshot

    async def activate(self) -> DashboardSnapshot:
        """Start a page activation: reset to empty, then load once.

        Failures are logged and leave the empty snapshot in place; they
        never propagate to the caller.
        """
        self._generation += 1
        self._active = True
        self._snapshot = DashboardSnapshot.empty()
        self.last_error = None
        try:
            return await self.load()
        except OrgAdminError as exc:
            self.last_error = exc
            _logger.warning("Error fetching dashboard data: %s", exc)
            return self._snapshot

    def deactivate(self) -> None:
        """End the activation. Reads still in flight are dropped on arrival."""
        self._generation += 1
        self._active = False
        self._loading = False
        self._snapshot = DashboardSnapshot.empty()
