"""Route list endpoint.

Endpoint:
  - GET /roots
"""

from __future__ import annotations

from orgadmin._api._common import get_list
from orgadmin._constants import ROUTES_PATH
from orgadmin._transport import Transport
from orgadmin.models.route import Route


async def fetch_routes(transport: Transport) -> list[Route]:
    """Fetch all routes, in backend order."""
    return await get_list(transport, ROUTES_PATH, Route)
