"""Contact request endpoint.

Endpoint:
  - GET /ContactMessages
"""

from __future__ import annotations

from orgadmin._api._common import get_list
from orgadmin._constants import CONTACT_MESSAGES_PATH
from orgadmin._transport import Transport
from orgadmin.models.contact import ContactMessage


async def fetch_contact_messages(transport: Transport) -> list[ContactMessage]:
    """Fetch all contact requests, in backend order."""
    return await get_list(transport, CONTACT_MESSAGES_PATH, ContactMessage)
