"""Contact request model."""

from __future__ import annotations

from pydantic import AliasChoices, Field

from orgadmin.models._base import AdminBaseModel, Timestamp


class ContactMessage(AdminBaseModel):
    """A contact-us request submitted through the public site.

    Mapped from the ``/ContactMessages`` collection.
    """

    id: str = Field(default="", validation_alias=AliasChoices("_id", "id"))
    """Backend identifier."""
    name: str = ""
    """Sender name."""
    subject: str = ""
    """Message subject."""
    created_at: Timestamp = Field(default=None, validation_alias=AliasChoices("createdAt", "created_at"))
    """Submission time (UTC)."""
