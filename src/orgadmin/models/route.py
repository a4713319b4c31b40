"""Route model.

The backend calls routes "roots" (``/roots``); the library uses the
product name.
"""

from __future__ import annotations

from pydantic import AliasChoices, Field

from orgadmin.models._base import AdminBaseModel


class Route(AdminBaseModel):
    """A route managed by the organization."""

    id: str = Field(default="", validation_alias=AliasChoices("_id", "id"))
    name: str = ""
    district: str = ""
    manager_name: str = Field(default="", validation_alias=AliasChoices("managerName", "manager_name"))
