"""Branch models."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from orgadmin.models._base import AdminBaseModel


class Branch(AdminBaseModel):
    """A branch office, as listed by ``/branches``."""

    id: str = Field(default="", validation_alias=AliasChoices("_id", "id"))
    """Backend identifier."""
    name: str = ""
    district: str = ""
    address: str = ""
    phone: str = ""
    manager: str = Field(default="", validation_alias=AliasChoices("manager", "managerName", "manager_name"))
    """Manager name."""
    hours: str = ""
    """Operating hours as free text (e.g. ``"Mon-Fri 9-17"``)."""


class BranchInput(BaseModel):
    """Writable branch fields for create and update calls."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        str_strip_whitespace=True,
    )

    name: str
    district: str = ""
    address: str = ""
    phone: str = ""
    manager: str = ""
    hours: str = ""

    @field_validator("name")
    @classmethod
    def _name_non_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("name must be non-empty")
        return value

    @classmethod
    def from_branch(cls, branch: Branch) -> BranchInput:
        """Prefill an edit form from an existing branch."""
        return cls(
            name=branch.name,
            district=branch.district,
            address=branch.address,
            phone=branch.phone,
            manager=branch.manager,
            hours=branch.hours,
        )

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump()
