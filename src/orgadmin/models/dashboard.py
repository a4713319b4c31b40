"""Dashboard snapshot models."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from orgadmin._constants import DEFAULT_RECENT_LIMIT
from orgadmin.models.branch import Branch
from orgadmin.models.contact import ContactMessage
from orgadmin.models.route import Route

ItemT = TypeVar("ItemT")


class CollectionSummary(BaseModel, Generic[ItemT]):
    """Record count plus the leading items of one collection."""

    model_config = ConfigDict(frozen=True)

    count: int = Field(default=0, ge=0)
    recent: list[ItemT] = Field(default_factory=list)

    @model_validator(mode="after")
    def _recent_within_count(self) -> CollectionSummary[ItemT]:
        if len(self.recent) > self.count:
            raise ValueError(f"recent has {len(self.recent)} items but count is {self.count}")
        return self

    @classmethod
    def from_items(cls, items: Sequence[ItemT], limit: int = DEFAULT_RECENT_LIMIT) -> CollectionSummary[ItemT]:
        """Summarize *items* in the order given.

        The backend's order is taken as recency order; items are never
        re-sorted, and the recent list is never padded.
        """
        return cls(count=len(items), recent=list(items[:limit]))


class DashboardSnapshot(BaseModel):
    """Everything the dashboard renders after one load cycle.

    A snapshot is replaced wholesale on every load; it is never merged.
    """

    model_config = ConfigDict(frozen=True)

    contacts: CollectionSummary[ContactMessage] = Field(default_factory=CollectionSummary[ContactMessage])
    branches: CollectionSummary[Branch] = Field(default_factory=CollectionSummary[Branch])
    routes: CollectionSummary[Route] = Field(default_factory=CollectionSummary[Route])

    @classmethod
    def empty(cls) -> DashboardSnapshot:
        """Zero counts and empty recent lists for every collection."""
        return cls()

    @classmethod
    def from_collections(
        cls,
        contacts: Sequence[ContactMessage],
        branches: Sequence[Branch],
        routes: Sequence[Route],
        *,
        limit: int = DEFAULT_RECENT_LIMIT,
    ) -> DashboardSnapshot:
        return cls(
            contacts=CollectionSummary[ContactMessage].from_items(contacts, limit),
            branches=CollectionSummary[Branch].from_items(branches, limit),
            routes=CollectionSummary[Route].from_items(routes, limit),
        )

    @property
    def is_empty(self) -> bool:
        return self.contacts.count == 0 and self.branches.count == 0 and self.routes.count == 0
