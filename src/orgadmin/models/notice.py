"""User-visible notices raised by the management pages."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class NoticeLevel(StrEnum):
    INFO = "info"
    ERROR = "error"


class Notice(BaseModel):
    """A one-line message for the admin (toast, alert, status bar)."""

    model_config = ConfigDict(frozen=True)

    level: NoticeLevel
    message: str

    @classmethod
    def info(cls, message: str) -> Notice:
        return cls(level=NoticeLevel.INFO, message=message)

    @classmethod
    def error(cls, message: str) -> Notice:
        return cls(level=NoticeLevel.ERROR, message=message)
