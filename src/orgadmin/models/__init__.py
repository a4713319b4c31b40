"""Data models for admin backend records and view state."""

from orgadmin.models._base import AdminBaseModel, Timestamp, parse_timestamp
from orgadmin.models.branch import Branch, BranchInput
from orgadmin.models.contact import ContactMessage
from orgadmin.models.dashboard import CollectionSummary, DashboardSnapshot
from orgadmin.models.notice import Notice, NoticeLevel
from orgadmin.models.registration import RegistrationOutcome, SignupRequest, SignupResponse
from orgadmin.models.route import Route

__all__ = [
    "AdminBaseModel",
    "Branch",
    "BranchInput",
    "CollectionSummary",
    "ContactMessage",
    "DashboardSnapshot",
    "Notice",
    "NoticeLevel",
    "RegistrationOutcome",
    "Route",
    "SignupRequest",
    "SignupResponse",
    "Timestamp",
    "parse_timestamp",
]
