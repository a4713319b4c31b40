"""orgadmin - Async Python client for the organization admin console backend."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("orgadmin")
except PackageNotFoundError:
    __version__ = "0+local"
from orgadmin.branch_list import BranchListManager
from orgadmin.client import OrgAdminClient
from orgadmin.config import AdminConfig
from orgadmin.dashboard import DashboardAggregator
from orgadmin.exceptions import (
    OrgAdminConfigError,
    OrgAdminError,
    OrgAdminFetchError,
    OrgAdminStatusError,
    OrgAdminTransportError,
    OrgAdminValidationError,
)
from orgadmin.models import (
    Branch,
    BranchInput,
    CollectionSummary,
    ContactMessage,
    DashboardSnapshot,
    Notice,
    NoticeLevel,
    RegistrationOutcome,
    Route,
)
from orgadmin.registration import AdminRegistration

__all__ = [
    "__version__",
    "AdminConfig",
    "AdminRegistration",
    "Branch",
    "BranchInput",
    "BranchListManager",
    "CollectionSummary",
    "ContactMessage",
    "DashboardAggregator",
    "DashboardSnapshot",
    "Notice",
    "NoticeLevel",
    "OrgAdminClient",
    "OrgAdminConfigError",
    "OrgAdminError",
    "OrgAdminFetchError",
    "OrgAdminStatusError",
    "OrgAdminTransportError",
    "OrgAdminValidationError",
    "RegistrationOutcome",
    "Route",
]
