"""Internal constants shared across the library."""

USER_AGENT = "orgadmin/1"
DEFAULT_RECENT_LIMIT = 5

# Backend collection paths.
CONTACT_MESSAGES_PATH = "/ContactMessages"
BRANCHES_PATH = "/branches"
ROUTES_PATH = "/roots"
ADMIN_SIGNUP_PATH = "/admin/signup"

# ------------------------------------------------------------------
# User-visible notice texts
# ------------------------------------------------------------------

MSG_FETCH_BRANCHES_FAILED = "Failed to fetch branches"
MSG_FETCH_BRANCHES_ERROR = "An error occurred while fetching branches"
MSG_BRANCH_DELETED = "Branch deleted successfully"
MSG_DELETE_BRANCH_FAILED = "Failed to delete branch"
MSG_DELETE_BRANCH_ERROR = "An error occurred while deleting the branch"
MSG_BRANCH_ADDED = "Branch added successfully"
MSG_BRANCH_UPDATED = "Branch updated successfully"
MSG_SAVE_BRANCH_FAILED = "Failed to save branch"
MSG_SAVE_BRANCH_ERROR = "An error occurred while saving the branch"
MSG_REGISTRATION_FAILED = "Registration failed"
MSG_UNEXPECTED_ERROR = "An unexpected error occurred"
