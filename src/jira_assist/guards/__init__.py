from jira_assist.guards.permissions import ALL_TOOLS, READ_TOOLS, WRITE_TOOLS
from jira_assist.guards.rate_limit import rate_limit, reset_limiter
from jira_assist.guards.read_only import check_read_only

__all__ = [
    "ALL_TOOLS",
    "READ_TOOLS",
    "WRITE_TOOLS",
    "check_read_only",
    "rate_limit",
    "reset_limiter",
]
