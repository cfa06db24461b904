from jira_assist.jira.client import JiraClient
from jira_assist.jira.errors import (
    JiraAPIError,
    JiraAuthenticationError,
    JiraConnectionError,
    JiraNotFoundError,
    JiraPermissionError,
    JiraRateLimitError,
    JiraValidationError,
)

__all__ = [
    "JiraClient",
    "JiraAPIError",
    "JiraAuthenticationError",
    "JiraConnectionError",
    "JiraNotFoundError",
    "JiraPermissionError",
    "JiraRateLimitError",
    "JiraValidationError",
]
