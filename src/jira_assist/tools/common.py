"""Input checks shared by tool functions."""

from __future__ import annotations

import re

from jira_assist.jira.errors import JiraValidationError

_ISSUE_KEY = re.compile(r"^[A-Z][A-Z0-9_]*-\d+$")


def require_text(value: str | None, name: str) -> str:
    """Return *value* stripped, or raise if it is missing or blank."""
    if value is None or not value.strip():
        raise JiraValidationError(f"{name} must not be empty.")
    return value.strip()


def require_issue_key(issue_key: str | None) -> str:
    """Normalize an issue key like ``proj-12`` to ``PROJ-12``."""
    key = require_text(issue_key, "issue_key").upper()
    if not _ISSUE_KEY.match(key):
        raise JiraValidationError(f"Invalid issue key {issue_key!r}; expected e.g. PROJ-123.")
    return key
