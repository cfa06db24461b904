"""Worklog tools: log, list, edit and delete time spent on issues."""

from __future__ import annotations

from typing import Any

from jira_assist.adf import ensure_document
from jira_assist.formatters import format_worklogs
from jira_assist.guards.rate_limit import rate_limit
from jira_assist.guards.read_only import check_read_only
from jira_assist.jira.errors import JiraValidationError
from jira_assist.jira.models import JiraWorklog
from jira_assist.lifespan import get_jira_client
from jira_assist.server import mcp
from jira_assist.tools.common import require_issue_key, require_text
from jira_assist.utils.timing import timed


def build_worklog_payload(
    time_spent: str | None = None,
    started: str | None = None,
    comment: str | None = None,
) -> dict[str, Any]:
    """Build a worklog request body. ``time_spent`` uses Jira notation like "1h 30m"."""
    payload: dict[str, Any] = {}
    if time_spent is not None:
        payload["timeSpent"] = require_text(time_spent, "time_spent")
    if started:
        payload["started"] = started
    document = ensure_document(comment)
    if document is not None:
        payload["comment"] = document
    return payload


@mcp.tool()
@rate_limit
@timed
async def add_worklog(
    issue_key: str,
    time_spent: str,
    started: str | None = None,
    comment: str | None = None,
) -> str:
    """Log time spent on an issue.

    Args:
        issue_key: The issue key (e.g. "PROJ-123").
        time_spent: Duration in Jira notation, e.g. "2h" or "1d 4h".
        started: Start timestamp, e.g. "2024-01-15T09:00:00.000+0000". Optional.
        comment: Plain text note. Optional.
    """
    check_read_only()
    key = require_issue_key(issue_key)
    payload = build_worklog_payload(
        time_spent=require_text(time_spent, "time_spent"), started=started, comment=comment
    )
    client = get_jira_client()
    created = await client.add_worklog(key, payload)
    return f"Logged {payload['timeSpent']} on {key} (worklog {created.get('id', '')})."


@mcp.tool()
@rate_limit
@timed
async def get_worklogs(issue_key: str) -> str:
    """List all worklog entries on an issue."""
    key = require_issue_key(issue_key)
    client = get_jira_client()
    raw = await client.get_worklogs(key)
    worklogs = [JiraWorklog.model_validate(w) for w in raw.get("worklogs", [])]
    return format_worklogs(key, worklogs)


@mcp.tool()
@rate_limit
@timed
async def update_worklog(
    issue_key: str,
    worklog_id: str,
    time_spent: str | None = None,
    comment: str | None = None,
) -> str:
    """Change the duration or note of an existing worklog entry.

    Args:
        issue_key: The issue key (e.g. "PROJ-123").
        worklog_id: The worklog ID (from get_worklogs).
        time_spent: New duration in Jira notation. Optional.
        comment: New plain text note. Optional.
    """
    check_read_only()
    key = require_issue_key(issue_key)
    worklog_id = require_text(worklog_id, "worklog_id")
    payload = build_worklog_payload(time_spent=time_spent, comment=comment)
    if not payload:
        raise JiraValidationError("Provide time_spent or comment to update.")
    client = get_jira_client()
    await client.update_worklog(key, worklog_id, payload)
    return f"Worklog {worklog_id} on {key} updated."


@mcp.tool()
@rate_limit
@timed
async def delete_worklog(issue_key: str, worklog_id: str) -> str:
    """Delete a worklog entry. This action is irreversible."""
    check_read_only()
    key = require_issue_key(issue_key)
    worklog_id = require_text(worklog_id, "worklog_id")
    client = get_jira_client()
    await client.delete_worklog(key, worklog_id)
    return f"Worklog {worklog_id} deleted from {key}."
