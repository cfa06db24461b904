"""Issue tools: get, search, create and update."""

from __future__ import annotations

from typing import Any

from jira_assist.adf import ensure_document
from jira_assist.formatters import (
    format_issue,
    format_issue_created,
    format_issue_list,
    format_issue_updated,
)
from jira_assist.guards.rate_limit import rate_limit
from jira_assist.guards.read_only import check_read_only
from jira_assist.jira.errors import JiraValidationError
from jira_assist.jira.models import JiraIssue, JiraSearchResult
from jira_assist.lifespan import get_jira_client, get_settings
from jira_assist.server import mcp
from jira_assist.tools.common import require_issue_key, require_text
from jira_assist.utils.timing import timed

SEARCH_FIELDS = [
    "summary",
    "description",
    "status",
    "priority",
    "assignee",
    "issuetype",
    "updated",
]


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def build_jql(
    jql: str | None = None,
    text: str | None = None,
    project: str | None = None,
    status: str | list[str] | None = None,
    assigned_to_me: bool = False,
) -> str:
    """Return *jql* as given, or build a query from the helper filters.

    Helper conditions are joined with AND and ordered by last update. Raises
    JiraValidationError when neither *jql* nor any helper is given.
    """
    if jql is not None and jql.strip():
        return jql.strip()

    conditions = []
    if assigned_to_me:
        conditions.append("assignee = currentUser()")
    if project and project.strip():
        conditions.append(f"project = {_quote(project.strip())}")
    statuses = [status] if isinstance(status, str) else list(status or [])
    statuses = [s.strip() for s in statuses if s and s.strip()]
    if statuses:
        conditions.append(f"status IN ({', '.join(_quote(s) for s in statuses)})")
    if text and text.strip():
        needle = _quote(text.strip())
        conditions.append(f"(summary ~ {needle} OR description ~ {needle})")

    if not conditions:
        raise JiraValidationError(
            "Provide jql or at least one of text, project, status, assigned_to_me."
        )
    return f"{' AND '.join(conditions)} ORDER BY updated DESC"


def build_create_fields(
    project_key: str,
    summary: str,
    issue_type: str = "Task",
    description: Any = None,
    priority: str | None = None,
    labels: list[str] | None = None,
    assignee_account_id: str | None = None,
) -> dict[str, Any]:
    """Build the ``fields`` payload for a new issue."""
    fields: dict[str, Any] = {
        "project": {"key": require_text(project_key, "project_key").upper()},
        "summary": require_text(summary, "summary"),
        "issuetype": {"name": issue_type},
    }
    document = ensure_document(description)
    if document is not None:
        fields["description"] = document
    if priority:
        fields["priority"] = {"name": priority}
    if labels:
        fields["labels"] = labels
    if assignee_account_id:
        fields["assignee"] = {"accountId": assignee_account_id}
    return fields


def build_update_fields(
    summary: str | None = None,
    description: Any = None,
    priority: str | None = None,
    labels: list[str] | None = None,
    assignee_account_id: str | None = None,
) -> dict[str, Any]:
    """Build the ``fields`` payload for an issue update.

    An empty description string clears the description.
    """
    fields: dict[str, Any] = {}
    if summary is not None:
        fields["summary"] = require_text(summary, "summary")
    if description is not None:
        fields["description"] = ensure_document(description)
    if priority is not None:
        fields["priority"] = {"name": priority}
    if labels is not None:
        fields["labels"] = labels
    if assignee_account_id is not None:
        fields["assignee"] = {"accountId": assignee_account_id or None}
    return fields


@mcp.tool()
@rate_limit
@timed
async def get_issue(issue_key: str) -> str:
    """Get a Jira issue by its key (e.g. "PROJ-123").

    Args:
        issue_key: The issue key.

    Returns:
        Markdown with status, people, dates and the description rendered
        from Atlassian Document Format.
    """
    client = get_jira_client()
    raw = await client.get_issue(require_issue_key(issue_key))
    return format_issue(JiraIssue.model_validate(raw))


@mcp.tool()
@rate_limit
@timed
async def search_issues(
    jql: str | None = None,
    text: str | None = None,
    project: str | None = None,
    status: str | list[str] | None = None,
    assigned_to_me: bool = False,
    max_results: int | None = None,
    start_at: int = 0,
) -> str:
    """Search for Jira issues using JQL (Jira Query Language) or simple filters.

    Either jql or at least one filter is required. Filters are ignored when
    jql is given.

    Args:
        jql: JQL query string (e.g. 'project = PROJ AND status = "To Do"').
        text: Match this text in summary or description. Optional.
        project: Project key. Optional.
        status: Status name or list of names. Optional.
        assigned_to_me: Only issues assigned to the authenticated user.
        max_results: Maximum number of results. Defaults to server config (50).
        start_at: Pagination offset. Defaults to 0.

    Returns:
        Markdown list of matching issues with description previews.
    """
    query = build_jql(
        jql, text=text, project=project, status=status, assigned_to_me=assigned_to_me
    )
    client = get_jira_client()
    settings = get_settings()
    limit = max_results if max_results is not None else settings.max_results

    raw = await client.search_issues(
        query, max_results=limit, start_at=start_at, fields=SEARCH_FIELDS
    )
    return format_issue_list(JiraSearchResult.model_validate(raw))


@mcp.tool()
@rate_limit
@timed
async def get_assigned_issues(max_results: int | None = None) -> str:
    """List issues assigned to the authenticated user, most recently updated first.

    Args:
        max_results: Maximum number of results. Defaults to server config (50).
    """
    client = get_jira_client()
    settings = get_settings()
    limit = max_results if max_results is not None else settings.max_results
    raw = await client.search_issues(
        build_jql(assigned_to_me=True), max_results=limit, fields=SEARCH_FIELDS
    )
    return format_issue_list(JiraSearchResult.model_validate(raw), title="Assigned Issues")


@mcp.tool()
@rate_limit
@timed
async def create_issue(
    project_key: str,
    summary: str,
    issue_type: str = "Task",
    description: str | None = None,
    priority: str | None = None,
    labels: list[str] | None = None,
    assignee_account_id: str | None = None,
) -> str:
    """Create a new Jira issue.

    Args:
        project_key: The project key (e.g. "PROJ").
        summary: Issue title/summary.
        issue_type: Issue type name (e.g. "Task", "Bug", "Story"). Defaults to "Task".
        description: Plain text description. Blank lines separate paragraphs.
        priority: Priority name (e.g. "High", "Medium", "Low"). Optional.
        labels: List of labels to attach. Optional.
        assignee_account_id: Jira account ID of the assignee. Optional.

    Returns:
        Confirmation with the new issue key.
    """
    check_read_only()
    client = get_jira_client()

    fields = build_create_fields(
        project_key,
        summary,
        issue_type=issue_type,
        description=description,
        priority=priority,
        labels=labels,
        assignee_account_id=assignee_account_id,
    )
    created = await client.create_issue(fields)
    key = created.get("key", "")
    return format_issue_created(
        key, fields["summary"], JiraIssue(key=key, self=created.get("self", "")).browse_url
    )


@mcp.tool()
@rate_limit
@timed
async def update_issue(
    issue_key: str,
    summary: str | None = None,
    description: str | None = None,
    priority: str | None = None,
    labels: list[str] | None = None,
    assignee_account_id: str | None = None,
    transition_id: str | None = None,
) -> str:
    """Update fields on an existing Jira issue and optionally move it to a new status.

    Args:
        issue_key: The issue key (e.g. "PROJ-123").
        summary: New summary. Optional.
        description: New plain text description. Pass "" to clear it. Optional.
        priority: New priority name. Optional.
        labels: New labels list (replaces existing). Optional.
        assignee_account_id: Account ID to assign, or "" to unassign. Optional.
        transition_id: Workflow transition to apply (see get_transitions). Optional.

    Returns:
        Confirmation listing what changed.
    """
    check_read_only()
    key = require_issue_key(issue_key)
    fields = build_update_fields(
        summary=summary,
        description=description,
        priority=priority,
        labels=labels,
        assignee_account_id=assignee_account_id,
    )
    if not fields and not transition_id:
        raise JiraValidationError("No fields to update.")

    client = get_jira_client()
    changed = sorted(fields)
    if fields:
        await client.update_issue(key, fields)
    if transition_id:
        await client.transition_issue(key, transition_id)
        changed.append(f"status (transition {transition_id})")
    return format_issue_updated(key, changed)
