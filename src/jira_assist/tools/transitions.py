"""Transition tools: get available transitions and move issues between statuses."""

from __future__ import annotations

from jira_assist.formatters import format_transitions
from jira_assist.guards.rate_limit import rate_limit
from jira_assist.guards.read_only import check_read_only
from jira_assist.jira.models import JiraTransition
from jira_assist.lifespan import get_jira_client
from jira_assist.server import mcp
from jira_assist.tools.common import require_issue_key, require_text
from jira_assist.utils.timing import timed


@mcp.tool()
@rate_limit
@timed
async def get_transitions(issue_key: str) -> str:
    """Get available workflow transitions for a Jira issue.

    Args:
        issue_key: The issue key (e.g. "PROJ-123").

    Returns:
        Markdown list of transitions, each with id, name, and target status.
    """
    key = require_issue_key(issue_key)
    client = get_jira_client()
    result = await client.get_transitions(key)
    transitions = [JiraTransition.model_validate(t) for t in result.get("transitions", [])]
    return format_transitions(key, transitions)


@mcp.tool()
@rate_limit
@timed
async def transition_issue(issue_key: str, transition_id: str) -> str:
    """Transition a Jira issue to a new status.

    Use get_transitions first to find the available transition IDs.

    Args:
        issue_key: The issue key (e.g. "PROJ-123").
        transition_id: The transition ID (from get_transitions).

    Returns:
        Confirmation message.
    """
    check_read_only()
    key = require_issue_key(issue_key)
    transition_id = require_text(transition_id, "transition_id")
    client = get_jira_client()
    await client.transition_issue(key, transition_id)
    return f"Issue {key} transitioned successfully (transition_id={transition_id})."
