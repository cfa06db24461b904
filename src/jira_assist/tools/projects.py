"""Project and user tools."""

from __future__ import annotations

from jira_assist.formatters import format_projects, format_user
from jira_assist.guards.rate_limit import rate_limit
from jira_assist.jira.models import JiraProject, JiraUser
from jira_assist.lifespan import get_jira_client
from jira_assist.server import mcp
from jira_assist.utils.timing import timed


def filter_projects(projects: list[JiraProject], query: str | None) -> list[JiraProject]:
    """Case-insensitive substring match on project key or name."""
    if not query or not query.strip():
        return projects
    needle = query.strip().lower()
    return [p for p in projects if needle in p.key.lower() or needle in p.name.lower()]


@mcp.tool()
@rate_limit
@timed
async def get_projects(query: str | None = None) -> str:
    """List Jira projects accessible to the authenticated user.

    Args:
        query: Only include projects whose key or name contains this text. Optional.

    Returns:
        Markdown list of projects with key, name, and type.
    """
    client = get_jira_client()
    projects = [JiraProject.model_validate(p) for p in await client.list_projects()]
    return format_projects(filter_projects(projects, query))


@mcp.tool()
@rate_limit
@timed
async def get_current_user() -> str:
    """Get the profile of the user the server authenticates as."""
    client = get_jira_client()
    return format_user(JiraUser.model_validate(await client.get_current_user()))
