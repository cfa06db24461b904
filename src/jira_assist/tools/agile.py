"""Board and sprint tools backed by the Jira Agile API."""

from __future__ import annotations

from jira_assist.formatters import format_boards, format_sprints
from jira_assist.guards.rate_limit import rate_limit
from jira_assist.jira.errors import JiraValidationError
from jira_assist.jira.models import JiraBoard, JiraSprint
from jira_assist.lifespan import get_jira_client, get_settings
from jira_assist.server import mcp
from jira_assist.utils.timing import timed

BOARD_TYPES = frozenset({"scrum", "kanban", "simple"})
SPRINT_STATES = frozenset({"active", "future", "closed"})


@mcp.tool()
@rate_limit
@timed
async def get_boards(
    board_type: str | None = None,
    project_key: str | None = None,
    name: str | None = None,
    max_results: int | None = None,
) -> str:
    """List Jira boards, optionally filtered by type, project, or name.

    Args:
        board_type: "scrum", "kanban" or "simple". Optional.
        project_key: Only boards for this project. Optional.
        name: Only boards whose name contains this text. Optional.
        max_results: Maximum number of boards. Defaults to server config (50).
    """
    if board_type is not None and board_type not in BOARD_TYPES:
        raise JiraValidationError(f"board_type must be one of {', '.join(sorted(BOARD_TYPES))}.")
    client = get_jira_client()
    limit = max_results if max_results is not None else get_settings().max_results
    raw = await client.get_boards(
        board_type=board_type, project_key=project_key, name=name, max_results=limit
    )
    boards = [JiraBoard.model_validate(b) for b in raw.get("values", [])]
    return format_boards(boards, has_more=not raw.get("isLast", True))


@mcp.tool()
@rate_limit
@timed
async def get_sprints(board_id: int, state: str | None = None) -> str:
    """List sprints on a board, active sprints first.

    Args:
        board_id: The board ID (from get_boards).
        state: "active", "future" or "closed". Optional.
    """
    if state is not None and state not in SPRINT_STATES:
        raise JiraValidationError(f"state must be one of {', '.join(sorted(SPRINT_STATES))}.")
    client = get_jira_client()
    raw = await client.get_sprints(board_id, state=state)
    sprints = [JiraSprint.model_validate(s) for s in raw.get("values", [])]
    return format_sprints(board_id, sprints)
