"""Markdown formatters for boards and sprints."""

from __future__ import annotations

from jira_assist.jira.models import JiraBoard, JiraSprint

_SPRINT_ORDER = {"active": 0, "future": 1, "closed": 2}


def format_boards(boards: list[JiraBoard], has_more: bool = False) -> str:
    if not boards:
        return "# Boards\n\nNo boards found."
    lines = ["# Boards", "", f"Found {len(boards)} board{'' if len(boards) == 1 else 's'}", ""]
    for board in boards:
        line = f"- **{board.name}** (id: {board.id}, type: {board.type or 'unknown'})"
        if board.location and board.location.project_key:
            line += f" in project {board.location.project_key}"
        lines.append(line)
    if has_more:
        lines += ["", "More boards available: raise max_results or narrow the filters."]
    return "\n".join(lines)


def format_sprint(sprint: JiraSprint) -> str:
    lines = [f"### {sprint.name} (id: {sprint.id}, {sprint.state or 'unknown'})"]
    if sprint.goal:
        lines.append(f"**Goal:** {sprint.goal}")
    if sprint.start_date or sprint.end_date:
        lines.append(f"**Dates:** {sprint.start_date or '?'} to {sprint.end_date or '?'}")
    if sprint.complete_date:
        lines.append(f"**Completed:** {sprint.complete_date}")
    return "\n".join(lines)


def format_sprints(board_id: int, sprints: list[JiraSprint]) -> str:
    """Format sprints grouped active first, then future, then closed."""
    if not sprints:
        return f"# Sprints for board {board_id}\n\nNo sprints found."
    ordered = sorted(sprints, key=lambda s: _SPRINT_ORDER.get(s.state, len(_SPRINT_ORDER)))
    body = "\n\n".join(format_sprint(sprint) for sprint in ordered)
    return f"# Sprints for board {board_id}\n\n{body}"
