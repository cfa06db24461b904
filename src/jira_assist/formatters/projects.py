"""Markdown formatters for projects and the current user."""

from __future__ import annotations

from jira_assist.jira.models import JiraProject, JiraUser


def format_projects(projects: list[JiraProject]) -> str:
    if not projects:
        return "# Projects\n\nNo projects found."
    lines = ["# Projects", ""]
    for project in projects:
        line = f"- **{project.key}**: {project.name}"
        if project.project_type_key:
            line += f" ({project.project_type_key})"
        if project.lead and project.lead.display_name:
            line += f", lead {project.lead.display_name}"
        lines.append(line)
    return "\n".join(lines)


def format_user(user: JiraUser) -> str:
    lines = [
        f"# {user.display_name or 'Unknown User'}",
        "",
        f"**Account ID:** {user.account_id or 'Unknown'}",
    ]
    if user.email_address:
        lines.append(f"**Email:** {user.email_address}")
    if user.time_zone:
        lines.append(f"**Time Zone:** {user.time_zone}")
    lines.append(f"**Active:** {'Yes' if user.active else 'No'}")
    return "\n".join(lines)
