"""Markdown formatters for issues, search results and transitions."""

from __future__ import annotations

from jira_assist.adf import render
from jira_assist.jira.models import JiraIssue, JiraSearchResult, JiraTransition

PREVIEW_LENGTH = 100


def _name(value, default: str) -> str:
    return value.name if value is not None and value.name else default


def _user(user, default: str = "Unassigned") -> str:
    return user.display_name if user is not None and user.display_name else default


def truncate(text: str, length: int = PREVIEW_LENGTH) -> str:
    """Collapse whitespace and cut *text* to *length* characters."""
    flat = " ".join(text.split())
    if len(flat) <= length:
        return flat
    return flat[: length - 3].rstrip() + "..."


def format_issue(issue: JiraIssue) -> str:
    """Format a single issue with its rendered description."""
    fields = issue.fields
    parts = [
        f"# {issue.key}: {fields.summary or 'No Summary'}",
        "\n".join([
            f"**Status:** {_name(fields.status, 'Unknown')}",
            f"**Type:** {_name(fields.issue_type, 'Unknown')}",
            f"**Priority:** {_name(fields.priority, 'None')}",
            f"**Assignee:** {_user(fields.assignee)}",
            f"**Reporter:** {_user(fields.reporter, 'Unknown')}",
        ]),
    ]

    description = render(fields.description).strip()
    if description:
        parts.append(f"## Description\n{description}")

    if fields.labels:
        parts.append(f"## Labels\n{', '.join(fields.labels)}")

    dates = []
    if fields.created:
        dates.append(f"**Created:** {fields.created}")
    if fields.updated:
        dates.append(f"**Updated:** {fields.updated}")
    if fields.due_date:
        dates.append(f"**Due:** {fields.due_date}")
    if dates:
        parts.append("## Dates\n" + "\n".join(dates))

    if issue.browse_url:
        parts.append(f"[View in JIRA]({issue.browse_url})")

    return "\n\n".join(parts) + "\n"


def format_issue_card(issue: JiraIssue) -> str:
    fields = issue.fields
    card = (
        f"## {issue.key}: {fields.summary or 'No Summary'}\n\n"
        f"**Status**: {_name(fields.status, 'Unknown')} | "
        f"**Priority**: {_name(fields.priority, 'None')} | "
        f"**Assignee**: {_user(fields.assignee)}\n\n"
    )
    if fields.description:
        preview = truncate(render(fields.description))
        if preview:
            card += f"**Description**: {preview}\n\n"
    if fields.updated:
        card += f"*Updated: {fields.updated}*\n\n"
    return card


def format_issue_list(result: JiraSearchResult, title: str = "Search Results") -> str:
    """Format search results as a list of issue cards."""
    if not result.issues:
        return f"# {title}\n\nNo issues found."

    shown_to = result.start_at + len(result.issues)
    header = f"# {title}\n\nShowing {result.start_at + 1}-{shown_to} of {result.total} issues\n\n---\n\n"
    body = "---\n\n".join(format_issue_card(issue) for issue in result.issues)
    footer = ""
    if shown_to < result.total:
        footer = f"---\n\nMore results available: use start_at={shown_to} to see the next page."
    return header + body + footer


def format_issue_created(issue_key: str, summary: str, browse_url: str | None = None) -> str:
    message = f"# Issue Created\n\n**{issue_key}**: {summary}"
    if browse_url:
        message += f"\n\n[View in JIRA]({browse_url})"
    return message


def format_issue_updated(issue_key: str, changed: list[str]) -> str:
    lines = "\n".join(f"- {name}" for name in changed)
    return f"# Issue Updated\n\n**{issue_key}** was updated.\n\n**Changed:**\n{lines}"


def format_transitions(issue_key: str, transitions: list[JiraTransition]) -> str:
    if not transitions:
        return f"No transitions available for {issue_key}."
    lines = [f"# Transitions for {issue_key}", ""]
    for transition in transitions:
        target = f" -> {transition.to.name}" if transition.to and transition.to.name else ""
        lines.append(f"- **{transition.name}** (id: {transition.id}){target}")
    return "\n".join(lines)
