"""Markdown formatter for worklog entries."""

from __future__ import annotations

from jira_assist.adf import extract_plain_text
from jira_assist.jira.models import JiraWorklog


def format_worklog(worklog: JiraWorklog) -> str:
    sections = [f"## Worklog {worklog.id}"]
    author = worklog.author.display_name if worklog.author else "Unknown"
    sections.append(f"**Author:** {author}")
    sections.append(f"**Time Spent:** {worklog.time_spent or 'Unknown'}")
    if worklog.started:
        sections.append(f"**Started:** {worklog.started}")
    comment = extract_plain_text(worklog.comment).strip()
    if comment:
        sections.append(f"**Comment:**\n\n{comment}")
    if worklog.visibility:
        sections.append(f"**Visibility:** {worklog.visibility.type} - {worklog.visibility.value}")
    return "\n\n".join(sections)


def format_worklogs(issue_key: str, worklogs: list[JiraWorklog]) -> str:
    if not worklogs:
        return f"# Worklogs for {issue_key}\n\nNo worklogs recorded."
    total_seconds = sum(w.time_spent_seconds or 0 for w in worklogs)
    hours, remainder = divmod(total_seconds, 3600)
    header = (
        f"# Worklogs for {issue_key}\n\n"
        f"**Entries:** {len(worklogs)} | **Total:** {hours}h {remainder // 60}m"
    )
    return header + "\n\n---\n\n" + "\n\n---\n\n".join(format_worklog(w) for w in worklogs)
