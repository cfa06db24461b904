"""Markdown formatter for issue comments."""

from __future__ import annotations

from jira_assist.adf import render
from jira_assist.jira.models import JiraComment


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


def format_comment(comment: JiraComment, number: int) -> str:
    author = comment.author.display_name if comment.author else "Unknown User"
    internal = comment.internal

    header = f"## {'🔒 ' if internal else ''}Comment #{number} • {author} • {comment.created or 'Unknown date'}"
    parts = [header]

    if comment.updated and comment.updated != comment.created:
        editor = comment.update_author.display_name if comment.update_author else author
        edited = f"_Last edited: {comment.updated}"
        if editor != author:
            edited += f" by {editor}"
        parts.append(edited + "_")

    if comment.visibility is not None:
        parts.append(
            f"_Internal comment - restricted to {comment.visibility.type} {comment.visibility.value}_"
        )

    body = render(comment.body).strip()
    parts.append(body or "_Empty comment_")
    return "\n\n".join(parts) + "\n"


def format_comments(issue_key: str, comments: list[JiraComment], total: int) -> str:
    """Format a page of comments, numbered in display order."""
    if not comments:
        return f"# Comments for {issue_key}\n\n**No comments found**\n\nThis issue doesn't have any comments yet."

    summary = f"**Total:** {_plural(total, 'comment')}"
    if len(comments) < total:
        summary += f" | **Showing:** {len(comments)}"

    body = "\n---\n\n".join(
        format_comment(comment, number) for number, comment in enumerate(comments, start=1)
    )
    markdown = f"# Comments for {issue_key}\n\n{summary}\n\n---\n\n{body}"

    if len(comments) < total:
        remaining = total - len(comments)
        markdown += (
            f"\n**Navigation:** {_plural(remaining, 'more comment')} available; "
            f"raise max_comments to see them."
        )
    return markdown
