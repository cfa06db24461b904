"""Comment tools: add and retrieve comments on issues."""

from __future__ import annotations

from jira_assist.adf import ensure_document
from jira_assist.formatters import format_comments
from jira_assist.guards.rate_limit import rate_limit
from jira_assist.guards.read_only import check_read_only
from jira_assist.jira.errors import JiraValidationError
from jira_assist.jira.models import JiraComment, JiraCommentPage
from jira_assist.lifespan import get_jira_client
from jira_assist.server import mcp
from jira_assist.tools.common import require_issue_key
from jira_assist.utils.timing import timed

MAX_COMMENTS_LIMIT = 100


def filter_comments(
    comments: list[JiraComment],
    include_internal: bool = False,
    author_filter: str | None = None,
) -> list[JiraComment]:
    """Drop internal comments unless asked for, and apply the author filter.

    The author filter is a case-insensitive substring match on display name
    or email address.
    """
    if not include_internal:
        comments = [c for c in comments if not c.internal]
    if author_filter and author_filter.strip():
        needle = author_filter.strip().lower()
        comments = [
            c
            for c in comments
            if c.author is not None
            and (
                needle in c.author.display_name.lower()
                or needle in (c.author.email_address or "").lower()
            )
        ]
    return comments


@mcp.tool()
@rate_limit
@timed
async def add_comment(issue_key: str, body: str) -> str:
    """Add a comment to a Jira issue.

    Args:
        issue_key: The issue key (e.g. "PROJ-123").
        body: Plain text comment body. Blank lines separate paragraphs.

    Returns:
        Confirmation with the new comment ID.
    """
    check_read_only()
    key = require_issue_key(issue_key)
    document = ensure_document(body)
    if document is None:
        raise JiraValidationError("body must not be empty.")
    client = get_jira_client()
    created = await client.add_comment(key, document)
    return f"Comment {created.get('id', '')} added to {key}."


@mcp.tool()
@rate_limit
@timed
async def get_issue_comments(
    issue_key: str,
    max_comments: int = 10,
    newest_first: bool = False,
    include_internal: bool = False,
    author_filter: str | None = None,
) -> str:
    """Get comments on a Jira issue, rendered as Markdown.

    Args:
        issue_key: The issue key (e.g. "PROJ-123").
        max_comments: Number of comments to return (1-100). Defaults to 10.
        newest_first: Return the most recent comments first. Defaults to False.
        include_internal: Include restricted and non-public comments. Defaults to False.
        author_filter: Only comments whose author name or email contains this text. Optional.

    Returns:
        Markdown with each comment's author, dates and body.
    """
    if not 1 <= max_comments <= MAX_COMMENTS_LIMIT:
        raise JiraValidationError(f"max_comments must be between 1 and {MAX_COMMENTS_LIMIT}.")
    key = require_issue_key(issue_key)
    client = get_jira_client()
    raw = await client.get_comments(
        key, max_results=max_comments, order_by="-created" if newest_first else "created"
    )
    page = JiraCommentPage.model_validate(raw)
    comments = filter_comments(
        page.comments, include_internal=include_internal, author_filter=author_filter
    )
    hidden = len(page.comments) - len(comments)
    total = max(page.total, len(page.comments)) - hidden
    return format_comments(key, comments[:max_comments], total=total)
