from jira_assist.formatters.agile import format_boards, format_sprints
from jira_assist.formatters.comments import format_comments
from jira_assist.formatters.issues import (
    format_issue,
    format_issue_created,
    format_issue_list,
    format_issue_updated,
    format_transitions,
)
from jira_assist.formatters.projects import format_projects, format_user
from jira_assist.formatters.worklogs import format_worklogs

__all__ = [
    "format_boards",
    "format_comments",
    "format_issue",
    "format_issue_created",
    "format_issue_list",
    "format_issue_updated",
    "format_projects",
    "format_sprints",
    "format_transitions",
    "format_user",
    "format_worklogs",
]
