"""Permission sets defining read-only vs write tool groups."""

READ_TOOLS = frozenset({
    "get_issue",
    "search_issues",
    "get_assigned_issues",
    "get_issue_comments",
    "get_transitions",
    "get_projects",
    "get_boards",
    "get_sprints",
    "get_current_user",
    "get_worklogs",
})

WRITE_TOOLS = frozenset({
    "create_issue",
    "update_issue",
    "add_comment",
    "transition_issue",
    "add_worklog",
    "update_worklog",
    "delete_worklog",
})

ALL_TOOLS = READ_TOOLS | WRITE_TOOLS
