"""MCP tool modules. Importing this package registers every tool with the server."""

from jira_assist.tools import agile, comments, issues, projects, transitions, worklogs

__all__ = ["agile", "comments", "issues", "projects", "transitions", "worklogs"]
