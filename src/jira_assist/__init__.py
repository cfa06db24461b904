"""Jira MCP server with Atlassian Document Format rendering for AI assistants."""

from jira_assist.adf import ensure_document, extract_plain_text, render, text_to_tree
from jira_assist.jira.client import JiraClient
from jira_assist.server import mcp
from jira_assist.settings import JiraSettings

__all__ = [
    "mcp",
    "JiraSettings",
    "JiraClient",
    "ensure_document",
    "extract_plain_text",
    "render",
    "text_to_tree",
]
