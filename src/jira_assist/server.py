"""FastMCP server instance."""

from fastmcp import FastMCP

from jira_assist.lifespan import lifespan

mcp = FastMCP("jira-assist", lifespan=lifespan)
