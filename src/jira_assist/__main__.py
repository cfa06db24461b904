"""Entry point for running the Jira MCP server: python -m jira_assist"""

import jira_assist.tools  # noqa: F401  registers tools with the server
from jira_assist.server import mcp


def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
