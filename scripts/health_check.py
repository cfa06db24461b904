#!/usr/bin/env python3
"""Validate jira-assist configuration and test connectivity."""

import asyncio
import sys

from jira_assist.lifespan import create_client
from jira_assist.settings import JiraSettings


async def main() -> int:
    print("Loading settings...")
    try:
        settings = JiraSettings()
    except Exception as e:
        print(f"FAIL: Could not load settings: {e}")
        print("Ensure JIRA_URL, JIRA_EMAIL, and JIRA_API_TOKEN are set.")
        return 1

    print(f"  JIRA_URL: {settings.url}")
    print(f"  JIRA_EMAIL: {settings.email}")
    print(f"  JIRA_API_TOKEN: {'*' * 8}...{settings.api_token[-4:]}")
    print(f"  JIRA_READ_ONLY_MODE: {settings.read_only_mode}")

    print("\nTesting connectivity...")
    client = create_client(settings)

    try:
        user = await client.get_current_user()
        print(f"  OK: Authenticated as {user.get('displayName')} ({user.get('accountId')})")
        projects = await client.list_projects()
        print(f"  OK: Found {len(projects)} accessible projects")
        for p in projects[:5]:
            print(f"    - {p.get('key')}: {p.get('name')}")
        if len(projects) > 5:
            print(f"    ... and {len(projects) - 5} more")
        return 0
    except Exception as e:
        print(f"  FAIL: {e}")
        return 1
    finally:
        await client.close()


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
