"""Tests for the Markdown formatters."""

from __future__ import annotations

from jira_assist.adf import text_to_tree
from jira_assist.formatters import (
    format_boards,
    format_comments,
    format_issue,
    format_issue_list,
    format_issue_updated,
    format_projects,
    format_sprints,
    format_transitions,
    format_user,
    format_worklogs,
)
from jira_assist.formatters.issues import truncate
from jira_assist.jira.models import (
    JiraBoard,
    JiraComment,
    JiraIssue,
    JiraProject,
    JiraSearchResult,
    JiraSprint,
    JiraTransition,
    JiraUser,
    JiraWorklog,
)

ADF_DESCRIPTION = {
    "type": "doc",
    "version": 1,
    "content": [
        {"type": "heading", "attrs": {"level": 2}, "content": [{"type": "text", "text": "Problem"}]},
        {
            "type": "paragraph",
            "content": [
                {"type": "text", "text": "Search returns "},
                {"type": "text", "text": "500", "marks": [{"type": "strong"}]},
            ],
        },
    ],
}


def _issue(**fields):
    return JiraIssue.model_validate(
        {
            "id": "10001",
            "key": "PROJ-1",
            "self": "https://acme.atlassian.net/rest/api/3/issue/10001",
            "fields": {"summary": "Broken search", **fields},
        }
    )


class TestIssueFormatter:
    def test_renders_adf_description(self):
        markdown = format_issue(
            _issue(
                description=ADF_DESCRIPTION,
                status={"name": "In Progress"},
                priority={"name": "High"},
                assignee={"accountId": "a1", "displayName": "Ada Lovelace"},
                labels=["backend", "search"],
                created="2024-01-01T10:00:00.000+0000",
            )
        )
        assert markdown.startswith("# PROJ-1: Broken search\n\n")
        assert "**Status:** In Progress" in markdown
        assert "**Assignee:** Ada Lovelace" in markdown
        assert "## Description\n## Problem\n\nSearch returns **500**" in markdown
        assert "## Labels\nbackend, search" in markdown
        assert "**Created:** 2024-01-01T10:00:00.000+0000" in markdown
        assert "[View in JIRA](https://acme.atlassian.net/browse/PROJ-1)" in markdown

    def test_plain_string_description(self):
        assert "## Description\nlegacy text" in format_issue(_issue(description="legacy text"))

    def test_missing_fields_fall_back(self):
        markdown = format_issue(_issue())
        assert "**Status:** Unknown" in markdown
        assert "**Assignee:** Unassigned" in markdown
        assert "## Description" not in markdown

    def test_empty_adf_description_is_omitted(self):
        markdown = format_issue(_issue(description={"type": "doc", "version": 1, "content": []}))
        assert "## Description" not in markdown


class TestIssueList:
    def test_empty(self):
        assert "No issues found." in format_issue_list(JiraSearchResult())

    def test_cards_and_pagination(self):
        result = JiraSearchResult.model_validate(
            {
                "startAt": 0,
                "maxResults": 1,
                "total": 3,
                "issues": [
                    {
                        "key": "PROJ-1",
                        "fields": {"summary": "One", "description": text_to_tree("x " * 80)},
                    }
                ],
            }
        )
        markdown = format_issue_list(result)
        assert "Showing 1-1 of 3 issues" in markdown
        assert "## PROJ-1: One" in markdown
        assert "**Description**: " in markdown
        assert "start_at=1" in markdown

    def test_truncate(self):
        assert truncate("short") == "short"
        assert truncate("a  b\n\nc") == "a b c"
        cut = truncate("word " * 50, length=20)
        assert len(cut) <= 20
        assert cut.endswith("...")


class TestComments:
    def test_no_comments(self):
        assert "**No comments found**" in format_comments("PROJ-1", [], total=0)

    def test_comment_body_is_rendered(self):
        comments = [
            JiraComment.model_validate(
                {
                    "id": "1",
                    "author": {"displayName": "Ada"},
                    "body": text_to_tree("First line\n\nSecond"),
                    "created": "2024-01-01",
                    "updated": "2024-01-02",
                    "updateAuthor": {"displayName": "Grace"},
                }
            ),
            JiraComment.model_validate(
                {
                    "id": "2",
                    "author": {"displayName": "Linus"},
                    "body": "plain",
                    "created": "2024-01-03",
                    "visibility": {"type": "role", "value": "Developers"},
                }
            ),
        ]
        markdown = format_comments("PROJ-1", comments, total=5)
        assert "**Total:** 5 comments | **Showing:** 2" in markdown
        assert "## Comment #1 • Ada • 2024-01-01" in markdown
        assert "_Last edited: 2024-01-02 by Grace_" in markdown
        assert "First line\n\nSecond" in markdown
        assert "## 🔒 Comment #2 • Linus" in markdown
        assert "3 more comments available" in markdown


class TestWorklogs:
    def test_plain_text_comment_and_total(self):
        worklogs = [
            JiraWorklog.model_validate(
                {
                    "id": "7",
                    "author": {"displayName": "Ada"},
                    "timeSpent": "1h 30m",
                    "timeSpentSeconds": 5400,
                    "comment": text_to_tree("Fixed the **bug**"),
                }
            ),
            JiraWorklog.model_validate({"id": "8", "timeSpent": "1h", "timeSpentSeconds": 3600}),
        ]
        markdown = format_worklogs("PROJ-1", worklogs)
        assert "**Entries:** 2 | **Total:** 2h 30m" in markdown
        assert "Fixed the **bug**" in markdown
        assert "## Worklog 8" in markdown

    def test_empty(self):
        assert "No worklogs recorded." in format_worklogs("PROJ-1", [])


class TestAgile:
    def test_boards(self):
        boards = [
            JiraBoard.model_validate(
                {"id": 1, "name": "Team", "type": "scrum", "location": {"projectKey": "PROJ"}}
            )
        ]
        markdown = format_boards(boards, has_more=True)
        assert "- **Team** (id: 1, type: scrum) in project PROJ" in markdown
        assert "More boards available" in markdown

    def test_sprints_active_first(self):
        sprints = [
            JiraSprint.model_validate({"id": 1, "name": "Old", "state": "closed"}),
            JiraSprint.model_validate({"id": 2, "name": "Now", "state": "active", "goal": "Ship"}),
            JiraSprint.model_validate({"id": 3, "name": "Next", "state": "future"}),
        ]
        markdown = format_sprints(9, sprints)
        assert markdown.index("Now") < markdown.index("Next") < markdown.index("Old")
        assert "**Goal:** Ship" in markdown


def test_projects_and_user():
    projects = [JiraProject.model_validate({"key": "PROJ", "name": "Project", "projectTypeKey": "software"})]
    assert "- **PROJ**: Project (software)" in format_projects(projects)
    user = JiraUser.model_validate({"accountId": "a1", "displayName": "Ada", "emailAddress": "ada@x.io"})
    markdown = format_user(user)
    assert markdown.startswith("# Ada")
    assert "**Email:** ada@x.io" in markdown


def test_transitions_and_update_confirmation():
    transitions = [JiraTransition.model_validate({"id": "31", "name": "Done", "to": {"name": "Done"}})]
    assert "- **Done** (id: 31) -> Done" in format_transitions("PROJ-1", transitions)
    assert "No transitions" in format_transitions("PROJ-1", [])
    assert "- summary" in format_issue_updated("PROJ-1", ["summary"])
