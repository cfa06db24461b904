"""Tests for the payload builders and input checks behind the MCP tools."""

from __future__ import annotations

import pytest

from jira_assist.jira.errors import JiraValidationError
from jira_assist.jira.models import JiraComment, JiraProject
from jira_assist.tools.common import require_issue_key, require_text
from jira_assist.tools.comments import filter_comments
from jira_assist.tools.issues import build_create_fields, build_jql, build_update_fields
from jira_assist.tools.projects import filter_projects
from jira_assist.tools.worklogs import build_worklog_payload


class TestInputChecks:
    def test_require_text_strips(self):
        assert require_text("  jql  ", "jql") == "jql"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_require_text_rejects_blank(self, value):
        with pytest.raises(JiraValidationError, match="summary must not be empty"):
            require_text(value, "summary")

    def test_issue_key_is_uppercased(self):
        assert require_issue_key(" proj-12 ") == "PROJ-12"

    @pytest.mark.parametrize("value", ["PROJ", "12-PROJ", "PROJ-", "PR OJ-1"])
    def test_issue_key_rejects_malformed(self, value):
        with pytest.raises(JiraValidationError, match="Invalid issue key"):
            require_issue_key(value)


class TestCreateFields:
    def test_minimal(self):
        assert build_create_fields("proj", "Title") == {
            "project": {"key": "PROJ"},
            "summary": "Title",
            "issuetype": {"name": "Task"},
        }

    def test_description_becomes_document(self):
        fields = build_create_fields(
            "PROJ",
            "Title",
            issue_type="Bug",
            description="First\n\nSecond",
            priority="High",
            labels=["a"],
            assignee_account_id="acc-1",
        )
        assert fields["description"] == {
            "version": 1,
            "type": "doc",
            "content": [
                {"type": "paragraph", "content": [{"type": "text", "text": "First"}]},
                {"type": "paragraph", "content": [{"type": "text", "text": "Second"}]},
            ],
        }
        assert fields["issuetype"] == {"name": "Bug"}
        assert fields["priority"] == {"name": "High"}
        assert fields["labels"] == ["a"]
        assert fields["assignee"] == {"accountId": "acc-1"}

    def test_blank_description_is_omitted(self):
        assert "description" not in build_create_fields("PROJ", "Title", description="  ")

    def test_blank_summary_is_rejected(self):
        with pytest.raises(JiraValidationError):
            build_create_fields("PROJ", " ")


class TestUpdateFields:
    def test_nothing_given(self):
        assert build_update_fields() == {}

    def test_empty_description_clears(self):
        assert build_update_fields(description="") == {"description": None}

    def test_empty_assignee_unassigns(self):
        assert build_update_fields(assignee_account_id="") == {"assignee": {"accountId": None}}

    def test_summary_and_labels(self):
        assert build_update_fields(summary=" New ", labels=[]) == {"summary": "New", "labels": []}


class TestWorklogPayload:
    def test_full(self):
        payload = build_worklog_payload("1h 30m", started="2024-01-15T09:00:00.000+0000", comment="Done")
        assert payload["timeSpent"] == "1h 30m"
        assert payload["started"] == "2024-01-15T09:00:00.000+0000"
        assert payload["comment"]["content"][0]["content"][0]["text"] == "Done"

    def test_empty(self):
        assert build_worklog_payload() == {}

    def test_blank_time_spent_is_rejected(self):
        with pytest.raises(JiraValidationError):
            build_worklog_payload(time_spent=" ")


def test_filter_projects():
    projects = [
        JiraProject(key="WEB", name="Website"),
        JiraProject(key="OPS", name="Operations"),
    ]
    assert filter_projects(projects, None) == projects
    assert filter_projects(projects, "  ") == projects
    assert [p.key for p in filter_projects(projects, "web")] == ["WEB"]
    assert [p.key for p in filter_projects(projects, "ration")] == ["OPS"]
    assert filter_projects(projects, "zzz") == []


class TestBuildJql:
    def test_raw_jql_wins_over_helpers(self):
        assert build_jql("  project = X  ", text="ignored", assigned_to_me=True) == "project = X"

    def test_all_helpers(self):
        jql = build_jql(
            text='say "hi"', project="PROJ", status=["To Do", "In Progress"], assigned_to_me=True
        )
        assert jql == (
            'assignee = currentUser() AND project = "PROJ" '
            'AND status IN ("To Do", "In Progress") '
            'AND (summary ~ "say \\"hi\\"" OR description ~ "say \\"hi\\"") '
            "ORDER BY updated DESC"
        )

    def test_single_status_string(self):
        assert build_jql(status="Done") == 'status IN ("Done") ORDER BY updated DESC'

    def test_assigned_to_me_only(self):
        assert build_jql(assigned_to_me=True) == "assignee = currentUser() ORDER BY updated DESC"

    def test_backslash_is_escaped(self):
        assert build_jql(text="a\\b") == '(summary ~ "a\\\\b" OR description ~ "a\\\\b") ORDER BY updated DESC'

    @pytest.mark.parametrize(
        "kwargs", [{}, {"jql": "  "}, {"text": " ", "project": ""}, {"status": []}, {"status": [" "]}]
    )
    def test_requires_jql_or_a_helper(self, kwargs):
        with pytest.raises(JiraValidationError, match="Provide jql"):
            build_jql(**kwargs)


def _comment(author, email=None, **extra):
    return JiraComment.model_validate(
        {"author": {"displayName": author, "emailAddress": email}, **extra}
    )


class TestFilterComments:
    def test_internal_comments_hidden_by_default(self):
        public = _comment("Ada")
        restricted = _comment("Bob", visibility={"type": "role", "value": "Developers"})
        agent_only = _comment("Cy", jsdPublic=False)
        comments = [public, restricted, agent_only]
        assert filter_comments(comments) == [public]
        assert filter_comments(comments, include_internal=True) == comments

    def test_author_filter_matches_name_or_email(self):
        ada = _comment("Ada Lovelace", "ada@example.com")
        bob = _comment("Bob", "bob@corp.io")
        assert filter_comments([ada, bob], author_filter="LOVE") == [ada]
        assert filter_comments([ada, bob], author_filter="corp.io") == [bob]
        assert filter_comments([ada, bob], author_filter="  ") == [ada, bob]

    def test_comment_without_author_is_dropped_by_author_filter(self):
        anonymous = JiraComment(id="1")
        assert filter_comments([anonymous], author_filter="ada") == []
