"""Pydantic models for Jira API responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class JiraUser(BaseModel):
    account_id: str = Field(alias="accountId", default="")
    display_name: str = Field(alias="displayName", default="")
    email_address: str | None = Field(alias="emailAddress", default=None)
    time_zone: str | None = Field(alias="timeZone", default=None)
    active: bool = True

    model_config = {"populate_by_name": True}


class JiraNamed(BaseModel):
    """Status, priority, issue type and similar ``{"name": ...}`` objects."""

    id: str | None = None
    name: str = ""

    model_config = {"populate_by_name": True}


class JiraIssueFields(BaseModel):
    summary: str = ""
    description: Any | None = None
    status: JiraNamed | None = None
    issue_type: JiraNamed | None = Field(alias="issuetype", default=None)
    priority: JiraNamed | None = None
    assignee: JiraUser | None = None
    reporter: JiraUser | None = None
    labels: list[str] = Field(default_factory=list)
    project: dict[str, Any] | None = None
    created: str | None = None
    updated: str | None = None
    due_date: str | None = Field(alias="duedate", default=None)

    model_config = {"populate_by_name": True}


class JiraIssue(BaseModel):
    id: str = ""
    key: str = ""
    self_url: str = Field(alias="self", default="")
    fields: JiraIssueFields = Field(default_factory=JiraIssueFields)

    model_config = {"populate_by_name": True}

    @property
    def browse_url(self) -> str | None:
        """Link to the issue in the Jira web UI, derived from the API self URL."""
        if not self.self_url or "/rest/" not in self.self_url or not self.key:
            return None
        return f"{self.self_url.split('/rest/')[0]}/browse/{self.key}"


class JiraSearchResult(BaseModel):
    start_at: int = Field(alias="startAt", default=0)
    max_results: int = Field(alias="maxResults", default=50)
    total: int = 0
    issues: list[JiraIssue] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class JiraProject(BaseModel):
    id: str = ""
    key: str = ""
    name: str = ""
    project_type_key: str | None = Field(alias="projectTypeKey", default=None)
    lead: JiraUser | None = None
    self_url: str = Field(alias="self", default="")

    model_config = {"populate_by_name": True}


class JiraTransition(BaseModel):
    id: str = ""
    name: str = ""
    to: JiraNamed | None = None

    model_config = {"populate_by_name": True}


class JiraVisibility(BaseModel):
    type: str = ""
    value: str = ""


class JiraComment(BaseModel):
    id: str = ""
    author: JiraUser | None = None
    update_author: JiraUser | None = Field(alias="updateAuthor", default=None)
    body: Any | None = None
    created: str | None = None
    updated: str | None = None
    visibility: JiraVisibility | None = None
    jsd_public: bool | None = Field(alias="jsdPublic", default=None)

    model_config = {"populate_by_name": True}

    @property
    def internal(self) -> bool:
        """Restricted by visibility, or hidden from service desk customers."""
        return self.visibility is not None or self.jsd_public is False


class JiraCommentPage(BaseModel):
    start_at: int = Field(alias="startAt", default=0)
    max_results: int = Field(alias="maxResults", default=0)
    total: int = 0
    comments: list[JiraComment] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class JiraWorklog(BaseModel):
    id: str = ""
    author: JiraUser | None = None
    comment: Any | None = None
    started: str | None = None
    time_spent: str | None = Field(alias="timeSpent", default=None)
    time_spent_seconds: int | None = Field(alias="timeSpentSeconds", default=None)
    visibility: JiraVisibility | None = None

    model_config = {"populate_by_name": True}


class JiraBoardLocation(BaseModel):
    project_key: str | None = Field(alias="projectKey", default=None)
    project_name: str | None = Field(alias="projectName", default=None)

    model_config = {"populate_by_name": True}


class JiraBoard(BaseModel):
    id: int = 0
    name: str = ""
    type: str = ""
    location: JiraBoardLocation | None = None

    model_config = {"populate_by_name": True}


class JiraSprint(BaseModel):
    id: int = 0
    name: str = ""
    state: str = ""
    goal: str | None = None
    start_date: str | None = Field(alias="startDate", default=None)
    end_date: str | None = Field(alias="endDate", default=None)
    complete_date: str | None = Field(alias="completeDate", default=None)

    model_config = {"populate_by_name": True}
