"""Async Jira REST API v3 and Agile API client using httpx."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from jira_assist.jira.errors import (
    JiraAPIError,
    JiraAuthenticationError,
    JiraConnectionError,
    JiraNotFoundError,
    JiraPermissionError,
    JiraRateLimitError,
    JiraValidationError,
)
from jira_assist.utils.retry import retry

logger = logging.getLogger("jira_assist")

API_PATH = "/rest/api/3"
AGILE_PATH = "/rest/agile/1.0"

_ERROR_MAP: dict[int, type[JiraAPIError]] = {
    400: JiraValidationError,
    401: JiraAuthenticationError,
    403: JiraPermissionError,
    404: JiraNotFoundError,
    429: JiraRateLimitError,
}


def _drop_none(params: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in params.items() if v is not None}


class JiraClient:
    """Async wrapper around Jira REST API v3 and the Agile board/sprint API."""

    def __init__(
        self,
        base_url: str,
        email: str,
        api_token: str,
        timeout: int = 30,
        ssl_verify: bool | str = True,
        max_retries: int = 3,
        retry_delay: float = 1.0,
    ):
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            auth=(email, api_token),
            headers={"Accept": "application/json", "Content-Type": "application/json"},
            timeout=timeout,
            verify=ssl_verify,
        )
        self._request = retry(max_attempts=max_retries + 1, base_delay=retry_delay)(self._send)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def close(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Request helpers
    # ------------------------------------------------------------------

    async def _send(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.TransportError as e:
            raise JiraConnectionError(f"Jira API {method} {path} failed: {e}") from e
        if response.status_code >= 400:
            body = response.text
            message = f"Jira API {method} {path} failed ({response.status_code}): {body}"
            error_cls = _ERROR_MAP.get(response.status_code)
            if error_cls is None:
                raise JiraAPIError(message, status_code=response.status_code)
            raise error_cls(message)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    async def _get(self, path: str, **params: Any) -> Any:
        return await self._request("GET", f"{API_PATH}{path}", params=_drop_none(params))

    async def _post(self, path: str, json: Any) -> Any:
        return await self._request("POST", f"{API_PATH}{path}", json=json)

    async def _put(self, path: str, json: Any) -> Any:
        return await self._request("PUT", f"{API_PATH}{path}", json=json)

    async def _delete(self, path: str) -> Any:
        return await self._request("DELETE", f"{API_PATH}{path}")

    async def _agile_get(self, path: str, **params: Any) -> Any:
        return await self._request("GET", f"{AGILE_PATH}{path}", params=_drop_none(params))

    # ------------------------------------------------------------------
    # Issues
    # ------------------------------------------------------------------

    async def get_issue(
        self,
        issue_key: str,
        fields: list[str] | None = None,
        expand: list[str] | None = None,
    ) -> dict[str, Any]:
        return await self._get(
            f"/issue/{issue_key}",
            fields=",".join(fields) if fields else None,
            expand=",".join(expand) if expand else None,
        )

    async def create_issue(self, fields: dict[str, Any]) -> dict[str, Any]:
        return await self._post("/issue", json={"fields": fields})

    async def update_issue(self, issue_key: str, fields: dict[str, Any]) -> None:
        await self._put(f"/issue/{issue_key}", json={"fields": fields})

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    async def search_issues(
        self,
        jql: str,
        max_results: int = 50,
        start_at: int = 0,
        fields: list[str] | None = None,
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {"jql": jql, "maxResults": max_results, "startAt": start_at}
        if fields:
            payload["fields"] = fields
        return await self._post("/search", json=payload)

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    async def get_comments(
        self,
        issue_key: str,
        max_results: int | None = None,
        order_by: str | None = None,
    ) -> dict[str, Any]:
        return await self._get(
            f"/issue/{issue_key}/comment", maxResults=max_results, orderBy=order_by
        )

    async def add_comment(self, issue_key: str, body: dict[str, Any]) -> dict[str, Any]:
        return await self._post(f"/issue/{issue_key}/comment", json={"body": body})

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    async def get_transitions(self, issue_key: str) -> dict[str, Any]:
        return await self._get(f"/issue/{issue_key}/transitions")

    async def transition_issue(
        self, issue_key: str, transition_id: str, fields: dict[str, Any] | None = None
    ) -> None:
        payload: dict[str, Any] = {"transition": {"id": transition_id}}
        if fields:
            payload["fields"] = fields
        await self._post(f"/issue/{issue_key}/transitions", json=payload)

    # ------------------------------------------------------------------
    # Worklogs
    # ------------------------------------------------------------------

    async def get_worklogs(self, issue_key: str) -> dict[str, Any]:
        return await self._get(f"/issue/{issue_key}/worklog")

    async def add_worklog(self, issue_key: str, payload: dict[str, Any]) -> dict[str, Any]:
        return await self._post(f"/issue/{issue_key}/worklog", json=payload)

    async def update_worklog(
        self, issue_key: str, worklog_id: str, payload: dict[str, Any]
    ) -> dict[str, Any]:
        return await self._put(f"/issue/{issue_key}/worklog/{worklog_id}", json=payload)

    async def delete_worklog(self, issue_key: str, worklog_id: str) -> None:
        await self._delete(f"/issue/{issue_key}/worklog/{worklog_id}")

    # ------------------------------------------------------------------
    # Projects and users
    # ------------------------------------------------------------------

    async def list_projects(self) -> list[dict[str, Any]]:
        return await self._get("/project")

    async def get_current_user(self) -> dict[str, Any]:
        return await self._get("/myself")

    # ------------------------------------------------------------------
    # Boards and sprints (Agile API)
    # ------------------------------------------------------------------

    async def get_boards(
        self,
        board_type: str | None = None,
        project_key: str | None = None,
        name: str | None = None,
        max_results: int = 50,
        start_at: int = 0,
    ) -> dict[str, Any]:
        return await self._agile_get(
            "/board",
            type=board_type,
            projectKeyOrId=project_key,
            name=name,
            maxResults=max_results,
            startAt=start_at,
        )

    async def get_sprints(
        self,
        board_id: int,
        state: str | None = None,
        max_results: int = 50,
        start_at: int = 0,
    ) -> dict[str, Any]:
        return await self._agile_get(
            f"/board/{board_id}/sprint",
            state=state,
            maxResults=max_results,
            startAt=start_at,
        )
