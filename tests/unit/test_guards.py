"""Tests for read-only guard and rate limiter."""

from __future__ import annotations

import time
from unittest.mock import patch

import pytest

import jira_assist.tools  # noqa: F401  registers tools with the server
from jira_assist.guards.permissions import ALL_TOOLS, READ_TOOLS, WRITE_TOOLS
from jira_assist.guards.rate_limit import RateLimiter, _get_limiter, rate_limit, reset_limiter
from jira_assist.jira.errors import JiraPermissionError, JiraRateLimitError
from jira_assist.server import mcp


class TestReadOnlyGuard:
    def test_blocks_when_enabled(self):
        mock_settings = type("S", (), {"read_only_mode": True})()
        with patch("jira_assist.guards.read_only.get_settings", return_value=mock_settings):
            from jira_assist.guards.read_only import check_read_only

            with pytest.raises(JiraPermissionError, match="READ_ONLY_MODE"):
                check_read_only()

    def test_allows_when_disabled(self):
        mock_settings = type("S", (), {"read_only_mode": False})()
        with patch("jira_assist.guards.read_only.get_settings", return_value=mock_settings):
            from jira_assist.guards.read_only import check_read_only

            check_read_only()  # Should not raise


class TestRateLimiter:
    async def test_allows_within_limit(self):
        limiter = RateLimiter(max_calls=3, period=60)
        await limiter.acquire()
        await limiter.acquire()
        await limiter.acquire()

    async def test_blocks_over_limit(self):
        limiter = RateLimiter(max_calls=2, period=60)
        await limiter.acquire()
        await limiter.acquire()
        with pytest.raises(JiraRateLimitError, match="Rate limit"):
            await limiter.acquire()

    async def test_decorator_applies_rate_limit(self):
        call_count = 0

        @rate_limit
        async def my_tool():
            nonlocal call_count
            call_count += 1
            return "ok"

        mock_limiter = RateLimiter(max_calls=100, period=60)
        with patch("jira_assist.guards.rate_limit._get_limiter", return_value=mock_limiter):
            result = await my_tool()
            assert result == "ok"
            assert call_count == 1

    async def test_window_slides(self):
        limiter = RateLimiter(max_calls=1, period=60)
        limiter._timestamps = [time.monotonic() - 61]
        await limiter.acquire()
        assert len(limiter._timestamps) == 1


class TestPermissions:
    def test_read_and_write_sets_are_disjoint(self):
        assert not READ_TOOLS & WRITE_TOOLS
        assert ALL_TOOLS == READ_TOOLS | WRITE_TOOLS

    def test_write_tools_cover_every_mutation(self):
        assert {"create_issue", "update_issue", "add_comment", "add_worklog"} <= WRITE_TOOLS

    async def test_match_registered_tools(self):
        registered = await mcp.get_tools()
        assert set(registered) == ALL_TOOLS


class TestGlobalLimiter:
    def test_built_from_settings(self):
        settings = type("S", (), {"rate_limit_calls": 5, "rate_limit_period": 30})()
        reset_limiter()
        try:
            with patch("jira_assist.lifespan.get_settings", return_value=settings):
                limiter = _get_limiter()
            assert (limiter.max_calls, limiter.period) == (5, 30)
            assert _get_limiter() is limiter
        finally:
            reset_limiter()
