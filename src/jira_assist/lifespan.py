"""Server lifespan: creates JiraClient on startup, closes on shutdown."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from jira_assist.jira.client import JiraClient
from jira_assist.logging.logger import setup_logger
from jira_assist.settings import JiraSettings

_client: JiraClient | None = None
_settings: JiraSettings | None = None


def get_jira_client() -> JiraClient:
    """Return the active JiraClient. Only valid during server lifespan."""
    if _client is None:
        raise RuntimeError("JiraClient not initialized. Is the server running?")
    return _client


def get_settings() -> JiraSettings:
    """Return the loaded settings. Only valid during server lifespan."""
    if _settings is None:
        raise RuntimeError("Settings not loaded. Is the server running?")
    return _settings


def create_client(settings: JiraSettings) -> JiraClient:
    return JiraClient(
        base_url=settings.url,
        email=settings.email,
        api_token=settings.api_token,
        timeout=settings.timeout,
        ssl_verify=settings.ssl_verify,
        max_retries=settings.max_retries,
        retry_delay=settings.retry_delay,
    )


@asynccontextmanager
async def lifespan(server) -> AsyncIterator[None]:  # noqa: ARG001
    """Async context manager that manages the JiraClient lifecycle."""
    global _client, _settings

    _settings = JiraSettings()
    logger = setup_logger(level=_settings.log_level)
    logger.info(
        "Starting jira-assist server (url=%s, read_only=%s)",
        _settings.url,
        _settings.read_only_mode,
    )

    _client = create_client(_settings)

    try:
        yield
    finally:
        logger.info("Shutting down jira-assist server")
        await _client.close()
        _client = None
        _settings = None
