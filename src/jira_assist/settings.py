"""Configuration settings loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class JiraSettings(BaseSettings):
    """jira-assist server settings.

    All settings are loaded from environment variables prefixed with JIRA_,
    falling back to a ``.env`` file in the working directory.
    """

    model_config = {"env_prefix": "JIRA_", "env_file": ".env", "extra": "ignore"}

    # Required
    url: str
    email: str
    api_token: str

    # Optional
    read_only_mode: bool = False
    max_results: int = 50
    timeout: int = 30
    max_retries: int = 3
    retry_delay: float = 1.0
    rate_limit_calls: int = 10
    rate_limit_period: int = 60
    log_level: str = "INFO"
    ssl_verify: bool | str = True
