"""Retry helper with exponential backoff for transient errors."""

from __future__ import annotations

import asyncio
import functools
import logging
from typing import Any, Callable

from jira_assist.jira.errors import JiraAPIError, JiraConnectionError

logger = logging.getLogger("jira_assist")

# Status codes that are safe to retry
_RETRYABLE_CODES = {429, 500, 502, 503, 504}


def is_retryable(error: JiraAPIError) -> bool:
    return isinstance(error, JiraConnectionError) or error.status_code in _RETRYABLE_CODES


def retry(max_attempts: int = 3, base_delay: float = 1.0) -> Callable:
    """Decorator that retries on transient Jira API errors with exponential backoff.

    Args:
        max_attempts: Maximum number of attempts, including the first call.
        base_delay: Initial delay in seconds, doubled on each retry.
    """
    max_attempts = max(max_attempts, 1)

    def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(fn)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            for attempt in range(max_attempts):
                try:
                    return await fn(*args, **kwargs)
                except JiraAPIError as e:
                    if not is_retryable(e) or attempt == max_attempts - 1:
                        raise
                    delay = base_delay * (2**attempt)
                    logger.warning(
                        "Retrying %s (attempt %d/%d) after %ss: %s",
                        fn.__name__,
                        attempt + 1,
                        max_attempts,
                        delay,
                        e,
                    )
                    await asyncio.sleep(delay)

        return wrapper

    return decorator
