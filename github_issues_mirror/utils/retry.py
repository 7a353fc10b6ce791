"""Retry decorator for GitHub API rate limits.

Only the in-process GitHub API backend retries; the sync engine itself never
retries a failed fetch.
"""

import asyncio
import functools
import inspect
import time
from typing import Any, Awaitable, Callable, TypeVar

import structlog
from github import GithubException, RateLimitExceededException

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def is_rate_limit_error(exc: GithubException) -> bool:
    """Whether a GitHub error is a primary or secondary rate limit."""
    if isinstance(exc, RateLimitExceededException) or exc.status == 429:
        return True
    message = exc.data.get("message", "") if isinstance(exc.data, dict) else str(exc.data or "")
    return exc.status == 403 and "rate limit" in str(message).lower()


def wait_time_from_headers(headers: dict[str, Any] | None, default: float) -> float:
    """Derive a wait time from retry-after or x-ratelimit-reset headers."""
    headers = {key.lower(): value for key, value in (headers or {}).items()}
    retry_after = headers.get("retry-after")
    if retry_after:
        try:
            return float(retry_after)
        except ValueError:
            logger.warning("Invalid retry-after header value", retry_after=retry_after)
    rate_limit_reset = headers.get("x-ratelimit-reset")
    if rate_limit_reset:
        try:
            remaining = int(rate_limit_reset) - int(time.time())
            if remaining > 0:
                return float(remaining + 1)
        except ValueError:
            logger.warning("Invalid x-ratelimit-reset header value", rate_limit_reset=rate_limit_reset)
    return default


def retry_on_rate_limit(
    max_retries: int = 5,
    initial_delay: float = 10.0,
    max_delay: float = 300.0,
    exponential_base: float = 2.0,
) -> Callable[[F], F]:
    """Retry an async GitHub call when it hits a rate limit.

    Waits for as long as the retry-after or x-ratelimit-reset headers ask,
    falling back to exponential backoff. Any other error is raised immediately.

    Args:
        max_retries: Maximum number of retry attempts
        initial_delay: Delay in seconds before the first retry when GitHub gives no hint
        max_delay: Upper bound for any single wait
        exponential_base: Multiplier applied to the fallback delay after each attempt
    """

    def decorator(func: F) -> F:
        if not inspect.iscoroutinefunction(func):
            raise TypeError(f"Function {func.__name__} decorated with @retry_on_rate_limit must be async.")

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            delay = initial_delay
            attempt = 0
            while True:
                try:
                    return await func(*args, **kwargs)
                except GithubException as e:
                    if not is_rate_limit_error(e):
                        raise
                    if attempt == max_retries:
                        logger.error("Max retries reached for GitHub rate limit error", function=func.__name__, attempt=attempt + 1, status_code=e.status)
                        raise
                    wait_time = min(wait_time_from_headers(e.headers, delay), max_delay)

                attempt += 1
                logger.warning(
                    f"GitHub rate limit exceeded, waiting {wait_time} seconds",
                    function=func.__name__,
                    attempt=attempt,
                    max_retries=max_retries,
                )
                await asyncio.sleep(wait_time)
                delay = min(delay * exponential_base, max_delay)

        return wrapper  # type: ignore

    return decorator
