"""Unit tests for the rate limit retry decorator."""

import time
from unittest.mock import AsyncMock, patch

import pytest
from github import GithubException

from github_issues_mirror.utils.retry import is_rate_limit_error, retry_on_rate_limit, wait_time_from_headers


@pytest.mark.parametrize(
    "exc,expected",
    [
        pytest.param(GithubException(429, {"message": "Too Many Requests"}, {}), True, id="429"),
        pytest.param(GithubException(403, {"message": "You have exceeded a secondary rate limit"}, {}), True, id="secondary"),
        pytest.param(GithubException(403, {"message": "Resource not accessible"}, {}), False, id="forbidden"),
        pytest.param(GithubException(404, {"message": "Not Found"}, {}), False, id="not found"),
    ],
)
def test_is_rate_limit_error(exc: GithubException, expected: bool) -> None:
    """Test classification of GitHub errors."""
    assert is_rate_limit_error(exc) is expected


def test_wait_time_from_headers() -> None:
    """Test that retry-after wins, then x-ratelimit-reset, then the default."""
    assert wait_time_from_headers({"Retry-After": "7"}, 10.0) == 7.0
    reset = str(int(time.time()) + 30)
    assert 30.0 <= wait_time_from_headers({"x-ratelimit-reset": reset}, 10.0) <= 32.0
    assert wait_time_from_headers({"retry-after": "soon"}, 10.0) == 10.0
    assert wait_time_from_headers(None, 10.0) == 10.0


@pytest.mark.asyncio
async def test_retry_gives_up_after_max_retries() -> None:
    """Test that the last rate limit error is raised once retries are exhausted."""
    func = AsyncMock(side_effect=GithubException(429, {"message": "Too Many Requests"}, {}))
    func.__name__ = "func"
    decorated = retry_on_rate_limit(max_retries=2, initial_delay=1.0)(func)
    with patch("github_issues_mirror.utils.retry.asyncio.sleep", AsyncMock()) as sleep:
        with pytest.raises(GithubException):
            await decorated()
    assert func.await_count == 3
    assert [call.args[0] for call in sleep.await_args_list] == [1.0, 2.0]


@pytest.mark.asyncio
async def test_retry_does_not_retry_other_errors() -> None:
    """Test that non rate limit errors propagate immediately."""
    func = AsyncMock(side_effect=GithubException(500, {"message": "boom"}, {}))
    func.__name__ = "func"
    decorated = retry_on_rate_limit()(func)
    with pytest.raises(GithubException):
        await decorated()
    assert func.await_count == 1


def test_retry_rejects_sync_functions() -> None:
    """Test that decorating a plain function is refused."""

    def plain() -> None:
        pass

    with pytest.raises(TypeError, match="must be async"):
        retry_on_rate_limit()(plain)
