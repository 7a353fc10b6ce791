"""Unit tests for inferring the repository from git."""

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from github_issues_mirror.configuration.exceptions import RepositoryConfigurationError
from github_issues_mirror.utils.git import infer_repository_from_git
from github_issues_mirror.utils.process import CommandResult


def git_result(stdout: str = "", stderr: str = "", returncode: int = 0) -> CommandResult:
    return CommandResult(args=["git"], returncode=returncode, stdout=stdout, stderr=stderr)


@pytest.mark.asyncio
async def test_infer_repository_from_origin(tmp_path: Path) -> None:
    """Test that the origin remote URL is read from the checkout."""
    run = AsyncMock(return_value=git_result("git@github.com:octocat/Hello-World.git\n"))
    with patch("github_issues_mirror.utils.git.run_command", run):
        assert await infer_repository_from_git(tmp_path) == "octocat/Hello-World"
    run.assert_awaited_once_with(["git", "remote", "get-url", "origin"], cwd=tmp_path)


@pytest.mark.asyncio
async def test_infer_repository_git_failure(tmp_path: Path) -> None:
    """Test that a failing git command is a configuration error."""
    run = AsyncMock(return_value=git_result(stderr="error: No such remote 'origin'\n", returncode=2))
    with patch("github_issues_mirror.utils.git.run_command", run):
        with pytest.raises(RepositoryConfigurationError, match="No such remote 'origin'"):
            await infer_repository_from_git(tmp_path)


@pytest.mark.asyncio
async def test_infer_repository_git_missing(tmp_path: Path) -> None:
    """Test that a missing git executable is a configuration error."""
    with patch("github_issues_mirror.utils.git.run_command", AsyncMock(side_effect=FileNotFoundError("git"))):
        with pytest.raises(RepositoryConfigurationError, match="git is not installed"):
            await infer_repository_from_git(tmp_path)


@pytest.mark.asyncio
async def test_infer_repository_unsupported_url(tmp_path: Path) -> None:
    """Test that a non-GitHub origin is a configuration error."""
    with patch("github_issues_mirror.utils.git.run_command", AsyncMock(return_value=git_result("https://gitlab.com/a/b.git\n"))):
        with pytest.raises(RepositoryConfigurationError, match="Unsupported origin URL format"):
            await infer_repository_from_git(tmp_path)
