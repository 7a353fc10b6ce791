"""Infers repository identity from a local git checkout."""

from pathlib import Path

import structlog

from github_issues_mirror.configuration.exceptions import RepositoryConfigurationError
from github_issues_mirror.utils.github import parse_repository_from_remote_url
from github_issues_mirror.utils.process import run_command

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def infer_repository_from_git(repo_path: Path, remote: str = "origin") -> str:
    """Return 'owner/name' for the given remote of the checkout at repo_path."""
    try:
        result = await run_command(["git", "remote", "get-url", remote], cwd=repo_path)
    except FileNotFoundError as exc:
        raise RepositoryConfigurationError("Could not infer repo: git is not installed; pass --repo owner/name.") from exc
    if result.returncode != 0:
        raise RepositoryConfigurationError(
            f"Could not infer repo: git remote get-url {remote} exited with code {result.returncode}: {result.stderr.strip() or result.stdout.strip()}"
        )
    repo = parse_repository_from_remote_url(result.stdout)
    logger.debug("Inferred repository from git remote", remote=remote, repo=repo)
    return repo
