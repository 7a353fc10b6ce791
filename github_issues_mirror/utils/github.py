"""Contains utility functions for GitHub interactions."""

from github_issues_mirror.configuration.exceptions import RepositoryConfigurationError
from github_issues_mirror.utils.constants import GITHUB_REMOTE_PATTERNS


async def split_repository_in_configuration(repo: str | None) -> tuple[str, str]:
    """Splits the repository in the configuration into owner and repository."""
    if repo is None:
        raise RepositoryConfigurationError("Could not determine the repository; pass --repo owner/name.")
    repo = repo.strip().strip("/")
    parts = repo.split("/")
    if len(parts) != 2 or not all(parts):
        raise RepositoryConfigurationError(f"Invalid repo: {repo!r} must be in the format 'owner/name'.")
    owner, repository = parts
    return owner, repository


def parse_repository_from_remote_url(url: str) -> str:
    """Extracts 'owner/name' from a github.com remote URL.

    Both the SCP-like SSH form (``git@github.com:owner/name.git``), the
    ``ssh://`` form and the HTTPS form are recognized.
    """
    url = url.strip()
    if not url:
        raise RepositoryConfigurationError("Could not infer repo: git remote origin is empty")
    for pattern in GITHUB_REMOTE_PATTERNS:
        match = pattern.match(url)
        if match:
            return f"{match.group('owner')}/{match.group('name')}"
    raise RepositoryConfigurationError(f"Unsupported origin URL format: {url}")
