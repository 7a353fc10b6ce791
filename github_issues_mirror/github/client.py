"""Sets up the resource fetcher for the configured backend."""

from pathlib import Path

from github import Auth, Github

from github_issues_mirror.configuration.exceptions import RequiredConfigurationElementError
from github_issues_mirror.configuration.models import FetcherBackend
from github_issues_mirror.github.abc import ResourceFetcherBase
from github_issues_mirror.utils.constants import DEFAULT_GITHUB_API_URL


def get_github_pat_client(github_pat_token: str | None, github_api_url: str = DEFAULT_GITHUB_API_URL) -> Github:
    """Returns an authenticated GitHub client using GitHub PAT credentials."""
    if not github_pat_token:
        raise RequiredConfigurationElementError(
            name="GitHub Personal Access Token",
            cli_name="--github-pat-token",
            env_name="GITHUB_PAT_TOKEN",
        )
    # Rate limit retries are handled by retry_on_rate_limit, not by the client.
    return Github(auth=Auth.Token(github_pat_token), base_url=github_api_url, retry=None)


def get_resource_fetcher(
    backend: FetcherBackend,
    repo_path: Path,
    github_pat_token: str | None = None,
    github_api_url: str = DEFAULT_GITHUB_API_URL,
) -> ResourceFetcherBase:
    """Returns the resource fetcher for the requested backend.

    The ``gh`` backend delegates authentication to the GitHub CLI. The ``api``
    backend talks to the REST API directly and needs a token.
    """
    if backend == FetcherBackend.API:
        from github_issues_mirror.github.adapter import PyGithubFetcher

        return PyGithubFetcher(get_github_pat_client(github_pat_token, github_api_url))

    from github_issues_mirror.github.gh_cli import GhCliFetcher

    return GhCliFetcher(repo_path)
