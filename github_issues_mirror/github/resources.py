"""Request descriptors for GitHub REST resources."""

from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlencode


@dataclass(frozen=True)
class ResourcePath:
    """A REST endpoint plus its query parameters.

    Parameters whose value is None are left out of the rendered path, so an
    optional filter such as ``since`` only appears once it is known.
    """

    endpoint: str
    params: dict[str, Any] = field(default_factory=dict)

    @property
    def query(self) -> dict[str, str]:
        """Query parameters with unset values omitted."""
        return {key: str(value) for key, value in self.params.items() if value is not None}

    def render(self) -> str:
        """Render the endpoint and URL-encoded query string."""
        query = self.query
        if not query:
            return self.endpoint
        return f"{self.endpoint}?{urlencode(query)}"

    def __str__(self) -> str:
        return self.render()


def repository_issues(owner: str, repo_name: str, per_page: int, since: str | None = None) -> ResourcePath:
    """Issues and pull requests of a repository, open and closed."""
    return ResourcePath(
        endpoint=f"/repos/{owner}/{repo_name}/issues",
        params={"state": "all", "per_page": per_page, "since": since},
    )


def issue_comments(owner: str, repo_name: str, issue_number: int, per_page: int) -> ResourcePath:
    """Comments of a single issue or pull request."""
    return ResourcePath(
        endpoint=f"/repos/{owner}/{repo_name}/issues/{issue_number}/comments",
        params={"per_page": per_page},
    )
