"""Test doubles shared by unit tests."""

from typing import Any

from github_issues_mirror.configuration.exceptions import FetchError
from github_issues_mirror.github.abc import ResourceFetcherBase
from github_issues_mirror.github.resources import ResourcePath


class FakeFetcher(ResourceFetcherBase):
    """In-memory fetcher returning canned responses keyed by endpoint."""

    def __init__(self, responses: dict[str, Any] | None = None, failures: dict[str, FetchError] | None = None) -> None:
        self.responses = responses or {}
        self.failures = failures or {}
        self.requests: list[ResourcePath] = []

    async def fetch_all(self, resource: ResourcePath, paginate: bool = True) -> Any:
        self.requests.append(resource)
        if resource.endpoint in self.failures:
            raise self.failures[resource.endpoint]
        return self.responses.get(resource.endpoint)

    @property
    def endpoints(self) -> list[str]:
        return [request.endpoint for request in self.requests]
