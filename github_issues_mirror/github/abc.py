"""Base ABC for GitHub resource fetchers."""

from abc import ABC, abstractmethod
from typing import Any

from github_issues_mirror.github.resources import ResourcePath


class ResourceFetcherBase(ABC):
    """Base ABC for fetching JSON resources from GitHub."""

    @abstractmethod
    async def fetch_all(self, resource: ResourcePath, paginate: bool = True) -> Any:
        """Fetch a resource as decoded JSON.

        For list endpoints with paginate set, the result is the full collection
        with every page concatenated. Returns None when the response body is
        empty, which is distinct from an empty list.

        Raises:
            FetchError: If the underlying client reports a failure.
        """
        pass
