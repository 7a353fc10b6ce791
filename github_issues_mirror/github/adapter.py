"""Resource fetcher adapter for the PyGithub library."""

import asyncio
import json
from functools import wraps
from typing import Any, Awaitable, Callable, TypeVar

import structlog
from github import Github, GithubException
from requests.exceptions import RequestException

from github_issues_mirror.configuration.exceptions import FetchError, ResponseShapeError
from github_issues_mirror.utils.constants import GITHUB_ACCEPT_HEADER, LINK_NEXT_PATTERN
from github_issues_mirror.utils.retry import retry_on_rate_limit

from .abc import ResourceFetcherBase
from .resources import ResourcePath

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])

Page = tuple[dict[str, Any], Any]
"""Response headers and decoded body of one request."""


def raise_fetch_error(func: F) -> F:
    """Decorator translating PyGithub and transport failures into FetchError."""

    @wraps(func)
    async def wrapper(self: "PyGithubFetcher", resource: ResourcePath, *args: Any, **kwargs: Any) -> Any:
        try:
            return await func(self, resource, *args, **kwargs)
        except GithubException as exc:
            body = json.dumps(exc.data) if exc.data is not None else str(exc)
            logger.error("GitHub request failed", function=func.__name__, resource=resource.render(), status_code=exc.status)
            raise FetchError(resource.render(), exc.status, body) from exc
        except RequestException as exc:
            logger.error("GitHub request could not be sent", function=func.__name__, resource=resource.render(), error=str(exc))
            raise FetchError(resource.render(), None, str(exc)) from exc

    return wrapper  # type: ignore


def next_page_url(headers: dict[str, Any]) -> str | None:
    """Return the rel="next" URL from the headers of a paginated response, if any."""
    link = headers.get("link") or headers.get("Link")
    if not link:
        return None
    match = LINK_NEXT_PATTERN.search(link)
    return match.group("url") if match else None


class PyGithubFetcher(ResourceFetcherBase):
    """Fetches resources through the GitHub REST API with PyGithub."""

    def __init__(self, client: Github) -> None:
        """Initialize the fetcher with an already-initialized client."""
        self.client = client

    def _request(self, url: str, params: dict[str, str] | None) -> Page:
        return self.client.requester.requestJsonAndCheck("GET", url, parameters=params, headers={"Accept": GITHUB_ACCEPT_HEADER})

    @retry_on_rate_limit()
    async def _get(self, url: str, params: dict[str, str] | None = None) -> Page:
        """Issue a single GET request without blocking the event loop."""
        return await asyncio.to_thread(self._request, url, params)

    @raise_fetch_error
    async def fetch_all(self, resource: ResourcePath, paginate: bool = True) -> Any:
        """Fetch a resource, following Link headers across pages for list endpoints.

        PyGithub decodes an empty body to None.
        """
        logger.debug("Fetching resource with PyGithub", resource=resource.render(), paginate=paginate)
        headers, data = await self._get(resource.endpoint, params=resource.query)
        if not paginate or not isinstance(data, list):
            return data

        items: list[Any] = list(data)
        url = next_page_url(headers)
        page = 1
        while url:
            page += 1
            headers, page_data = await self._get(url)
            if not isinstance(page_data, list):
                raise ResponseShapeError(f"Page {page} of {resource.render()} is not a list")
            items.extend(page_data)
            url = next_page_url(headers)
        logger.debug("Fetched paginated resource", resource=resource.render(), pages=page, items=len(items))
        return items
