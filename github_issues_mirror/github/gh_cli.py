"""Resource fetcher backed by the GitHub CLI (``gh api``).

Authentication, retries and HTTP pagination are all left to ``gh``; this
module only shapes the command and decodes what it prints.
"""

import json
from pathlib import Path
from typing import Any

import structlog

from github_issues_mirror.configuration.exceptions import FetchError, ResponseShapeError
from github_issues_mirror.github.abc import ResourceFetcherBase
from github_issues_mirror.github.resources import ResourcePath
from github_issues_mirror.utils.constants import GITHUB_ACCEPT_HEADER
from github_issues_mirror.utils.process import run_command

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def decode_json_output(output: str) -> Any:
    """Decode the JSON printed by ``gh api``.

    Returns None for empty output. ``gh api --paginate`` may print one JSON
    document per page; page arrays are concatenated into a single list.
    """
    text = output.strip()
    if not text:
        return None
    decoder = json.JSONDecoder()
    documents: list[Any] = []
    index = 0
    while index < len(text):
        try:
            document, index = decoder.raw_decode(text, index)
        except json.JSONDecodeError as exc:
            raise ResponseShapeError(f"Could not decode JSON from gh output: {exc}") from exc
        documents.append(document)
        while index < len(text) and text[index].isspace():
            index += 1
    if len(documents) == 1:
        return documents[0]
    if all(isinstance(document, list) for document in documents):
        merged: list[Any] = []
        for document in documents:
            merged.extend(document)
        return merged
    raise ResponseShapeError(f"gh printed {len(documents)} JSON documents that are not all lists")


class GhCliFetcher(ResourceFetcherBase):
    """Fetches resources by running ``gh api`` in the repository checkout."""

    def __init__(self, repo_path: Path, executable: str = "gh") -> None:
        """Initialize the fetcher for the checkout at repo_path."""
        self.repo_path = repo_path
        self.executable = executable

    def build_command(self, resource: ResourcePath, paginate: bool = True) -> list[str]:
        """Build the ``gh api`` argument list for a resource."""
        args = [self.executable, "api"]
        if paginate:
            args.append("--paginate")
        args.extend(["-H", f"Accept: {GITHUB_ACCEPT_HEADER}", resource.render()])
        return args

    async def fetch_all(self, resource: ResourcePath, paginate: bool = True) -> Any:
        """Fetch a resource through ``gh api``."""
        args = self.build_command(resource, paginate=paginate)
        logger.debug("Fetching resource with gh", command=" ".join(args))
        try:
            result = await run_command(args, cwd=self.repo_path)
        except FileNotFoundError as exc:
            raise FetchError(resource.render(), None, f"{self.executable} executable not found: {exc}") from exc
        if result.returncode != 0:
            raise FetchError(resource.render(), result.returncode, result.stderr or result.stdout)
        return decode_json_output(result.stdout)
