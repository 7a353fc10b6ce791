"""Orchestrates one incremental sync of a repository's issues into the mirror."""

import time
from pathlib import Path
from typing import Any

import structlog

from github_issues_mirror.configuration.exceptions import RepositoryConfigurationError, ResponseShapeError
from github_issues_mirror.configuration.models import FetcherBackend
from github_issues_mirror.github.abc import ResourceFetcherBase
from github_issues_mirror.github.client import get_resource_fetcher
from github_issues_mirror.github.resources import issue_comments, repository_issues
from github_issues_mirror.mirror.results import SyncResult
from github_issues_mirror.mirror.snapshot import IssueRecord, MirrorPaths, write_issue_record
from github_issues_mirror.mirror.state import SyncState, SyncStats, read_state, write_state
from github_issues_mirror.utils.constants import DEFAULT_GITHUB_API_URL, PER_PAGE
from github_issues_mirror.utils.git import infer_repository_from_git
from github_issues_mirror.utils.github import split_repository_in_configuration
from github_issues_mirror.utils.helpers import utc_now_iso

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def _is_count(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def get_issue_number(issue: Any) -> int | None:
    """Return the issue number, or None when the payload has no integral number."""
    if not isinstance(issue, dict):
        return None
    number = issue.get("number")
    if isinstance(number, float) and number.is_integer():
        return int(number)
    if isinstance(number, bool) or not isinstance(number, int):
        return None
    return number


def resolve_effective_since(since: str | None, previous_state: SyncState | None) -> str | None:
    """Pick the cutoff: explicit since, then the last successful sync, then none."""
    if since:
        return since
    if previous_state is not None and previous_state.last_successful_sync_at:
        return previous_state.last_successful_sync_at
    return None


async def resolve_repository(repo_path: Path, repo: str | None) -> str:
    """Return the 'owner/name' identity, inferring it from git when not given."""
    if not repo:
        repo = await infer_repository_from_git(repo_path)
    owner, repo_name = await split_repository_in_configuration(repo)
    return f"{owner}/{repo_name}"


async def fetch_issue_comments(fetcher: ResourceFetcherBase, owner: str, repo_name: str, issue: dict[str, Any]) -> list[Any]:
    """Fetch the comments of an issue.

    No request is made when the issue reports no comments. A response that is
    not a list is treated as having no comments.
    """
    comment_count = issue.get("comments")
    if not _is_count(comment_count) or comment_count <= 0:
        return []
    number = issue["number"]
    comments = await fetcher.fetch_all(issue_comments(owner, repo_name, number, per_page=PER_PAGE))
    if not isinstance(comments, list):
        logger.warning(
            "Comment response is not a list, recording no comments",
            issue_number=number,
            response_type=type(comments).__name__,
        )
        return []
    return comments


async def run_sync_workflow(
    repo_path: Path,
    repo: str | None = None,
    since: str | None = None,
    fetcher: ResourceFetcherBase | None = None,
    backend: FetcherBackend = FetcherBackend.GH,
    github_pat_token: str | None = None,
    github_api_url: str = DEFAULT_GITHUB_API_URL,
) -> SyncResult:
    """Mirror the issues and pull requests of a repository into repo_path.

    Issues modified since the effective cutoff are fetched, each is written
    with its comments to its own record file, and the sync state is replaced
    last. Fetches and writes happen one at a time; the first failure aborts
    the run and leaves the previous state in place, so the next run fetches
    the same issues again.

    Raises:
        ConfigurationError: If the repository identity cannot be resolved.
        FetchError: If any fetch fails.
        ResponseShapeError: If the issue list is not a list.
        PersistenceError: If any file cannot be written.
    """
    repo_path = repo_path.resolve()
    if not repo_path.is_dir():
        raise RepositoryConfigurationError(f"Repository path is not a directory: {repo_path}")

    repo = await resolve_repository(repo_path, repo)
    owner, repo_name = repo.split("/")

    if fetcher is None:
        fetcher = get_resource_fetcher(
            backend=backend,
            repo_path=repo_path,
            github_pat_token=github_pat_token,
            github_api_url=github_api_url,
        )

    paths = MirrorPaths.for_repository(repo_path)
    paths.ensure()

    previous_state = read_state(paths.state_file)
    effective_since = resolve_effective_since(since, previous_state)
    logger.info("Starting sync", repo=repo, mirror_dir=str(paths.root), effective_since=effective_since)

    start_time = time.time()
    issues = await fetcher.fetch_all(repository_issues(owner, repo_name, per_page=PER_PAGE, since=effective_since))
    if not isinstance(issues, list):
        raise ResponseShapeError("Unexpected response: issues list is not an array")
    logger.info("Fetched issues", count=len(issues), duration=round(time.time() - start_time, 2))

    wrote_issue_files = 0
    fetched_comments = 0
    for issue in issues:
        number = get_issue_number(issue)
        if number is None:
            logger.debug("Skipping issue without a numeric identifier")
            continue

        comments = await fetch_issue_comments(fetcher, owner, repo_name, issue)
        fetched_comments += len(comments)

        record = IssueRecord(fetched_at=utc_now_iso(), repo=repo, issue=issue, comments=comments)
        path = write_issue_record(paths.issues_dir, record)
        wrote_issue_files += 1
        logger.debug("Wrote issue record", issue_number=number, comments=len(comments), path=str(path))

    # Only advanced once every record of this run is on disk.
    now = utc_now_iso()
    state = SyncState(
        repo=repo,
        last_run_at=now,
        last_successful_sync_at=now,
        effective_since=effective_since,
        stats=SyncStats(
            fetched_issues=len(issues),
            wrote_issue_files=wrote_issue_files,
            fetched_comments=fetched_comments,
        ),
    )
    write_state(paths.state_file, state)
    logger.info(
        "Finished sync",
        repo=repo,
        fetched_issues=len(issues),
        wrote_issue_files=wrote_issue_files,
        fetched_comments=fetched_comments,
        duration=round(time.time() - start_time, 2),
    )
    return SyncResult(repo=repo, repo_path=repo_path, mirror_dir=paths.root, state=state)
