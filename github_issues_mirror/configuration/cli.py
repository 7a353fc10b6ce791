"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
import sys
from pathlib import Path

import structlog
import typer
from dotenv import load_dotenv
from typer import Argument, Option
from typing_extensions import Annotated

from github_issues_mirror.configuration.env import get_settings
from github_issues_mirror.configuration.exceptions import MirrorError
from github_issues_mirror.configuration.models import FetcherBackend
from github_issues_mirror.mirror.driver import run_sync_workflow
from github_issues_mirror.utils.helpers import parse_iso_timestamp
from github_issues_mirror.utils.logging import configure_logging

load_dotenv()

PROG_NAME = "gh-issues-mirror"
ERROR_PREFIX = f"[{PROG_NAME}]"
HELP_OPTION_NAMES = ["-h", "--help"]
USAGE_ERROR_EXIT_CODE = 2

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

typer_app = typer.Typer(
    name=PROG_NAME,
    help="Mirror GitHub issues and pull requests into <repoPath>/.github-mirror/.",
    context_settings={"help_option_names": HELP_OPTION_NAMES},
    add_completion=False,
    pretty_exceptions_enable=False,
)


@typer_app.callback(invoke_without_command=True)
def main_callback(ctx: typer.Context) -> None:
    """Mirror GitHub issues and pull requests into <repoPath>/.github-mirror/."""
    if ctx.invoked_subcommand is None:
        ctx.fail("Missing command.")


def validate_since(value: str | None) -> str | None:
    """Ensure --since is an ISO-8601 timestamp, keeping the original text."""
    if value is None:
        return None
    try:
        parse_iso_timestamp(value)
    except ValueError as exc:
        raise typer.BadParameter(f"'{value}' is not an ISO-8601 timestamp") from exc
    return value


@typer_app.command(name="sync")
def sync_cli(
    repo_path: Annotated[
        Path | None,
        Argument(help="Path to the local repository checkout. Defaults to the current directory.", show_default=False),
    ] = None,
    repo: Annotated[
        str | None,
        Option("--repo", help="Repository (owner/name). Inferred from git remote 'origin' when omitted.", show_default=False),
    ] = None,
    since: Annotated[
        str | None,
        Option("--since", help="Only fetch issues updated at or after this ISO-8601 timestamp.", callback=validate_since, show_default=False),
    ] = None,
    verbose: Annotated[bool, Option("--verbose", "-v", help="Log each request and decision to stderr.")] = False,
    backend: Annotated[
        FetcherBackend | None,
        Option("--backend", help="Fetch with the gh CLI or directly from the GitHub API.", case_sensitive=False, show_default=False),
    ] = None,
    github_api_url: Annotated[str | None, Option(help="GitHub API URL for the api backend.", show_default=False)] = None,
    github_pat_token: Annotated[str | None, Option(help="GitHub Personal Access Token for the api backend.", show_default=False)] = None,
) -> None:
    """Incrementally sync issues and pull requests (with comments) into the mirror."""
    settings = get_settings()
    configure_logging(verbose or settings.DEBUG)

    try:
        result = asyncio.run(
            run_sync_workflow(
                repo_path=repo_path or Path.cwd(),
                repo=repo or settings.REPO,
                since=since,
                backend=backend or settings.MIRROR_BACKEND,
                github_pat_token=github_pat_token or settings.GITHUB_PAT_TOKEN,
                github_api_url=github_api_url or settings.GITHUB_API_URL,
            )
        )
    except MirrorError as exc:
        logger.debug("Sync failed", error_type=type(exc).__name__)
        typer.echo(f"{ERROR_PREFIX} error: {exc}", err=True)
        raise typer.Exit(1) from exc

    for line in result.summary_lines():
        typer.echo(f"{ERROR_PREFIX} {line}")


def _help_args(args: list[str]) -> list[str]:
    """Reduce an argument list containing a help flag to a plain help request."""
    command = next((arg for arg in args if not arg.startswith("-")), None)
    if command is not None and command in typer.main.get_command(typer_app).commands:  # type: ignore[attr-defined]
        return [command, "--help"]
    return ["--help"]


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return its exit code.

    Help always exits 0; usage errors and failed runs exit 1. Typer reports
    usage errors itself and exits with code 2, which is folded into 1.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if any(arg in HELP_OPTION_NAMES for arg in args):
        args = _help_args(args)
    try:
        typer_app(args=args, prog_name=PROG_NAME)
    except SystemExit as exc:
        if exc.code is None:
            return 0
        if not isinstance(exc.code, int):
            typer.echo(exc.code, err=True)
            return 1
        return 1 if exc.code == USAGE_ERROR_EXIT_CODE else exc.code
    return 0


if __name__ == "__main__":
    sys.exit(main())
