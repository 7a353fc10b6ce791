"""Runs external commands without blocking the event loop."""

import asyncio
from dataclasses import dataclass
from pathlib import Path

import structlog

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


@dataclass
class CommandResult:
    """Captured outcome of an external command."""

    args: list[str]
    returncode: int
    stdout: str
    stderr: str


async def run_command(args: list[str], cwd: Path | None = None) -> CommandResult:
    """Run a command to completion and capture its output.

    Raises:
        FileNotFoundError: If the executable cannot be found.
    """
    logger.debug("Running command", command=" ".join(args), cwd=str(cwd) if cwd else None)
    process = await asyncio.create_subprocess_exec(
        *args,
        cwd=cwd,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    stdout, stderr = await process.communicate()
    result = CommandResult(
        args=list(args),
        returncode=process.returncode if process.returncode is not None else -1,
        stdout=stdout.decode("utf-8", errors="replace"),
        stderr=stderr.decode("utf-8", errors="replace"),
    )
    if result.returncode != 0:
        logger.debug("Command failed", command=" ".join(args), returncode=result.returncode, stderr=result.stderr.strip())
    return result
