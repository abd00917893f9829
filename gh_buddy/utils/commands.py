"""Runs external commands (git, gh) as blocking subprocesses."""

import subprocess
from pathlib import Path

import structlog

from gh_buddy.exceptions import GhBuddyError

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class CommandNotFoundError(GhBuddyError):
    """Raised when the executable for a command is not installed or not on PATH."""

    def __init__(self, executable: str) -> None:
        """Initializes the exception with the name of the missing executable."""
        super().__init__(f"command not found: {executable}")
        self.executable = executable


def run_command(args: list[str], cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    """Run a command to completion and capture its text output.

    The return code is not checked; callers decide what a failure means.
    """
    logger.debug("Running command", command=" ".join(args), cwd=str(cwd) if cwd else None)
    try:
        result = subprocess.run(args, capture_output=True, text=True, cwd=cwd)
    except FileNotFoundError as exc:
        raise CommandNotFoundError(args[0]) from exc
    logger.debug("Command finished", command=args[0], returncode=result.returncode)
    return result


def describe_failure(result: subprocess.CompletedProcess[str]) -> str:
    """Return the most useful description of why a command failed."""
    output = (result.stderr or result.stdout or "").strip()
    return output or f"exit status {result.returncode}"
