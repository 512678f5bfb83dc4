"""Staged diff and commit via the git command line."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from gitscribe.llm.models import GitscribeError

logger = logging.getLogger(__name__)


class GitError(GitscribeError):
    """A git command could not be run or exited non-zero."""

    def __init__(self, command: str, detail: str) -> None:
        self.command = command
        self.detail = detail
        super().__init__(f"Git {command} command failed: {detail}")


def _run_git(args: list[str], cwd: Path | None = None) -> str:
    try:
        result = subprocess.run(
            ["git", *args],
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            cwd=cwd,
        )
    except FileNotFoundError as e:
        raise GitError(args[0], "git executable not found") from e

    if result.returncode != 0:
        logger.debug("git %s exited %d", args[0], result.returncode)
        detail = result.stderr.strip() or result.stdout.strip()
        raise GitError(args[0], detail or f"exit status {result.returncode}")
    return result.stdout


def read_staged_diff(cwd: Path | None = None) -> str:
    """Return `git diff --staged`; empty when nothing is staged."""
    return _run_git(["diff", "--staged"], cwd=cwd)


def commit(message: str, cwd: Path | None = None) -> None:
    """Commit the staged changes with the given message."""
    _run_git(["commit", "-m", message], cwd=cwd)
    logger.info("Committed staged changes")
