"""Thin wrappers around git CLI commands."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Iterable

from .exceptions import GitCommandError

logger = logging.getLogger(__name__)


def run_git(
    args: Iterable[str],
    *,
    cwd: Path,
    raise_on_error: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Execute a git command and optionally raise on failure."""

    cmd = ["git", *args]
    logger.debug("Running command in %s: %s", cwd, " ".join(cmd))
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError as exc:
        raise GitCommandError(cmd, 127, stderr=f"git executable not found: {exc}") from exc
    if raise_on_error and proc.returncode != 0:
        raise GitCommandError(cmd, proc.returncode, stdout=proc.stdout, stderr=proc.stderr)
    return proc


def is_inside_work_tree(path: Path) -> bool:
    proc = run_git(["rev-parse", "--is-inside-work-tree"], cwd=path, raise_on_error=False)
    return proc.returncode == 0 and proc.stdout.strip() == "true"


def show_current(path: Path) -> str:
    """Return the checked-out branch name, or an empty string when detached."""

    proc = run_git(["branch", "--show-current"], cwd=path)
    return proc.stdout.strip()


def branch_listing(path: Path) -> str:
    """Return the raw output of `git branch -a`."""

    proc = run_git(["branch", "-a", "--no-color"], cwd=path)
    return proc.stdout
