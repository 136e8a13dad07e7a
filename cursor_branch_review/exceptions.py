"""Custom error hierarchy for cursor-branch-review."""

from __future__ import annotations


class BranchReviewError(RuntimeError):
    """Base error for the CLI."""


class GitCommandError(BranchReviewError):
    """Raised when an underlying git command fails."""

    def __init__(
        self,
        command: list[str],
        returncode: int,
        *,
        stdout: str | None = None,
        stderr: str | None = None,
    ):
        self.command = command
        self.returncode = returncode
        self.stdout = stdout or ""
        self.stderr = stderr or ""
        message = f"git command failed (exit {returncode}): {' '.join(command)}"
        if self.stderr.strip():
            message = f"{message}\n{self.stderr.strip()}"
        super().__init__(message)


class ValidationError(BranchReviewError):
    """Raised when user input or arguments fail validation."""


class ClipboardError(BranchReviewError):
    """Raised when the system clipboard cannot be written."""


class LaunchError(BranchReviewError):
    """Raised when the editor application cannot be started."""


__all__ = [
    "BranchReviewError",
    "GitCommandError",
    "ValidationError",
    "ClipboardError",
    "LaunchError",
]
