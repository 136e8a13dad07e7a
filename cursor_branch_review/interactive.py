"""Interactive prompt helpers built on InquirerPy."""

from __future__ import annotations

import sys
from typing import Protocol, Sequence

from InquirerPy import inquirer

from .exceptions import ValidationError

SELECT_MESSAGE = "选择要与当前分支比较的分支:"


class BranchSelector(Protocol):
    def __call__(self, branches: Sequence[str], default: str | None = None) -> str: ...


def _ensure_tty() -> None:
    if not sys.stdin.isatty():
        raise ValidationError("Branch selection requires an interactive terminal (TTY).")


def suggest_default(branches: Sequence[str], candidates: Sequence[str]) -> str | None:
    """Return the first candidate present in `branches`."""

    return next((name for name in candidates if name in branches), None)


def select_comparison_branch(branches: Sequence[str], default: str | None = None) -> str:
    if not branches:
        raise ValidationError("No local branches available for comparison.")
    _ensure_tty()
    return inquirer.select(
        message=SELECT_MESSAGE,
        choices=list(branches),
        default=default,
    ).execute()
