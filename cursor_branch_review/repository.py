"""Repository inspection against an explicit base path."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Protocol

from . import git

REMOTE_MARKER = "remotes/"
DETACHED_HEAD = "HEAD"


class RepositoryInspector(Protocol):
    """The three repository facts the review flow needs."""

    def is_repository(self) -> bool: ...

    def current_branch(self) -> str: ...

    def local_branches(self) -> list[str]: ...


@dataclass(frozen=True)
class GitRepository:
    """Answers repository queries by shelling out to git in `path`."""

    path: Path

    def is_repository(self) -> bool:
        return git.is_inside_work_tree(self.path)

    def current_branch(self) -> str:
        return git.show_current(self.path) or DETACHED_HEAD

    def local_branches(self) -> list[str]:
        return filter_local_branches(parse_branch_listing(git.branch_listing(self.path)))


def parse_branch_listing(output: str) -> list[str]:
    """Turn `git branch -a` output into bare branch names.

    The current and other-worktree markers are stripped, symbolic aliases keep
    only their own name, and detached-HEAD pseudo entries are dropped.
    """

    names: list[str] = []
    for raw in output.splitlines():
        line = raw[2:] if raw[:2] in ("* ", "+ ") else raw
        line = line.strip()
        if not line or line.startswith("("):
            continue
        name = line.split(" -> ", 1)[0].strip()
        if name:
            names.append(name)
    return names


def filter_local_branches(names: Iterable[str]) -> list[str]:
    """Drop remote-tracking entries, keeping the original order."""

    return [name for name in names if REMOTE_MARKER not in name]


__all__ = [
    "RepositoryInspector",
    "GitRepository",
    "parse_branch_listing",
    "filter_local_branches",
    "REMOTE_MARKER",
]
