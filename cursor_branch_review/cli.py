"""Typer-based CLI for cursor-branch-review."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import typer

from . import render
from .app import ReviewSession, run

app = typer.Typer(
    help="Generate a branch-comparison review prompt and hand it to Cursor",
    add_completion=False,
)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


DIR_FLAG = "--dir"


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logging."),
) -> None:
    """Copy a review prompt comparing the current branch with another one.

    Pass `--dir PATH` to review a repository other than the current directory.
    """
    configure_logging(verbose)
    # Typer rejects an option without its value, so --dir is read from the
    # leftover arguments instead.
    base_path = resolve_base_path(find_dir_argument(ctx.args))
    run(ReviewSession.for_path(base_path))


def find_dir_argument(args: list[str]) -> str | None:
    """Return the value following `--dir`, or None when absent or trailing."""

    if DIR_FLAG not in args:
        return None
    index = args.index(DIR_FLAG)
    if index < len(args) - 1:
        return args[index + 1]
    return None


def resolve_base_path(directory: str | None) -> Path:
    """Validate `--dir` and return the path every later step works in."""

    if directory is None:
        return Path.cwd()
    render.info(f"指定目标目录: {directory}")
    target = Path(directory)
    if not directory or not target.exists():
        _fail(f'错误: 目录 "{directory}" 不存在')
    if not target.is_dir():
        _fail(f'错误: 无法切换到目录 "{directory}": 不是目录')
    if not os.access(target, os.R_OK | os.X_OK):
        _fail(f'错误: 无法切换到目录 "{directory}": 权限不足')
    resolved = target.resolve()
    render.success(f"已切换到目录: {directory}")
    return resolved


def _fail(message: str, code: int = 1) -> None:
    render.error(message)
    raise typer.Exit(code)


if __name__ == "__main__":
    app()
