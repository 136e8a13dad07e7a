"""Main application orchestration."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from . import render
from .clipboard import copy_prompt
from .config import EditorSettings
from .host import EnvironmentHostDetector, HostDetector
from .interactive import BranchSelector, select_comparison_branch, suggest_default
from .launcher import Launcher, LaunchOutcome, build_launcher, open_editor
from .prompt import build_review_prompt
from .repository import GitRepository, RepositoryInspector

logger = logging.getLogger(__name__)


@dataclass
class ReviewSession:
    """Collaborators for one run, all replaceable in tests."""

    base_path: Path
    repository: RepositoryInspector
    select_branch: BranchSelector = select_comparison_branch
    publish: Callable[[str], None] = copy_prompt
    host: HostDetector | None = None
    launcher: Launcher | None = None
    sleep: Callable[[float], None] = time.sleep
    settings: EditorSettings = field(default_factory=EditorSettings)

    def __post_init__(self) -> None:
        if self.host is None:
            self.host = EnvironmentHostDetector(markers=self.settings.host_markers)

    @classmethod
    def for_path(cls, base_path: Path) -> "ReviewSession":
        return cls(base_path=base_path, repository=GitRepository(base_path))

    def resolve_launcher(self) -> Launcher:
        if self.launcher is None:
            self.launcher = build_launcher(settings=self.settings, sleep=self.sleep)
        return self.launcher


def run(session: ReviewSession) -> LaunchOutcome:
    """Run the review-prompt flow.

    Any error raised before the editor step is fatal: it is printed once and
    the process exits with status 1. Launch problems are reported and the run
    still completes.

    Returns:
        The terminal outcome of the editor launch.
    """
    try:
        render.info("🔍 正在分析Git仓库...")
        if not session.repository.is_repository():
            render.error("错误: 当前目录不是Git仓库")
            raise SystemExit(1)

        current_branch = session.repository.current_branch()
        render.success(f"当前分支: {current_branch}")

        branches = session.repository.local_branches()
        logger.debug("Local branches: %s", branches)
        default = suggest_default(branches, session.settings.default_branches)
        comparison_branch = session.select_branch(branches, default)
        render.success(f"将比较 {current_branch} 与 {comparison_branch}")

        prompt = build_review_prompt(current_branch, comparison_branch)
        session.publish(prompt)
        render.success("审核提示已复制到剪贴板")

        outcome = _launch_editor(session)

        render.show_instructions()
        render.show_prompt(prompt)
        return outcome
    except SystemExit:
        raise
    except Exception as exc:
        logger.debug("Review flow failed", exc_info=True)
        render.error(f"错误: {exc}")
        raise SystemExit(1)


def _launch_editor(session: ReviewSession) -> LaunchOutcome:
    app_name = session.settings.app_name
    outcome = open_editor(session.base_path, session.host, session.resolve_launcher(), app_name)
    logger.debug("Launch outcome: %s", outcome.value)
    if outcome is LaunchOutcome.ALREADY_INSIDE:
        render.info(f"🚀 在{app_name}中打开聊天面板 (Cmd+L/Ctrl+L)，然后粘贴提示...")
    elif outcome.launched:
        render.success(f"{app_name}已启动")
        render.warning(f"请等待几秒钟，让{app_name}完全启动...")
        session.sleep(session.settings.settle_delay)
        render.info(f"请在{app_name}中打开聊天面板 (Cmd+L/Ctrl+L)，然后粘贴提示")
    else:
        render.warning(f"请手动打开{app_name}，然后粘贴剪贴板中的提示")
    return outcome
