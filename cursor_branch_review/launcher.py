"""Start the Cursor editor on the project and, on macOS, drive its chat panel.

The flow is a small state machine:

    NotStarted -> DetectingHost -> AlreadyInside            -> Done
                                -> Launching -> AutomationAttempted -> Done
                                             -> ManualStepRequired  -> Done
                                             -> Failure             -> Done

Each platform gets one launcher, picked from a table when the session starts.
Every external call (open, spawn, osascript) is attempted exactly once.
"""

from __future__ import annotations

import enum
import logging
import shutil
import subprocess
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Protocol

from . import render
from .config import EditorSettings
from .exceptions import LaunchError
from .host import HostDetector

logger = logging.getLogger(__name__)

Sleep = Callable[[float], None]


class Platform(enum.Enum):
    MACOS = "darwin"
    WINDOWS = "win32"
    LINUX = "linux"
    UNSUPPORTED = "unsupported"

    @classmethod
    def detect(cls, name: str | None = None) -> "Platform":
        name = name or sys.platform
        if name.startswith("linux"):
            return cls.LINUX
        for member in (cls.MACOS, cls.WINDOWS):
            if name == member.value:
                return member
        return cls.UNSUPPORTED


class LaunchOutcome(enum.Enum):
    ALREADY_INSIDE = "already_inside"
    AUTOMATION_ATTEMPTED = "automation_attempted"
    MANUAL_STEP_REQUIRED = "manual_step_required"
    FAILURE = "failure"

    @property
    def launched(self) -> bool:
        return self in (LaunchOutcome.AUTOMATION_ATTEMPTED, LaunchOutcome.MANUAL_STEP_REQUIRED)


class Launcher(Protocol):
    def launch(self, path: Path) -> LaunchOutcome: ...


class UiAutomation(Protocol):
    def run(self) -> bool: ...


APPLESCRIPT_TEMPLATE = """
tell application "{app}"
  activate
  delay 2
  tell application "System Events"
    tell process "{app}"
      keystroke "l" using command down
      delay 1
      keystroke "v" using command down
      delay 0.5
      keystroke return
    end tell
  end tell
end tell
"""


@dataclass
class AppleScriptAutomation:
    """Focus the editor, open the chat panel, paste and send via osascript."""

    app_name: str = EditorSettings.app_name
    runner: Callable[..., object] = subprocess.run

    @property
    def script(self) -> str:
        return APPLESCRIPT_TEMPLATE.format(app=self.app_name)

    def run(self) -> bool:
        cmd = ["osascript", "-e", self.script]
        logger.debug("Running UI automation for %s", self.app_name)
        try:
            self.runner(cmd, capture_output=True, text=True, check=True)
        except (OSError, subprocess.SubprocessError) as exc:
            render.error(f"自动化失败: {exc}")
            return False
        return True


@dataclass
class MacLauncher:
    settings: EditorSettings
    automation: UiAutomation
    sleep: Sleep = time.sleep
    runner: Callable[..., object] = subprocess.run

    def launch(self, path: Path) -> LaunchOutcome:
        cmd = ["open", "-a", self.settings.mac_bundle, str(path)]
        logger.debug("Running command: %s", " ".join(cmd))
        try:
            self.runner(cmd, capture_output=True, text=True, check=True)
        except (OSError, subprocess.SubprocessError) as exc:
            raise LaunchError(str(exc)) from exc

        render.warning(f"正在等待{self.settings.app_name}启动...")
        self.sleep(self.settings.startup_delay)

        render.info("尝试自动打开聊天面板并粘贴内容...")
        if self.automation.run():
            render.success("已自动打开聊天面板并粘贴内容")
        else:
            render.warning("请手动打开聊天面板 (Cmd+L) 并粘贴内容")
        return LaunchOutcome.AUTOMATION_ATTEMPTED


@dataclass
class ExecutableLauncher:
    """Spawn the editor executable with the project path as its argument."""

    executable: str
    app_name: str = EditorSettings.app_name
    spawn: Callable[..., object] = subprocess.Popen
    process: object | None = field(default=None, init=False)

    def launch(self, path: Path) -> LaunchOutcome:
        cmd = [self.executable, str(path)]
        logger.debug("Running command: %s", " ".join(cmd))
        try:
            # The editor is meant to outlive this process, so it is never waited on.
            self.process = self.spawn(
                cmd,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as exc:
            raise LaunchError(str(exc)) from exc
        render.success(f"{self.app_name}已启动")
        render.warning("请手动打开聊天面板 (Ctrl+L) 并粘贴内容")
        return LaunchOutcome.MANUAL_STEP_REQUIRED


@dataclass
class UnsupportedLauncher:
    platform_name: str = field(default_factory=lambda: sys.platform)

    def launch(self, path: Path) -> LaunchOutcome:
        logger.debug("No editor executable known for platform %s", self.platform_name)
        return LaunchOutcome.FAILURE


def resolve_executable(
    platform: Platform,
    settings: EditorSettings,
    which: Callable[[str], str | None] = shutil.which,
) -> str:
    """Prefer the executable on PATH, then the platform's install location."""

    found = which(settings.executable_name)
    if found:
        return found
    if platform is Platform.WINDOWS:
        return settings.windows_executable
    return settings.linux_executable


def _mac(settings: EditorSettings, sleep: Sleep) -> Launcher:
    return MacLauncher(settings, AppleScriptAutomation(settings.app_name), sleep=sleep)


def _windows(settings: EditorSettings, sleep: Sleep) -> Launcher:
    return ExecutableLauncher(resolve_executable(Platform.WINDOWS, settings), settings.app_name)


def _linux(settings: EditorSettings, sleep: Sleep) -> Launcher:
    return ExecutableLauncher(resolve_executable(Platform.LINUX, settings), settings.app_name)


def _unsupported(settings: EditorSettings, sleep: Sleep) -> Launcher:
    return UnsupportedLauncher()


LAUNCHERS: dict[Platform, Callable[[EditorSettings, Sleep], Launcher]] = {
    Platform.MACOS: _mac,
    Platform.WINDOWS: _windows,
    Platform.LINUX: _linux,
    Platform.UNSUPPORTED: _unsupported,
}


def build_launcher(
    platform: Platform | None = None,
    settings: EditorSettings | None = None,
    *,
    sleep: Sleep = time.sleep,
) -> Launcher:
    platform = platform or Platform.detect()
    settings = settings or EditorSettings()
    return LAUNCHERS[platform](settings, sleep)


def open_editor(path: Path, host: HostDetector, launcher: Launcher, app_name: str = "Cursor") -> LaunchOutcome:
    """Run the launch state machine once and report its terminal outcome."""

    if host.is_inside_editor():
        logger.debug("Editor host markers present, skipping launch")
        return LaunchOutcome.ALREADY_INSIDE
    render.info(f"🚀 尝试打开{app_name}...")
    try:
        return launcher.launch(path)
    except Exception as exc:
        render.error(f"无法打开{app_name}: {exc}")
        return LaunchOutcome.FAILURE
