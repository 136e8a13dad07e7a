"""Tests for the editor launch state machine and platform launchers."""

from __future__ import annotations

import subprocess
import unittest
from pathlib import Path

from cursor_branch_review.config import EditorSettings
from cursor_branch_review.exceptions import LaunchError
from cursor_branch_review.launcher import (
    AppleScriptAutomation,
    ExecutableLauncher,
    LaunchOutcome,
    MacLauncher,
    Platform,
    UnsupportedLauncher,
    build_launcher,
    open_editor,
    resolve_executable,
)

from .fakes import FakeAutomation, FakeHost, FakeLauncher, Recorder

PROJECT = Path("/work/project")


class PlatformDetectTests(unittest.TestCase):
    def test_known_platforms(self) -> None:
        self.assertIs(Platform.detect("darwin"), Platform.MACOS)
        self.assertIs(Platform.detect("win32"), Platform.WINDOWS)
        self.assertIs(Platform.detect("linux"), Platform.LINUX)

    def test_unknown_platform(self) -> None:
        self.assertIs(Platform.detect("freebsd14"), Platform.UNSUPPORTED)

    def test_build_launcher_uses_platform_table(self) -> None:
        self.assertIsInstance(build_launcher(Platform.MACOS), MacLauncher)
        self.assertIsInstance(build_launcher(Platform.WINDOWS), ExecutableLauncher)
        self.assertIsInstance(build_launcher(Platform.LINUX), ExecutableLauncher)
        self.assertIsInstance(build_launcher(Platform.UNSUPPORTED), UnsupportedLauncher)


class OpenEditorTests(unittest.TestCase):
    def test_inside_editor_skips_launch(self) -> None:
        launcher = FakeLauncher()

        outcome = open_editor(PROJECT, FakeHost(inside=True), launcher)

        self.assertIs(outcome, LaunchOutcome.ALREADY_INSIDE)
        self.assertEqual(launcher.paths, [])

    def test_launches_once_with_project_path(self) -> None:
        launcher = FakeLauncher(LaunchOutcome.MANUAL_STEP_REQUIRED)

        outcome = open_editor(PROJECT, FakeHost(), launcher)

        self.assertIs(outcome, LaunchOutcome.MANUAL_STEP_REQUIRED)
        self.assertEqual(launcher.paths, [PROJECT])

    def test_launcher_error_becomes_failure(self) -> None:
        launcher = FakeLauncher(error=LaunchError("no such app"))

        outcome = open_editor(PROJECT, FakeHost(), launcher)

        self.assertIs(outcome, LaunchOutcome.FAILURE)
        self.assertEqual(len(launcher.paths), 1)


class MacLauncherTests(unittest.TestCase):
    def setUp(self) -> None:
        self.settings = EditorSettings(startup_delay=1.5)
        self.sleeps: list[float] = []

    def test_opens_app_waits_then_automates(self) -> None:
        runner = Recorder()
        automation = FakeAutomation(result=True)
        launcher = MacLauncher(self.settings, automation, sleep=self.sleeps.append, runner=runner)

        outcome = launcher.launch(PROJECT)

        self.assertIs(outcome, LaunchOutcome.AUTOMATION_ATTEMPTED)
        self.assertEqual(runner.calls, [(["open", "-a", "Cursor.app", str(PROJECT)],)])
        self.assertEqual(self.sleeps, [1.5])
        self.assertEqual(automation.runs, 1)

    def test_failed_automation_keeps_launched_outcome(self) -> None:
        automation = FakeAutomation(result=False)
        launcher = MacLauncher(self.settings, automation, sleep=self.sleeps.append, runner=Recorder())

        self.assertIs(launcher.launch(PROJECT), LaunchOutcome.AUTOMATION_ATTEMPTED)
        self.assertEqual(automation.runs, 1)

    def test_open_failure_raises_without_automation(self) -> None:
        runner = Recorder(error=subprocess.CalledProcessError(1, ["open"]))
        automation = FakeAutomation()
        launcher = MacLauncher(self.settings, automation, sleep=self.sleeps.append, runner=runner)

        with self.assertRaises(LaunchError):
            launcher.launch(PROJECT)
        self.assertEqual(automation.runs, 0)
        self.assertEqual(self.sleeps, [])


class AppleScriptAutomationTests(unittest.TestCase):
    def test_runs_osascript_once(self) -> None:
        runner = Recorder()
        automation = AppleScriptAutomation(runner=runner)

        self.assertTrue(automation.run())
        self.assertEqual(len(runner.calls), 1)
        cmd = runner.calls[0][0]
        self.assertEqual(cmd[:2], ["osascript", "-e"])
        self.assertIn('keystroke "l" using command down', cmd[2])
        self.assertIn('tell application "Cursor"', cmd[2])

    def test_script_error_reports_false(self) -> None:
        runner = Recorder(error=subprocess.CalledProcessError(1, ["osascript"]))

        self.assertFalse(AppleScriptAutomation(runner=runner).run())

    def test_missing_osascript_reports_false(self) -> None:
        runner = Recorder(error=FileNotFoundError("osascript"))

        self.assertFalse(AppleScriptAutomation(runner=runner).run())


class ExecutableLauncherTests(unittest.TestCase):
    def test_spawns_executable_with_project_path(self) -> None:
        spawn = Recorder()

        outcome = ExecutableLauncher("/usr/bin/cursor", spawn=spawn).launch(PROJECT)

        self.assertIs(outcome, LaunchOutcome.MANUAL_STEP_REQUIRED)
        self.assertEqual(spawn.calls, [(["/usr/bin/cursor", str(PROJECT)],)])

    def test_keeps_spawned_process_handle(self) -> None:
        handle = object()
        launcher = ExecutableLauncher("/usr/bin/cursor", spawn=Recorder(result=handle))

        launcher.launch(PROJECT)

        self.assertIs(launcher.process, handle)

    def test_missing_executable_is_failure(self) -> None:
        launcher = ExecutableLauncher("/nope/cursor", spawn=Recorder(error=FileNotFoundError("/nope/cursor")))

        self.assertIs(open_editor(PROJECT, FakeHost(), launcher), LaunchOutcome.FAILURE)

    def test_resolve_prefers_path_lookup(self) -> None:
        settings = EditorSettings()

        self.assertEqual(
            resolve_executable(Platform.LINUX, settings, which=lambda name: "/opt/bin/cursor"),
            "/opt/bin/cursor",
        )
        self.assertEqual(
            resolve_executable(Platform.WINDOWS, settings, which=lambda name: None),
            settings.windows_executable,
        )
        self.assertEqual(
            resolve_executable(Platform.LINUX, settings, which=lambda name: None),
            settings.linux_executable,
        )

    def test_unsupported_platform_fails(self) -> None:
        self.assertIs(UnsupportedLauncher("plan9").launch(PROJECT), LaunchOutcome.FAILURE)


if __name__ == "__main__":
    unittest.main()
