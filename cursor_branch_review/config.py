"""Static settings for locating and driving the Cursor editor."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class EditorSettings:
    """Defaults used by the launcher and host detection.

    Nothing here is read from the environment. Tests build their own instance,
    usually with the delays set to zero.
    """

    app_name: str = "Cursor"
    mac_bundle: str = "Cursor.app"
    executable_name: str = "cursor"
    windows_executable: str = r"C:\Program Files\Cursor\Cursor.exe"
    linux_executable: str = "/usr/bin/cursor"
    # seconds to wait for the editor window before driving it
    startup_delay: float = 3.0
    settle_delay: float = 3.0
    host_markers: tuple[str, ...] = ("CURSOR_EDITOR", "CURSOR")
    default_branches: tuple[str, ...] = field(default=("master", "main"))
