"""Detect whether the tool already runs inside the Cursor editor."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Protocol

from .config import EditorSettings


class HostDetector(Protocol):
    def is_inside_editor(self) -> bool: ...


@dataclass
class EnvironmentHostDetector:
    """Checks the editor's environment markers for the value ``"true"``."""

    environ: Mapping[str, str] = field(default_factory=lambda: os.environ)
    markers: tuple[str, ...] = EditorSettings.host_markers

    def is_inside_editor(self) -> bool:
        return any(self.environ.get(marker) == "true" for marker in self.markers)
