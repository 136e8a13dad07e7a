"""Clipboard publishing built on pyperclip."""

from __future__ import annotations

import logging

import pyperclip

from .exceptions import ClipboardError

logger = logging.getLogger(__name__)


def copy_prompt(text: str) -> None:
    logger.debug("Copying %d characters to the clipboard", len(text))
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise ClipboardError(f"无法写入剪贴板: {exc}") from exc
