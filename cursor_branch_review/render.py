"""Rich UI helpers for terminal output."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

RULE_WIDTH = 50


def info(message: str) -> None:
    """Print a status message."""
    console.print(f"[blue]{escape(message)}[/blue]")


def success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓ {escape(message)}[/green]")


def warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]{escape(message)}[/yellow]")


def error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(f"[red]{escape(message)}[/red]", soft_wrap=True)


def show_instructions() -> None:
    console.print()
    console.print("[cyan]使用说明:[/cyan]")
    console.print("1. 在Cursor中打开聊天面板 (Cmd+L 或 Ctrl+L)")
    console.print("2. 粘贴剪贴板中的内容 (Cmd+V 或 Ctrl+V)")
    console.print("3. 发送消息并等待代码审核报告")
    console.print()


def show_prompt(prompt: str) -> None:
    """Echo the generated prompt between two rules."""

    console.print("[cyan]📋 审核提示内容:[/cyan]")
    console.print(f"[bright_black]{'─' * RULE_WIDTH}[/bright_black]")
    console.print(prompt, markup=False, soft_wrap=True)
    console.print(f"[bright_black]{'─' * RULE_WIDTH}[/bright_black]")
    console.print()
