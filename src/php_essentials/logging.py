# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

import os
import sys
from functools import lru_cache

from rich.console import Console
from rich.text import Text


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _color_default() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()


@lru_cache(maxsize=4)
def _console(color: bool, use_emoji: bool) -> Console:
    # No ``file`` argument: rich resolves ``sys.stdout`` on every print.
    return Console(no_color=not color, emoji=use_emoji, highlight=False)


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_emoji: bool,
    use_color: bool | None = None,
) -> None:
    """Render ``msg`` on stdout.

    Args:
        msg: Message text to print.
        style: Rich style applied when colour output is active.
        use_emoji: Whether emoji output is desired.
        use_color: Explicit colour flag; ``None`` follows the terminal.
    """

    color = _color_default() if use_color is None else use_color
    text = Text(msg)
    if style and color:
        text.stylize(style)
    _console(color, use_emoji).print(text)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an informational message."""

    prefix = emoji("ℹ️ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="cyan", use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a success message."""

    prefix = emoji("✅ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="green", use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a warning message."""

    prefix = emoji("⚠️ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="yellow", use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message."""

    prefix = emoji("❌ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="red", use_emoji=use_emoji, use_color=use_color)


def debug(msg: str, *, use_color: bool | None = None) -> None:
    """Emit a dimmed diagnostic line prefixed with ``[debug]``."""

    _print_line(f"[debug] {msg}", style="dim", use_emoji=False, use_color=use_color)


__all__ = ["debug", "emoji", "fail", "info", "ok", "warn"]
