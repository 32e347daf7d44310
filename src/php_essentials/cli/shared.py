# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

import typer

from ..logging import debug as core_debug
from ..logging import fail as core_fail
from ..logging import info as core_info
from ..logging import ok as core_ok
from ..logging import warn as core_warn


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Report sink for the add-scripts workflow honouring CLI output flags."""

    use_emoji: bool
    use_color: bool | None = None
    debug_enabled: bool = False

    def fail(self, message: str) -> None:
        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def ok(self, message: str) -> None:
        core_ok(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def info(self, message: str) -> None:
        core_info(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def echo(self, message: str) -> None:
        """Write ``message`` verbatim, e.g. the dry-run JSON or the install command."""

        typer.echo(message)

    def debug(self, message: str) -> None:
        if self.debug_enabled:
            core_debug(message, use_color=self.use_color)


def build_cli_logger(*, emoji: bool, debug: bool = False, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` for the given output flags.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether ``[debug]`` lines are printed.
        no_color: Force plain output; otherwise colour follows the terminal.

    Returns:
        CLILogger: Configured logger.
    """

    return CLILogger(use_emoji=emoji, use_color=False if no_color else None, debug_enabled=debug)


__all__: Final = [
    "CLIError",
    "CLILogger",
    "build_cli_logger",
]
