# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command adding development scripts to composer.json."""

from __future__ import annotations

from pathlib import Path

import typer

from ....scripts.reconcile import ExistingTestPolicy
from ...shared import CLIError, build_cli_logger
from .models import (
    DEBUG_OPTION,
    DRY_RUN_OPTION,
    EMOJI_OPTION,
    EXISTING_TEST_COMMANDS_OPTION,
    ROOT_OPTION,
    SKIP_CHECKS_OPTION,
    AddScriptsOptions,
)
from .services import emit_add_scripts_summary, perform_add_scripts


def _confirm(prompt: str) -> bool:
    return typer.confirm(prompt, default=False)


def add_scripts_command(
    root: ROOT_OPTION = Path("."),
    skip_checks: SKIP_CHECKS_OPTION = False,
    existing_test_commands: EXISTING_TEST_COMMANDS_OPTION = ExistingTestPolicy.ASK,
    dry_run: DRY_RUN_OPTION = False,
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Add useful development scripts to composer.json.

    Raises:
        typer.Exit: Raised with status ``1`` when the manifest or configuration
            cannot be loaded.
    """

    options = AddScriptsOptions.from_cli(
        root,
        skip_checks=skip_checks,
        existing_policy=existing_test_commands,
        dry_run=dry_run,
        emoji=emoji,
        debug=debug,
    )
    logger = build_cli_logger(emoji=options.emoji, debug=options.debug)
    try:
        project, result = perform_add_scripts(options, logger=logger, confirm=_confirm)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    emit_add_scripts_summary(project, result, options, logger=logger)


__all__ = ["add_scripts_command"]
