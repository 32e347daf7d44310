# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Data structures for the add-scripts CLI command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from ....scripts.reconcile import ExistingTestPolicy

ROOT_OPTION = Annotated[
    Path,
    typer.Option("--root", "-r", help="Directory containing composer.json.", show_default=False),
]
SKIP_CHECKS_OPTION = Annotated[
    bool,
    typer.Option("--skip-checks", help="Skip dependency checks."),
]
EXISTING_TEST_COMMANDS_OPTION = Annotated[
    ExistingTestPolicy,
    typer.Option(
        "--existing-test-commands",
        help="How to handle existing test commands.",
        case_sensitive=False,
    ),
]
DRY_RUN_OPTION = Annotated[
    bool,
    typer.Option("--dry-run", help="Show the resulting scripts without modifying composer.json."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Emit debug output."),
]


@dataclass(slots=True)
class AddScriptsOptions:
    """Normalised CLI inputs for the add-scripts workflow."""

    root: Path
    skip_checks: bool
    existing_policy: ExistingTestPolicy
    dry_run: bool
    emoji: bool
    debug: bool = False

    @classmethod
    def from_cli(
        cls,
        root: Path,
        *,
        skip_checks: bool,
        existing_policy: ExistingTestPolicy,
        dry_run: bool,
        emoji: bool,
        debug: bool,
    ) -> AddScriptsOptions:
        """Return options parsed from CLI arguments."""

        return cls(
            root=root.resolve(),
            skip_checks=skip_checks,
            existing_policy=existing_policy,
            dry_run=dry_run,
            emoji=emoji,
            debug=debug,
        )


__all__ = [
    "DEBUG_OPTION",
    "DRY_RUN_OPTION",
    "EMOJI_OPTION",
    "EXISTING_TEST_COMMANDS_OPTION",
    "ROOT_OPTION",
    "SKIP_CHECKS_OPTION",
    "AddScriptsOptions",
]
