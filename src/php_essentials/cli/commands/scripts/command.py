# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command listing the script catalog."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from ....config import ConfigError
from ....manifest import ManifestMissingError
from ....project import load_project
from ...shared import build_cli_logger
from ..add_scripts.models import EMOJI_OPTION, ROOT_OPTION, SKIP_CHECKS_OPTION
from .rendering import build_catalog_table


def scripts_command(
    root: ROOT_OPTION = Path("."),
    skip_checks: SKIP_CHECKS_OPTION = False,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Render the script catalog with availability for the project.

    Raises:
        typer.Exit: Raised with status ``1`` when the project cannot be loaded.
    """

    logger = build_cli_logger(emoji=emoji)
    try:
        project = load_project(root.resolve())
    except ManifestMissingError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc
    except ConfigError as exc:
        logger.fail(f"Configuration invalid: {exc}")
        raise typer.Exit(code=1) from exc

    console = Console(highlight=False, emoji=emoji)
    console.print(build_catalog_table(project.catalog, project.declared, skip_checks=skip_checks))


__all__ = ["scripts_command"]
