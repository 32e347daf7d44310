# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Add-scripts CLI command package."""

from __future__ import annotations

import typer

from .command import add_scripts_command

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Register the add-scripts command with ``app``.

    Args:
        app: Typer application receiving the command registration.
    """

    app.command(name="add-scripts", help="Add useful development scripts to composer.json.")(add_scripts_command)
