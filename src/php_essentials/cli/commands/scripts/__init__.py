# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Script catalog listing CLI command."""

from __future__ import annotations

import typer

from .command import scripts_command

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Register the scripts command with ``app``.

    Args:
        app: Typer application receiving the command registration.
    """

    app.command(name="scripts", help="List the known scripts and whether the project can use them.")(
        scripts_command
    )
