# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rendering helpers for the scripts command."""

from __future__ import annotations

from collections.abc import Sequence

from rich import box
from rich.table import Table

from ....scripts.catalog import DependencySet, ScriptDefinition, is_available, is_test_script


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


def build_catalog_table(
    catalog: Sequence[ScriptDefinition],
    declared: DependencySet,
    *,
    skip_checks: bool,
) -> Table:
    """Return a rich table describing each catalog entry for the project.

    Args:
        catalog: Script definitions in canonical order.
        declared: Dependencies declared by the project.
        skip_checks: When ``True`` every entry is reported as available.

    Returns:
        Table: Rich table instance ready for rendering.
    """

    table = Table(title="Scripts", box=box.SIMPLE, expand=True)
    table.add_column("Name", style="bold", no_wrap=True)
    table.add_column("Command", overflow="fold")
    table.add_column("Package")
    table.add_column("In test")
    table.add_column("Available")

    for definition in catalog:
        package = f"{definition.package} ({definition.version})" if definition.package else "-"
        table.add_row(
            definition.name,
            definition.command,
            package,
            _yes_no(is_test_script(definition)),
            _yes_no(is_available(definition, declared, skip_checks=skip_checks)),
        )
    return table


__all__ = ["build_catalog_table"]
