# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Summaries of the scripts added and the packages still missing."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Final, Protocol

from .catalog import ScriptDefinition
from .reconcile import TEST_SCRIPT_KEY, ReconciliationResult

SCRIPT_RUNNER: Final[str] = "composer"
INSTALL_TOOL: Final[str] = "composer require --dev"
BULLET: Final[str] = "•"
TEST_SUMMARY: Final[str] = "Run all checks in sequence"


class ReportSink(Protocol):
    """Output channel receiving report lines."""

    def info(self, message: str) -> None: ...

    def echo(self, message: str) -> None: ...

    def warn(self, message: str) -> None: ...

    def ok(self, message: str) -> None: ...


def added_script_lines(available: Iterable[ScriptDefinition], scripts: Mapping[str, object]) -> list[str]:
    """Return one line per added script plus the composite test summary.

    Args:
        available: Script definitions written to the manifest.
        scripts: Final script map, consulted for the ``test`` entry.

    Returns:
        list[str]: ``composer <name>: <description>`` lines.
    """

    lines = [f"{SCRIPT_RUNNER} {definition.name}: {definition.description}" for definition in available]
    if TEST_SCRIPT_KEY in scripts:
        lines.append(f"{SCRIPT_RUNNER} {TEST_SCRIPT_KEY}: {TEST_SUMMARY}")
    return lines


def missing_package_lines(missing: Mapping[str, str], catalog: Sequence[ScriptDefinition]) -> list[str]:
    """Describe each missing package and the scripts it would enable.

    Args:
        missing: ``package -> version`` constraints for absent dependencies.
        catalog: Full script catalog used to find dependent scripts.

    Returns:
        list[str]: ``<package> (<version>) - Enables: ...`` lines in ``missing`` order.
    """

    lines: list[str] = []
    for package, version in missing.items():
        enabled = ", ".join(
            f"{SCRIPT_RUNNER} {definition.name}" for definition in catalog if definition.package == package
        )
        lines.append(f"{package} ({version}) - Enables: {enabled}")
    return lines


def install_command(missing: Mapping[str, str], *, tool: str = INSTALL_TOOL) -> str:
    """Return a single command installing every missing package."""

    requirements = [f"{package}:{version}" for package, version in missing.items()]
    return " ".join([tool, *requirements])


def emit_report(
    result: ReconciliationResult,
    catalog: Sequence[ScriptDefinition],
    sink: ReportSink,
    *,
    skip_checks: bool,
) -> None:
    """Write the post-merge summary to ``sink``.

    Args:
        result: Outcome of merging the catalog into the manifest.
        catalog: Full script catalog used for package recommendations.
        sink: Output channel receiving the rendered lines.
        skip_checks: When ``True`` missing package recommendations are suppressed.
    """

    if result.available:
        sink.info("The following scripts have been added to composer.json:")
        for line in added_script_lines(result.available, result.scripts):
            sink.echo(f"{BULLET} {line}")

    if not result.missing or skip_checks:
        return

    sink.echo("")
    sink.warn("Some dependencies are missing for all scripts to work properly.")
    sink.echo("Install the following packages to enable more features:")
    for line in missing_package_lines(result.missing, catalog):
        sink.echo(f"{BULLET} {line}")
    sink.echo("")
    sink.echo("You can install all missing packages with:")
    sink.ok(install_command(result.missing))


__all__ = [
    "INSTALL_TOOL",
    "ReportSink",
    "added_script_lines",
    "emit_report",
    "install_command",
    "missing_package_lines",
]
