# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Partition the script catalog by the dependencies a project declares."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .catalog import DependencySet, ScriptDefinition, is_available, is_test_script


@dataclass(slots=True)
class AvailabilityResult:
    """Outcome of filtering the catalog against declared dependencies."""

    available: list[ScriptDefinition] = field(default_factory=list)
    missing: dict[str, str] = field(default_factory=dict)
    individual: dict[str, str] = field(default_factory=dict)

    @property
    def has_test_scripts(self) -> bool:
        """Return ``True`` when at least one test-category entry is available."""

        return any(is_test_script(definition) for definition in self.available)


def filter_available(
    catalog: Iterable[ScriptDefinition],
    declared: DependencySet,
    *,
    skip_checks: bool,
) -> AvailabilityResult:
    """Split ``catalog`` into available scripts and missing packages.

    Args:
        catalog: Script definitions in canonical order.
        declared: Dependencies declared in ``require`` and ``require-dev``.
        skip_checks: When ``True`` every catalog entry is treated as available.

    Returns:
        AvailabilityResult: Available entries, their ``name -> command`` map and the
        ``package -> version`` map of missing dependencies.
    """

    result = AvailabilityResult()
    for definition in catalog:
        if is_available(definition, declared, skip_checks=skip_checks):
            result.available.append(definition)
            result.individual[definition.name] = definition.command
        else:
            # last constraint seen for a shared package wins
            result.missing[definition.package] = definition.version
    return result


__all__ = ["AvailabilityResult", "filter_available"]
