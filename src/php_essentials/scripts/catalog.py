# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Built-in catalog of composer development scripts."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Final, TypeAlias

TEST_PREFIX: Final[str] = "test:"
SCRIPT_REFERENCE_PREFIX: Final[str] = "@"
DEFAULT_TEST_COVERAGE: Final[int] = 40
DEFAULT_TYPE_COVERAGE: Final[int] = 100

DependencySet: TypeAlias = Mapping[str, str]


@dataclass(frozen=True, slots=True)
class ScriptDefinition:
    """Describe a composer script together with the package enabling it."""

    name: str
    command: str
    package: str
    version: str
    description: str

    @property
    def reference(self) -> str:
        """Return the ``@name`` back-reference used inside composite scripts.

        Returns:
            str: Composer back-reference invoking this script.
        """

        return f"{SCRIPT_REFERENCE_PREFIX}{self.name}"


@dataclass(frozen=True, slots=True)
class CoverageThresholds:
    """Minimum coverage percentages substituted into the test commands."""

    test: int = DEFAULT_TEST_COVERAGE
    types: int = DEFAULT_TYPE_COVERAGE


def is_test_script(definition: ScriptDefinition) -> bool:
    """Return ``True`` when ``definition`` participates in the composite test script.

    Args:
        definition: Catalog entry to inspect.

    Returns:
        bool: ``True`` for ``test:`` prefixed entries.
    """

    return definition.name.startswith(TEST_PREFIX)


def is_available(definition: ScriptDefinition, declared: DependencySet, *, skip_checks: bool) -> bool:
    """Return whether ``definition`` may be added for the declared dependencies.

    Args:
        definition: Catalog entry to inspect.
        declared: Dependencies declared by the project.
        skip_checks: When ``True`` every entry counts as available.

    Returns:
        bool: ``True`` when checks are skipped, the entry needs no package, or the
        package is declared.
    """

    if skip_checks or not definition.package:
        return True
    return definition.package in declared


def canonical_test_references(catalog: Iterable[ScriptDefinition]) -> tuple[str, ...]:
    """Return ``@name`` references for every test-category entry in catalog order."""

    return tuple(definition.reference for definition in catalog if is_test_script(definition))


def build_catalog(thresholds: CoverageThresholds | None = None) -> tuple[ScriptDefinition, ...]:
    """Return the ordered catalog of known scripts.

    Args:
        thresholds: Coverage minimums used by the unit and type-coverage entries.
            Defaults apply when omitted.

    Returns:
        tuple[ScriptDefinition, ...]: Script definitions in canonical order.
    """

    limits = thresholds or CoverageThresholds()
    return (
        ScriptDefinition(
            name="lint",
            command="pint",
            package="laravel/pint",
            version="^1.0",
            description="Format your code using Laravel Pint",
        ),
        ScriptDefinition(
            name="refactor",
            command="rector",
            package="rector/rector",
            version="^2.0",
            description="Refactor your code using Rector",
        ),
        ScriptDefinition(
            name="test:spellcheck",
            command="peck",
            package="peckphp/peck",
            version="^0.1",
            description="Check for spelling errors using Peck",
        ),
        ScriptDefinition(
            name="test:refactor",
            command="rector --dry-run",
            package="rector/rector",
            version="^2.0",
            description="Check for possible refactoring opportunities",
        ),
        ScriptDefinition(
            name="test:lint",
            command="pint --test",
            package="laravel/pint",
            version="^1.0",
            description="Check if code needs formatting",
        ),
        ScriptDefinition(
            name="test:types",
            command="phpstan analyse --ansi",
            package="larastan/larastan",
            version="^3.0",
            description="Run static analysis using PHPStan",
        ),
        ScriptDefinition(
            name="test:unit",
            command=f"pest --colors=always --coverage --parallel --min={limits.test}",
            package="pestphp/pest",
            version="^3.0",
            description=f"Run unit tests with coverage (minimum {limits.test}%) and parallel execution",
        ),
        ScriptDefinition(
            name="test:type-coverage",
            command=f"pest --type-coverage --min={limits.types}",
            package="pestphp/pest-plugin-type-coverage",
            version="^3.0",
            description=f"Check type coverage (minimum {limits.types}%)",
        ),
    )


__all__ = [
    "DEFAULT_TEST_COVERAGE",
    "DEFAULT_TYPE_COVERAGE",
    "SCRIPT_REFERENCE_PREFIX",
    "TEST_PREFIX",
    "CoverageThresholds",
    "DependencySet",
    "ScriptDefinition",
    "build_catalog",
    "is_available",
    "is_test_script",
    "canonical_test_references",
]
