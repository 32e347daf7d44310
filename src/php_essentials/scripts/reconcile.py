# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Reconcile the composite ``test`` script with the script catalog.

Entries already present in the ``test`` slot fall into two groups. References
to known ``test:`` scripts are canonical: they are always re-emitted at the tail
of the sequence in catalog order, filtered by availability. Everything else is
foreign and survives according to the selected :class:`ExistingTestPolicy`,
keeping its relative order ahead of the canonical references.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Final, TypeAlias, cast

from .availability import filter_available
from .catalog import (
    DependencySet,
    ScriptDefinition,
    canonical_test_references,
    is_available,
    is_test_script,
)

TEST_SCRIPT_KEY: Final[str] = "test"

ScriptValue: TypeAlias = str | list[str]
ScriptMap: TypeAlias = dict[str, ScriptValue]
ConfirmCallback = Callable[[str], bool]


class ExistingTestPolicy(Enum):
    """How foreign entries found in the existing ``test`` script are handled."""

    ASK = "ask"
    KEEP = "keep"
    REMOVE = "remove"


@dataclass(slots=True)
class ReconciliationResult:
    """Final script map together with the packages that would enable more scripts."""

    scripts: ScriptMap
    missing: dict[str, str] = field(default_factory=dict)
    available: list[ScriptDefinition] = field(default_factory=list)


def keep_prompt(script: str) -> str:
    """Return the confirmation question asked for a foreign ``script``."""

    return (
        f"The script '{script}' in the 'test' section is not defined in essential scripts. "
        "Would you like to keep it?"
    )


def should_keep(script: str, policy: ExistingTestPolicy, confirm: ConfirmCallback) -> bool:
    """Decide whether a foreign test entry survives reconciliation.

    Args:
        script: Literal text of the foreign entry.
        policy: Selected handling for foreign entries.
        confirm: Callback consulted only under :attr:`ExistingTestPolicy.ASK`.

    Returns:
        bool: ``True`` when the entry should be kept.
    """

    if policy is ExistingTestPolicy.KEEP:
        return True
    if policy is ExistingTestPolicy.REMOVE:
        return False
    return confirm(keep_prompt(script))


def normalize_test_slot(existing: object) -> list[str]:
    """Return the existing ``test`` value as a list of command references.

    Args:
        existing: Raw value stored under ``scripts.test`` (``None`` when absent).

    Returns:
        list[str]: Entries in their original order. Single strings are not split
        and values of any other type are coerced to their string form.
    """

    if existing is None:
        return []
    if isinstance(existing, str):
        return [existing]
    if isinstance(existing, (list, tuple)):
        return [entry if isinstance(entry, str) else str(entry) for entry in existing]
    return [str(existing)]


def ordered_test_references(
    catalog: Iterable[ScriptDefinition],
    declared: DependencySet,
    *,
    skip_checks: bool,
) -> list[str]:
    """Return references for available test-category entries in catalog order."""

    return [
        definition.reference
        for definition in catalog
        if is_test_script(definition) and is_available(definition, declared, skip_checks=skip_checks)
    ]


def _retained_foreign_entries(
    entries: Sequence[str],
    valid: frozenset[str],
    *,
    policy: ExistingTestPolicy,
    confirm: ConfirmCallback,
) -> list[str]:
    retained: list[str] = []
    seen: set[str] = set()
    for entry in entries:
        if entry in valid or entry in seen:
            continue
        seen.add(entry)
        if should_keep(entry, policy, confirm):
            retained.append(entry)
    return retained


def reconcile_test_script(
    existing: object,
    catalog: Sequence[ScriptDefinition],
    declared: DependencySet,
    *,
    skip_checks: bool,
    policy: ExistingTestPolicy,
    confirm: ConfirmCallback,
) -> list[str]:
    """Compute the final composite ``test`` script.

    Args:
        existing: Current ``scripts.test`` value, ``None`` when absent.
        catalog: Script definitions in canonical order.
        declared: Dependencies declared by the project.
        skip_checks: When ``True`` every test-category entry is emitted.
        policy: Handling applied to foreign entries.
        confirm: Yes/no callback used under :attr:`ExistingTestPolicy.ASK`.

    Returns:
        list[str]: Retained foreign entries followed by canonical references. An
        empty list leaves any existing ``test`` entry untouched.
    """

    entries = normalize_test_slot(existing)
    valid = frozenset(canonical_test_references(catalog))
    ordered = ordered_test_references(catalog, declared, skip_checks=skip_checks)
    retained = _retained_foreign_entries(entries, valid, policy=policy, confirm=confirm)
    emitted = set(ordered)
    return [entry for entry in retained if entry not in emitted] + ordered


def add_scripts(
    scripts: Mapping[str, object],
    declared: DependencySet,
    catalog: Sequence[ScriptDefinition],
    *,
    skip_checks: bool,
    policy: ExistingTestPolicy,
    confirm: ConfirmCallback,
) -> ReconciliationResult:
    """Merge the catalog into an existing composer ``scripts`` section.

    Args:
        scripts: Current ``scripts`` section; left untouched.
        declared: Dependencies declared in ``require`` and ``require-dev``.
        catalog: Script definitions in canonical order.
        skip_checks: When ``True`` dependency checks are bypassed.
        policy: Handling applied to foreign ``test`` entries.
        confirm: Yes/no callback used under :attr:`ExistingTestPolicy.ASK`.

    Returns:
        ReconciliationResult: Merged scripts, missing packages and the scripts added.
    """

    availability = filter_available(catalog, declared, skip_checks=skip_checks)
    merged = cast(ScriptMap, dict(scripts))
    merged.update(availability.individual)

    if availability.has_test_scripts or skip_checks:
        sequence = reconcile_test_script(
            merged.get(TEST_SCRIPT_KEY),
            catalog,
            declared,
            skip_checks=skip_checks,
            policy=policy,
            confirm=confirm,
        )
        if sequence:
            merged[TEST_SCRIPT_KEY] = sequence

    return ReconciliationResult(
        scripts=merged,
        missing=dict(availability.missing),
        available=list(availability.available),
    )


__all__ = [
    "TEST_SCRIPT_KEY",
    "ConfirmCallback",
    "ExistingTestPolicy",
    "ReconciliationResult",
    "ScriptMap",
    "ScriptValue",
    "add_scripts",
    "keep_prompt",
    "normalize_test_slot",
    "ordered_test_references",
    "reconcile_test_script",
    "should_keep",
]
