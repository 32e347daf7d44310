# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for reconciling the composite test script."""

from __future__ import annotations

import pytest

from php_essentials.scripts.catalog import ScriptDefinition
from php_essentials.scripts.reconcile import (
    ExistingTestPolicy,
    add_scripts,
    keep_prompt,
    normalize_test_slot,
    reconcile_test_script,
    should_keep,
)

FULL_TEST_SEQUENCE = [
    "@test:spellcheck",
    "@test:refactor",
    "@test:lint",
    "@test:types",
    "@test:unit",
    "@test:type-coverage",
]


class RecordingConfirm:
    def __init__(self, answers: dict[str, bool] | None = None) -> None:
        self.answers = answers or {}
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        return any(self.answers.get(script, False) for script in self.answers if f"'{script}'" in prompt)


def _never(prompt: str) -> bool:
    raise AssertionError(f"unexpected prompt: {prompt}")


@pytest.mark.parametrize(
    ("existing", "expected"),
    [
        (None, []),
        ("phpunit", ["phpunit"]),
        ("phpunit && echo done", ["phpunit && echo done"]),
        (["@test:lint", "echo a"], ["@test:lint", "echo a"]),
        (42, ["42"]),
        (["echo", 7], ["echo", "7"]),
    ],
)
def test_normalize_test_slot(existing, expected) -> None:
    assert normalize_test_slot(existing) == expected


def test_should_keep_dispatch() -> None:
    assert should_keep("echo", ExistingTestPolicy.KEEP, _never)
    assert not should_keep("echo", ExistingTestPolicy.REMOVE, _never)
    confirm = RecordingConfirm({"echo": True})
    assert should_keep("echo", ExistingTestPolicy.ASK, confirm)
    assert confirm.prompts == [keep_prompt("echo")]


def test_keep_places_foreign_first_and_reorders_canonical(catalog, all_declared) -> None:
    result = reconcile_test_script(
        ["@test:lint", "echo custom", "@test:unit"],
        catalog,
        all_declared,
        skip_checks=False,
        policy=ExistingTestPolicy.KEEP,
        confirm=_never,
    )
    assert result == ["echo custom", *FULL_TEST_SEQUENCE]


def test_remove_drops_every_foreign_entry(catalog, all_declared) -> None:
    existing = ["echo one", "@test:types", "phpunit", "@test:spellcheck"]
    result = reconcile_test_script(
        existing,
        catalog,
        all_declared,
        skip_checks=False,
        policy=ExistingTestPolicy.REMOVE,
        confirm=_never,
    )
    assert result == FULL_TEST_SEQUENCE


def test_ask_consults_callback_per_foreign_entry(catalog, all_declared) -> None:
    confirm = RecordingConfirm({"echo keep": True, "echo drop": False})
    result = reconcile_test_script(
        ["echo drop", "@test:lint", "echo keep"],
        catalog,
        all_declared,
        skip_checks=False,
        policy=ExistingTestPolicy.ASK,
        confirm=confirm,
    )
    assert result == ["echo keep", *FULL_TEST_SEQUENCE]
    assert confirm.prompts == [keep_prompt("echo drop"), keep_prompt("echo keep")]


def test_only_pint_declared_without_existing_slot(catalog) -> None:
    result = reconcile_test_script(
        None,
        catalog,
        {"laravel/pint": "^1.0"},
        skip_checks=False,
        policy=ExistingTestPolicy.ASK,
        confirm=_never,
    )
    assert result == ["@test:lint"]


def test_unavailable_canonical_entries_are_dropped(catalog) -> None:
    result = reconcile_test_script(
        ["@test:unit", "@test:lint"],
        catalog,
        {"laravel/pint": "^1.0"},
        skip_checks=False,
        policy=ExistingTestPolicy.KEEP,
        confirm=_never,
    )
    assert result == ["@test:lint"]


def test_nothing_available_and_no_slot_yields_empty(catalog) -> None:
    result = reconcile_test_script(
        None,
        catalog,
        {},
        skip_checks=False,
        policy=ExistingTestPolicy.KEEP,
        confirm=_never,
    )
    assert result == []


def test_duplicate_foreign_entries_collapse(catalog, all_declared) -> None:
    confirm = RecordingConfirm({"echo twice": True})
    result = reconcile_test_script(
        ["echo twice", "echo twice"],
        catalog,
        all_declared,
        skip_checks=False,
        policy=ExistingTestPolicy.ASK,
        confirm=confirm,
    )
    assert result == ["echo twice", *FULL_TEST_SEQUENCE]
    assert len(confirm.prompts) == 1


def test_reconcile_is_idempotent(catalog) -> None:
    first = reconcile_test_script(
        ["echo a", "@test:unit", "echo b", "@test:lint"],
        catalog,
        {},
        skip_checks=True,
        policy=ExistingTestPolicy.KEEP,
        confirm=_never,
    )
    second = reconcile_test_script(
        first,
        catalog,
        {},
        skip_checks=True,
        policy=ExistingTestPolicy.KEEP,
        confirm=_never,
    )
    assert first == second == ["echo a", "echo b", *FULL_TEST_SEQUENCE]
    assert len(set(first)) == len(first)


def test_add_scripts_merges_individual_commands(catalog, all_declared) -> None:
    existing = {"post-install-cmd": "@php artisan", "lint": "old-lint", "test": "phpunit"}
    result = add_scripts(
        existing,
        all_declared,
        catalog,
        skip_checks=False,
        policy=ExistingTestPolicy.KEEP,
        confirm=_never,
    )
    assert list(result.scripts)[:3] == ["post-install-cmd", "lint", "test"]
    assert result.scripts["lint"] == "pint"
    assert result.scripts["test:lint"] == "pint --test"
    assert result.scripts["test"] == ["phpunit", *FULL_TEST_SEQUENCE]
    assert result.missing == {}
    assert existing["lint"] == "old-lint"


def test_add_scripts_without_test_scripts_leaves_test_slot(catalog) -> None:
    result = add_scripts(
        {"test": "phpunit"},
        {"rector/rector": "^2.0"},
        catalog,
        skip_checks=False,
        policy=ExistingTestPolicy.REMOVE,
        confirm=_never,
    )
    assert result.scripts["test"] == ["@test:refactor"]

    untouched = add_scripts(
        {"test": "phpunit"},
        {},
        catalog,
        skip_checks=False,
        policy=ExistingTestPolicy.REMOVE,
        confirm=_never,
    )
    assert untouched.scripts == {"test": "phpunit"}
    assert untouched.available == []


def test_add_scripts_never_creates_empty_test_key(catalog) -> None:
    result = add_scripts(
        {},
        {},
        catalog,
        skip_checks=False,
        policy=ExistingTestPolicy.ASK,
        confirm=_never,
    )
    assert "test" not in result.scripts
    assert list(result.missing) == [
        "laravel/pint",
        "rector/rector",
        "peckphp/peck",
        "larastan/larastan",
        "pestphp/pest",
        "pestphp/pest-plugin-type-coverage",
    ]


def test_add_scripts_keeps_existing_test_when_sequence_is_empty() -> None:
    lint_only = (ScriptDefinition("lint", "pint", "laravel/pint", "^1.0", "Format"),)
    result = add_scripts(
        {"test": "phpunit"},
        {},
        lint_only,
        skip_checks=True,
        policy=ExistingTestPolicy.REMOVE,
        confirm=_never,
    )
    assert result.scripts == {"test": "phpunit", "lint": "pint"}


def test_add_scripts_skip_checks_adds_everything(catalog) -> None:
    result = add_scripts(
        {},
        {},
        catalog,
        skip_checks=True,
        policy=ExistingTestPolicy.ASK,
        confirm=_never,
    )
    assert result.scripts["test"] == FULL_TEST_SEQUENCE
    assert len(result.available) == len(catalog)
    assert result.missing == {}
