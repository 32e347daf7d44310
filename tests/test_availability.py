# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for partitioning the catalog by declared dependencies."""

from __future__ import annotations

from php_essentials.scripts.availability import filter_available
from php_essentials.scripts.catalog import ScriptDefinition


def test_all_declared_makes_everything_available(catalog, all_declared) -> None:
    result = filter_available(catalog, all_declared, skip_checks=False)
    assert [definition.name for definition in result.available] == [d.name for d in catalog]
    assert result.missing == {}
    assert list(result.individual) == [d.name for d in catalog]
    assert result.individual["test:lint"] == "pint --test"
    assert result.has_test_scripts


def test_only_pint_declared(catalog) -> None:
    result = filter_available(catalog, {"laravel/pint": "^1.5"}, skip_checks=False)
    assert [definition.name for definition in result.available] == ["lint", "test:lint"]
    assert result.individual == {"lint": "pint", "test:lint": "pint --test"}
    assert list(result.missing) == [
        "rector/rector",
        "peckphp/peck",
        "larastan/larastan",
        "pestphp/pest",
        "pestphp/pest-plugin-type-coverage",
    ]
    assert result.missing["pestphp/pest"] == "^3.0"


def test_skip_checks_ignores_declared_dependencies(catalog) -> None:
    result = filter_available(catalog, {}, skip_checks=True)
    assert len(result.available) == len(catalog)
    assert result.missing == {}


def test_nothing_declared_has_no_test_scripts(catalog) -> None:
    result = filter_available(catalog, {}, skip_checks=False)
    assert result.available == []
    assert result.individual == {}
    assert not result.has_test_scripts


def test_shared_package_keeps_last_constraint() -> None:
    catalog = (
        ScriptDefinition("a", "a", "vendor/tool", "^1.0", "first"),
        ScriptDefinition("b", "b", "other/tool", "^2.0", "second"),
        ScriptDefinition("c", "c", "vendor/tool", "^1.1", "third"),
    )
    result = filter_available(catalog, {}, skip_checks=False)
    assert list(result.missing.items()) == [("vendor/tool", "^1.1"), ("other/tool", "^2.0")]
