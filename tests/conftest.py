# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from php_essentials.scripts.catalog import ScriptDefinition, build_catalog

ALL_PACKAGES: dict[str, str] = {
    "laravel/pint": "^1.0",
    "rector/rector": "^2.0",
    "peckphp/peck": "^0.1",
    "larastan/larastan": "^3.0",
    "pestphp/pest": "^3.0",
    "pestphp/pest-plugin-type-coverage": "^3.0",
}


@pytest.fixture
def catalog() -> tuple[ScriptDefinition, ...]:
    """Return the default script catalog."""
    return build_catalog()


@pytest.fixture
def all_declared() -> dict[str, str]:
    """Return a dependency set declaring every catalog package."""
    return dict(ALL_PACKAGES)


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``HOME`` at an empty directory so user config never leaks in."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def write_composer(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    """Return a helper writing ``composer.json`` into a project directory."""

    def _write(document: dict[str, Any]) -> Path:
        project = tmp_path / "project"
        project.mkdir(exist_ok=True)
        manifest = project / "composer.json"
        manifest.write_text(json.dumps(document, indent=4), encoding="utf-8")
        return manifest

    return _write
