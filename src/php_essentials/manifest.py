# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Read and write the ``composer.json`` manifest."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final

from .scripts.catalog import DependencySet

COMPOSER_MANIFEST: Final[str] = "composer.json"
SCRIPTS_KEY: Final[str] = "scripts"
REQUIRE_KEY: Final[str] = "require"
REQUIRE_DEV_KEY: Final[str] = "require-dev"
EXTRA_KEY: Final[str] = "extra"
JSON_INDENT: Final[int] = 4


class ManifestError(Exception):
    """Base class for manifest failures."""


class ManifestMissingError(ManifestError):
    """Raised when no manifest exists at the expected location."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"{path.name} not found in {path.parent}.")
        self.path = path


@dataclass(slots=True)
class ComposerManifest:
    """In-memory view of a ``composer.json`` document."""

    path: Path
    data: dict[str, Any] = field(default_factory=dict)
    parsed: bool = True

    @staticmethod
    def locate(root: Path) -> Path:
        """Return the manifest path expected inside ``root``."""

        return root / COMPOSER_MANIFEST

    @classmethod
    def load(cls, path: Path) -> ComposerManifest:
        """Load the manifest stored at ``path``.

        Args:
            path: Location of ``composer.json``.

        Returns:
            ComposerManifest: Parsed document. Content that is not a JSON object
            yields an empty document flagged with ``parsed=False``.

        Raises:
            ManifestMissingError: If ``path`` does not exist.
        """

        if not path.is_file():
            raise ManifestMissingError(path)
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError):
            return cls(path=path, data={}, parsed=False)
        if not isinstance(payload, dict):
            return cls(path=path, data={}, parsed=False)
        return cls(path=path, data=payload)

    @property
    def scripts(self) -> dict[str, Any]:
        """Return a copy of the ``scripts`` section (empty when absent or malformed)."""

        section = self.data.get(SCRIPTS_KEY)
        return dict(section) if isinstance(section, Mapping) else {}

    def declared_dependencies(self) -> DependencySet:
        """Return ``require`` merged with ``require-dev``; dev constraints win."""

        declared: dict[str, str] = {}
        for key in (REQUIRE_KEY, REQUIRE_DEV_KEY):
            section = self.data.get(key)
            if isinstance(section, Mapping):
                declared.update({str(name): str(version) for name, version in section.items()})
        return declared

    def extra(self, name: str) -> Mapping[str, Any]:
        """Return the ``extra.<name>`` table, or an empty mapping."""

        extra = self.data.get(EXTRA_KEY)
        if not isinstance(extra, Mapping):
            return {}
        section = extra.get(name)
        return section if isinstance(section, Mapping) else {}

    def render(self, scripts: Mapping[str, Any]) -> str:
        """Return the serialised document with ``scripts`` replaced."""

        document = dict(self.data)
        document[SCRIPTS_KEY] = dict(scripts)
        return json.dumps(document, indent=JSON_INDENT, ensure_ascii=False) + "\n"

    def save(self, scripts: Mapping[str, Any]) -> None:
        """Persist ``scripts`` into the manifest on disk."""

        self.path.write_text(self.render(scripts), encoding="utf-8")
        self.data[SCRIPTS_KEY] = dict(scripts)


__all__ = [
    "COMPOSER_MANIFEST",
    "ComposerManifest",
    "ManifestError",
    "ManifestMissingError",
]
