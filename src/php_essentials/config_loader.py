# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Config loading with layered precedence."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Final, Protocol

from pydantic import ValidationError

from .config import ConfigError, EssentialsConfig
from .manifest import ComposerManifest, ManifestError

CONFIG_FILENAME: Final[str] = ".essentials.toml"
COMPOSER_EXTRA_SECTION: Final[str] = "essentials"


class ConfigSource(Protocol):
    """Provide configuration data loaded from disk or other mediums."""

    name: str

    def load(self) -> Mapping[str, Any]: ...


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class DefaultConfigSource:
    """Return the built-in defaults as a configuration fragment."""

    name = "defaults"

    def load(self) -> Mapping[str, Any]:
        return EssentialsConfig().to_dict()


class TomlConfigSource:
    """Load configuration data from a TOML document."""

    def __init__(self, path: Path, *, name: str | None = None) -> None:
        self._path = path
        self.name = name or str(path)

    def load(self) -> Mapping[str, Any]:
        if not self._path.is_file():
            return {}
        try:
            with self._path.open("rb") as handle:
                return tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"{self._path}: {exc}") from exc


class ComposerExtraConfigSource:
    """Read configuration from ``extra.essentials`` within ``composer.json``."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self.name = f"{path}#extra.{COMPOSER_EXTRA_SECTION}"

    def load(self) -> Mapping[str, Any]:
        try:
            manifest = ComposerManifest.load(self._path)
        except ManifestError:
            return {}
        return dict(manifest.extra(COMPOSER_EXTRA_SECTION))


class ConfigLoader:
    """Apply layered configuration sources with predictable precedence."""

    def __init__(self, *, sources: Sequence[ConfigSource]) -> None:
        if not sources:
            raise ValueError("at least one configuration source is required")
        self._sources = list(sources)

    @classmethod
    def for_root(
        cls,
        project_root: Path,
        *,
        user_config: Path | None = None,
        project_config: Path | None = None,
    ) -> ConfigLoader:
        """Build a loader that respects user, composer and project sources.

        Args:
            project_root: Directory holding ``composer.json``.
            user_config: Optional path to a user-level override.
            project_config: Optional project-level override path.

        Returns:
            ConfigLoader: Loader configured with default precedence ordering.
        """

        root = project_root.resolve()
        home_config = user_config if user_config is not None else Path.home() / CONFIG_FILENAME
        project_file = project_config if project_config is not None else root / CONFIG_FILENAME
        sources: list[ConfigSource] = [
            DefaultConfigSource(),
            TomlConfigSource(home_config),
            ComposerExtraConfigSource(ComposerManifest.locate(root)),
            TomlConfigSource(project_file),
        ]
        return cls(sources=sources)

    def load(self) -> EssentialsConfig:
        """Return the merged configuration.

        Returns:
            EssentialsConfig: Validated configuration model.

        Raises:
            ConfigError: If a source is unreadable or a value fails validation.
        """

        merged: dict[str, Any] = {}
        for source in self._sources:
            if fragment := source.load():
                merged = _deep_merge(merged, fragment)
        try:
            return EssentialsConfig.model_validate(merged)
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc


__all__ = [
    "CONFIG_FILENAME",
    "ComposerExtraConfigSource",
    "ConfigLoader",
    "ConfigSource",
    "DefaultConfigSource",
    "TomlConfigSource",
]
