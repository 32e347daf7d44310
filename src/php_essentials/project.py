# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Project context shared by the CLI commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import EssentialsConfig, coverage_thresholds
from .config_loader import ConfigLoader
from .manifest import ComposerManifest
from .scripts.catalog import DependencySet, ScriptDefinition, build_catalog


@dataclass(slots=True)
class ProjectContext:
    """Manifest, configuration and catalog resolved for a project root."""

    root: Path
    manifest: ComposerManifest
    config: EssentialsConfig
    catalog: tuple[ScriptDefinition, ...]

    @property
    def declared(self) -> DependencySet:
        return self.manifest.declared_dependencies()


def load_project(root: Path, *, loader: ConfigLoader | None = None) -> ProjectContext:
    """Load the manifest and configuration for ``root`` and build the catalog.

    Args:
        root: Directory containing ``composer.json``.
        loader: Optional configuration loader override.

    Returns:
        ProjectContext: Resolved project state.

    Raises:
        ManifestMissingError: If ``composer.json`` does not exist.
        ConfigError: If configuration sources are invalid.
    """

    manifest = ComposerManifest.load(ComposerManifest.locate(root))
    config = (loader or ConfigLoader.for_root(root)).load()
    catalog = build_catalog(coverage_thresholds(config))
    return ProjectContext(root=root, manifest=manifest, config=config, catalog=catalog)


__all__ = ["ProjectContext", "load_project"]
