# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helper services used by the add-scripts CLI command."""

from __future__ import annotations

import json

from ....config import ConfigError
from ....manifest import ManifestMissingError
from ....project import ProjectContext, load_project
from ....scripts.reconcile import ConfirmCallback, ReconciliationResult, add_scripts
from ....scripts.report import emit_report
from ...shared import CLIError, CLILogger
from .models import AddScriptsOptions


def prepare_project(options: AddScriptsOptions, *, logger: CLILogger) -> ProjectContext:
    """Load the project for ``options.root``.

    Args:
        options: Normalised CLI options.
        logger: Logger used to emit user-facing messages.

    Returns:
        ProjectContext: Manifest, configuration and catalog for the project.

    Raises:
        CLIError: If the manifest is missing or configuration is invalid.
    """

    try:
        project = load_project(options.root)
    except ManifestMissingError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc)) from exc
    except ConfigError as exc:
        logger.fail(f"Configuration invalid: {exc}")
        raise CLIError(str(exc)) from exc
    if not project.manifest.parsed:
        logger.warn(f"{project.manifest.path.name} could not be parsed; continuing with an empty manifest.")
    logger.debug(
        f"manifest={project.manifest.path} declared={len(project.declared)} "
        f"skip_checks={options.skip_checks} policy={options.existing_policy.value}"
    )
    return project


def perform_add_scripts(
    options: AddScriptsOptions,
    *,
    logger: CLILogger,
    confirm: ConfirmCallback,
) -> tuple[ProjectContext, ReconciliationResult]:
    """Merge the catalog into the project's scripts and persist the result.

    Args:
        options: Normalised CLI options.
        logger: Logger used to emit user-facing messages.
        confirm: Yes/no callback consulted for foreign ``test`` entries.

    Returns:
        tuple[ProjectContext, ReconciliationResult]: Loaded project and merge outcome.
    """

    project = prepare_project(options, logger=logger)
    result = add_scripts(
        project.manifest.scripts,
        project.declared,
        project.catalog,
        skip_checks=options.skip_checks,
        policy=options.existing_policy,
        confirm=confirm,
    )
    if options.dry_run:
        logger.warn(f"DRY RUN: {project.manifest.path.name} left unchanged.")
        logger.echo(json.dumps({"scripts": result.scripts}, indent=4, ensure_ascii=False))
    else:
        project.manifest.save(result.scripts)
        logger.debug(f"wrote={project.manifest.path} scripts={len(result.scripts)}")
    return project, result


def emit_add_scripts_summary(
    project: ProjectContext,
    result: ReconciliationResult,
    options: AddScriptsOptions,
    *,
    logger: CLILogger,
) -> None:
    """Report added scripts and recommend missing packages."""

    emit_report(result, project.catalog, logger, skip_checks=options.skip_checks)


__all__ = ["emit_add_scripts_summary", "perform_add_scripts", "prepare_project"]
