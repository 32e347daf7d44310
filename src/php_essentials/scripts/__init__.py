# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Script catalog, availability filtering, reconciliation and reporting."""

from __future__ import annotations

from .availability import AvailabilityResult, filter_available
from .catalog import (
    CoverageThresholds,
    DependencySet,
    ScriptDefinition,
    build_catalog,
    canonical_test_references,
    is_available,
    is_test_script,
)
from .reconcile import (
    TEST_SCRIPT_KEY,
    ExistingTestPolicy,
    ReconciliationResult,
    ScriptMap,
    add_scripts,
    reconcile_test_script,
    should_keep,
)
from .report import ReportSink, added_script_lines, emit_report, install_command, missing_package_lines

__all__ = [
    "TEST_SCRIPT_KEY",
    "AvailabilityResult",
    "CoverageThresholds",
    "DependencySet",
    "ExistingTestPolicy",
    "ReconciliationResult",
    "ReportSink",
    "ScriptDefinition",
    "ScriptMap",
    "add_scripts",
    "added_script_lines",
    "build_catalog",
    "canonical_test_references",
    "emit_report",
    "filter_available",
    "install_command",
    "is_available",
    "is_test_script",
    "missing_package_lines",
    "reconcile_test_script",
    "should_keep",
]
