# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model for the composer script helpers."""

from __future__ import annotations

from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field

from .scripts.catalog import DEFAULT_TEST_COVERAGE, DEFAULT_TYPE_COVERAGE, CoverageThresholds

MINIMUM_TEST_KEY: Final[str] = "minimum_test"
MINIMUM_TEST_COVERAGE_KEY: Final[str] = "minimum_test_coverage"
MINIMUM_TYPE_COVERAGE_KEY: Final[str] = "minimum_type_coverage"


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class EssentialsConfig(BaseModel):
    """Coverage thresholds substituted into the generated test scripts."""

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    minimum_test: int | None = Field(default=None, ge=0)
    minimum_test_coverage: int | None = Field(default=None, ge=0)
    minimum_type_coverage: int | None = Field(default=None, ge=0)

    def get_int(self, key: str, default: int) -> int:
        """Return the integer stored under ``key`` or ``default`` when unset.

        Args:
            key: Configuration field name.
            default: Value returned when the field is unset or unknown.

        Returns:
            int: Configured or default value.
        """

        value = getattr(self, key, None) if key in type(self).model_fields else None
        return default if value is None else int(value)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


def coverage_thresholds(config: EssentialsConfig) -> CoverageThresholds:
    """Resolve the coverage minimums, falling back to ``minimum_test``.

    Args:
        config: Loaded configuration.

    Returns:
        CoverageThresholds: Minimums used when building the script catalog.
    """

    return CoverageThresholds(
        test=config.get_int(
            MINIMUM_TEST_COVERAGE_KEY,
            config.get_int(MINIMUM_TEST_KEY, DEFAULT_TEST_COVERAGE),
        ),
        types=config.get_int(
            MINIMUM_TYPE_COVERAGE_KEY,
            config.get_int(MINIMUM_TEST_KEY, DEFAULT_TYPE_COVERAGE),
        ),
    )


__all__ = [
    "ConfigError",
    "EssentialsConfig",
    "coverage_thresholds",
]
