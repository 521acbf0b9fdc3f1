# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for depsize runs."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Final, Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_COLUMN_WIDTH: Final[int] = 25
DEFAULT_CARGO_BIN: Final[str] = "cargo"


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


def default_parallel_jobs() -> int:
    """Return the number of available processing units.

    Returns:
        int: CPU count reported by the interpreter, never less than one.
    """

    return max(1, os.cpu_count() or 1)


class ExecutionConfig(BaseModel):
    """Concurrency settings for the measurement fan-out."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    jobs: int = Field(default_factory=default_parallel_jobs, ge=1)


class OutputConfig(BaseModel):
    """Presentation settings for rendered reports."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    format: Literal["text", "json"] = "text"
    color: bool = True
    emoji: bool = True
    column_width: int = Field(default=DEFAULT_COLUMN_WIDTH, ge=1)


class ResolverConfig(BaseModel):
    """Settings forwarded to the Cargo metadata adapter."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    cargo_bin: str = DEFAULT_CARGO_BIN
    offline: bool = False
    direct_only: bool = False
    manifest_path: Path | None = None
    timeout: float | None = Field(default=None, gt=0)


class DepsizeConfig(BaseModel):
    """Top-level configuration bundling every section."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    resolver: ResolverConfig = Field(default_factory=ResolverConfig)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible mapping of the configuration.

        Returns:
            dict[str, Any]: Serialised configuration values.
        """

        return self.model_dump(mode="json")


__all__ = [
    "ConfigError",
    "DEFAULT_CARGO_BIN",
    "DEFAULT_COLUMN_WIDTH",
    "DepsizeConfig",
    "ExecutionConfig",
    "OutputConfig",
    "ResolverConfig",
    "default_parallel_jobs",
]
