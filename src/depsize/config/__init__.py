# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders."""

from __future__ import annotations

from .loaders import (
    CONFIG_FILE_NAME,
    CargoManifestConfigSource,
    ConfigLoader,
    ConfigLoadResult,
    DefaultConfigSource,
    TomlConfigSource,
)
from .models import (
    ConfigError,
    DepsizeConfig,
    ExecutionConfig,
    OutputConfig,
    ResolverConfig,
    default_parallel_jobs,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "CargoManifestConfigSource",
    "ConfigError",
    "ConfigLoadResult",
    "ConfigLoader",
    "DefaultConfigSource",
    "DepsizeConfig",
    "ExecutionConfig",
    "OutputConfig",
    "ResolverConfig",
    "TomlConfigSource",
    "default_parallel_jobs",
]
