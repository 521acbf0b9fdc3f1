# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared resolver interfaces."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from ..models import ResolvedPackage


class ResolverError(RuntimeError):
    """Raised when an external resolver cannot produce a package list."""


class PackageResolver(Protocol):
    """Produce the resolved dependency closure for a project."""

    def resolve(self, root: Path) -> list[ResolvedPackage]:
        """Return resolved packages for the project rooted at ``root``."""


__all__ = ["PackageResolver", "ResolverError"]
