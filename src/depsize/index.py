# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Deduplicate resolved packages before they are measured."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .models import PackageKey, ResolvedPackage


@dataclass(frozen=True, slots=True)
class ResolverInconsistency:
    """Two resolved entries shared an identity but pointed at different paths."""

    key: PackageKey
    kept_path: Path
    discarded_path: Path

    def describe(self) -> str:
        """Return a one-line warning message for the inconsistency.

        Returns:
            str: Message naming the package and both paths.
        """

        return (
            f"{self.key.label()} resolved to multiple paths; "
            f"using {self.kept_path} and ignoring {self.discarded_path}"
        )


@dataclass(frozen=True, slots=True)
class DedupeResult:
    """Unique packages in first-seen order plus any path conflicts."""

    packages: tuple[ResolvedPackage, ...] = ()
    inconsistencies: tuple[ResolverInconsistency, ...] = field(default_factory=tuple)

    @property
    def keys(self) -> tuple[PackageKey, ...]:
        return tuple(package.key for package in self.packages)


class PackageIndex:
    """Collapse a resolver's package stream to one entry per ``(name, version)``."""

    def dedupe(self, packages: Iterable[ResolvedPackage]) -> DedupeResult:
        """Return the unique packages from ``packages``.

        The first entry seen for a key wins. Later entries with the same key
        but a different ``root_path`` are dropped and reported as
        :class:`ResolverInconsistency` records; they never stop the run.

        Args:
            packages: Resolved packages, possibly containing duplicates.

        Returns:
            DedupeResult: Unique packages in first-seen order and the
            inconsistencies discovered along the way.
        """

        unique: dict[PackageKey, ResolvedPackage] = {}
        inconsistencies: list[ResolverInconsistency] = []
        reported: set[tuple[PackageKey, Path]] = set()
        for package in packages:
            key = package.key
            kept = unique.get(key)
            if kept is None:
                unique[key] = package
                continue
            if kept.root_path == package.root_path:
                continue
            marker = (key, package.root_path)
            if marker in reported:
                continue
            reported.add(marker)
            inconsistencies.append(
                ResolverInconsistency(
                    key=key,
                    kept_path=kept.root_path,
                    discarded_path=package.root_path,
                ),
            )
        return DedupeResult(packages=tuple(unique.values()), inconsistencies=tuple(inconsistencies))


__all__ = ["DedupeResult", "PackageIndex", "ResolverInconsistency"]
