# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data structures shared by the probe, index, aggregator and reporting."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import NamedTuple


class SizeError(str, Enum):
    """Enumerate the reasons a package could not be measured."""

    PATH_NOT_FOUND = "path not found"
    PERMISSION_DENIED = "permission denied"
    NOT_A_DIRECTORY = "not a directory"
    IO_ERROR = "i/o error"
    CANCELLED = "cancelled"


class PackageKey(NamedTuple):
    """Identity of a package on disk: one checkout per ``(name, version)``."""

    name: str
    version: str

    def label(self) -> str:
        """Return the display label used in rendered reports.

        Returns:
            str: ``name (vversion)`` label.
        """

        return f"{self.name} (v{self.version})"


@dataclass(frozen=True, slots=True)
class ResolvedPackage:
    """Dependency package produced by an external resolver."""

    name: str
    version: str
    root_path: Path
    source: str | None = None

    @property
    def key(self) -> PackageKey:
        """Return the deduplication key for the package.

        Returns:
            PackageKey: ``(name, version)`` identity tuple.
        """

        return PackageKey(self.name, self.version)


@dataclass(frozen=True, slots=True)
class ProbeIssue:
    """Entry that could not be read while walking a package tree."""

    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class SizeResult:
    """Tagged outcome of measuring one package directory.

    A result is either *ok* (``error`` is ``None``) carrying ``total_bytes``,
    or *failed* carrying an ``error``. Ok results with ``issues`` are partial:
    the total covers everything that could be read.
    """

    total_bytes: int = 0
    error: SizeError | None = None
    detail: str | None = None
    issues: tuple[ProbeIssue, ...] = ()

    @classmethod
    def ok(cls, total_bytes: int, issues: Iterable[ProbeIssue] = ()) -> SizeResult:
        """Build a successful result.

        Args:
            total_bytes: Logical size of every regular file that was read.
            issues: Entries skipped because they could not be read.

        Returns:
            SizeResult: Successful, possibly partial, result.

        Raises:
            ValueError: If ``total_bytes`` is negative.
        """

        if total_bytes < 0:
            raise ValueError("total_bytes must not be negative")
        return cls(total_bytes=total_bytes, issues=tuple(issues))

    @classmethod
    def failed(cls, error: SizeError, detail: str | None = None) -> SizeResult:
        """Build a failed result.

        Args:
            error: Reason the package could not be measured.
            detail: Optional human-readable context such as the OS message.

        Returns:
            SizeResult: Failed result contributing nothing to totals.
        """

        return cls(error=error, detail=detail)

    @property
    def is_ok(self) -> bool:
        """Return ``True`` when the package was measured."""

        return self.error is None

    @property
    def partial(self) -> bool:
        """Return ``True`` when the measurement skipped unreadable entries."""

        return self.is_ok and bool(self.issues)


@dataclass(frozen=True, slots=True)
class ReportEntry:
    """Pair a package with its measurement outcome."""

    package: ResolvedPackage
    result: SizeResult

    @property
    def key(self) -> PackageKey:
        return self.package.key


def entry_sort_key(entry: ReportEntry) -> tuple[str, str]:
    """Return the display ordering key: name then version, case-sensitive."""

    return entry.package.name, entry.package.version


@dataclass(frozen=True, slots=True)
class Report:
    """Sorted per-package results plus aggregate counters."""

    entries: tuple[ReportEntry, ...] = ()
    cancelled: bool = False
    grand_total: int = field(init=False)
    failure_count: int = field(init=False)
    partial_count: int = field(init=False)

    def __post_init__(self) -> None:
        ordered = tuple(sorted(self.entries, key=entry_sort_key))
        object.__setattr__(self, "entries", ordered)
        object.__setattr__(
            self,
            "grand_total",
            sum(entry.result.total_bytes for entry in ordered if entry.result.is_ok),
        )
        object.__setattr__(
            self,
            "failure_count",
            sum(1 for entry in ordered if not entry.result.is_ok),
        )
        object.__setattr__(
            self,
            "partial_count",
            sum(1 for entry in ordered if entry.result.partial),
        )

    @property
    def failures(self) -> tuple[ReportEntry, ...]:
        """Return entries whose packages could not be measured."""

        return tuple(entry for entry in self.entries if not entry.result.is_ok)


__all__ = [
    "PackageKey",
    "ProbeIssue",
    "Report",
    "ReportEntry",
    "ResolvedPackage",
    "SizeError",
    "SizeResult",
    "entry_sort_key",
]
