# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""End-to-end helpers combining deduplication and aggregation."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from dataclasses import dataclass

from .aggregate import Aggregator, AggregatorHooks, SupportsMeasure
from .config import DepsizeConfig
from .index import DedupeResult, PackageIndex, ResolverInconsistency
from .models import Report, ResolvedPackage


@dataclass(frozen=True, slots=True)
class SizeRun:
    """Outcome of one measurement run."""

    dedupe: DedupeResult
    report: Report

    @property
    def inconsistencies(self) -> tuple[ResolverInconsistency, ...]:
        return self.dedupe.inconsistencies

    @property
    def exit_code(self) -> int:
        """Return ``1`` when any package failed to measure, else ``0``."""

        return 1 if self.report.failure_count else 0


def measure_dependencies(
    packages: Iterable[ResolvedPackage],
    *,
    config: DepsizeConfig | None = None,
    probe: SupportsMeasure | None = None,
    hooks: AggregatorHooks | None = None,
    cancel: threading.Event | None = None,
) -> SizeRun:
    """Deduplicate ``packages`` then measure every unique package.

    Args:
        packages: Resolved packages from any resolver adapter.
        config: Run configuration; only the execution section is consulted.
        probe: Optional probe override.
        hooks: Optional aggregator hooks.
        cancel: Optional cancellation signal checked between dispatches.

    Returns:
        SizeRun: Deduplication outcome and the joined report.
    """

    cfg = config or DepsizeConfig()
    dedupe = PackageIndex().dedupe(packages)
    aggregator = Aggregator(cfg.execution, probe=probe, hooks=hooks)
    report = aggregator.aggregate(dedupe.packages, cancel=cancel)
    return SizeRun(dedupe=dedupe, report=report)


__all__ = ["SizeRun", "measure_dependencies"]
