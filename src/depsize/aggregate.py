# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Concurrent fan-out of size probes over unique packages."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .config import ExecutionConfig
from .models import PackageKey, Report, ReportEntry, ResolvedPackage, SizeError, SizeResult
from .probe import SizeProbe


class SupportsMeasure(Protocol):
    """Protocol implemented by :class:`SizeProbe` and test doubles."""

    def measure(self, root_path: Path | str) -> SizeResult:
        """Return the size of the directory at ``root_path``."""


@dataclass
class AggregatorHooks:
    """Optional callbacks invoked as packages are dispatched and finished."""

    before_package: Callable[[ResolvedPackage], None] | None = None
    after_package: Callable[[ResolvedPackage, SizeResult], None] | None = None


class Aggregator:
    """Measure every package on a bounded worker pool and build a report."""

    def __init__(
        self,
        config: ExecutionConfig | None = None,
        *,
        probe: SupportsMeasure | None = None,
        hooks: AggregatorHooks | None = None,
    ) -> None:
        """Create an aggregator.

        Args:
            config: Execution settings; ``jobs`` bounds concurrent probes.
            probe: Measurement strategy, defaulting to :class:`SizeProbe`.
            hooks: Optional callbacks for progress reporting.
        """

        self._config = config or ExecutionConfig()
        self._probe = probe or SizeProbe()
        self._hooks = hooks or AggregatorHooks()

    @property
    def jobs(self) -> int:
        return self._config.jobs

    def aggregate(
        self,
        packages: Iterable[ResolvedPackage],
        *,
        cancel: threading.Event | None = None,
    ) -> Report:
        """Measure ``packages`` concurrently and return the joined report.

        At most ``jobs`` measurements are in flight. ``cancel`` is checked
        before each dispatch; once set, running measurements are still joined
        and the remaining packages are recorded as cancelled. An interrupt
        received while waiting sets ``cancel``.

        Args:
            packages: Unique packages, typically from :class:`PackageIndex`.
            cancel: Optional caller-owned cancellation signal.

        Returns:
            Report: One entry per package with totals computed from ok results.
        """

        if cancel is None:
            cancel = threading.Event()
        unique: dict[PackageKey, ResolvedPackage] = {}
        for package in packages:
            unique.setdefault(package.key, package)
        queue = list(unique.values())
        results: dict[PackageKey, SizeResult] = {}
        in_flight: dict[Future[SizeResult], ResolvedPackage] = {}
        position = 0
        with ThreadPoolExecutor(max_workers=self.jobs) as executor:
            while position < len(queue) or in_flight:
                while position < len(queue) and len(in_flight) < self.jobs and not cancel.is_set():
                    package = queue[position]
                    position += 1
                    if self._hooks.before_package:
                        self._hooks.before_package(package)
                    in_flight[executor.submit(self._measure, package)] = package
                if not in_flight:
                    break
                try:
                    done, _ = wait(in_flight, return_when=FIRST_COMPLETED)
                except KeyboardInterrupt:
                    cancel.set()
                    continue
                for future in done:
                    package = in_flight.pop(future)
                    result = future.result()
                    results[package.key] = result
                    if self._hooks.after_package:
                        self._hooks.after_package(package, result)

        for package in queue[position:]:
            results[package.key] = SizeResult.failed(SizeError.CANCELLED)
        entries = tuple(ReportEntry(package=package, result=results[package.key]) for package in queue)
        return Report(entries=entries, cancelled=position < len(queue))

    def _measure(self, package: ResolvedPackage) -> SizeResult:
        try:
            return self._probe.measure(package.root_path)
        except Exception as exc:  # probe failures stay scoped to their package
            return SizeResult.failed(SizeError.IO_ERROR, f"{exc.__class__.__name__}: {exc}")


__all__ = ["Aggregator", "AggregatorHooks", "SupportsMeasure"]
