# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Report the on-disk size of a project's resolved dependency packages."""

from __future__ import annotations

from .aggregate import Aggregator, AggregatorHooks
from .index import DedupeResult, PackageIndex, ResolverInconsistency
from .models import PackageKey, ProbeIssue, Report, ReportEntry, ResolvedPackage, SizeError, SizeResult
from .probe import SizeProbe
from .reporting import ReportBuilder, format_size
from .runner import SizeRun, measure_dependencies

__version__ = "0.1.0"

__all__ = [
    "Aggregator",
    "AggregatorHooks",
    "DedupeResult",
    "PackageIndex",
    "PackageKey",
    "ProbeIssue",
    "Report",
    "ReportBuilder",
    "ReportEntry",
    "ResolvedPackage",
    "ResolverInconsistency",
    "SizeError",
    "SizeProbe",
    "SizeResult",
    "SizeRun",
    "__version__",
    "format_size",
    "measure_dependencies",
]
