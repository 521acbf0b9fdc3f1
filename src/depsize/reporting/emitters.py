# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Emit machine-readable size reports."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..models import Report, ReportEntry


def serialize_entry(entry: ReportEntry) -> dict[str, Any]:
    """Return a JSON-compatible mapping describing ``entry``."""
    package = entry.package
    result = entry.result
    return {
        "name": package.name,
        "version": package.version,
        "path": str(package.root_path),
        "source": package.source,
        "bytes": result.total_bytes if result.is_ok else None,
        "partial": result.partial,
        "error": result.error.name.lower() if result.error is not None else None,
        "detail": result.detail,
        "issues": [{"path": str(issue.path), "reason": issue.reason} for issue in result.issues],
    }


def report_to_dict(report: Report) -> dict[str, Any]:
    """Return the JSON payload for ``report`` with entries in display order."""
    return {
        "packages": [serialize_entry(entry) for entry in report.entries],
        "total_bytes": report.grand_total,
        "failure_count": report.failure_count,
        "partial_count": report.partial_count,
        "cancelled": report.cancelled,
    }


def render_json(report: Report) -> str:
    """Return ``report`` serialised as indented JSON text."""
    return json.dumps(report_to_dict(report), indent=2)


def write_json_report(report: Report, path: Path) -> None:
    """Write a JSON report summarising package sizes."""
    path.write_text(render_json(report) + "\n", encoding="utf-8")


__all__ = ["render_json", "report_to_dict", "serialize_entry", "write_json_report"]
