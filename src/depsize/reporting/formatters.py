# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Plain-text rendering of size reports."""

from __future__ import annotations

from typing import Final

from ..config import OutputConfig
from ..models import Report, ReportEntry, SizeError, entry_sort_key

BYTE_UNITS: Final[tuple[tuple[str, int], ...]] = (
    ("GB", 1024**3),
    ("MB", 1024**2),
    ("KB", 1024),
)
PARTIAL_MARKER: Final[str] = "[partial]"
FAILED_LABEL: Final[str] = "FAILED"
SKIPPED_LABEL: Final[str] = "SKIPPED"
TOTAL_LABEL: Final[str] = "Total size"


def format_size(size: int) -> str:
    """Format ``size`` bytes using 1024-based units plus the exact count.

    Args:
        size: Non-negative byte count.

    Returns:
        str: Text such as ``"1.50KB (1536 bytes)"`` or ``"512 bytes"``.
    """

    for unit, scale in BYTE_UNITS:
        if size >= scale:
            return f"{size / scale:.2f}{unit} ({size} bytes)"
    return f"{size} bytes"


class ReportBuilder:
    """Render a :class:`Report` as aligned text lines."""

    def __init__(self, config: OutputConfig | None = None) -> None:
        self._config = config or OutputConfig()

    def render(self, report: Report) -> str:
        """Return the report text: package lines, failure summary, total line.

        Args:
            report: Report produced by the aggregator.

        Returns:
            str: Newline-joined report without a trailing newline.
        """

        return "\n".join(self.render_lines(report))

    def render_lines(self, report: Report) -> list[str]:
        """Return the individual report lines in display order."""

        entries = sorted(report.entries, key=entry_sort_key)
        width = max(
            [self._config.column_width, *(len(entry.key.label()) for entry in entries)],
        )
        lines = [f"{entry.key.label():<{width}} : {self._describe(entry)}" for entry in entries]
        if report.failure_count:
            lines.append(f"Failed to measure {report.failure_count} package(s)")
        lines.append(f"{TOTAL_LABEL}: {format_size(report.grand_total)}")
        return lines

    @staticmethod
    def _describe(entry: ReportEntry) -> str:
        result = entry.result
        if result.error is SizeError.CANCELLED:
            return f"{SKIPPED_LABEL} ({result.error.value})"
        if result.error is not None:
            return f"{FAILED_LABEL} ({result.error.value})"
        text = format_size(result.total_bytes)
        if result.partial:
            return f"{text} {PARTIAL_MARKER}"
        return text


__all__ = ["BYTE_UNITS", "ReportBuilder", "format_size"]
