# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for text and JSON report rendering."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from depsize.config import OutputConfig
from depsize.models import ProbeIssue, Report, ReportEntry, ResolvedPackage, SizeError, SizeResult
from depsize.reporting import ReportBuilder, format_size, report_to_dict, write_json_report


def _entry(name: str, version: str, result: SizeResult) -> ReportEntry:
    package = ResolvedPackage(name=name, version=version, root_path=Path(f"/pkgs/{name}-{version}"))
    return ReportEntry(package=package, result=result)


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        (0, "0 bytes"),
        (100, "100 bytes"),
        (1023, "1023 bytes"),
        (1024, "1.00KB (1024 bytes)"),
        (1536, "1.50KB (1536 bytes)"),
        (1048576, "1.00MB (1048576 bytes)"),
        (1073741824, "1.00GB (1073741824 bytes)"),
        (5 * 1024**4, "5120.00GB (5497558138880 bytes)"),
    ],
)
def test_format_size_picks_largest_unit(size: int, expected: str) -> None:
    assert format_size(size) == expected


def test_render_lists_packages_and_total() -> None:
    report = Report(
        entries=(
            _entry("b", "2.0", SizeResult.ok(2048)),
            _entry("a", "1.0", SizeResult.ok(1000)),
        ),
    )

    lines = ReportBuilder().render(report).splitlines()

    assert lines == [
        f"{'a (v1.0)':<25} : 1000 bytes",
        f"{'b (v2.0)':<25} : 2.00KB (2048 bytes)",
        "Total size: 2.98KB (3048 bytes)",
    ]


def test_render_is_stable_under_reordering() -> None:
    entries = [
        _entry("serde", "1.0.195", SizeResult.ok(10)),
        _entry("Serde", "0.9.0", SizeResult.ok(20)),
        _entry("anyhow", "1.0.79", SizeResult.failed(SizeError.PATH_NOT_FOUND)),
        _entry("serde", "1.0.100", SizeResult.ok(30)),
    ]
    builder = ReportBuilder()

    forward = builder.render(Report(entries=tuple(entries)))
    backward = builder.render(Report(entries=tuple(reversed(entries))))

    assert forward == backward
    labels = [line.split(" : ")[0].strip() for line in forward.splitlines()[:4]]
    assert labels == ["Serde (v0.9.0)", "anyhow (v1.0.79)", "serde (v1.0.100)", "serde (v1.0.195)"]


def test_failed_packages_are_marked_and_excluded() -> None:
    report = Report(
        entries=(
            _entry("c", "1.0", SizeResult.failed(SizeError.PATH_NOT_FOUND, "No such file: /missing")),
            _entry("d", "1.0", SizeResult.ok(10)),
        ),
    )

    lines = ReportBuilder().render(report).splitlines()

    assert lines[0].endswith(": FAILED (path not found)")
    assert lines[-2] == "Failed to measure 1 package(s)"
    assert lines[-1] == "Total size: 10 bytes"


def test_partial_and_cancelled_markers() -> None:
    issue = ProbeIssue(path=Path("/pkgs/e/secret"), reason="Permission denied: /pkgs/e/secret")
    report = Report(
        entries=(
            _entry("e", "1.0", SizeResult.ok(2048, [issue])),
            _entry("f", "1.0", SizeResult.failed(SizeError.CANCELLED)),
        ),
        cancelled=True,
    )

    text = ReportBuilder().render(report)

    assert "2.00KB (2048 bytes) [partial]" in text
    assert "SKIPPED (cancelled)" in text


def test_long_labels_widen_the_column() -> None:
    long_name = "a-very-long-crate-name-for-alignment"
    report = Report(
        entries=(
            _entry(long_name, "1.0.0", SizeResult.ok(1)),
            _entry("z", "1", SizeResult.ok(1)),
        ),
    )

    lines = ReportBuilder(OutputConfig(column_width=10)).render(report).splitlines()

    assert lines[0].index(":") == lines[1].index(":")


def test_empty_report_renders_zero_total() -> None:
    assert ReportBuilder().render(Report()) == "Total size: 0 bytes"


def test_json_report_contents(tmp_path: Path) -> None:
    report = Report(
        entries=(
            _entry("b", "2.0", SizeResult.ok(2048)),
            _entry("c", "1.0", SizeResult.failed(SizeError.PERMISSION_DENIED, "Permission denied")),
        ),
    )
    dest = tmp_path / "sizes.json"

    write_json_report(report, dest)

    data = json.loads(dest.read_text(encoding="utf-8"))
    assert data == report_to_dict(report)
    assert data["total_bytes"] == 2048
    assert data["failure_count"] == 1
    assert data["packages"][0]["bytes"] == 2048
    assert data["packages"][1]["bytes"] is None
    assert data["packages"][1]["error"] == "permission_denied"
