# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for stderr diagnostics."""

from __future__ import annotations

from pathlib import Path

import pytest

from depsize.console import ConsoleSettings
from depsize.logging import Severity, emit, entry_problems, section, warn_report_problems
from depsize.models import ProbeIssue, Report, ReportEntry, ResolvedPackage, SizeError, SizeResult

PLAIN = ConsoleSettings(color=False, emoji=False)


def _entry(name: str, result: SizeResult) -> ReportEntry:
    return ReportEntry(package=ResolvedPackage(name, "1.0", Path(f"/pkgs/{name}")), result=result)


def test_entry_problems_lists_failure_detail_and_skipped_paths() -> None:
    failed = _entry("gone", SizeResult.failed(SizeError.PATH_NOT_FOUND, "No such file or directory: /pkgs/gone"))
    partial = _entry(
        "half",
        SizeResult.ok(10, [ProbeIssue(Path("/pkgs/half/a"), "Permission denied: /pkgs/half/a")]),
    )
    clean = _entry("fine", SizeResult.ok(10))

    assert entry_problems(failed) == ["gone (v1.0): No such file or directory: /pkgs/gone"]
    assert entry_problems(partial) == ["half (v1.0): skipped Permission denied: /pkgs/half/a"]
    assert entry_problems(clean) == []


def test_warn_report_problems_goes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    report = Report(
        entries=(
            _entry("gone", SizeResult.failed(SizeError.IO_ERROR, "boom")),
            _entry("later", SizeResult.failed(SizeError.CANCELLED)),
        ),
        cancelled=True,
    )

    count = warn_report_problems(report, settings=PLAIN)

    captured = capsys.readouterr()
    assert count == 2
    assert captured.out == ""
    assert "gone (v1.0): boom" in captured.err
    assert "Measurement cancelled" in captured.err


@pytest.mark.parametrize("severity", list(Severity))
def test_emit_respects_emoji_setting(capsys: pytest.CaptureFixture[str], severity: Severity) -> None:
    emit(severity, "plain", settings=PLAIN)
    emit(severity, "decorated", settings=ConsoleSettings(color=False, emoji=True))

    lines = capsys.readouterr().err.splitlines()
    assert lines[0] == "plain"
    assert lines[1].startswith(severity.prefix.strip())


def test_section_without_colour_prints_marker(capsys: pytest.CaptureFixture[str]) -> None:
    section("Configuration sources", settings=PLAIN)

    assert capsys.readouterr().err.strip() == "--- Configuration sources ---"
