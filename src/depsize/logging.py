# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Diagnostics printed around a size run: notes, warnings and failures."""

from __future__ import annotations

from enum import Enum

from rich.rule import Rule
from rich.text import Text

from .console import ConsoleSettings, diagnostic_consoles
from .models import Report, ReportEntry


class Severity(Enum):
    """Diagnostic level with its emoji prefix and Rich style."""

    INFO = ("ℹ️ ", "cyan")
    OK = ("✅ ", "green")
    WARN = ("⚠️ ", "yellow")
    FAIL = ("❌ ", "red")

    @property
    def prefix(self) -> str:
        return self.value[0]

    @property
    def style(self) -> str:
        return self.value[1]


def emit(severity: Severity, message: str, *, settings: ConsoleSettings) -> None:
    """Print ``message`` to stderr with the prefix and colour of ``severity``.

    Args:
        severity: Diagnostic level.
        message: Text to print.
        settings: Colour and emoji switches for the console.
    """

    text = Text(f"{severity.prefix if settings.emoji else ''}{message}")
    if settings.color:
        text.stylize(severity.style)
    diagnostic_consoles().get(settings).print(text)


def section(title: str, *, settings: ConsoleSettings) -> None:
    """Print a header separating a block of diagnostics."""

    console = diagnostic_consoles().get(settings)
    if settings.color:
        console.print(Rule(title))
    else:
        console.print(f"--- {title} ---")


def entry_problems(entry: ReportEntry) -> list[str]:
    """Return the warnings worth showing for one report entry.

    A failed entry yields its OS detail when there is one; a partial entry
    yields one line per skipped path.
    """

    label = entry.key.label()
    result = entry.result
    problems: list[str] = []
    if result.error is not None and result.detail:
        problems.append(f"{label}: {result.detail}")
    problems.extend(f"{label}: skipped {issue.reason}" for issue in result.issues)
    return problems


def warn_report_problems(report: Report, *, settings: ConsoleSettings) -> int:
    """Emit a warning for every failure, skipped path and cancellation in ``report``.

    Returns:
        int: Number of warnings printed.
    """

    count = 0
    for entry in report.entries:
        for problem in entry_problems(entry):
            emit(Severity.WARN, problem, settings=settings)
            count += 1
    if report.cancelled:
        emit(Severity.WARN, "Measurement cancelled; remaining packages were skipped", settings=settings)
        count += 1
    return count


__all__ = ["Severity", "emit", "entry_problems", "section", "warn_report_problems"]
