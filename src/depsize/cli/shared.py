# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors)."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

import typer
from rich.text import Text

from ..console import ConsoleSettings, diagnostic_consoles
from ..logging import Severity, emit, section, warn_report_problems
from ..models import Report

_KEY_VALUE_RE = re.compile(r"([\w-]+)=(\".*?\"|\S+)")


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 2) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Route command diagnostics to stderr and report text to stdout."""

    settings: ConsoleSettings = field(default_factory=ConsoleSettings)
    debug_enabled: bool = False

    def fail(self, message: str) -> None:
        emit(Severity.FAIL, message, settings=self.settings)

    def warn(self, message: str) -> None:
        emit(Severity.WARN, message, settings=self.settings)

    def info(self, message: str) -> None:
        emit(Severity.INFO, message, settings=self.settings)

    def ok(self, message: str) -> None:
        emit(Severity.OK, message, settings=self.settings)

    def section(self, title: str) -> None:
        section(title, settings=self.settings)

    def report_problems(self, report: Report) -> int:
        """Warn about failed, partial and skipped packages in ``report``."""

        return warn_report_problems(report, settings=self.settings)

    def echo(self, message: str) -> None:
        """Write ``message`` to stdout using Typer's echo helper."""

        typer.echo(message)

    def debug(self, message: str) -> None:
        """Emit a debug message when debug logging is enabled.

        ``key=value`` pairs in ``message`` are highlighted.

        Args:
            message: Debug payload rendered with simple highlighting.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in _KEY_VALUE_RE.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            key, raw_value = match.group(1), match.group(2)
            text.append(key, style="bold magenta")
            text.append("=", style="dim")
            text.append(raw_value, style="bold green")
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        diagnostic_consoles().get(self.settings).print(text)


def build_cli_logger(*, emoji: bool, debug: bool = False, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided preferences.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether debug logging should be enabled.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Logger writing diagnostics to stderr.
    """

    return CLILogger(settings=ConsoleSettings(color=not no_color, emoji=emoji), debug_enabled=debug)


__all__ = ["CLIError", "CLILogger", "build_cli_logger"]
