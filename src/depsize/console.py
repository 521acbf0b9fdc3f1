# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Stderr consoles for diagnostics, kept apart from the report on stdout."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from functools import lru_cache

from rich.console import Console


def stderr_is_tty() -> bool:
    """Return ``True`` when diagnostics are going to an interactive terminal."""

    try:
        return sys.stderr.isatty()
    except (AttributeError, ValueError):
        return False


@dataclass(frozen=True, slots=True)
class ConsoleSettings:
    """Presentation switches for diagnostic output."""

    color: bool = True
    emoji: bool = True


class DiagnosticConsoles:
    """Cache one Rich console per settings and terminal state.

    Colour is only enabled when requested *and* stderr is a terminal, so
    redirected logs never carry escape codes.
    """

    def __init__(self) -> None:
        self._consoles: dict[tuple[ConsoleSettings, bool], Console] = {}

    def get(self, settings: ConsoleSettings) -> Console:
        interactive = stderr_is_tty()
        key = (settings, interactive)
        console = self._consoles.get(key)
        if console is None:
            colored = settings.color and interactive
            console = Console(
                stderr=True,
                soft_wrap=True,
                highlight=False,
                emoji=settings.emoji,
                no_color=not colored,
                color_system="auto" if colored else None,
            )
            self._consoles[key] = console
        return console


@lru_cache(maxsize=1)
def diagnostic_consoles() -> DiagnosticConsoles:
    """Return the process-wide console cache."""

    return DiagnosticConsoles()


__all__ = ["ConsoleSettings", "DiagnosticConsoles", "diagnostic_consoles", "stderr_is_tty"]
