# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Report CLI command package."""

from __future__ import annotations

import typer

from .command import report_command

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Register the report command on the provided Typer application.

    Args:
        app: Typer application receiving the command.
    """

    app.command(name="report", help="Report the size of each dependency package.")(report_command)
