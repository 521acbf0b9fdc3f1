# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Config CLI command package."""

from __future__ import annotations

import typer

from .command import config_command

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Register the config command on the provided Typer application.

    Args:
        app: Typer application receiving the command.
    """

    app.command(name="config", help="Show the effective configuration.")(config_command)
