# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

from .commands import register_commands
from .typer_ext import TyperAppConfig, create_typer

app = create_typer(
    config=TyperAppConfig(
        name="depsize",
        help_text="Report the on-disk size of resolved dependency packages.",
        no_args_is_help=True,
    ),
)
register_commands(app)


def main() -> None:
    """Console script entry point."""

    app()


__all__ = ["app", "main"]
