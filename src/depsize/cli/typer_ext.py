# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer construction helpers shared by every command group."""

from __future__ import annotations

from dataclasses import dataclass

import typer


@dataclass(frozen=True, slots=True)
class TyperAppConfig:
    """Options applied when building a Typer application."""

    name: str | None = None
    help_text: str | None = None
    invoke_without_command: bool = False
    no_args_is_help: bool = False


def create_typer(*, config: TyperAppConfig) -> typer.Typer:
    """Return a Typer application with the project's shared defaults.

    Args:
        config: Name, help text and invocation behaviour for the app.

    Returns:
        typer.Typer: Configured application with completion disabled and
        Rich markup enabled for help output.
    """

    return typer.Typer(
        name=config.name,
        help=config.help_text,
        invoke_without_command=config.invoke_without_command,
        no_args_is_help=config.no_args_is_help,
        add_completion=False,
        rich_markup_mode="rich",
        pretty_exceptions_enable=False,
    )


__all__ = ["TyperAppConfig", "create_typer"]
