# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Command registration for the depsize CLI."""

from __future__ import annotations

import typer

from . import config, report


def register_commands(app: typer.Typer) -> None:
    """Register every command group on ``app``.

    Args:
        app: Root Typer application.
    """

    report.register(app)
    config.register(app)


__all__ = ["register_commands"]
