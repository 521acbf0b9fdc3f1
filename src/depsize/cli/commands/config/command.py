# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command showing the effective configuration."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer

from ....config import ConfigError, ConfigLoader
from ...shared import build_cli_logger

ROOT_OPTION = Annotated[
    Path | None,
    typer.Option("--root", "-r", help="Project root (defaults to the current directory)."),
]
SOURCES_OPTION = Annotated[
    bool,
    typer.Option("--sources", help="List the configuration sources that were applied."),
]


def config_command(root: ROOT_OPTION = None, sources: SOURCES_OPTION = False) -> None:
    """Print the merged configuration for a project as JSON.

    Raises:
        typer.Exit: ``2`` when a configuration source is invalid.
    """

    project_root = (root or Path.cwd()).resolve()
    logger = build_cli_logger(emoji=False)
    try:
        result = ConfigLoader.for_root(project_root).load_with_trace()
    except ConfigError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=2) from exc
    if sources:
        logger.section("Configuration sources")
        for description in result.sources:
            logger.info(description)
    typer.echo(json.dumps(result.config.to_dict(), indent=2))


__all__ = ["config_command"]
