# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command printing dependency sizes."""

from __future__ import annotations

import typer

from ....runner import measure_dependencies
from ...shared import CLIError, build_cli_logger
from .models import (
    COLOR_OPTION,
    DEBUG_OPTION,
    DIRECT_ONLY_OPTION,
    EMOJI_OPTION,
    JOBS_OPTION,
    JSON_OPTION,
    MANIFEST_OPTION,
    OFFLINE_OPTION,
    OUTPUT_OPTION,
    PACKAGES_FILE_OPTION,
    ROOT_OPTION,
    TIMEOUT_OPTION,
    build_report_options,
)
from .services import (
    build_debug_hooks,
    emit_inconsistencies,
    emit_issues,
    emit_report,
    exit_code_for,
    load_report_config,
    resolve_packages,
    select_resolver,
)


def report_command(
    root: ROOT_OPTION = None,
    manifest_path: MANIFEST_OPTION = None,
    packages_file: PACKAGES_FILE_OPTION = None,
    jobs: JOBS_OPTION = None,
    direct_only: DIRECT_ONLY_OPTION = None,
    offline: OFFLINE_OPTION = None,
    timeout: TIMEOUT_OPTION = None,
    json_output: JSON_OPTION = False,
    output: OUTPUT_OPTION = None,
    emoji: EMOJI_OPTION = None,
    color: COLOR_OPTION = None,
    debug: DEBUG_OPTION = False,
) -> None:
    """Print the on-disk size of every resolved dependency and the total.

    Raises:
        typer.Exit: Always raised; ``0`` when every package was measured,
            ``1`` when some failed, ``2`` on configuration or resolver errors,
            ``130`` when measurement was interrupted.
    """

    options = build_report_options(
        root=root,
        manifest_path=manifest_path,
        packages_file=packages_file,
        jobs=jobs,
        direct_only=direct_only,
        offline=offline,
        timeout=timeout,
        json_output=json_output,
        output=output,
        emoji=emoji,
        color=color,
        debug=debug,
    )
    logger = build_cli_logger(
        emoji=options.emoji if options.emoji is not None else True,
        debug=options.debug,
        no_color=options.color is False,
    )
    try:
        config = load_report_config(options, logger=logger)
        logger = build_cli_logger(
            emoji=config.output.emoji,
            debug=options.debug,
            no_color=not config.output.color,
        )
        resolver = select_resolver(options, config)
        packages = resolve_packages(resolver, options.root, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    logger.debug(f"jobs={config.execution.jobs}")
    run = measure_dependencies(packages, config=config, hooks=build_debug_hooks(logger))
    emit_inconsistencies(run, logger=logger)
    emit_issues(run, logger=logger)
    emit_report(run, config, logger=logger, output=options.output)
    raise typer.Exit(code=exit_code_for(run))


__all__ = ["report_command"]
