# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helper services for the report CLI."""

from __future__ import annotations

from pathlib import Path

from ....aggregate import AggregatorHooks
from ....config import ConfigError, ConfigLoader, DepsizeConfig
from ....models import ResolvedPackage, SizeResult
from ....reporting import ReportBuilder, render_json, write_json_report
from ....resolvers import CargoMetadataResolver, ListingResolver, PackageResolver, ResolverError
from ....runner import SizeRun
from ...shared import CLIError, CLILogger
from .models import ReportCLIOptions

CANCELLED_EXIT_CODE = 130


def load_report_config(options: ReportCLIOptions, *, logger: CLILogger) -> DepsizeConfig:
    """Return the layered configuration for ``options.root`` with CLI overrides.

    Args:
        options: Parsed CLI options.
        logger: Logger used to report configuration failures.

    Returns:
        DepsizeConfig: Validated configuration.

    Raises:
        CLIError: If any configuration source is invalid.
    """

    try:
        return ConfigLoader.for_root(options.root).load(options.config_overrides())
    except ConfigError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc)) from exc


def select_resolver(options: ReportCLIOptions, config: DepsizeConfig) -> PackageResolver:
    """Return the listing resolver when a file was supplied, otherwise cargo."""

    if options.packages_file is not None:
        return ListingResolver(options.packages_file)
    return CargoMetadataResolver(config.resolver)


def resolve_packages(
    resolver: PackageResolver,
    root: Path,
    *,
    logger: CLILogger,
) -> list[ResolvedPackage]:
    """Run ``resolver`` for ``root`` translating failures into ``CLIError``.

    Raises:
        CLIError: If the resolver cannot produce a package list.
    """

    try:
        packages = resolver.resolve(root)
    except ResolverError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc)) from exc
    logger.debug(f"resolved packages={len(packages)}")
    return packages


def build_debug_hooks(logger: CLILogger) -> AggregatorHooks | None:
    """Return aggregator hooks that trace each package when debugging."""

    if not logger.debug_enabled:
        return None

    def _before(package: ResolvedPackage) -> None:
        logger.debug(f"measuring name={package.name} version={package.version} path={package.root_path}")

    def _after(package: ResolvedPackage, result: SizeResult) -> None:
        outcome = result.error.name.lower() if result.error is not None else "ok"
        logger.debug(f"measured name={package.name} bytes={result.total_bytes} outcome={outcome}")

    return AggregatorHooks(before_package=_before, after_package=_after)


def emit_inconsistencies(run: SizeRun, *, logger: CLILogger) -> None:
    """Warn about resolver entries that disagreed on a package's location."""

    for inconsistency in run.inconsistencies:
        logger.warn(inconsistency.describe())


def emit_issues(run: SizeRun, *, logger: CLILogger) -> None:
    """Warn about failed packages and unreadable entries inside partial ones."""

    logger.report_problems(run.report)


def emit_report(run: SizeRun, config: DepsizeConfig, *, logger: CLILogger, output: Path | None) -> None:
    """Print the report in the configured format and optionally save JSON."""

    if config.output.format == "json":
        logger.echo(render_json(run.report))
    else:
        logger.echo(ReportBuilder(config.output).render(run.report))
    if output is not None:
        write_json_report(run.report, output)
        logger.ok(f"Wrote JSON report to {output}")


def exit_code_for(run: SizeRun) -> int:
    """Return the process exit status for ``run``."""

    if run.report.cancelled:
        return CANCELLED_EXIT_CODE
    return run.exit_code


__all__ = [
    "CANCELLED_EXIT_CODE",
    "build_debug_hooks",
    "emit_inconsistencies",
    "emit_issues",
    "emit_report",
    "exit_code_for",
    "load_report_config",
    "resolve_packages",
    "select_resolver",
]
