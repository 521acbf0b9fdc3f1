# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Option declarations and parsed options for the report command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any

import typer

ROOT_OPTION = Annotated[
    Path | None,
    typer.Option("--root", "-r", help="Project root (defaults to the current directory)."),
]
MANIFEST_OPTION = Annotated[
    Path | None,
    typer.Option("--manifest-path", help="Path to Cargo.toml passed to cargo metadata."),
]
PACKAGES_FILE_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--packages-file",
        help="JSON listing of resolved {name, version, path} records; skips cargo.",
    ),
]
JOBS_OPTION = Annotated[
    int | None,
    typer.Option("--jobs", "-j", min=1, help="Maximum concurrent directory walks."),
]
DIRECT_ONLY_OPTION = Annotated[
    bool | None,
    typer.Option(
        "--direct-only/--all-dependencies",
        help="Only report direct normal dependencies of workspace members.",
    ),
]
OFFLINE_OPTION = Annotated[
    bool | None,
    typer.Option("--offline/--online", help="Forward --offline to cargo metadata."),
]
TIMEOUT_OPTION = Annotated[
    float | None,
    typer.Option("--timeout", min=0.1, help="Seconds to wait for cargo metadata before giving up."),
]
JSON_OPTION = Annotated[
    bool,
    typer.Option("--json", help="Print the report as JSON instead of text."),
]
OUTPUT_OPTION = Annotated[
    Path | None,
    typer.Option("--output", "-o", help="Also write a JSON report to this path."),
]
EMOJI_OPTION = Annotated[
    bool | None,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
COLOR_OPTION = Annotated[
    bool | None,
    typer.Option("--color/--no-color", help="Toggle ANSI colour output."),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Log each package as it is measured."),
]


@dataclass(slots=True)
class ReportCLIOptions:
    """Capture CLI overrides supplied to the report command."""

    root: Path
    manifest_path: Path | None = None
    packages_file: Path | None = None
    jobs: int | None = None
    direct_only: bool | None = None
    offline: bool | None = None
    timeout: float | None = None
    json_output: bool = False
    output: Path | None = None
    emoji: bool | None = None
    color: bool | None = None
    debug: bool = False

    def config_overrides(self) -> dict[str, Any]:
        """Return the configuration fragment implied by explicit flags.

        Returns:
            dict[str, Any]: Nested mapping keyed by configuration section;
            options left unset are omitted so file configuration applies.
        """

        execution: dict[str, Any] = {}
        output: dict[str, Any] = {}
        resolver: dict[str, Any] = {}
        if self.jobs is not None:
            execution["jobs"] = self.jobs
        if self.json_output:
            output["format"] = "json"
        if self.emoji is not None:
            output["emoji"] = self.emoji
        if self.color is not None:
            output["color"] = self.color
        if self.manifest_path is not None:
            resolver["manifest_path"] = self.manifest_path
        if self.direct_only is not None:
            resolver["direct_only"] = self.direct_only
        if self.offline is not None:
            resolver["offline"] = self.offline
        if self.timeout is not None:
            resolver["timeout"] = self.timeout
        sections = {"execution": execution, "output": output, "resolver": resolver}
        return {name: values for name, values in sections.items() if values}


def build_report_options(
    *,
    root: Path | None,
    manifest_path: Path | None,
    packages_file: Path | None,
    jobs: int | None,
    direct_only: bool | None,
    offline: bool | None,
    timeout: float | None,
    json_output: bool,
    output: Path | None,
    emoji: bool | None,
    color: bool | None,
    debug: bool,
) -> ReportCLIOptions:
    """Construct ``ReportCLIOptions`` from Typer callback parameters.

    Paths given on the command line are resolved against the current
    directory, not ``--root``.
    """

    return ReportCLIOptions(
        root=(root or Path.cwd()).resolve(),
        manifest_path=_from_cwd(manifest_path),
        packages_file=_from_cwd(packages_file),
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


def _from_cwd(path: Path | None) -> Path | None:
    return path.resolve() if path is not None else None


__all__ = [
    "COLOR_OPTION",
    "DEBUG_OPTION",
    "DIRECT_ONLY_OPTION",
    "EMOJI_OPTION",
    "JOBS_OPTION",
    "JSON_OPTION",
    "MANIFEST_OPTION",
    "OFFLINE_OPTION",
    "OUTPUT_OPTION",
    "PACKAGES_FILE_OPTION",
    "ROOT_OPTION",
    "TIMEOUT_OPTION",
    "ReportCLIOptions",
    "build_report_options",
]
