# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Read the resolved dependency closure from ``cargo metadata``."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable, Mapping, Sequence
from pathlib import Path
from subprocess import CompletedProcess
from typing import Any, Final

from ..config import ResolverConfig
from ..models import ResolvedPackage
from ..process_utils import CommandTimeoutError, SubprocessExecutionError, run_command
from .base import ResolverError

METADATA_FORMAT_VERSION: Final[str] = "1"

CommandRunner = Callable[..., CompletedProcess[str]]


class CargoMetadataResolver:
    """Resolve dependency packages by delegating to ``cargo metadata``.

    Cargo performs the full resolution; this adapter only maps each package's
    ``manifest_path`` to the directory holding its checkout.
    """

    def __init__(
        self,
        config: ResolverConfig | None = None,
        *,
        runner: CommandRunner | None = None,
    ) -> None:
        self._config = config or ResolverConfig()
        self._runner = runner or run_command

    def build_command(self) -> list[str]:
        """Return the ``cargo metadata`` argument list for the configuration.

        Returns:
            list[str]: Command including the executable.
        """

        command = [self._config.cargo_bin, "metadata", "--format-version", METADATA_FORMAT_VERSION]
        if self._config.manifest_path is not None:
            command.extend(["--manifest-path", str(self._config.manifest_path)])
        if self._config.offline:
            command.append("--offline")
        return command

    def resolve(self, root: Path) -> list[ResolvedPackage]:
        """Run cargo in ``root`` and return every non-workspace package.

        Args:
            root: Directory containing the project's ``Cargo.toml``.

        Returns:
            list[ResolvedPackage]: Dependency packages in cargo's order.

        Raises:
            ResolverError: If cargo is missing, fails, times out, or prints
                invalid JSON.
        """

        command = self.build_command()
        try:
            completed = self._runner(command, cwd=root, check=True, timeout=self._config.timeout)
        except FileNotFoundError as exc:
            raise ResolverError(str(exc)) from exc
        except CommandTimeoutError as exc:
            raise ResolverError(f"cargo metadata timed out after {exc.timeout:g}s") from exc
        except SubprocessExecutionError as exc:
            stderr = (exc.stderr or "").strip() or "<no output>"
            raise ResolverError(f"cargo metadata failed with status {exc.returncode}: {stderr}") from exc
        try:
            payload = json.loads(completed.stdout)
        except json.JSONDecodeError as exc:
            raise ResolverError(f"cargo metadata produced invalid JSON: {exc}") from exc
        if not isinstance(payload, Mapping):
            raise ResolverError("cargo metadata output must be a JSON object")
        return parse_metadata(payload, direct_only=self._config.direct_only)


def parse_metadata(payload: Mapping[str, Any], *, direct_only: bool = False) -> list[ResolvedPackage]:
    """Convert a ``cargo metadata`` document into resolved packages.

    Args:
        payload: Decoded ``cargo metadata --format-version 1`` output.
        direct_only: When ``True`` keep only normal (non-dev, non-build)
            dependencies declared directly by workspace members.

    Returns:
        list[ResolvedPackage]: Dependency packages excluding workspace members.

    Raises:
        ResolverError: If required fields are missing.
    """

    raw_packages = payload.get("packages")
    if not isinstance(raw_packages, list):
        raise ResolverError("cargo metadata output has no 'packages' array")
    members = set(payload.get("workspace_members") or ())
    allowed = _direct_dependency_ids(payload, members) if direct_only else None

    packages: list[ResolvedPackage] = []
    for raw in raw_packages:
        try:
            package_id = raw["id"]
            name = raw["name"]
            version = raw["version"]
            manifest_path = raw["manifest_path"]
        except (KeyError, TypeError) as exc:
            raise ResolverError(f"cargo metadata package entry is missing {exc}") from exc
        if package_id in members:
            continue
        if allowed is not None and package_id not in allowed:
            continue
        packages.append(
            ResolvedPackage(
                name=name,
                version=version,
                root_path=Path(manifest_path).parent,
                source=raw.get("source"),
            ),
        )
    return packages


def _direct_dependency_ids(payload: Mapping[str, Any], members: set[str]) -> set[str]:
    resolve = payload.get("resolve")
    if not isinstance(resolve, Mapping):
        raise ResolverError("cargo metadata output has no 'resolve' graph; direct-only filtering needs it")
    allowed: set[str] = set()
    for node in resolve.get("nodes") or ():
        if node.get("id") not in members:
            continue
        for dep in node.get("deps") or ():
            if _is_normal_dependency(dep.get("dep_kinds")):
                allowed.add(dep["pkg"])
    return allowed


def _is_normal_dependency(dep_kinds: Sequence[Mapping[str, Any]] | None) -> bool:
    """Return ``True`` when any declared kind is a normal dependency."""

    # Cargo older than 1.41 omits dep_kinds entirely.
    if not dep_kinds:
        return True
    return any(kind.get("kind") is None for kind in _as_mappings(dep_kinds))


def _as_mappings(items: Iterable[Any]) -> Iterable[Mapping[str, Any]]:
    return (item for item in items if isinstance(item, Mapping))


__all__ = ["CargoMetadataResolver", "parse_metadata"]
