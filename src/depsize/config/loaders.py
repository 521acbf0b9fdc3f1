# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Configuration sources (defaults, ``.depsize.toml``, ``Cargo.toml``) and layering."""

from __future__ import annotations

import copy
import tomllib
from abc import abstractmethod
from collections.abc import Iterable, Mapping, MutableMapping, Sequence
from pathlib import Path
from typing import Any, Final, Protocol

from pydantic import BaseModel, Field, ValidationError

from .models import ConfigError, DepsizeConfig

DEFAULT_INCLUDE_KEY: Final[str] = "include"
CONFIG_FILE_NAME: Final[str] = ".depsize.toml"
CARGO_MANIFEST_NAME: Final[str] = "Cargo.toml"
METADATA_KEY: Final[str] = "metadata"
METADATA_SECTION_KEY: Final[str] = "depsize"
CARGO_TABLES: Final[tuple[str, ...]] = ("workspace", "package")

_TOML_CACHE: dict[tuple[Path, int], Mapping[str, Any]] = {}


class ConfigSource(Protocol):
    """Provide configuration data loaded from disk or other mediums."""

    name: str

    @abstractmethod
    def load(self) -> Mapping[str, Any]:
        """Provide configuration values as a mapping."""

    @abstractmethod
    def describe(self) -> str:
        """Return a human-readable description of the source."""


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _read_toml(path: Path) -> dict[str, Any]:
    """Return the parsed TOML document at ``path`` using a mtime-keyed cache."""

    resolved = path.resolve()
    stat = resolved.stat()
    cache_key = (resolved, stat.st_mtime_ns)
    if cached := _TOML_CACHE.get(cache_key):
        return copy.deepcopy(dict(cached))
    try:
        with resolved.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    _TOML_CACHE[cache_key] = copy.deepcopy(data)
    return data


class DefaultConfigSource:
    """Return the built-in defaults as a configuration fragment."""

    name = "defaults"

    def load(self) -> Mapping[str, Any]:
        return DepsizeConfig().to_dict()

    def describe(self) -> str:
        return "Built-in defaults"


class TomlConfigSource:
    """Load configuration data from a TOML document with include support."""

    def __init__(
        self,
        path: Path,
        *,
        name: str | None = None,
        include_key: str = DEFAULT_INCLUDE_KEY,
    ) -> None:
        self._root_path = path
        self.name = name or str(path)
        self._include_key = include_key

    def load(self) -> Mapping[str, Any]:
        return self._load(self._root_path, ())

    def _load(self, path: Path, stack: tuple[Path, ...]) -> Mapping[str, Any]:
        if not path.exists():
            return {}
        if path in stack:
            include_chain = " -> ".join(str(entry) for entry in (*stack, path))
            raise ConfigError(f"Circular include detected: {include_chain}")
        data = _read_toml(path)
        if not isinstance(data, MutableMapping):
            raise ConfigError(f"Configuration at {path} must be a table")
        document: dict[str, Any] = dict(data)
        includes = document.pop(self._include_key, None)
        merged: dict[str, Any] = {}
        for include_path in self._coerce_includes(includes, path.parent):
            fragment = self._load(include_path, stack + (path,))
            merged = _deep_merge(merged, fragment)
        return _deep_merge(merged, document)

    def _coerce_includes(self, raw: Any, base_dir: Path) -> Iterable[Path]:
        if raw is None:
            return []
        if isinstance(raw, (str, Path)):
            return [self._resolve_path(Path(raw), base_dir)]
        if isinstance(raw, Iterable):
            return [self._resolve_path(Path(item), base_dir) for item in raw]
        raise ConfigError(f"Unsupported include declaration: {raw!r}")

    @staticmethod
    def _resolve_path(path: Path, base_dir: Path) -> Path:
        return path if path.is_absolute() else (base_dir / path)

    def describe(self) -> str:
        return f"TOML configuration at {self.name}"


class CargoManifestConfigSource:
    """Read ``[package.metadata.depsize]`` or ``[workspace.metadata.depsize]``.

    Workspace metadata is applied first so a package table can refine it.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self.name = str(path)

    def load(self) -> Mapping[str, Any]:
        if not self._path.exists():
            return {}
        data = _read_toml(self._path)
        merged: dict[str, Any] = {}
        for table_name in CARGO_TABLES:
            table = data.get(table_name)
            if not isinstance(table, Mapping):
                continue
            metadata = table.get(METADATA_KEY)
            if not isinstance(metadata, Mapping):
                continue
            section = metadata.get(METADATA_SECTION_KEY)
            if section is None:
                continue
            if not isinstance(section, Mapping):
                raise ConfigError(f"[{table_name}.metadata.depsize] in {self._path} must be a table")
            merged = _deep_merge(merged, section)
        return merged

    def describe(self) -> str:
        return f"Cargo.toml metadata ({self.name})"


class ConfigLoadResult(BaseModel):
    """Container bundling a resolved config with the sources that shaped it."""

    config: DepsizeConfig
    sources: list[str] = Field(default_factory=list)


class ConfigLoader:
    """Apply layered configuration sources with predictable precedence."""

    def __init__(self, *, project_root: Path, sources: Sequence[ConfigSource]) -> None:
        """Initialise a loader that merges the supplied configuration sources.

        Args:
            project_root: Directory that anchors relative paths.
            sources: Ordered collection of configuration sources; later
                sources override earlier ones.

        Raises:
            ValueError: If no sources are supplied.
        """

        if not sources:
            raise ValueError("at least one configuration source is required")
        self._sources = list(sources)
        self._project_root = project_root.resolve()

    @classmethod
    def for_root(cls, project_root: Path) -> ConfigLoader:
        """Return a loader wired with the standard source stack for ``project_root``.

        Args:
            project_root: Project directory containing ``Cargo.toml`` and
                optionally ``.depsize.toml``.

        Returns:
            ConfigLoader: Loader using defaults, Cargo metadata, then
            ``.depsize.toml``.
        """

        return cls(
            project_root=project_root,
            sources=[
                DefaultConfigSource(),
                CargoManifestConfigSource(project_root / CARGO_MANIFEST_NAME),
                TomlConfigSource(project_root / CONFIG_FILE_NAME),
            ],
        )

    def load_with_trace(self, overrides: Mapping[str, Any] | None = None) -> ConfigLoadResult:
        """Merge every source plus ``overrides`` and validate the outcome.

        Args:
            overrides: Final fragment applied on top of file sources, typically
                built from CLI flags.

        Returns:
            ConfigLoadResult: Validated configuration and contributing sources.

        Raises:
            ConfigError: If a source is malformed or values fail validation.
        """

        merged: dict[str, Any] = {}
        applied: list[str] = []
        for source in self._sources:
            fragment = source.load()
            if not fragment:
                continue
            if not isinstance(fragment, Mapping):
                raise ConfigError(f"{source.describe()} must provide a table")
            merged = _deep_merge(merged, fragment)
            applied.append(source.describe())
        if overrides:
            merged = _deep_merge(merged, overrides)
            applied.append("Command-line overrides")
        try:
            config = DepsizeConfig.model_validate(merged)
        except ValidationError as exc:
            raise ConfigError(f"Invalid configuration ({', '.join(applied) or 'defaults'}): {exc}") from exc
        config = self._resolve_paths(config)
        return ConfigLoadResult(config=config, sources=applied)

    def load(self, overrides: Mapping[str, Any] | None = None) -> DepsizeConfig:
        """Return the validated configuration, discarding provenance."""

        return self.load_with_trace(overrides).config

    def _resolve_paths(self, config: DepsizeConfig) -> DepsizeConfig:
        manifest = config.resolver.manifest_path
        if manifest is None or manifest.is_absolute():
            return config
        resolver = config.resolver.model_copy(update={"manifest_path": self._project_root / manifest})
        return config.model_copy(update={"resolver": resolver})


__all__ = [
    "CARGO_MANIFEST_NAME",
    "CONFIG_FILE_NAME",
    "CargoManifestConfigSource",
    "ConfigLoadResult",
    "ConfigLoader",
    "ConfigSource",
    "DefaultConfigSource",
    "TomlConfigSource",
]
