# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for layered configuration loading."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from depsize.config import ConfigError, ConfigLoader, DepsizeConfig, default_parallel_jobs


def test_defaults_follow_available_parallelism(tmp_path: Path) -> None:
    config = ConfigLoader.for_root(tmp_path).load()

    assert config.execution.jobs == default_parallel_jobs() == max(1, os.cpu_count() or 1)
    assert config.output.format == "text"
    assert config.output.column_width == 25
    assert config.resolver.cargo_bin == "cargo"


def test_cargo_metadata_table_is_read(tmp_path: Path) -> None:
    (tmp_path / "Cargo.toml").write_text(
        "\n".join(
            [
                "[workspace.metadata.depsize.execution]",
                "jobs = 3",
                "[package]",
                'name = "demo"',
                'version = "0.1.0"',
                "[package.metadata.depsize.output]",
                "column_width = 40",
            ],
        ),
        encoding="utf-8",
    )

    config = ConfigLoader.for_root(tmp_path).load()

    assert config.execution.jobs == 3
    assert config.output.column_width == 40


def test_depsize_toml_overrides_cargo_metadata(tmp_path: Path) -> None:
    (tmp_path / "Cargo.toml").write_text(
        "[package.metadata.depsize.execution]\njobs = 3\n",
        encoding="utf-8",
    )
    (tmp_path / ".depsize.toml").write_text("[execution]\njobs = 5\n", encoding="utf-8")

    result = ConfigLoader.for_root(tmp_path).load_with_trace()

    assert result.config.execution.jobs == 5
    assert result.sources[-1].startswith("TOML configuration")


def test_cli_overrides_win(tmp_path: Path) -> None:
    (tmp_path / ".depsize.toml").write_text("[execution]\njobs = 5\n", encoding="utf-8")

    config = ConfigLoader.for_root(tmp_path).load({"execution": {"jobs": 1}})

    assert config.execution.jobs == 1


def test_includes_are_merged(tmp_path: Path) -> None:
    (tmp_path / "shared.toml").write_text('[resolver]\ncargo_bin = "/opt/cargo"\n', encoding="utf-8")
    (tmp_path / ".depsize.toml").write_text(
        'include = "shared.toml"\n[resolver]\noffline = true\n',
        encoding="utf-8",
    )

    config = ConfigLoader.for_root(tmp_path).load()

    assert config.resolver.cargo_bin == "/opt/cargo"
    assert config.resolver.offline is True


def test_circular_include_is_rejected(tmp_path: Path) -> None:
    (tmp_path / "a.toml").write_text('include = ".depsize.toml"\n', encoding="utf-8")
    (tmp_path / ".depsize.toml").write_text('include = "a.toml"\n', encoding="utf-8")

    with pytest.raises(ConfigError, match="Circular include"):
        ConfigLoader.for_root(tmp_path).load()


def test_unknown_keys_are_rejected(tmp_path: Path) -> None:
    (tmp_path / ".depsize.toml").write_text("[execution]\nworkers = 2\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        ConfigLoader.for_root(tmp_path).load()


def test_invalid_jobs_are_rejected(tmp_path: Path) -> None:
    (tmp_path / ".depsize.toml").write_text("[execution]\njobs = 0\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        ConfigLoader.for_root(tmp_path).load()


def test_malformed_toml_is_reported(tmp_path: Path) -> None:
    (tmp_path / ".depsize.toml").write_text("[execution\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        ConfigLoader.for_root(tmp_path).load()


def test_relative_manifest_path_resolves_against_root(tmp_path: Path) -> None:
    (tmp_path / ".depsize.toml").write_text('[resolver]\nmanifest_path = "crates/app/Cargo.toml"\n', encoding="utf-8")

    config = ConfigLoader.for_root(tmp_path).load()

    assert config.resolver.manifest_path == tmp_path.resolve() / "crates/app/Cargo.toml"


def test_to_dict_is_json_compatible() -> None:
    data = DepsizeConfig().to_dict()

    assert data["output"]["format"] == "text"
    assert data["resolver"]["manifest_path"] is None


def test_resolver_timeout_from_file_and_cli(tmp_path: Path) -> None:
    (tmp_path / ".depsize.toml").write_text("[resolver]\ntimeout = 45\n", encoding="utf-8")
    loader = ConfigLoader.for_root(tmp_path)

    assert loader.load().resolver.timeout == 45.0
    assert loader.load({"resolver": {"timeout": 5}}).resolver.timeout == 5.0
    assert ConfigLoader.for_root(tmp_path / "elsewhere").load().resolver.timeout is None
