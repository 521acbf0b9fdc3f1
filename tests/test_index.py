# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for package deduplication."""

from __future__ import annotations

from pathlib import Path

from depsize.index import PackageIndex
from depsize.models import PackageKey, ResolvedPackage


def _pkg(name: str, version: str, path: str) -> ResolvedPackage:
    return ResolvedPackage(name=name, version=version, root_path=Path(path))


def test_duplicates_collapse_to_first_entry() -> None:
    packages = [
        _pkg("a", "1.0", "/pkgs/a"),
        _pkg("b", "2.0", "/pkgs/b"),
        _pkg("a", "1.0", "/pkgs/a"),
    ]

    result = PackageIndex().dedupe(packages)

    assert result.keys == (PackageKey("a", "1.0"), PackageKey("b", "2.0"))
    assert result.inconsistencies == ()


def test_distinct_versions_are_kept() -> None:
    packages = [_pkg("syn", "1.0.109", "/r/syn-1"), _pkg("syn", "2.0.48", "/r/syn-2")]

    result = PackageIndex().dedupe(packages)

    assert len(result.packages) == 2


def test_conflicting_paths_keep_first_and_warn() -> None:
    packages = [
        _pkg("log", "0.4.20", "/registry/log-0.4.20"),
        _pkg("log", "0.4.20", "/vendor/log"),
        _pkg("log", "0.4.20", "/vendor/log"),
    ]

    result = PackageIndex().dedupe(packages)

    assert [package.root_path for package in result.packages] == [Path("/registry/log-0.4.20")]
    assert len(result.inconsistencies) == 1
    inconsistency = result.inconsistencies[0]
    assert inconsistency.kept_path == Path("/registry/log-0.4.20")
    assert inconsistency.discarded_path == Path("/vendor/log")
    assert "log (v0.4.20)" in inconsistency.describe()


def test_dedupe_is_idempotent() -> None:
    packages = [
        _pkg("c", "1.0", "/c"),
        _pkg("a", "1.0", "/a"),
        _pkg("c", "1.0", "/c-other"),
        _pkg("a", "1.0", "/a"),
    ]
    index = PackageIndex()

    once = index.dedupe(packages)
    twice = index.dedupe(once.packages)

    assert twice.packages == once.packages
    assert twice.inconsistencies == ()


def test_dedupe_is_deterministic_for_fixed_input() -> None:
    packages = [_pkg("x", "1", "/x1"), _pkg("x", "1", "/x2"), _pkg("y", "1", "/y")]

    assert PackageIndex().dedupe(packages) == PackageIndex().dedupe(list(packages))


def test_empty_input_is_valid() -> None:
    result = PackageIndex().dedupe([])

    assert result.packages == ()
    assert result.inconsistencies == ()
