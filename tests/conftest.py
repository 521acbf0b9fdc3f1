# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path

import pytest

PackageFactory = Callable[[str, Mapping[str, int]], Path]


@pytest.fixture
def make_package(tmp_path: Path) -> PackageFactory:
    """Return a factory creating a package directory filled with sized files."""

    def _make(name: str, files: Mapping[str, int]) -> Path:
        root = tmp_path / "pkgs" / name
        root.mkdir(parents=True, exist_ok=True)
        for relative, size in files.items():
            target = root / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(b"x" * size)
        return root

    return _make
