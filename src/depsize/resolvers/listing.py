# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Load pre-resolved package listings written by other resolvers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..models import ResolvedPackage
from .base import ResolverError


class ListedPackage(BaseModel):
    """One ``{name, version, path}`` record in a listing document."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(min_length=1)
    version: str = Field(min_length=1)
    path: Path
    source: str | None = None


class PackageListing(BaseModel):
    """Listing document wrapper accepting ``{"packages": [...]}``."""

    model_config = ConfigDict(extra="ignore")

    packages: list[ListedPackage] = Field(default_factory=list)


def load_package_listing(path: Path) -> list[ResolvedPackage]:
    """Read resolved packages from the JSON listing at ``path``.

    The document is either a bare array of package records or an object with
    a ``packages`` array. Relative package paths resolve against the
    listing's directory.

    Args:
        path: JSON listing file.

    Returns:
        list[ResolvedPackage]: Packages in document order.

    Raises:
        ResolverError: If the file cannot be read or fails validation.
    """

    try:
        raw: Any = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ResolverError(f"Unable to read package listing {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ResolverError(f"Package listing {path} is not valid JSON: {exc}") from exc
    if isinstance(raw, list):
        raw = {"packages": raw}
    try:
        listing = PackageListing.model_validate(raw)
    except ValidationError as exc:
        raise ResolverError(f"Package listing {path} is invalid: {exc}") from exc

    base_dir = path.parent.resolve()
    return [
        ResolvedPackage(
            name=entry.name,
            version=entry.version,
            root_path=entry.path if entry.path.is_absolute() else base_dir / entry.path,
            source=entry.source,
        )
        for entry in listing.packages
    ]


class ListingResolver:
    """Resolver adapter that replays a listing file instead of running a tool."""

    def __init__(self, listing_path: Path) -> None:
        self._listing_path = listing_path

    def resolve(self, root: Path) -> list[ResolvedPackage]:
        """Load the listing; a relative listing path is taken from ``root``."""

        path = self._listing_path if self._listing_path.is_absolute() else root / self._listing_path
        return load_package_listing(path)


__all__ = ["ListedPackage", "ListingResolver", "PackageListing", "load_package_listing"]
