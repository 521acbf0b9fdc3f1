# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Adapters that obtain resolved packages from external resolvers."""

from __future__ import annotations

from .base import PackageResolver, ResolverError
from .cargo import CargoMetadataResolver, parse_metadata
from .listing import ListingResolver, load_package_listing

__all__ = [
    "CargoMetadataResolver",
    "ListingResolver",
    "PackageResolver",
    "ResolverError",
    "load_package_listing",
    "parse_metadata",
]
