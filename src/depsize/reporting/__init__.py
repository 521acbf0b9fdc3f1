# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reporting helpers for text and JSON output."""

from __future__ import annotations

from .emitters import render_json, report_to_dict, write_json_report
from .formatters import ReportBuilder, format_size

__all__ = [
    "ReportBuilder",
    "format_size",
    "render_json",
    "report_to_dict",
    "write_json_report",
]
