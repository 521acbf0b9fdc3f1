# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Measure the logical size of a package directory tree."""

from __future__ import annotations

import os
import stat
from pathlib import Path

from .models import ProbeIssue, SizeError, SizeResult


class SizeProbe:
    """Sum the byte size of every regular file beneath a directory.

    Symbolic links are never followed: a link contributes its own ``lstat``
    size and its target is not traversed, so link cycles terminate and shared
    targets are not double-counted. Entries that cannot be read mid-walk are
    recorded as :class:`ProbeIssue` values and the walk continues.
    """

    def measure(self, root_path: Path | str) -> SizeResult:
        """Return the total logical size of ``root_path``.

        Args:
            root_path: Absolute path of the package checkout.

        Returns:
            SizeResult: Ok with the byte total (partial when some entries were
            unreadable), or a failure when the root itself cannot be walked.
        """

        root = Path(root_path)
        try:
            root_stat = root.stat()
        except FileNotFoundError as exc:
            return SizeResult.failed(SizeError.PATH_NOT_FOUND, _describe(exc, root))
        except PermissionError as exc:
            return SizeResult.failed(SizeError.PERMISSION_DENIED, _describe(exc, root))
        except OSError as exc:
            return SizeResult.failed(SizeError.IO_ERROR, _describe(exc, root))
        except ValueError as exc:
            # Paths the OS cannot represent, e.g. embedded NUL or lone surrogates.
            return SizeResult.failed(SizeError.IO_ERROR, f"{exc}: {str(root)!r}")
        if not stat.S_ISDIR(root_stat.st_mode):
            return SizeResult.failed(SizeError.NOT_A_DIRECTORY, str(root))

        try:
            top_entries = list(os.scandir(root))
        except FileNotFoundError as exc:
            return SizeResult.failed(SizeError.PATH_NOT_FOUND, _describe(exc, root))
        except PermissionError as exc:
            return SizeResult.failed(SizeError.PERMISSION_DENIED, _describe(exc, root))
        except OSError as exc:
            return SizeResult.failed(SizeError.IO_ERROR, _describe(exc, root))

        total, issues = self._walk(top_entries)
        return SizeResult.ok(total, issues)

    def _walk(self, entries: list[os.DirEntry[str]]) -> tuple[int, list[ProbeIssue]]:
        total = 0
        issues: list[ProbeIssue] = []
        pending = [entries]
        while pending:
            for entry in pending.pop():
                try:
                    if entry.is_dir(follow_symlinks=False):
                        pending.append(list(os.scandir(entry.path)))
                    elif entry.is_file(follow_symlinks=False) or entry.is_symlink():
                        total += entry.stat(follow_symlinks=False).st_size
                except OSError as exc:
                    issues.append(ProbeIssue(path=Path(entry.path), reason=_describe(exc, entry.path)))
        return total, issues


def _describe(exc: OSError, path: Path | str) -> str:
    """Return a short reason string for ``exc`` raised while reading ``path``."""

    reason = exc.strerror or exc.__class__.__name__
    return f"{reason}: {path}"


__all__ = ["SizeProbe"]
