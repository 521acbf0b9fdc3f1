# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run resolver commands such as ``cargo metadata`` without a shell."""

from __future__ import annotations

import shutil

# Bandit: resolver commands are argument lists, never shell strings.
import subprocess  # nosec B404
from collections.abc import Sequence
from pathlib import Path
from subprocess import CompletedProcess
from typing import Final

TIMEOUT_EXIT_STATUS: Final[int] = 124


class SubprocessExecutionError(RuntimeError):
    """Raised when a resolver command exits with a non-zero status."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        stdout: str | None,
        stderr: str | None,
    ) -> None:
        super().__init__(
            f"Command '{command[0]}' exited with status {returncode}. stderr: {stderr or '<none>'}",
        )
        self.command = tuple(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


class CommandTimeoutError(SubprocessExecutionError):
    """Raised when a resolver command outlives its time budget."""

    def __init__(self, command: Sequence[str], timeout: float, stdout: str | None) -> None:
        super().__init__(command, TIMEOUT_EXIT_STATUS, stdout, f"timed out after {timeout:g}s")
        self.timeout = timeout


def locate_executable(name: str) -> str:
    """Return an absolute path for ``name``, searching ``PATH`` when needed.

    Raises:
        FileNotFoundError: If ``name`` is not an absolute path and is not on ``PATH``.
    """

    if Path(name).is_absolute():
        return name
    resolved = shutil.which(name)
    if resolved is None:
        raise FileNotFoundError(f"Executable '{name}' was not found on PATH")
    return resolved


def run_command(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    check: bool = True,
    timeout: float | None = None,
) -> CompletedProcess[str]:
    """Execute *args* and capture its text output.

    Args:
        args: Executable followed by its arguments.
        cwd: Working directory for the command.
        check: Raise when the command fails or times out.
        timeout: Seconds to wait before the command is killed.

    Returns:
        CompletedProcess[str]: Finished process; a timed-out process is
        reported with status 124 when ``check`` is false.

    Raises:
        ValueError: If ``args`` is empty.
        FileNotFoundError: If the executable cannot be located.
        CommandTimeoutError: If ``check`` is true and ``timeout`` elapses.
        SubprocessExecutionError: If ``check`` is true and the command fails.
    """

    if not args:
        raise ValueError("a command requires at least one argument")
    command = [locate_executable(args[0]), *args[1:]]
    try:
        completed = subprocess.run(  # nosec B603
            command,
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            stdin=subprocess.DEVNULL,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        partial = exc.stdout.decode(errors="replace") if isinstance(exc.stdout, bytes) else exc.stdout
        if check:
            raise CommandTimeoutError(command, exc.timeout, partial) from exc
        return CompletedProcess(command, TIMEOUT_EXIT_STATUS, stdout=partial or "", stderr="timed out")

    if check and completed.returncode != 0:
        raise SubprocessExecutionError(command, completed.returncode, completed.stdout, completed.stderr)
    return completed


__all__ = [
    "CommandTimeoutError",
    "SubprocessExecutionError",
    "TIMEOUT_EXIT_STATUS",
    "locate_executable",
    "run_command",
]
