"""Process utilities for spawning the listing program.

Wraps ``subprocess.Popen`` with argument validation and turns OS-level
process creation failures into ``SpawnError`` so the launcher can report
the platform error code and exit with its own status.
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence
from typing import Any

CommandArg = str | os.PathLike[str]


class SpawnError(Exception):
    """The operating system refused to create the child process."""

    def __init__(self, program: str, code: int | None, reason: str):
        self.program = program
        self.code = code
        self.reason = reason
        super().__init__(
            f"failed to start {program}: error {code} ({reason})"
        )


def platform_error_code(exc: OSError) -> int | None:
    """Return the code the platform reported for ``exc``.

    Windows reports ``GetLastError()`` values through ``winerror``; every
    other platform uses ``errno``.
    """
    winerror = getattr(exc, "winerror", None)
    if winerror is not None:
        return winerror
    return exc.errno


def _normalize_command(cmd: Sequence[CommandArg]) -> list[str]:
    """Validate and normalize subprocess command arguments."""
    if not cmd:
        msg = "Command must include at least one argument"
        raise ValueError(msg)

    normalized: list[str] = []
    for arg in cmd:
        if isinstance(arg, os.PathLike):
            value = os.fspath(arg)
        elif isinstance(arg, str):
            value = arg
        else:
            msg = "Command arguments must be strings or os.PathLike"
            raise TypeError(msg)
        normalized.append(value)

    if not normalized[0].strip():
        msg = "Program name cannot be empty or whitespace"
        raise ValueError(msg)

    return normalized


def popen_with_validation(
    cmd: str | Sequence[CommandArg], **kwargs: Any
) -> subprocess.Popen[Any]:
    """Run subprocess.Popen with validation to satisfy security lint checks.

    A ``str`` is a complete Windows command line and is handed to
    ``CreateProcess`` untouched; a sequence is an argv vector.

    Raises:
        SpawnError: If the process could not be created
    """
    if isinstance(cmd, str):
        if not cmd.strip():
            msg = "Command line cannot be empty or whitespace"
            raise ValueError(msg)
        command: str | list[str] = cmd
        if cmd.startswith('"'):
            program = cmd[1:].split('"', 1)[0]
        else:
            program = cmd.split(" ", 1)[0]
    else:
        command = _normalize_command(cmd)
        program = command[0]

    try:
        return subprocess.Popen(command, **kwargs)  # noqa: S603
    except OSError as exc:
        raise SpawnError(
            program, platform_error_code(exc), exc.strerror or str(exc)
        ) from exc
