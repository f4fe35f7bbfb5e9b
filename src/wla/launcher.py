"""Launcher: run the listing program with ``-l -a`` and mirror its exit code.

The command line is built the way ``CreateProcess`` expects it: the
program, the fixed flags, then each forwarded argument, double-quoted
only when it contains a space. Embedded double quotes are not escaped,
so an argument containing one may not reach the child intact.
"""

from __future__ import annotations

import os
import re
from collections.abc import Sequence
from typing import Optional

import click

from .context import DEFAULT_PROGRAM, LauncherSettings, resolve_settings
from .process_utils import SpawnError, popen_with_validation

FIXED_FLAGS = ("-l", "-a")

EXIT_SPAWN_FAILED = 1
EXIT_NO_MEMORY = 2

_TOKEN = re.compile(r'"([^"]*)"|[^ ]+')


def _quote(arg: str) -> str:
    if " " in arg:
        return f'"{arg}"'
    return arg


def build_command_line(
    args: Sequence[str], program: str = DEFAULT_PROGRAM
) -> str:
    """Build the child command line.

    Args:
        args: Forwarded arguments, in order
        program: Target program token

    Returns:
        ``<program> -l -a`` followed by each argument, space separated
    """
    parts = [_quote(program), *FIXED_FLAGS]
    parts.extend(_quote(arg) for arg in args)
    return " ".join(parts)


def split_command_line(command_line: str) -> list[str]:
    """Split a command line built by ``build_command_line`` back into argv.

    Inverse of the quoting rule only: a token that starts with ``"``
    runs to the next ``"``, anything else runs to the next space.
    """
    argv = []
    for match in _TOKEN.finditer(command_line):
        quoted = match.group(1)
        argv.append(match.group(0) if quoted is None else quoted)
    return argv


def spawn(command_line: str):
    """Start the child with inherited streams, environment and cwd.

    Windows receives the command line verbatim; elsewhere it is split
    into an argv vector first.

    Raises:
        SpawnError: If the OS could not create the process
    """
    if os.name == "nt":
        return popen_with_validation(command_line)
    return popen_with_validation(split_command_line(command_line))


def _exit_status(returncode: int) -> int:
    # Killed by signal N on POSIX; report it the way shells do.
    if returncode < 0:
        return 128 - returncode
    return returncode


def wait_for_exit(proc) -> int:
    """Block until ``proc`` terminates and return its exit status.

    No timeout. The ``with`` scope closes the pipes and reaps the child on
    every path; on Windows the process handle itself is closed when the
    Popen object is finalized. If the status cannot be retrieved it
    defaults to 0.
    """
    with proc:
        try:
            returncode = proc.wait()
        except ChildProcessError:
            # Popen.wait already reports ECHILD as 0; other handles may raise.
            returncode = 0
    return _exit_status(returncode)


def launch(
    args: Sequence[str], settings: Optional[LauncherSettings] = None
) -> int:
    """Run the listing program against ``args`` and return the exit status.

    Returns:
        The child's exit status, ``EXIT_SPAWN_FAILED`` if it could not be
        started, or ``EXIT_NO_MEMORY`` if the command line could not be
        built
    """
    if settings is None:
        settings = resolve_settings()

    try:
        command_line = build_command_line(args, settings.program)
    except MemoryError:
        return EXIT_NO_MEMORY

    if settings.debug:
        click.echo(f"wla: {command_line}", err=True)

    try:
        proc = spawn(command_line)
    except SpawnError as e:
        click.echo(f"Error: {e}", err=True)
        return EXIT_SPAWN_FAILED

    return wait_for_exit(proc)
