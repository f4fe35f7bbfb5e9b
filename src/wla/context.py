"""Launcher settings resolved from the environment."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_PROGRAM = "wls.exe" if os.name == "nt" else "wls"


@dataclass(frozen=True)
class LauncherSettings:
    """Resolved settings for one launcher invocation."""

    program: str = DEFAULT_PROGRAM
    debug: bool = False


def resolve_settings(
    environ: Optional[Mapping[str, str]] = None,
) -> LauncherSettings:
    """Resolve launcher settings.

    Resolution order for the target program:
    1. $WLA_TARGET environment variable
    2. ``wls`` (``wls.exe`` on Windows), looked up on PATH by the OS

    ``$WLA_DEBUG`` set to any non-empty value echoes the built command
    line to stderr before spawning.

    Reads fresh from the environment each time.

    Args:
        environ: Mapping to read instead of ``os.environ``

    Returns:
        LauncherSettings with program and debug flag
    """
    env = os.environ if environ is None else environ

    program = env.get("WLA_TARGET", "").strip() or DEFAULT_PROGRAM
    debug = bool(env.get("WLA_DEBUG"))

    return LauncherSettings(program=program, debug=debug)
