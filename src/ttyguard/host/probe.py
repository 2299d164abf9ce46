"""OS family detection and terminal helper command resolution."""

from __future__ import annotations

import logging
import os
import platform
import threading
from collections.abc import Mapping
from pathlib import Path

from ttyguard import constants
from ttyguard.models import PlatformInfo

logger = logging.getLogger("ttyguard")

_lock = threading.Lock()
_cached: PlatformInfo | None = None


def host_os_name() -> str:
    """Return the OS identification string for the running interpreter.

    ``platform.system()`` reports "Darwin" on macOS, which would match the
    "win" test, so it is reported under its marketing name instead.
    """
    system = platform.system()
    if system == constants.DARWIN_SYSTEM:
        return constants.MAC_OS_NAME
    return system


def _is_cygwin_like(is_windows: bool, environ: Mapping[str, str]) -> bool:
    pwd = environ.get("PWD")
    return (
        is_windows
        and pwd is not None
        and pwd.startswith("/")
        and environ.get("TERM") != constants.CYGWIN_TERM
    )


def _file_in(directory: str, name: str) -> str | None:
    """Return the absolute path of *name* inside *directory*, if it is a file."""
    candidate = Path(directory, name)
    try:
        if candidate.is_file():
            return str(candidate.absolute())
    except OSError:
        logger.debug("Could not check %s", candidate, exc_info=True)
    return None


def _resolve_cygwin_commands(search_path: str | None, pathsep: str) -> dict[str, str]:
    commands = {
        "tty": constants.CYGWIN_TTY_COMMAND,
        "stty": constants.CYGWIN_STTY_COMMAND,
        "infocmp": constants.CYGWIN_INFOCMP_COMMAND,
    }
    if not search_path:
        return commands
    exe_names = dict(commands)
    # Every directory is visited; a later hit replaces an earlier one.
    for directory in search_path.split(pathsep):
        if not directory:
            continue
        for key, exe in exe_names.items():
            found = _file_in(directory, exe)
            if found is not None:
                commands[key] = found
    logger.debug("Resolved cygwin helper commands: %s", commands)
    return commands


def detect_platform(
    os_name: str,
    environ: Mapping[str, str],
    pathsep: str = os.pathsep,
) -> PlatformInfo:
    """Compute a PlatformInfo from an OS name and an environment mapping.

    Only ``PWD``, ``TERM`` and ``PATH`` are read from *environ*.  A missing
    variable or an unreadable directory counts as "not found"; this never
    raises.
    """
    lowered = os_name.lower()
    is_windows = "win" in lowered
    is_mac = "mac" in lowered
    cygwin_like = _is_cygwin_like(is_windows, environ)

    if cygwin_like:
        commands = _resolve_cygwin_commands(environ.get("PATH"), pathsep)
        flag_style = None
    else:
        commands = {
            "tty": constants.TTY_COMMAND,
            "stty": constants.STTY_COMMAND,
            "infocmp": constants.INFOCMP_COMMAND,
        }
        flag_style = constants.STTY_FLAG_BSD if is_mac else constants.STTY_FLAG_GNU

    return PlatformInfo(
        is_windows=is_windows,
        is_cygwin_like=cygwin_like,
        is_mac=is_mac,
        tty_command=commands["tty"],
        stty_command=commands["stty"],
        stty_flag_style=flag_style,
        infocmp_command=commands["infocmp"],
    )


def get_platform_info() -> PlatformInfo:
    """Probe the live host once and return the cached result thereafter."""
    global _cached
    info = _cached
    if info is not None:
        return info
    with _lock:
        if _cached is None:
            _cached = detect_platform(host_os_name(), dict(os.environ), os.pathsep)
            logger.debug("Platform detected: %s", _cached)
        return _cached


def reset_platform_info() -> None:
    """Forget the cached PlatformInfo so the next call probes again."""
    global _cached
    with _lock:
        _cached = None
