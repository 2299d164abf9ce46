"""Data models for ttyguard."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class SignalDisposition(enum.Enum):
    DEFAULT = "default"
    IGNORE = "ignore"


@dataclass(frozen=True)
class PlatformInfo:
    """Snapshot of the host's OS family and terminal helper commands."""
    is_windows: bool
    is_cygwin_like: bool
    is_mac: bool
    tty_command: str
    stty_command: str
    stty_flag_style: str | None  # None inside cygwin-like shells
    infocmp_command: str

    def stty_invocation(self, *args: str, device: str | None = None) -> list[str]:
        """Build an stty argument list, naming *device* when the dialect allows it."""
        cmd = [self.stty_command]
        if device is not None and self.stty_flag_style is not None:
            cmd += [self.stty_flag_style, device]
        cmd += list(args)
        return cmd


@dataclass(frozen=True)
class SignalHandle:
    """Opaque carrier of the handler that was active before a registration.

    Only meaningful as the argument to ``unregister`` for the same signal.
    """
    native: object
