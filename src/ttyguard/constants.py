"""Default constants for helper commands and signal handling."""

from __future__ import annotations

# Helper programs on POSIX-like hosts (resolved on PATH by the caller)
TTY_COMMAND = "tty"
STTY_COMMAND = "stty"
INFOCMP_COMMAND = "infocmp"

# Helper programs inside a cygwin-like shell on Windows
CYGWIN_TTY_COMMAND = "tty.exe"
CYGWIN_STTY_COMMAND = "stty.exe"
CYGWIN_INFOCMP_COMMAND = "infocmp.exe"

# stty option that names the terminal device
STTY_FLAG_BSD = "-f"  # macOS / BSD
STTY_FLAG_GNU = "-F"  # GNU coreutils

# A real cygwin terminal sets TERM to this; emulation shells do not
CYGWIN_TERM = "cygwin"

# What platform.system() reports for macOS, and what we report instead
DARWIN_SYSTEM = "Darwin"
MAC_OS_NAME = "Mac OS X"

SIGNAL_PREFIX = "SIG"

# Attributes a module must expose to be used as a native signal facility
SIGNAL_FACILITY_ATTRS = ("signal", "Signals", "SIG_DFL", "SIG_IGN")

# Config defaults
USE_NATIVE_SIGNALS = True
LOG_LEVEL = "WARNING"

# CLI
WATCH_POLL_INTERVAL_SECONDS = 0.05
