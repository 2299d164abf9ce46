"""ttyguard: host probing and signal registration for terminal code."""

__version__ = "0.1.0"
