"""Native signal registration with silent degradation."""

from ttyguard.signals.backends import NativeSignalBackend, NullSignalBackend, SignalBackend, detect_backend
from ttyguard.signals.registry import (
    SignalRegistry,
    default_registry,
    register,
    register_default,
    register_ignore,
    reset_default_registry,
    unregister,
)
from ttyguard.signals.watcher import SignalWatcher

__all__ = [
    "NativeSignalBackend",
    "NullSignalBackend",
    "SignalBackend",
    "SignalRegistry",
    "SignalWatcher",
    "default_registry",
    "detect_backend",
    "register",
    "register_default",
    "register_ignore",
    "reset_default_registry",
    "unregister",
]
