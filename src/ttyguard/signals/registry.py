"""Register and restore handlers for named process signals.

Names are short mnemonics such as ``"INT"``, ``"WINCH"`` or ``"CONT"``.
Which names exist depends on the host; an unknown name is not an error.

Every operation degrades silently: when the host has no signal facility,
the name is unknown, or installation fails, ``register*`` returns ``None``
and ``unregister`` does nothing.  The only error raised is ``TypeError``
for a missing or non-callable handler, which is a bug in the caller.

The registry stores nothing.  The handle returned by a registration
carries the previously installed handler; pass it back to ``unregister``
to put that handler back.  Restoring in reverse registration order is up
to the caller.
"""

from __future__ import annotations

import functools
import logging
import threading
from collections.abc import Callable
from types import FrameType

from ttyguard import config, constants
from ttyguard.models import SignalDisposition, SignalHandle
from ttyguard.signals.backends import SignalBackend, detect_backend

logger = logging.getLogger("ttyguard")


class SignalRegistry:
    """Register/unregister front end over a single SignalBackend."""

    def __init__(self, backend: SignalBackend) -> None:
        self.backend = backend

    def register(self, name: str, handler: Callable[[], object]) -> SignalHandle | None:
        """Install *handler* for *name*. Returns the handle of the previous handler."""
        if handler is None or not callable(handler):
            raise TypeError(f"Signal handler for {name!r} must be callable, got {handler!r}")

        @functools.wraps(handler)
        def _adapter(signum: int, frame: FrameType | None) -> None:
            handler()

        return self._safely(name, lambda: self.backend.install(name, _adapter))

    def register_default(self, name: str) -> SignalHandle | None:
        """Restore the platform's default action for *name*."""
        return self._safely(
            name, lambda: self.backend.install_disposition(name, SignalDisposition.DEFAULT)
        )

    def register_ignore(self, name: str) -> SignalHandle | None:
        """Ignore *name* entirely."""
        return self._safely(
            name, lambda: self.backend.install_disposition(name, SignalDisposition.IGNORE)
        )

    def unregister(self, name: str, previous: SignalHandle | None) -> None:
        """Put back the handler carried by *previous*; no-op for ``None``."""
        if previous is None:
            return
        self._safely(name, lambda: self.backend.restore(name, previous))

    def names(self) -> list[str]:
        try:
            return self.backend.names()
        except Exception:
            logger.debug("Could not list signal names", exc_info=True)
            return []

    @staticmethod
    def _safely(name: str, action: Callable[[], SignalHandle | None]) -> SignalHandle | None:
        try:
            return action()
        except Exception:
            logger.debug("Signal operation on %r failed", name, exc_info=True)
            return None


_default_lock = threading.Lock()
_default: SignalRegistry | None = None


def default_registry() -> SignalRegistry:
    """Return the process-wide registry, choosing its backend on first use."""
    global _default
    registry = _default
    if registry is not None:
        return registry
    with _default_lock:
        if _default is None:
            try:
                native = config.get_bool("signals", "native", constants.USE_NATIVE_SIGNALS)
            except Exception:
                logger.warning("Could not read config; using native signals", exc_info=True)
                native = constants.USE_NATIVE_SIGNALS
            backend = detect_backend(native=native)
            logger.debug("Using %s", type(backend).__name__)
            _default = SignalRegistry(backend)
        return _default


def reset_default_registry() -> None:
    global _default
    with _default_lock:
        _default = None


def register(name: str, handler: Callable[[], object]) -> SignalHandle | None:
    return default_registry().register(name, handler)


def register_default(name: str) -> SignalHandle | None:
    return default_registry().register_default(name)


def register_ignore(name: str) -> SignalHandle | None:
    return default_registry().register_ignore(name)


def unregister(name: str, previous: SignalHandle | None) -> None:
    default_registry().unregister(name, previous)
