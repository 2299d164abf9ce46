"""Flag-setting watcher over a set of signals."""

from __future__ import annotations

import threading
import time

from ttyguard import constants
from ttyguard.models import SignalHandle
from ttyguard.signals.registry import SignalRegistry, default_registry


class SignalWatcher:
    """Records which of *names* arrive, restoring previous handlers on exit."""

    def __init__(self, names: list[str], registry: SignalRegistry | None = None) -> None:
        self.names = list(names)
        self._registry = registry
        self._event = threading.Event()
        self._handles: list[tuple[str, SignalHandle | None]] = []
        self.received: list[str] = []

    @property
    def registry(self) -> SignalRegistry:
        return self._registry if self._registry is not None else default_registry()

    def install(self) -> None:
        """Install a handler for every watched name."""
        for name in self.names:
            handle = self.registry.register(name, self._make_handler(name))
            self._handles.append((name, handle))

    def uninstall(self) -> None:
        """Restore previous handlers, most recent first."""
        while self._handles:
            name, handle = self._handles.pop()
            self.registry.unregister(name, handle)

    def _make_handler(self, name: str):
        def _handle() -> None:
            self.received.append(name)
            self._event.set()
        return _handle

    @property
    def triggered(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: float, count: int = 1) -> bool:
        """Wait until *count* watched signals have arrived. Returns False on timeout.

        Polls instead of blocking on the event so the handler can run on
        this same thread.
        """
        deadline = time.monotonic() + timeout
        while len(self.received) < count:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return False
            time.sleep(min(constants.WATCH_POLL_INTERVAL_SECONDS, remaining))
        return True

    def __enter__(self) -> SignalWatcher:
        self.install()
        return self

    def __exit__(self, *exc: object) -> None:
        self.uninstall()
