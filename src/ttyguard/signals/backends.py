"""Native and null signal facilities behind a common interface."""

from __future__ import annotations

import importlib
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from types import FrameType
from typing import Any

from ttyguard import constants
from ttyguard.models import SignalDisposition, SignalHandle

logger = logging.getLogger("ttyguard")

NativeHandler = Callable[[int, "FrameType | None"], Any]


class SignalBackend(ABC):
    """Installs handlers for named signals.

    Implementations never raise for environmental failures; they return
    ``None`` instead of a handle.
    """

    @abstractmethod
    def install(self, name: str, handler: NativeHandler) -> SignalHandle | None:
        ...

    @abstractmethod
    def install_disposition(self, name: str, disposition: SignalDisposition) -> SignalHandle | None:
        ...

    @abstractmethod
    def restore(self, name: str, handle: SignalHandle) -> None:
        ...

    @abstractmethod
    def names(self) -> list[str]:
        ...


class NullSignalBackend(SignalBackend):
    """Backend for hosts without a usable signal facility."""

    def install(self, name: str, handler: NativeHandler) -> SignalHandle | None:
        return None

    def install_disposition(self, name: str, disposition: SignalDisposition) -> SignalHandle | None:
        return None

    def restore(self, name: str, handle: SignalHandle) -> None:
        return None

    def names(self) -> list[str]:
        return []


class NativeSignalBackend(SignalBackend):
    """Backend delegating to the stdlib ``signal`` module (or one shaped like it)."""

    def __init__(self, module: Any) -> None:
        self._module = module

    def _lookup(self, name: str) -> int:
        key = name.strip().upper()
        if not key.startswith(constants.SIGNAL_PREFIX):
            key = constants.SIGNAL_PREFIX + key
        return self._module.Signals[key]

    def _swap(self, name: str, native: object) -> SignalHandle | None:
        try:
            previous = self._module.signal(self._lookup(name), native)
        except KeyError:
            logger.debug("Unknown signal name %r", name)
            return None
        except Exception:
            # ValueError from a non-main thread or an uncatchable signal lands here too
            logger.debug("Could not install handler for %r", name, exc_info=True)
            return None
        if previous is None:
            return None
        return SignalHandle(previous)

    def install(self, name: str, handler: NativeHandler) -> SignalHandle | None:
        return self._swap(name, handler)

    def install_disposition(self, name: str, disposition: SignalDisposition) -> SignalHandle | None:
        if disposition is SignalDisposition.IGNORE:
            native = self._module.SIG_IGN
        else:
            native = self._module.SIG_DFL
        return self._swap(name, native)

    def restore(self, name: str, handle: SignalHandle) -> None:
        self._swap(name, handle.native)

    def names(self) -> list[str]:
        prefix = constants.SIGNAL_PREFIX
        return sorted(
            member.name[len(prefix):]
            for member in self._module.Signals
            if member.name.startswith(prefix)
        )


def detect_backend(
    loader: Callable[[str], Any] = importlib.import_module,
    native: bool = True,
) -> SignalBackend:
    """Pick the native backend if the host exposes a usable ``signal`` module."""
    if not native:
        logger.debug("Native signals disabled by configuration")
        return NullSignalBackend()
    try:
        module = loader("signal")
    except ImportError:
        logger.debug("No signal module available", exc_info=True)
        return NullSignalBackend()
    missing = [attr for attr in constants.SIGNAL_FACILITY_ATTRS if not hasattr(module, attr)]
    if missing:
        logger.debug("Signal module lacks %s; signals disabled", ", ".join(missing))
        return NullSignalBackend()
    return NativeSignalBackend(module)
