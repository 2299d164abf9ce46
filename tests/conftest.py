"""Shared test fixtures."""

from __future__ import annotations

import signal
from collections.abc import Iterator
from pathlib import Path

import pytest

from ttyguard import config
from ttyguard.host.probe import reset_platform_info
from ttyguard.signals.registry import reset_default_registry


@pytest.fixture(autouse=True)
def tmp_config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Redirect config directory to a temp dir and drop cached state for every test."""
    cfg_dir = tmp_path / "ttyguard-test"
    cfg_dir.mkdir()
    monkeypatch.setattr(config, "CONFIG_DIR", cfg_dir)
    monkeypatch.setattr(config, "CONFIG_FILE", cfg_dir / "config.toml")
    reset_platform_info()
    reset_default_registry()
    yield cfg_dir
    reset_platform_info()
    reset_default_registry()


@pytest.fixture
def usr1():
    """Yield the SIGUSR1 mnemonic, restoring whatever handler was there before."""
    if not hasattr(signal, "SIGUSR1"):
        pytest.skip("SIGUSR1 not available on this platform")
    original = signal.getsignal(signal.SIGUSR1)
    yield "USR1"
    signal.signal(signal.SIGUSR1, original)
