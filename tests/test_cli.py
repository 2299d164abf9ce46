"""Tests for CLI commands via Click testing."""

import os
import signal
import threading

import pytest
from click.testing import CliRunner

from ttyguard.cli import main


def test_version():
    runner = CliRunner()
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_help():
    runner = CliRunner()
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "ttyguard" in result.output


def test_platform():
    runner = CliRunner()
    result = runner.invoke(main, ["platform"])
    assert result.exit_code == 0
    assert "stty:" in result.output
    assert "infocmp:" in result.output


def test_signals_list():
    runner = CliRunner()
    result = runner.invoke(main, ["signals", "list"])
    assert result.exit_code == 0
    assert "NativeSignalBackend" in result.output
    assert "  INT" in result.output


def test_signals_list_disabled(tmp_config_dir):
    (tmp_config_dir / "config.toml").write_text("[signals]\nnative = false\n")
    runner = CliRunner()
    result = runner.invoke(main, ["signals", "list"])
    assert result.exit_code == 0
    assert "No native signal facility" in result.output


def test_signals_watch_timeout(usr1):
    runner = CliRunner()
    result = runner.invoke(main, ["signals", "watch", usr1, "--timeout", "0.1"])
    assert result.exit_code == 2
    assert "Watching USR1" in result.output


@pytest.mark.skipif(not hasattr(os, "kill"), reason="os.kill unavailable")
def test_signals_watch_receives(usr1):
    timer = threading.Timer(0.2, os.kill, (os.getpid(), signal.SIGUSR1))
    timer.start()
    runner = CliRunner()
    try:
        result = runner.invoke(main, ["signals", "watch", usr1, "--timeout", "10"])
    finally:
        timer.cancel()
    assert result.exit_code == 0
    assert "Received USR1" in result.output


def test_config_init():
    runner = CliRunner()
    result = runner.invoke(main, ["config", "init"])
    assert result.exit_code == 0
    assert "Config created" in result.output


def test_config_init_twice():
    runner = CliRunner()
    runner.invoke(main, ["config", "init"])
    result = runner.invoke(main, ["config", "init"])
    assert result.exit_code == 1


def test_config_show():
    runner = CliRunner()
    runner.invoke(main, ["config", "init"])
    result = runner.invoke(main, ["config", "show"])
    assert result.exit_code == 0
    assert "[signals]" in result.output


def test_config_show_missing():
    runner = CliRunner()
    result = runner.invoke(main, ["config", "show"])
    assert result.exit_code == 1


def test_malformed_config_sections_do_not_crash(tmp_config_dir):
    (tmp_config_dir / "config.toml").write_text('signals = 1\nlogging = "loud"\n')
    runner = CliRunner()
    result = runner.invoke(main, ["signals", "list"])
    assert result.exit_code == 0
    assert "NativeSignalBackend" in result.output
