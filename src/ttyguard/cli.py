"""Click CLI command definitions for ttyguard."""

from __future__ import annotations

import logging

import click

from ttyguard import __version__


def _setup_logging(verbose: bool) -> None:
    from ttyguard import config, constants
    if verbose:
        level = "DEBUG"
    else:
        try:
            level = str(config.get("logging", "level", constants.LOG_LEVEL)).upper()
        except Exception:
            level = constants.LOG_LEVEL
    numeric = getattr(logging, level, None)
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


@click.group()
@click.version_option(version=__version__, prog_name="ttyguard")
@click.option("-v", "--verbose", is_flag=True, help="Log at DEBUG level")
def main(verbose: bool) -> None:
    """ttyguard: inspect terminal helper commands and signal handling."""
    _setup_logging(verbose)


@main.command("platform")
def platform_show() -> None:
    """Show the detected platform and terminal helper commands."""
    from ttyguard.host.probe import get_platform_info
    info = get_platform_info()
    click.echo(f"Windows:      {'yes' if info.is_windows else 'no'}")
    click.echo(f"Cygwin-like:  {'yes' if info.is_cygwin_like else 'no'}")
    click.echo(f"macOS:        {'yes' if info.is_mac else 'no'}")
    click.echo(f"tty:          {info.tty_command}")
    click.echo(f"stty:         {info.stty_command}")
    click.echo(f"stty device:  {info.stty_flag_style or '(none)'}")
    click.echo(f"infocmp:      {info.infocmp_command}")


# --- Signal commands ---

@main.group()
def signals() -> None:
    """Inspect and watch process signals."""


@signals.command("list")
def signals_list() -> None:
    """List the signal names this host can handle."""
    from ttyguard.signals.registry import default_registry
    registry = default_registry()
    names = registry.names()
    if not names:
        click.echo("No native signal facility available.")
        return
    click.echo(f"Backend: {type(registry.backend).__name__}")
    for name in names:
        click.echo(f"  {name}")


@signals.command("watch")
@click.argument("names", nargs=-1, required=True)
@click.option("--timeout", type=float, default=60.0, show_default=True,
              help="Seconds to wait before giving up")
@click.option("--count", type=click.IntRange(1), default=1, show_default=True,
              help="Number of signals to wait for")
def signals_watch(names: tuple[str, ...], timeout: float, count: int) -> None:
    """Wait for one of NAMES (e.g. INT WINCH) and report what arrived.

    Previous handlers are restored on exit.
    """
    from ttyguard.signals.watcher import SignalWatcher
    with SignalWatcher(list(names)) as watcher:
        click.echo(f"Watching {', '.join(n.upper() for n in names)} for {timeout:g}s...")
        arrived = watcher.wait(timeout, count=count)
    for name in watcher.received:
        click.echo(f"Received {name.upper()}")
    if not arrived:
        click.echo(f"Timed out after {timeout:g}s", err=True)
        raise SystemExit(2)


# --- Config commands ---

@main.group()
def config() -> None:
    """Manage configuration."""


@config.command("init")
@click.option("--force", is_flag=True, help="Overwrite existing config")
def config_init(force: bool) -> None:
    """Create default configuration file."""
    from ttyguard.config import init_config
    try:
        path = init_config(force=force)
        click.echo(f"Config created: {path}")
    except FileExistsError as e:
        click.echo(str(e), err=True)
        raise SystemExit(1)


@config.command("show")
def config_show() -> None:
    """Show current configuration."""
    from ttyguard.config import CONFIG_FILE
    if not CONFIG_FILE.exists():
        click.echo(f"No config file found at {CONFIG_FILE}", err=True)
        click.echo("Run 'ttyguard config init' to create one.", err=True)
        raise SystemExit(1)
    click.echo(CONFIG_FILE.read_text())
