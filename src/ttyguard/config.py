"""TOML configuration management."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from ttyguard import constants

logger = logging.getLogger("ttyguard")

CONFIG_DIR = Path(os.environ.get("TTYGUARD_CONFIG_DIR", "~/.config/ttyguard")).expanduser()
CONFIG_FILE = CONFIG_DIR / "config.toml"

DEFAULT_CONFIG = """\
# ttyguard configuration

[signals]
# Use the host's native signal facility when it is available.
# When false every registration is a silent no-op.
native = {native}

[logging]
# Level for the ttyguard command (DEBUG, INFO, WARNING, ERROR)
level = "{log_level}"
""".format(
    native="true" if constants.USE_NATIVE_SIGNALS else "false",
    log_level=constants.LOG_LEVEL,
)


def init_config(force: bool = False) -> Path:
    """Create default config file. Returns path to config file."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    if CONFIG_FILE.exists() and not force:
        raise FileExistsError(f"Config already exists: {CONFIG_FILE}")
    CONFIG_FILE.write_text(DEFAULT_CONFIG)
    return CONFIG_FILE


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge *override* into *base*, returning a new dict."""
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config() -> dict[str, Any]:
    """Load config from TOML file, merged on top of built-in defaults."""
    defaults = tomllib.loads(DEFAULT_CONFIG)
    if CONFIG_FILE.exists():
        on_disk = tomllib.loads(CONFIG_FILE.read_text())
        return _deep_merge(defaults, on_disk)
    return defaults


def get(section: str, key: str, default: Any = None) -> Any:
    """Get a config value by section and key.

    A section that is not a table (e.g. ``signals = 1``) reads as empty.
    """
    section_cfg = load_config().get(section, {})
    if not isinstance(section_cfg, dict):
        logger.warning("Config section [%s] is not a table; using defaults", section)
        return default
    return section_cfg.get(key, default)


def get_bool(section: str, key: str, default: bool) -> bool:
    """Get a boolean switch; any non-boolean value falls back to *default*."""
    value = get(section, key, default)
    if not isinstance(value, bool):
        logger.warning("Config %s.%s must be true or false, got %r; using %s",
                       section, key, value, default)
        return default
    return value
