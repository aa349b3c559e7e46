"""User configuration for safari-tabs.

Settings come from an optional JSON file at
~/.config/safari-tabs/config.json. Missing keys fall back to the
defaults in constants.py.
"""

from __future__ import annotations

import json
import logging
import os

from .constants import CONFIG_PATH, DEFAULT_APP_NAME, DEFAULT_LOG_LEVEL, OSASCRIPT_TIMEOUT

logger = logging.getLogger(__name__)

# Loaded once on first call
_config: dict | None = None


def _load_config() -> dict:
    """Load optional user config from ~/.config/safari-tabs/config.json.

    Expected format:
    {
        "app_name": "Safari Technology Preview",
        "osascript_timeout": 10,
        "log_level": "DEBUG"
    }
    """
    global _config
    if _config is not None:
        return _config
    _config = {}
    if os.path.exists(CONFIG_PATH):
        try:
            with open(CONFIG_PATH, encoding="utf-8") as f:
                loaded = json.load(f)
            if isinstance(loaded, dict):
                _config = loaded
            else:
                logger.debug("Ignoring %s: top level is not an object", CONFIG_PATH)
        except (OSError, ValueError) as e:
            logger.debug("Could not read %s: %s", CONFIG_PATH, e)
    return _config


def get_app_name() -> str:
    value = _load_config().get("app_name")
    return value if isinstance(value, str) and value else DEFAULT_APP_NAME


def get_osascript_timeout() -> float:
    """Per-script timeout in seconds; invalid values fall back to the default."""
    value = _load_config().get("osascript_timeout", OSASCRIPT_TIMEOUT)
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        return OSASCRIPT_TIMEOUT
    return timeout if timeout > 0 else OSASCRIPT_TIMEOUT


def get_log_level() -> str:
    return str(_load_config().get("log_level") or DEFAULT_LOG_LEVEL).upper()
