"""
Centralised constants for safari-tabs.

Timeouts, file-system paths, the application allowlist and the close
targets live here so they are easy to find, tune, and test.
"""

from __future__ import annotations

import os

# ── Automation bridge ─────────────────────────────────────────────────────────

OSASCRIPT_PATH = "/usr/bin/osascript"

OSASCRIPT_TIMEOUT = 5
"""Timeout (seconds) for a single JXA script run."""

DEFAULT_APP_NAME = "Safari"

SUPPORTED_APPS: frozenset[str] = frozenset(
    {
        "Safari",
        "Safari Technology Preview",
    }
)
"""Application names the JXA backend is allowed to drive."""

# ── File-system paths ─────────────────────────────────────────────────────────

CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".config", "safari-tabs")
CONFIG_PATH = os.path.join(CONFIG_DIR, "config.json")

DEFAULT_LOG_LEVEL = "WARNING"

# ── Ordinals & exit codes ─────────────────────────────────────────────────────

WINDOW_ONLY = 0
"""Tab ordinal meaning "raise the window, leave the current tab alone"."""

FRONTMOST_WINDOW = 1

NAN_TEXT = "NaN"
"""How an unparseable ordinal is rendered in diagnostics."""

EXIT_FAILURE = 1

# ── Close targets ─────────────────────────────────────────────────────────────

CLOSE_ALIASES: dict[str, str] = {
    "w": "win",
    "t": "tab",
    "to": "tabs-other",
    "tl": "tabs-left",
    "tr": "tabs-right",
}
"""Short alias → canonical close target."""

CLOSE_TARGETS: tuple[str, ...] = ("win", "tab", "tabs-other", "tabs-left", "tabs-right")

# ── Listing ───────────────────────────────────────────────────────────────────

ACTIVE_TAB_MARKER = "* "
TREE_BRANCH = "├─ "
TREE_LAST = "└─ "
TREE_PIPE = "│  "
TREE_SPACE = "   "
