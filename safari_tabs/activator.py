"""
Bring a browser window, and optionally one of its tabs, to the front.

Windows and tabs are addressed by 1-based ordinals. A tab ordinal of 0
raises the window without touching its current tab.
"""

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Sequence

from .constants import EXIT_FAILURE, WINDOW_ONLY
from .errors import (
    InvalidTabOrdinal,
    InvalidWindowOrdinal,
    SafariTabsError,
    TabNotFound,
    WindowNotFound,
)
from .models import TabHandle, WindowHandle
from .window_service import WindowService, create_service

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_ordinal(value: str | None) -> int | None:
    """Parse the leading base-10 integer of ``value``.

    Leading whitespace and a sign are accepted and trailing junk is
    ignored, so ``" 12abc"`` gives 12. Returns None when there is no
    leading integer at all.
    """
    if value is None:
        return None
    m = _LEADING_INT.match(value)
    return int(m.group(1)) if m else None


class TabActivator:
    """Resolve window/tab ordinals against a WindowService and raise them."""

    def __init__(self, service: WindowService):
        self.service = service

    def run(self, args: Sequence[str]) -> None:
        """Activate the window (and tab) named by ``args``.

        ``args[0]`` is the window ordinal, ``args[1]`` the optional tab
        ordinal. Raises an ActivationError subclass on any invalid or
        unresolvable ordinal.
        """
        window_ordinal = parse_ordinal(args[0] if args else None)
        tab_ordinal: int | None = WINDOW_ONLY
        if len(args) > 1:
            tab_ordinal = parse_ordinal(args[1])

        if window_ordinal is None:
            raise InvalidWindowOrdinal(window_ordinal)
        if tab_ordinal is None:
            raise InvalidTabOrdinal(tab_ordinal)

        self.activate(window_ordinal, tab_ordinal)

    def activate(self, window_ordinal: int, tab_ordinal: int = WINDOW_ONLY) -> None:
        window = self._resolve_window(window_ordinal)

        if tab_ordinal == WINDOW_ONLY:
            logger.debug("Activating window %d", window_ordinal)
            self._raise_window(window)
            return

        tab = self._resolve_tab(window, window_ordinal, tab_ordinal)
        logger.debug("Activating window %d, tab %d", window_ordinal, tab_ordinal)
        self._raise_window(window)

        if not self.service.is_active_tab(window, tab):
            self.service.set_active_tab(window, tab)
        else:
            logger.debug("Tab %d is already active in window %d", tab_ordinal, window_ordinal)

    def _resolve_window(self, window_ordinal: int) -> WindowHandle:
        windows = self.service.list_windows()
        offset = window_ordinal - 1
        if not 0 <= offset < len(windows):
            raise WindowNotFound(window_ordinal)
        return windows[offset]

    def _resolve_tab(
        self, window: WindowHandle, window_ordinal: int, tab_ordinal: int
    ) -> TabHandle:
        tabs = self.service.list_tabs(window)
        offset = tab_ordinal - 1
        if not 0 <= offset < len(tabs):
            raise TabNotFound(window_ordinal, tab_ordinal)
        return tabs[offset]

    def _raise_window(self, window: WindowHandle) -> None:
        # Setting visible on an already-visible window does not reorder it;
        # hiding it first forces the window server to bring it to the front.
        self.service.activate_app()
        self.service.set_visible(window, False)
        self.service.set_visible(window, True)


def run(args: Sequence[str], service: WindowService | None = None) -> None:
    """Activate per ``args``, printing the diagnostic and exiting 1 on failure."""
    try:
        TabActivator(service or create_service()).run(args)
    except SafariTabsError as e:
        print(e.diagnostic, file=sys.stderr)
        sys.exit(EXIT_FAILURE)
