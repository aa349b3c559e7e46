"""Close a browser window, a tab, or a group of tabs within one window."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .constants import CLOSE_ALIASES, CLOSE_TARGETS, FRONTMOST_WINDOW
from .errors import InvalidCloseTarget, TabNotFound, WindowNotFound
from .models import TabHandle, WindowHandle
from .window_service import WindowService

logger = logging.getLogger(__name__)

# Close target → predicate(tab_index, reference_index) deciding which tabs go.
_TAB_FILTERS: dict[str, Callable[[int, int], bool]] = {
    "tab": lambda i, ref: i == ref,
    "tabs-other": lambda i, ref: i != ref,
    "tabs-left": lambda i, ref: i < ref,
    "tabs-right": lambda i, ref: i > ref,
}


def normalise_target(what: str) -> str:
    """Map a close target or its short alias to the canonical name."""
    target = CLOSE_ALIASES.get(what, what)
    if target not in CLOSE_TARGETS:
        raise InvalidCloseTarget(what)
    return target


class TabCloser:
    def __init__(self, service: WindowService):
        self.service = service

    def close(self, what: str, window: int = FRONTMOST_WINDOW, tab: int = 0) -> list[int]:
        """Close ``what`` in window ``window``, relative to tab ``tab``.

        ``window`` 0 means the frontmost window and ``tab`` 0 means the
        window's current tab. Returns the indices of the closed tabs,
        highest first; closing a whole window returns an empty list.
        """
        target = normalise_target(what)
        window_ordinal = window or FRONTMOST_WINDOW
        handle = self._resolve_window(window_ordinal)

        if target == "win":
            logger.info("Closing window %d", window_ordinal)
            self.service.close_window(handle)
            return []

        tabs = self.service.list_tabs(handle)
        if tab:
            if not 1 <= tab <= len(tabs):
                raise TabNotFound(window_ordinal, tab)
            reference = tab
        else:
            reference = self.service.current_tab(handle).index

        logger.debug("target=%s, win=%d, tab=%d", target, window_ordinal, reference)
        return self._close_tabs(handle, tabs, lambda i: _TAB_FILTERS[target](i, reference))

    def _resolve_window(self, window_ordinal: int) -> WindowHandle:
        windows = self.service.list_windows()
        if not 1 <= window_ordinal <= len(windows):
            raise WindowNotFound(window_ordinal)
        return windows[window_ordinal - 1]

    def _close_tabs(
        self,
        window: WindowHandle,
        tabs: list[TabHandle],
        should_close: Callable[[int], bool],
    ) -> list[int]:
        closed = []
        # Right to left, so indices of the tabs still to visit don't shift.
        for tab in reversed(tabs):
            if should_close(tab.index):
                logger.info("Closing tab %d ...", tab.index)
                self.service.close_tab(window, tab)
                closed.append(tab.index)
        return closed
