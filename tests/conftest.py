"""Shared pytest fixtures for the test suite."""

import pytest

import safari_tabs.config as config
from safari_tabs.models import TabHandle, WindowHandle
from safari_tabs.schemas import TabInfo, WindowInfo
from safari_tabs.window_service import WindowService


class FakeWindowService(WindowService):
    """In-memory browser: windows are tab counts plus an active tab each.

    Every call is recorded in ``calls`` as a tuple of (name, *indices).
    """

    def __init__(self, tab_counts, active=None):
        self.tab_counts = list(tab_counts)
        self.active = list(active) if active else [1] * len(self.tab_counts)
        self.visible = [True] * len(self.tab_counts)
        self.calls = []

    def names(self):
        return [c[0] for c in self.calls]

    def list_windows(self):
        self.calls.append(("list_windows",))
        return [WindowHandle(i) for i in range(1, len(self.tab_counts) + 1)]

    def list_tabs(self, window):
        self.calls.append(("list_tabs", window.index))
        count = self.tab_counts[window.index - 1]
        return [TabHandle(window.index, j) for j in range(1, count + 1)]

    def set_visible(self, window, visible):
        self.calls.append(("set_visible", window.index, visible))
        self.visible[window.index - 1] = visible

    def is_active_tab(self, window, tab):
        self.calls.append(("is_active_tab", window.index, tab.index))
        return self.active[window.index - 1] == tab.index

    def set_active_tab(self, window, tab):
        self.calls.append(("set_active_tab", window.index, tab.index))
        self.active[window.index - 1] = tab.index

    def activate_app(self):
        self.calls.append(("activate_app",))

    def current_tab(self, window):
        self.calls.append(("current_tab", window.index))
        return TabHandle(window.index, self.active[window.index - 1])

    def close_window(self, window):
        self.calls.append(("close_window", window.index))
        del self.tab_counts[window.index - 1]
        del self.active[window.index - 1]
        del self.visible[window.index - 1]

    def close_tab(self, window, tab):
        self.calls.append(("close_tab", window.index, tab.index))
        w = window.index - 1
        self.tab_counts[w] -= 1
        if self.active[w] > tab.index or self.active[w] > self.tab_counts[w]:
            self.active[w] -= 1

    def describe_windows(self):
        self.calls.append(("describe_windows",))
        return [
            WindowInfo(
                index=w,
                active_tab=self.active[w - 1],
                tabs=[
                    TabInfo(
                        index=t,
                        window_index=w,
                        title=f"Tab {t}",
                        url=f"https://example.com/{w}/{t}",
                    )
                    for t in range(1, count + 1)
                ],
            )
            for w, count in enumerate(self.tab_counts, start=1)
        ]


@pytest.fixture
def make_service():
    """Fixture that returns a helper to build a FakeWindowService."""

    def _make(tab_counts=(3,), active=None):
        return FakeWindowService(tab_counts, active)

    return _make


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep the user's real config file out of every test."""
    monkeypatch.setattr(config, "_config", {})
