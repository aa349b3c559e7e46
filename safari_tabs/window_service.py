"""
Window automation interface and its Safari backend.

``WindowService`` is the narrow surface the activator and closer talk
to. ``JXAWindowService`` implements it by running small JavaScript for
Automation scripts through ``osascript``. Every script takes the
application name and indices as arguments, so nothing user-supplied is
interpolated into script source.
"""

from __future__ import annotations

import abc
import logging
import subprocess
import sys

from pydantic import TypeAdapter, ValidationError

from .config import get_app_name, get_osascript_timeout
from .constants import OSASCRIPT_PATH, SUPPORTED_APPS
from .errors import AutomationError
from .models import TabHandle, WindowHandle
from .schemas import WindowInfo

logger = logging.getLogger(__name__)

_window_list = TypeAdapter(list[WindowInfo])


class WindowService(abc.ABC):
    """Enumerate and manipulate one application's windows and tabs.

    Windows are ordered front-to-back, tabs left-to-right. Handles are
    only valid for the invocation that produced them.
    """

    @abc.abstractmethod
    def list_windows(self) -> list[WindowHandle]: ...

    @abc.abstractmethod
    def list_tabs(self, window: WindowHandle) -> list[TabHandle]: ...

    @abc.abstractmethod
    def set_visible(self, window: WindowHandle, visible: bool) -> None: ...

    @abc.abstractmethod
    def is_active_tab(self, window: WindowHandle, tab: TabHandle) -> bool: ...

    @abc.abstractmethod
    def set_active_tab(self, window: WindowHandle, tab: TabHandle) -> None: ...

    @abc.abstractmethod
    def activate_app(self) -> None: ...

    @abc.abstractmethod
    def current_tab(self, window: WindowHandle) -> TabHandle: ...

    @abc.abstractmethod
    def close_window(self, window: WindowHandle) -> None: ...

    @abc.abstractmethod
    def close_tab(self, window: WindowHandle, tab: TabHandle) -> None: ...

    @abc.abstractmethod
    def describe_windows(self) -> list[WindowInfo]: ...


# ── JXA scripts ───────────────────────────────────────────────────────────────
# argv[0] is always the application name; argv[1] / argv[2] are 1-based
# window / tab indices.

_JS_COUNT_WINDOWS = """
function run(argv) {
  return String(Application(argv[0]).windows.length)
}
"""

_JS_COUNT_TABS = """
function run(argv) {
  var win = Application(argv[0]).windows[parseInt(argv[1], 10) - 1]
  return String(win.tabs.length)
}
"""

_JS_SET_VISIBLE = """
function run(argv) {
  var win = Application(argv[0]).windows[parseInt(argv[1], 10) - 1]
  win.visible = (argv[2] === 'true')
}
"""

_JS_TAB_VISIBLE = """
function run(argv) {
  var win = Application(argv[0]).windows[parseInt(argv[1], 10) - 1]
  return String(win.tabs[parseInt(argv[2], 10) - 1].visible())
}
"""

_JS_SET_CURRENT_TAB = """
function run(argv) {
  var win = Application(argv[0]).windows[parseInt(argv[1], 10) - 1]
  win.currentTab = win.tabs[parseInt(argv[2], 10) - 1]
}
"""

_JS_ACTIVATE = """
function run(argv) {
  Application(argv[0]).activate()
}
"""

_JS_CURRENT_TAB = """
function run(argv) {
  var win = Application(argv[0]).windows[parseInt(argv[1], 10) - 1]
  return String(win.currentTab().index())
}
"""

_JS_CLOSE_WINDOW = """
function run(argv) {
  Application(argv[0]).windows[parseInt(argv[1], 10) - 1].close()
}
"""

_JS_CLOSE_TAB = """
function run(argv) {
  var win = Application(argv[0]).windows[parseInt(argv[1], 10) - 1]
  win.tabs[parseInt(argv[2], 10) - 1].close()
}
"""

# Windows without a current tab (preferences, downloads) are skipped.
_JS_GET_WINDOWS = """
function run(argv) {
  var wins = Application(argv[0]).windows
  var results = []

  for (var i = 0; i < wins.length; i++) {
    var w = wins[i],
      data = {'index': i + 1, 'tabs': []}

    try {
      data['activeTab'] = w.currentTab().index()
    }
    catch (e) {
      continue
    }

    var tabs = w.tabs
    for (var j = 0; j < tabs.length; j++) {
      var t = tabs[j]
      data.tabs.push({
        'title': t.name() || '',
        'url': t.url() || '',
        'index': j + 1,
        'windowIndex': i + 1
      })
    }
    results.push(data)
  }
  return JSON.stringify(results)
}
"""


class JXAWindowService(WindowService):
    """Drive a Safari-family browser via ``osascript -l JavaScript``."""

    def __init__(self, app_name: str | None = None, timeout: float | None = None):
        app_name = app_name or get_app_name()
        if app_name not in SUPPORTED_APPS:
            raise AutomationError(f"Unsupported application: {app_name}")
        self.app_name = app_name
        self.timeout = timeout if timeout is not None else get_osascript_timeout()

    def _run(self, script: str, *args: object) -> str:
        """Run a JXA script and return its stripped stdout."""
        cmd = [OSASCRIPT_PATH, "-l", "JavaScript", "-e", script, self.app_name]
        cmd.extend(str(a) for a in args)
        logger.debug("osascript %s %s", self.app_name, " ".join(str(a) for a in args))
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise AutomationError(f"osascript timed out after {self.timeout}s") from e
        except OSError as e:
            raise AutomationError(f"Could not run osascript: {e}") from e

        if result.returncode != 0:
            detail = (result.stderr or "").strip()
            raise AutomationError(detail or f"osascript exited with status {result.returncode}")
        return (result.stdout or "").strip()

    def _run_int(self, script: str, *args: object) -> int:
        out = self._run(script, *args)
        try:
            return int(out)
        except ValueError as e:
            raise AutomationError(f"Unexpected osascript output: {out!r}") from e

    def list_windows(self) -> list[WindowHandle]:
        count = self._run_int(_JS_COUNT_WINDOWS)
        return [WindowHandle(i) for i in range(1, count + 1)]

    def list_tabs(self, window: WindowHandle) -> list[TabHandle]:
        count = self._run_int(_JS_COUNT_TABS, window.index)
        return [TabHandle(window.index, i) for i in range(1, count + 1)]

    def set_visible(self, window: WindowHandle, visible: bool) -> None:
        self._run(_JS_SET_VISIBLE, window.index, "true" if visible else "false")

    def is_active_tab(self, window: WindowHandle, tab: TabHandle) -> bool:
        return self._run(_JS_TAB_VISIBLE, window.index, tab.index) == "true"

    def set_active_tab(self, window: WindowHandle, tab: TabHandle) -> None:
        self._run(_JS_SET_CURRENT_TAB, window.index, tab.index)

    def activate_app(self) -> None:
        self._run(_JS_ACTIVATE)

    def current_tab(self, window: WindowHandle) -> TabHandle:
        return TabHandle(window.index, self._run_int(_JS_CURRENT_TAB, window.index))

    def close_window(self, window: WindowHandle) -> None:
        self._run(_JS_CLOSE_WINDOW, window.index)

    def close_tab(self, window: WindowHandle, tab: TabHandle) -> None:
        self._run(_JS_CLOSE_TAB, window.index, tab.index)

    def describe_windows(self) -> list[WindowInfo]:
        out = self._run(_JS_GET_WINDOWS)
        try:
            return _window_list.validate_json(out or "[]")
        except ValidationError as e:
            raise AutomationError(f"Could not parse window listing: {e}") from e


def create_service(app_name: str | None = None) -> WindowService:
    """Return the automation backend for this platform."""
    if sys.platform != "darwin":
        raise AutomationError("Safari automation is only supported on macOS")
    return JXAWindowService(app_name)
