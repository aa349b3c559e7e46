"""Exceptions raised by safari-tabs. ``exc.diagnostic`` is the line printed to stderr."""

from __future__ import annotations

from .constants import NAN_TEXT


def format_ordinal(value: int | None) -> str:
    """Render a parsed ordinal, using ``NaN`` for one that did not parse."""
    return NAN_TEXT if value is None else str(value)


class SafariTabsError(Exception):
    """Base class for all safari-tabs errors."""

    @property
    def diagnostic(self) -> str:
        """The single line printed to stderr before exiting."""
        return str(self)


class ActivationError(SafariTabsError):
    """A window/tab activation request could not be carried out."""


class InvalidWindowOrdinal(ActivationError):
    def __init__(self, value: int | None = None):
        self.value = value
        super().__init__(f"Invalid window: {format_ordinal(value)}")


class InvalidTabOrdinal(ActivationError):
    def __init__(self, value: int | None = None):
        self.value = value
        super().__init__(f"Invalid tab: {format_ordinal(value)}")


class WindowNotFound(ActivationError):
    """No window exists at the requested ordinal."""

    def __init__(self, window: int):
        self.window = window
        super().__init__(f"Invalid window: {window}")


class TabNotFound(ActivationError):
    """The resolved window has no tab at the requested ordinal."""

    def __init__(self, window: int, tab: int):
        self.window = window
        self.tab = tab
        super().__init__(f"Invalid tab for window {window}: {tab}")


class InvalidCloseTarget(SafariTabsError):
    def __init__(self, what: str):
        self.what = what
        super().__init__(f"Invalid target: {what}")


class AutomationError(SafariTabsError):
    """The osascript bridge failed (non-zero exit, timeout, missing binary)."""

    @property
    def diagnostic(self) -> str:
        return f"Safari command failed: {self}"
