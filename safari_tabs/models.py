"""Typed data models for safari-tabs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WindowHandle:
    """A window resolved by ordinal. Only valid for the current invocation."""

    index: int


@dataclass(frozen=True)
class TabHandle:
    """A tab within a resolved window. Same lifetime as its WindowHandle."""

    window_index: int
    index: int
