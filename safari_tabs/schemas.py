"""
Pydantic models for the window listing.

These define the JSON shape produced by the JXA listing script and
printed by ``safari-tabs list --json``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TabInfo(BaseModel):
    """A single tab in a window listing."""

    model_config = ConfigDict(populate_by_name=True)

    index: int
    window_index: int = Field(alias="windowIndex")
    title: str = ""
    url: str = ""


class WindowInfo(BaseModel):
    """A browser window and its tabs."""

    model_config = ConfigDict(populate_by_name=True)

    index: int
    active_tab: int = Field(default=0, alias="activeTab")
    tabs: list[TabInfo] = Field(default_factory=list)
