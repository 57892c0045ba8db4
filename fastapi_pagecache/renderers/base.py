"""Render callback contract and an in-memory recording renderer."""

from __future__ import annotations

from typing import Any

from fastapi_pagecache.schemas.pagination import NavBar


class PageRenderer:
    """Receive rendered page content and navigation bars for a target.

    Items are opaque handles; turning them into visible output is up to
    the surrounding application.
    """

    def on_render_page(self, target_id: str, items: list[Any]) -> None:
        """Replace the content area of ``target_id`` with ``items``."""
        raise NotImplementedError

    def on_render_nav(self, target_id: str, nav: NavBar) -> None:
        """Replace the navigation bar of ``target_id``."""
        raise NotImplementedError

    def on_render_error(self, target_id: str, error: dict[str, Any]) -> None:
        """Show an inline error indicator in place of the content area."""
        self.on_render_page(target_id, [error])


class RenderSnapshot:
    """Last content, navigation bar and error rendered for one target."""

    def __init__(self) -> None:
        self.items: list[Any] = []
        self.nav: NavBar | None = None
        self.error: dict[str, Any] | None = None
        self.page_renders = 0
        self.nav_renders = 0


class RecordingRenderer(PageRenderer):
    """Keep the latest render of every target in memory."""

    def __init__(self) -> None:
        """Start with no recorded targets."""
        self._snapshots: dict[str, RenderSnapshot] = {}

    def snapshot(self, target_id: str) -> RenderSnapshot:
        """Return the snapshot for ``target_id``, creating an empty one."""
        return self._snapshots.setdefault(target_id, RenderSnapshot())

    def forget(self, target_id: str) -> None:
        self._snapshots.pop(target_id, None)

    def on_render_page(self, target_id: str, items: list[Any]) -> None:
        snapshot = self.snapshot(target_id)
        snapshot.items = list(items)
        snapshot.error = None
        snapshot.page_renders += 1

    def on_render_nav(self, target_id: str, nav: NavBar) -> None:
        snapshot = self.snapshot(target_id)
        snapshot.nav = nav
        snapshot.nav_renders += 1

    def on_render_error(self, target_id: str, error: dict[str, Any]) -> None:
        snapshot = self.snapshot(target_id)
        snapshot.items = []
        snapshot.error = dict(error)
        snapshot.page_renders += 1
