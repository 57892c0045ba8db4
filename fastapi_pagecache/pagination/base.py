"""Cache strategy base class for capturing and rendering cached pages."""

from typing import Any

from fastapi_pagecache.schemas.pagination import CacheType


def is_heading_marker(item: Any) -> bool:
    """Return True if ``item`` flags itself as a heading row."""
    if isinstance(item, dict):
        return bool(item.get("is_heading"))
    return bool(getattr(item, "is_heading", False))


class CacheStrategy:
    """Define how a cache type captures a live render and renders a page."""

    cache_type: CacheType = CacheType.GENERIC
    supports_heading: bool = False

    def capture(self, rendered: list[Any], *, heading: Any = None) -> list[Any] | None:
        """Return the cacheable items of a live render, or None to skip caching."""
        raise NotImplementedError

    def render(self, items: list[Any], *, heading: Any = None) -> list[Any]:
        """Return the items to hand to the renderer for one page."""
        raise NotImplementedError
