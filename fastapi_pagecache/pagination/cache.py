"""Per-target page cache keyed by page number."""

from __future__ import annotations

from typing import Any, Iterable

from loguru import logger

from fastapi_pagecache.schemas.pagination import CacheType

from .base import CacheStrategy
from .strategies import get_strategy


class PageCache:
    """Map page numbers to ordered item lists, plus an optional heading.

    Page numbers are 1-based. The heading is kept apart from the pages,
    is never evicted and is never counted against the page size.
    """

    def __init__(self, strategy: CacheStrategy | CacheType | str = CacheType.GENERIC) -> None:
        """Create an empty cache for the given cache type or strategy."""
        if not isinstance(strategy, CacheStrategy):
            strategy = get_strategy(strategy)
        self.strategy = strategy
        self._pages: dict[int, list[Any]] = {}
        self._heading: Any = None

    @property
    def cache_type(self) -> CacheType:
        return self.strategy.cache_type

    def get(self, page: int) -> list[Any] | None:
        """Return the cached items for ``page`` or None on a miss."""
        entry = self._pages.get(page)
        return None if entry is None else list(entry)

    def put(self, page: int, items: Iterable[Any]) -> None:
        """Store ``items`` for ``page``, replacing any existing entry."""
        if page < 1:
            raise ValueError("Page numbers start at 1.")
        self._pages[page] = list(items)

    def clear(self) -> None:
        """Drop every cached page. The heading is kept."""
        self._pages.clear()

    def set_heading(self, item: Any) -> None:
        """Store the persistent heading item (tabular caches only)."""
        if not self.strategy.supports_heading:
            raise ValueError(f"{self.cache_type} caches do not hold a heading.")
        self._heading = item

    def heading(self) -> Any:
        """Return the heading item, or None."""
        return self._heading

    def capture_current_render(self, page: int, rendered_items: Iterable[Any]) -> bool:
        """Snapshot what is displayed for ``page`` unless it is already cached.

        Returns True when a new entry was stored.
        """
        if page in self._pages:
            return False
        captured = self.strategy.capture(list(rendered_items), heading=self._heading)
        if captured is None:
            return False
        self.put(page, captured)
        logger.debug("Captured {} items for page {}", len(captured), page)
        return True

    def render(self, items: Iterable[Any]) -> list[Any]:
        """Return ``items`` as the strategy renders them, heading included."""
        return self.strategy.render(list(items), heading=self._heading)

    def preload(self, items: Iterable[Any], items_per_page: int) -> int:
        """Split a complete result set into pages 1..n and return n."""
        if items_per_page < 1:
            raise ValueError("items_per_page must be at least 1.")
        items = list(items)
        rows = self.strategy.capture(items, heading=self._heading)
        if rows is None:
            rows = items
        page = 0
        for page, start in enumerate(range(0, len(rows), items_per_page), start=1):
            self.put(page, rows[start : start + items_per_page])
        return page

    def __contains__(self, page: object) -> bool:
        return page in self._pages

    def __len__(self) -> int:
        return len(self._pages)
