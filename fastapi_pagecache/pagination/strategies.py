"""Cache strategies for generic, tabular and listing rendering targets."""

from __future__ import annotations

from typing import Any, Callable

from fastapi_pagecache.schemas.pagination import CacheType

from .base import CacheStrategy, is_heading_marker


class GenericStrategy(CacheStrategy):
    """No extraction: pages are only cached when explicitly stored."""

    cache_type = CacheType.GENERIC

    def capture(self, rendered: list[Any], *, heading: Any = None) -> list[Any] | None:
        return None

    def render(self, items: list[Any], *, heading: Any = None) -> list[Any]:
        return list(items)


class TabularStrategy(CacheStrategy):
    """Row-like items with a persistent heading rendered on every page."""

    cache_type = CacheType.TABULAR
    supports_heading = True

    def capture(self, rendered: list[Any], *, heading: Any = None) -> list[Any] | None:
        """Keep rows, dropping the heading and anything marked as a heading."""
        return [
            item
            for item in rendered
            if not (heading is not None and item is heading) and not is_heading_marker(item)
        ]

    def render(self, items: list[Any], *, heading: Any = None) -> list[Any]:
        """Prepend the heading, if any, to the page rows."""
        if heading is None:
            return list(items)
        return [heading, *items]


class ListingStrategy(CacheStrategy):
    """Item-like children of a listing container."""

    cache_type = CacheType.LISTING

    def __init__(self, is_item: Callable[[Any], bool] | None = None) -> None:
        """Store the predicate selecting item-like children of a render."""
        self.is_item = is_item or (lambda item: item is not None and not is_heading_marker(item))

    def capture(self, rendered: list[Any], *, heading: Any = None) -> list[Any] | None:
        return [item for item in rendered if self.is_item(item)]

    def render(self, items: list[Any], *, heading: Any = None) -> list[Any]:
        return list(items)


_STRATEGIES: dict[CacheType, type[CacheStrategy]] = {
    CacheType.GENERIC: GenericStrategy,
    CacheType.TABULAR: TabularStrategy,
    CacheType.LISTING: ListingStrategy,
}


def get_strategy(cache_type: CacheType | str) -> CacheStrategy:
    """Instantiate the strategy for ``cache_type``."""
    try:
        strategy_class = _STRATEGIES[CacheType(cache_type)]
    except ValueError as exc:
        raise ValueError(f"Unknown cache type: {cache_type!r}") from exc
    return strategy_class()
