"""Tests for the page cache and its cache type strategies."""
# ruff: noqa: S101

import pytest

from fastapi_pagecache.pagination import ListingStrategy, PageCache, get_strategy
from fastapi_pagecache.schemas import CacheType

HEADING = {"is_heading": True, "cells": ["Title", "Status"]}


def test_put_then_get_is_stable() -> None:
    cache = PageCache(CacheType.GENERIC)
    cache.put(3, ["a", "b"])

    assert cache.get(3) == ["a", "b"]
    assert cache.get(3) == ["a", "b"]
    assert 3 in cache
    assert cache.get(4) is None


def test_get_returns_a_copy() -> None:
    cache = PageCache()
    cache.put(1, ["a"])
    cache.get(1).append("b")

    assert cache.get(1) == ["a"]


def test_put_overwrites_existing_entry() -> None:
    cache = PageCache()
    cache.put(2, ["old"])
    cache.put(2, ["new"])

    assert cache.get(2) == ["new"]
    assert len(cache) == 1


def test_page_zero_is_rejected() -> None:
    with pytest.raises(ValueError):
        PageCache().put(0, ["heading"])


def test_heading_only_on_tabular_caches() -> None:
    cache = PageCache(CacheType.TABULAR)
    cache.set_heading(HEADING)

    assert cache.heading() is HEADING
    with pytest.raises(ValueError):
        PageCache(CacheType.LISTING).set_heading(HEADING)


def test_tabular_capture_skips_headings() -> None:
    cache = PageCache(CacheType.TABULAR)
    cache.set_heading(HEADING)
    other_heading = {"is_heading": True, "cells": ["Again"]}

    assert cache.capture_current_render(1, [HEADING, "r1", other_heading, "r2"])
    assert cache.get(1) == ["r1", "r2"]


def test_tabular_render_prepends_heading() -> None:
    cache = PageCache(CacheType.TABULAR)
    cache.set_heading(HEADING)

    assert cache.render(["r1"]) == [HEADING, "r1"]
    assert cache.render([]) == [HEADING]


def test_capture_does_not_replace_cached_page() -> None:
    cache = PageCache(CacheType.LISTING)
    cache.put(1, ["fetched"])

    assert not cache.capture_current_render(1, ["displayed"])
    assert cache.get(1) == ["fetched"]


def test_listing_capture_keeps_item_children() -> None:
    strategy = ListingStrategy(is_item=lambda item: item.startswith("node"))
    cache = PageCache(strategy)

    assert cache.capture_current_render(2, ["node-1", "more-link", "node-2"])
    assert cache.get(2) == ["node-1", "node-2"]


def test_generic_capture_is_a_no_op() -> None:
    cache = PageCache(CacheType.GENERIC)

    assert not cache.capture_current_render(1, ["a", "b"])
    assert cache.get(1) is None


def test_preload_splits_result_set() -> None:
    cache = PageCache(CacheType.TABULAR)
    cache.set_heading(HEADING)

    pages = cache.preload([HEADING, *[f"r{i}" for i in range(7)]], 3)

    assert pages == 3
    assert cache.get(1) == ["r0", "r1", "r2"]
    assert cache.get(3) == ["r6"]


def test_unknown_cache_type() -> None:
    with pytest.raises(ValueError):
        get_strategy("gallery")


def test_clear_drops_pages_but_keeps_heading() -> None:
    cache = PageCache(CacheType.TABULAR)
    cache.set_heading(HEADING)
    cache.put(1, ["a"])
    cache.put(2, ["b"])

    cache.clear()

    assert len(cache) == 0
    assert cache.heading() == HEADING
