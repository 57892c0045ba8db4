"""Tests for environment-driven settings."""
# ruff: noqa: S101

import pytest

from fastapi_pagecache.config import Settings


def test_defaults() -> None:
    settings = Settings()

    assert settings.default_items_per_page == 10
    assert settings.page_size_param == "pagesize"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PAGECACHE_RENDER_STALE_RESPONSES", "true")
    monkeypatch.setenv("PAGECACHE_DEFAULT_ITEMS_PER_PAGE", "25")
    monkeypatch.setenv("PAGECACHE_PAGE_SIZE_PARAM", "size")

    settings = Settings()

    assert settings.render_stale_responses is True
    assert settings.default_items_per_page == 25
    assert settings.page_size_param == "size"
