"""Common test fixtures for the page cache."""

import asyncio
import os

os.environ.setdefault("PAGECACHE_APP_ENV", "testing")

import pytest

from fastapi_pagecache.controllers import PaginationController, PaginationRegistry
from fastapi_pagecache.fetchers import PageFetcher
from fastapi_pagecache.pagination import PageCache
from fastapi_pagecache.renderers import RecordingRenderer
from fastapi_pagecache.schemas import (
    CacheType,
    Failure,
    Items,
    PaginationMetadata,
    PaginationState,
)

TARGET = "forum-posts"


class StubFetcher(PageFetcher):
    """Serve generated pages, optionally holding them until released."""

    def __init__(self) -> None:
        self.requests: list[tuple[str, int, int]] = []
        self.gates: dict[int, asyncio.Event] = {}
        self.failures: set[int] = set()
        self.errors: set[int] = set()
        self.metadata = PaginationMetadata()

    def hold(self, page: int) -> asyncio.Event:
        gate = self.gates[page] = asyncio.Event()
        return gate

    async def fetch_page(self, target_id: str, page: int, page_size: int) -> Items | Failure:
        self.requests.append((target_id, page, page_size))
        gate = self.gates.get(page)
        if gate is not None:
            await gate.wait()
        if page in self.errors:
            raise RuntimeError("connection reset")
        if page in self.failures:
            return Failure(status="500", detail="server exploded")
        return Items(
            items=[f"row-{page}-{index}" for index in range(page_size)],
            metadata=self.metadata,
        )


@pytest.fixture
def fetcher() -> StubFetcher:
    return StubFetcher()


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def registry(fetcher: StubFetcher, renderer: RecordingRenderer) -> PaginationRegistry:
    return PaginationRegistry(fetcher=fetcher, renderer=renderer, render_stale_responses=False)


@pytest.fixture
def make_controller(fetcher: StubFetcher, renderer: RecordingRenderer):
    """Build a started controller over ``total_pages`` pages of five rows."""

    def _make(
        total_pages: int = 10,
        cache_type: CacheType = CacheType.TABULAR,
        heading: object = None,
        render_stale_responses: bool = False,
    ) -> PaginationController:
        state = PaginationState(
            target_id=TARGET,
            cache_type=cache_type,
            total_pages=total_pages,
            items_per_page=5,
            total_items=total_pages * 5,
        )
        controller = PaginationController(
            state,
            fetcher=fetcher,
            renderer=renderer,
            cache=PageCache(cache_type),
            render_stale_responses=render_stale_responses,
        )
        controller.start([f"row-1-{index}" for index in range(5)], heading=heading)
        return controller

    return _make
