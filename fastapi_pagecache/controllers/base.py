"""Pagination controller driving cache hits, fetches and re-renders."""

from __future__ import annotations

import asyncio
import math
from enum import StrEnum
from typing import Any, Iterable

from loguru import logger

from fastapi_pagecache.core.errors import PageErrorBuilder
from fastapi_pagecache.fetchers.base import PageFetcher
from fastapi_pagecache.pagination.cache import PageCache
from fastapi_pagecache.pagination.window import build_nav_bar
from fastapi_pagecache.renderers.base import PageRenderer
from fastapi_pagecache.schemas.pagination import (
    Failure,
    FetchRequest,
    Items,
    NavBar,
    PaginationMetadata,
    PaginationState,
)


class ControllerStatus(StrEnum):
    """Controller states."""

    IDLE = "idle"
    AWAITING_FETCH = "awaiting_fetch"


class PaginationController:
    """Own the paging state, cache and render flow of one rendering target.

    ``navigate`` renders cache hits synchronously. A miss clears the content
    area (the heading of tabular targets stays), schedules the fetch as an
    ``asyncio.Task`` and returns it; the task resolves to the fetch result
    once it has been cached and rendered.

    Fetches are never deduplicated or cancelled. Results for a page other
    than the latest requested one are cached but not rendered unless
    ``render_stale_responses`` is set, in which case the last response to
    arrive wins.
    """

    error_builder_class: type = PageErrorBuilder

    def __init__(
        self,
        state: PaginationState,
        *,
        fetcher: PageFetcher,
        renderer: PageRenderer,
        cache: PageCache | None = None,
        render_stale_responses: bool = False,
    ) -> None:
        """Bind state, collaborators and the page cache for one target."""
        self.state = state
        self.fetcher = fetcher
        self.renderer = renderer
        self.cache = cache or PageCache(state.cache_type)
        self.render_stale_responses = render_stale_responses
        self.status = ControllerStatus.IDLE
        self.latest_requested: int | None = None
        self._in_flight: set[asyncio.Task[Items | Failure]] = set()
        self._displayed: list[Any] = []
        self._displayed_page: int | None = None

    @property
    def target_id(self) -> str:
        return self.state.target_id

    @property
    def in_flight(self) -> int:
        return len(self._in_flight)

    def start(self, initial_items: Iterable[Any], *, heading: Any = None) -> NavBar | None:
        """Take over the first page rendered by the caller.

        When the complete result set is supplied and spans more than one
        page, it is split into cached pages and page 1 is re-rendered from
        the cache. Returns the navigation bar, or None for a single page.
        """
        items = list(initial_items)
        if heading is not None:
            self.cache.set_heading(heading)

        per_page = self.state.items_per_page
        if len(items) > per_page and len(items) >= self.state.total_items:
            pages = self.cache.preload(items, per_page)
            self.state.total_items = len(items)
            self._resize(max(1, pages))
            logger.debug("Preloaded {} pages for {}", pages, self.target_id)
            self._show(1, self.cache.get(1) or [])
        else:
            self._displayed = items
            self._displayed_page = 1

        if self.state.total_pages <= 1:
            return None
        return build_nav_bar(self.state.total_pages, self.state.current_page)

    def navigate(self, page: int) -> asyncio.Task[Items | Failure] | None:
        """Move to ``page``; return the fetch task on a cache miss.

        Cache misses schedule the fetch on the running event loop, so a miss
        must be triggered from inside one.
        """
        if not self.state.contains(page):
            logger.warning(
                "Ignoring navigation of {} to page {} outside [1, {}]",
                self.target_id,
                page,
                self.state.total_pages,
            )
            return None
        if page == self.state.current_page:
            return None

        self.capture_current_render()
        cached = self.cache.get(page)
        if cached is not None:
            logger.debug("Cache hit for page {} of {}", page, self.target_id)
            self.latest_requested = None
            self._show(page, cached)
            return None

        logger.debug("Cache miss for page {} of {}", page, self.target_id)
        return self._request(page)

    async def drain(self) -> None:
        """Wait until every in-flight fetch, including follow-ups, has resolved."""
        while self._in_flight:
            await asyncio.gather(*list(self._in_flight))

    def capture_current_render(self) -> bool:
        """Snapshot the displayed page into the cache before leaving it."""
        if self._displayed_page is None or self._displayed_page != self.state.current_page:
            return False
        return self.cache.capture_current_render(self._displayed_page, self._displayed)

    def _request(self, page: int) -> asyncio.Task[Items | Failure]:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            raise RuntimeError(
                f"Page {page} of {self.target_id!r} is not cached and must be fetched; "
                "navigate from inside a running event loop."
            ) from None

        request = FetchRequest(
            target_id=self.target_id, page=page, page_size=self.state.items_per_page
        )
        self.status = ControllerStatus.AWAITING_FETCH
        self.latest_requested = page
        self._displayed = []
        self._displayed_page = None
        self.renderer.on_render_page(self.target_id, self.cache.render([]))

        task = asyncio.create_task(self._fetch(request))
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)
        return task

    async def _fetch(self, request: FetchRequest) -> Items | Failure:
        try:
            result = await self.fetcher.fetch_page(
                request.target_id, request.page, request.page_size
            )
        except Exception as exc:  # noqa: BLE001 - surfaced through the renderer
            logger.exception("Fetcher raised for page {} of {}", request.page, request.target_id)
            result = Failure(detail=str(exc))
        self.resolve(request.page, result)
        return result

    def resolve(self, page: int, result: Items | Failure) -> None:
        """Apply a fetch result for ``page``."""
        is_latest = page == self.latest_requested
        if isinstance(result, Items):
            if self._apply_metadata(result.metadata):
                self.cache.clear()
            if self.state.contains(page):
                self.cache.put(page, result.items)

        if not is_latest and not self.render_stale_responses:
            logger.info("Discarding stale response for page {} of {}", page, self.target_id)
            return

        if is_latest:
            self.latest_requested = None
        if not self.state.contains(page):
            logger.warning("Page {} of {} is out of range after resize", page, self.target_id)
            self._reload_current()
            return

        if isinstance(result, Items):
            self._show(page, result.items)
            return

        logger.warning(
            "Fetching page {} of {} failed: {}", page, self.target_id, result.detail or result.title
        )
        self.state.current_page = page
        self.status = ControllerStatus.IDLE
        error = self.error_builder_class().from_failure(
            result, target_id=self.target_id, page=page
        )
        self.renderer.on_render_error(self.target_id, error)

    def _reload_current(self) -> None:
        """Show the current page again after the page count shrank under it."""
        page = self.state.current_page
        cached = self.cache.get(page)
        if cached is not None:
            self._show(page, cached)
            return
        self._request(page)
        self.renderer.on_render_nav(
            self.target_id, build_nav_bar(self.state.total_pages, page)
        )

    def _show(self, page: int, items: list[Any]) -> None:
        self.state.current_page = page
        self.status = ControllerStatus.IDLE
        self._displayed = list(items)
        self._displayed_page = page
        self.renderer.on_render_page(self.target_id, self.cache.render(items))
        self.renderer.on_render_nav(
            self.target_id, build_nav_bar(self.state.total_pages, page)
        )

    def _apply_metadata(self, metadata: PaginationMetadata) -> bool:
        """Re-derive page count when the server reports a new page size.

        Returns True when the page size changed. Pages cached or displayed
        under the old size no longer line up with the new page boundaries.
        """
        if not metadata.page_size or metadata.page_size == self.state.items_per_page:
            return False
        if metadata.last_page:
            self.state.total_items = metadata.last_page * metadata.page_size
        logger.info(
            "Page size of {} changed from {} to {}",
            self.target_id,
            self.state.items_per_page,
            metadata.page_size,
        )
        self.state.items_per_page = metadata.page_size
        self._resize(max(1, math.ceil(self.state.total_items / self.state.items_per_page)))
        self._displayed_page = None
        return True

    def _resize(self, total_pages: int) -> None:
        if self.state.current_page > total_pages:
            self.state.current_page = total_pages
        self.state.total_pages = total_pages
