"""Registry of pagination controllers keyed by rendering target id."""

from __future__ import annotations

import asyncio
import math
from typing import Any, Iterable

from loguru import logger

from fastapi_pagecache.config.settings import settings
from fastapi_pagecache.core.errors import TargetExistsError, TargetNotFoundError
from fastapi_pagecache.fetchers.base import PageFetcher
from fastapi_pagecache.pagination.cache import PageCache
from fastapi_pagecache.renderers.base import PageRenderer
from fastapi_pagecache.schemas.pagination import (
    CacheType,
    Failure,
    Items,
    NavBar,
    PaginationState,
)
from fastapi_pagecache.utils.link_header import LinkRelationParser

from .base import PaginationController


class PaginationRegistry:
    """Create, look up and destroy one controller per rendering target."""

    controller_class: type[PaginationController] = PaginationController

    def __init__(
        self,
        *,
        fetcher: PageFetcher,
        renderer: PageRenderer,
        render_stale_responses: bool | None = None,
    ) -> None:
        """Store the collaborators shared by every target."""
        self.fetcher = fetcher
        self.renderer = renderer
        self.render_stale_responses = (
            settings.render_stale_responses
            if render_stale_responses is None
            else render_stale_responses
        )
        self._controllers: dict[str, PaginationController] = {}

    def initialize(
        self,
        target_id: str,
        cache_type: CacheType | str,
        total_items: int,
        items_per_page: int,
        initial_items: Iterable[Any],
        heading: Any = None,
    ) -> NavBar | None:
        """Register ``target_id`` with its first page and return its nav bar.

        Returns None when everything fits on a single page.
        """
        if target_id in self._controllers:
            raise TargetExistsError(target_id)
        if items_per_page < 1:
            raise ValueError("items_per_page must be at least 1.")
        total_items = max(total_items, 0)

        state = PaginationState(
            target_id=target_id,
            cache_type=CacheType(cache_type),
            total_pages=max(1, math.ceil(total_items / items_per_page)),
            items_per_page=items_per_page,
            total_items=total_items,
        )
        controller = self.controller_class(
            state,
            fetcher=self.fetcher,
            renderer=self.renderer,
            cache=PageCache(state.cache_type),
            render_stale_responses=self.render_stale_responses,
        )
        nav = controller.start(initial_items, heading=heading)
        self._controllers[target_id] = controller
        logger.info(
            "Initialized {} ({}) with {} items over {} pages",
            target_id,
            state.cache_type,
            state.total_items,
            state.total_pages,
        )
        return nav

    def initialize_from_response(
        self,
        target_id: str,
        cache_type: CacheType | str,
        link_header: str | None,
        initial_items: Iterable[Any],
        items_per_page: int | None = None,
        heading: Any = None,
    ) -> NavBar | None:
        """Register ``target_id`` from the response that rendered its first page.

        The page size advertised in the ``Link`` header replaces the requested
        one, and the total is taken as ``last_page * page_size``.
        """
        metadata = LinkRelationParser(link_header).metadata()
        per_page = items_per_page or settings.default_items_per_page
        if metadata.page_size and metadata.page_size != per_page:
            logger.debug(
                "Server page size {} overrides {} for {}", metadata.page_size, per_page, target_id
            )
            per_page = metadata.page_size
        return self.initialize(
            target_id,
            cache_type,
            metadata.last_page * per_page,
            per_page,
            initial_items,
            heading=heading,
        )

    def get(self, target_id: str) -> PaginationController:
        """Return the controller of ``target_id``."""
        try:
            return self._controllers[target_id]
        except KeyError:
            raise TargetNotFoundError(target_id) from None

    def navigate(self, target_id: str, page: int) -> asyncio.Task[Items | Failure] | None:
        """Navigate ``target_id`` to ``page``; return the fetch task on a miss."""
        return self.get(target_id).navigate(page)

    def remove(self, target_id: str) -> None:
        """Destroy the state and cache of ``target_id``."""
        self.get(target_id)
        del self._controllers[target_id]
        logger.info("Removed {}", target_id)

    def __contains__(self, target_id: object) -> bool:
        return target_id in self._controllers

    def __len__(self) -> int:
        return len(self._controllers)
