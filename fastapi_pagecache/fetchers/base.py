"""Base fetch collaborator for pages missing from the cache."""

from fastapi_pagecache.schemas.pagination import Failure, Items


class PageFetcher:
    """Define how a page of items is fetched for a rendering target."""

    async def fetch_page(self, target_id: str, page: int, page_size: int) -> Items | Failure:
        """Return the items of ``page`` or a :class:`Failure`."""
        raise NotImplementedError
