"""HTTP fetch collaborator reading items from JSON and metadata from ``Link``."""

from __future__ import annotations

from typing import Any, Mapping

import httpx
from loguru import logger

from fastapi_pagecache.config.settings import settings
from fastapi_pagecache.schemas.pagination import Failure, Items
from fastapi_pagecache.utils.link_header import LinkRelationParser

from .base import PageFetcher

NOT_FOUND_MESSAGE = "No results found."
DEFAULT_MESSAGE = "Unable to load page"


class HTTPPageFetcher(PageFetcher):
    """Fetch pages with ``?page=N&pagesize=M`` from one URL per target.

    Args:
        urls: Mapping of target id to the collection URL of that target.
        client: Shared ``httpx.AsyncClient``; one is created when omitted.
        page_size_param: ``"pagesize"`` or ``"size"`` depending on the server.
        items_key: Key holding the item list in the JSON body, if it is not
            the body itself.
    """

    def __init__(
        self,
        urls: Mapping[str, str],
        *,
        client: httpx.AsyncClient | None = None,
        page_size_param: str | None = None,
        items_key: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """Store target URLs and the HTTP client."""
        self.urls = dict(urls)
        self.client = client or httpx.AsyncClient(timeout=timeout or settings.fetch_timeout)
        self.page_size_param = page_size_param or settings.page_size_param
        self.items_key = items_key

    def build_params(self, page: int, page_size: int) -> dict[str, int]:
        return {"page": page, self.page_size_param: page_size}

    def extract_items(self, payload: Any) -> list[Any]:
        """Return the item list from a decoded JSON body."""
        if self.items_key is not None:
            if not isinstance(payload, dict):
                raise ValueError(f"Expected an object holding {self.items_key!r}.")
            payload = payload.get(self.items_key, [])
        if not isinstance(payload, list):
            raise ValueError("Expected a list of items.")
        return payload

    async def fetch_page(self, target_id: str, page: int, page_size: int) -> Items | Failure:
        url = self.urls.get(target_id)
        if url is None:
            return Failure(title=DEFAULT_MESSAGE, detail=f"No URL configured for {target_id!r}.")

        try:
            response = await self.client.get(url, params=self.build_params(page, page_size))
            response.raise_for_status()
            items = self.extract_items(response.json())
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("Fetching page {} of {} failed with HTTP {}", page, target_id, status)
            if status == 404:
                return Failure(status=str(status), title=NOT_FOUND_MESSAGE)
            return Failure(status=str(status), title=DEFAULT_MESSAGE, detail=str(exc))
        except httpx.HTTPError as exc:
            logger.warning("Fetching page {} of {} failed: {}", page, target_id, exc)
            return Failure(title=DEFAULT_MESSAGE, detail=str(exc))
        except ValueError as exc:
            logger.warning("Page {} of {} has an unexpected body: {}", page, target_id, exc)
            return Failure(title=DEFAULT_MESSAGE, detail=str(exc))

        metadata = LinkRelationParser(response.headers.get("Link")).metadata()
        logger.debug(
            "Fetched {} items for page {} of {} (last_page={}, page_size={})",
            len(items),
            page,
            target_id,
            metadata.last_page,
            metadata.page_size,
        )
        return Items(items=items, metadata=metadata)

    async def aclose(self) -> None:
        await self.client.aclose()
