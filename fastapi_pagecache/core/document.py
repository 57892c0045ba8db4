"""Document construction for rendering target snapshots."""

from typing import Any, Iterable, Mapping

from fastapi_pagecache.schemas.pagination import NavBar, PaginationState


class PageDocumentBuilder:
    """Build JSON documents describing what a rendering target shows."""

    def build_target(
        self,
        state: PaginationState,
        *,
        items: Iterable[Any] | None = None,
        nav: NavBar | None = None,
        error: Mapping[str, Any] | None = None,
        meta: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a document for one rendering target."""
        document: dict[str, Any] = {
            "data": {
                "target": state.target_id,
                "cache_type": str(state.cache_type),
                "current_page": state.current_page,
                "total_pages": state.total_pages,
                "items_per_page": state.items_per_page,
                "items": list(items) if items is not None else [],
            }
        }
        if nav is not None:
            document["data"]["nav"] = nav.model_dump()
        if error:
            document["errors"] = [dict(error)]
        if meta:
            document["meta"] = dict(meta)
        return document

    def build_removed(self, target_id: str) -> dict[str, Any]:
        """Return the document acknowledging removal of a target."""
        return {"meta": {"target": target_id, "removed": True}}
