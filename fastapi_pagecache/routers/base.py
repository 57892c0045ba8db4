"""Router exposing a pagination registry over HTTP."""

from typing import Any

from fastapi import APIRouter

from fastapi_pagecache.config.settings import settings
from fastapi_pagecache.controllers.registry import PaginationRegistry
from fastapi_pagecache.core.document import PageDocumentBuilder
from fastapi_pagecache.renderers.base import RecordingRenderer
from fastapi_pagecache.schemas.requests import InitializeTargetRequest


class PageCacheRouter(APIRouter):
    """APIRouter wrapper for pagination registries."""

    document_builder_class: type = PageDocumentBuilder

    def build_document(self, registry: PaginationRegistry, target_id: str) -> dict[str, Any]:
        """Return the document describing what ``target_id`` shows now."""
        controller = registry.get(target_id)
        builder = self.document_builder_class()
        meta = {"status": str(controller.status), "cached_pages": len(controller.cache)}
        if not isinstance(registry.renderer, RecordingRenderer):
            return builder.build_target(controller.state, meta=meta)
        snapshot = registry.renderer.snapshot(target_id)
        return builder.build_target(
            controller.state,
            items=snapshot.items,
            nav=snapshot.nav,
            error=snapshot.error,
            meta=meta,
        )

    def register_registry(
        self,
        prefix: str,
        registry: PaginationRegistry,
        *,
        dependencies: list[Any] | None = None,
    ) -> None:
        """Register initialize, snapshot, navigate and remove routes.

        Args:
            prefix: URL prefix for all routes (e.g., "/targets")
            registry: Registry whose renderer should be a ``RecordingRenderer``
                for snapshots to include rendered items.
            dependencies: Additional FastAPI dependencies for all routes.

        Examples:
            registry = PaginationRegistry(fetcher=fetcher, renderer=RecordingRenderer())
            router = PageCacheRouter(prefix="/api/v1")
            router.register_registry("/targets", registry)
        """
        detail_path = f"{prefix}/{{target_id}}"

        async def initialize(body: InitializeTargetRequest) -> dict[str, Any]:
            if body.link_header is not None:
                nav = registry.initialize_from_response(
                    body.target_id,
                    body.cache_type,
                    body.link_header,
                    body.items,
                    items_per_page=body.items_per_page,
                    heading=body.heading,
                )
            else:
                items_per_page = body.items_per_page or settings.default_items_per_page
                total_items = body.total_items if body.total_items is not None else len(body.items)
                nav = registry.initialize(
                    body.target_id,
                    body.cache_type,
                    total_items,
                    items_per_page,
                    body.items,
                    heading=body.heading,
                )
            if isinstance(registry.renderer, RecordingRenderer):
                snapshot = registry.renderer.snapshot(body.target_id)
                if not snapshot.page_renders:
                    registry.renderer.on_render_page(
                        body.target_id, registry.get(body.target_id).cache.render(body.items)
                    )
                if nav is not None and snapshot.nav is None:
                    registry.renderer.on_render_nav(body.target_id, nav)
            return self.build_document(registry, body.target_id)

        async def retrieve(target_id: str) -> dict[str, Any]:
            return self.build_document(registry, target_id)

        async def navigate(target_id: str, page: int) -> dict[str, Any]:
            if registry.navigate(target_id, page) is not None:
                await registry.get(target_id).drain()
            return self.build_document(registry, target_id)

        async def remove(target_id: str) -> dict[str, Any]:
            registry.remove(target_id)
            if isinstance(registry.renderer, RecordingRenderer):
                registry.renderer.forget(target_id)
            return self.document_builder_class().build_removed(target_id)

        self.add_api_route(
            prefix, initialize, methods=["POST"], name=f"{prefix}_initialize",
            status_code=201, dependencies=dependencies,
        )
        self.add_api_route(
            detail_path, retrieve, methods=["GET"], name=f"{prefix}_retrieve",
            dependencies=dependencies,
        )
        self.add_api_route(
            f"{detail_path}/pages/{{page}}", navigate, methods=["POST"],
            name=f"{prefix}_navigate", dependencies=dependencies,
        )
        self.add_api_route(
            detail_path, remove, methods=["DELETE"], name=f"{prefix}_remove",
            dependencies=dependencies,
        )
