"""Application factory serving a pagination registry over HTTP."""

from fastapi import FastAPI

from fastapi_pagecache.config.logger import config_logger
from fastapi_pagecache.controllers.registry import PaginationRegistry
from fastapi_pagecache.middleware.error_handler import ErrorHandlerMiddleware
from fastapi_pagecache.routers.base import PageCacheRouter


def create_app(
    registry: PaginationRegistry,
    *,
    prefix: str = "/api/v1",
    targets_path: str = "/targets",
) -> FastAPI:
    """Return a FastAPI app exposing ``registry`` under ``prefix + targets_path``."""
    config_logger()
    app = FastAPI(
        title="Page cache",
        description="Cached, windowed pagination for server-paginated result sets.",
        version="0.1.0",
    )
    router = PageCacheRouter(prefix=prefix)
    router.register_registry(targets_path, registry)
    app.include_router(router)
    app.add_middleware(ErrorHandlerMiddleware)
    app.state.registry = registry
    return app
