"""Error handling middleware for the page cache routes."""

from typing import Any

from loguru import logger
from starlette.responses import JSONResponse

from fastapi_pagecache.core.errors import PageCacheError, PageErrorBuilder


class ErrorHandlerMiddleware:
    """Convert exceptions into error documents."""

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app
        self.error_builder = PageErrorBuilder()

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Handle exceptions and serialize error documents."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return
        try:
            await self.app(scope, receive, send)
        except PageCacheError as exc:
            logger.info("{} {}: {}", scope.get("method"), scope.get("path"), exc)
            response = JSONResponse(
                self.error_builder.error_document([self.error_builder.from_exception(exc)]),
                status_code=exc.status_code,
            )
            await response(scope, receive, send)
        except ValueError as exc:
            response = JSONResponse(
                self.error_builder.error_document(
                    [self.error_builder.error_object(status="400", title="Bad Request", detail=str(exc))]
                ),
                status_code=400,
            )
            await response(scope, receive, send)
        except Exception as exc:  # noqa: BLE001 - last-resort handler
            logger.exception("Unhandled error on {}", scope.get("path"))
            response = JSONResponse(
                self.error_builder.error_document(
                    [
                        self.error_builder.error_object(
                            status="500", title="Internal Server Error", detail=str(exc)
                        )
                    ]
                ),
                status_code=500,
            )
            await response(scope, receive, send)
