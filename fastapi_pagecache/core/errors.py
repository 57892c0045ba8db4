"""Page cache exceptions and JSON error object builder."""

from typing import Any

from fastapi_pagecache.schemas.pagination import Failure


class PageCacheError(Exception):
    """Base error for the page cache registry and HTTP surface."""

    status_code: int = 500
    code: str = "PAGE_CACHE_ERROR"
    title: str = "Page cache error"


class TargetNotFoundError(PageCacheError):
    """Raised when a rendering target was never initialized or was removed."""

    status_code = 404
    code = "TARGET_NOT_FOUND"
    title = "Target not found"

    def __init__(self, target_id: str) -> None:
        """Initialize with the missing target id."""
        self.target_id = target_id
        super().__init__(f"Rendering target {target_id!r} is not initialized.")


class TargetExistsError(PageCacheError):
    """Raised when a rendering target is initialized twice."""

    status_code = 409
    code = "TARGET_EXISTS"
    title = "Target already initialized"

    def __init__(self, target_id: str) -> None:
        """Initialize with the duplicated target id."""
        self.target_id = target_id
        super().__init__(f"Rendering target {target_id!r} is already initialized.")


class PageErrorBuilder:
    """Build error objects for inline failure indicators and error documents.

    Error objects carry ``status``, ``code``, ``title`` and ``detail`` when
    known. The target and page an error belongs to are reported under
    ``meta`` so a renderer can place the indicator next to the right page.
    """

    fields = ("status", "code", "title", "detail")

    def error_object(
        self,
        *,
        target_id: str | None = None,
        page: int | None = None,
        meta: dict[str, Any] | None = None,
        **fields: str | None,
    ) -> dict[str, Any]:
        """Return an error object built from the non-empty ``fields``."""
        unknown = set(fields) - set(self.fields)
        if unknown:
            raise TypeError(f"Unknown error fields: {', '.join(sorted(unknown))}.")
        error: dict[str, Any] = {
            name: fields[name] for name in self.fields if fields.get(name) is not None
        }

        location = {"target_id": target_id, "page": page}
        meta = {**(meta or {}), **{k: v for k, v in location.items() if v is not None}}
        if meta:
            error["meta"] = meta
        if not error:
            raise ValueError("Error object must include at least one field.")
        return error

    def from_failure(
        self, failure: Failure, *, target_id: str | None = None, page: int | None = None
    ) -> dict[str, Any]:
        """Return the inline error indicator for a failed page fetch."""
        return self.error_object(
            status=failure.status,
            code="FETCH_FAILED",
            title=failure.title,
            detail=failure.detail,
            target_id=target_id,
            page=page,
        )

    def from_exception(self, exc: PageCacheError) -> dict[str, Any]:
        """Return an error object describing a :class:`PageCacheError`."""
        return self.error_object(
            status=str(exc.status_code),
            code=exc.code,
            title=exc.title,
            detail=str(exc),
            target_id=getattr(exc, "target_id", None),
        )

    def error_document(self, errors: list[dict[str, Any]]) -> dict[str, Any]:
        """Return a document with an errors array."""
        return {"errors": errors}
