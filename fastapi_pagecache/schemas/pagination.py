"""Pydantic schemas for pagination metadata, state and fetch results."""

from enum import StrEnum
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CacheType(StrEnum):
    """Closed set of cache variants, one per kind of rendering target."""

    GENERIC = "generic"
    TABULAR = "tabular"
    LISTING = "listing"


class LinkRelationSet(BaseModel):
    """Relation name to absolute URL, parsed from a ``Link`` header."""

    model_config = ConfigDict(frozen=True)

    relations: Dict[str, str] = Field(default_factory=dict)

    def get(self, name: str) -> Optional[str]:
        return self.relations.get(name)

    @property
    def first(self) -> Optional[str]:
        return self.relations.get("first")

    @property
    def prev(self) -> Optional[str]:
        return self.relations.get("prev")

    @property
    def next(self) -> Optional[str]:
        return self.relations.get("next")

    @property
    def last(self) -> Optional[str]:
        return self.relations.get("last")

    def __bool__(self) -> bool:
        return bool(self.relations)

    def __len__(self) -> int:
        return len(self.relations)


class PaginationMetadata(BaseModel):
    """Last page and page size; both zero when no metadata was sent."""

    model_config = ConfigDict(frozen=True)

    last_page: int = Field(default=0, ge=0)
    page_size: int = Field(default=0, ge=0)

    @property
    def is_empty(self) -> bool:
        return self.last_page == 0 and self.page_size == 0


class PaginationState(BaseModel):
    """Per-target paging state owned by a single controller."""

    model_config = ConfigDict(validate_assignment=True)

    target_id: str
    cache_type: CacheType = CacheType.GENERIC
    current_page: int = Field(default=1, ge=1)
    total_pages: int = Field(default=1, ge=1)
    items_per_page: int = Field(gt=0)
    total_items: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_current_page(self) -> "PaginationState":
        if self.current_page > self.total_pages:
            raise ValueError(
                f"current_page {self.current_page} exceeds total_pages {self.total_pages}"
            )
        return self

    def contains(self, page: int) -> bool:
        """Return True if ``page`` is a valid page number for this target."""
        return 1 <= page <= self.total_pages


class PageWindow(BaseModel):
    """Page numbers to show around the current page."""

    pages: List[int]
    show_leading_ellipsis: bool = False
    show_trailing_ellipsis: bool = False
    show_first_prev: bool = False
    show_next_last: bool = False


class NavBarEntry(BaseModel):
    """One clickable (or ellipsis) element of the navigation bar."""

    label: str
    text: str
    title: Optional[str] = None
    page_number: Optional[int] = None
    is_ellipsis: bool = False
    is_active: bool = False


class NavBar(BaseModel):
    """Ordered navigation bar description for a rendering target."""

    current_page: int
    total_pages: int
    entries: List[NavBarEntry]


class FetchRequest(BaseModel):
    """Request sent to the fetch collaborator on a cache miss."""

    target_id: str
    page: int = Field(ge=1)
    page_size: int = Field(gt=0)


class Items(BaseModel):
    """Successful fetch: ordered item handles plus pagination metadata."""

    kind: Literal["items"] = "items"
    items: List[Any] = Field(default_factory=list)
    metadata: PaginationMetadata = Field(default_factory=PaginationMetadata)


class Failure(BaseModel):
    """Failed fetch, surfaced to the user as an inline error indicator."""

    kind: Literal["failure"] = "failure"
    status: Optional[str] = None
    title: str = "Unable to load page"
    detail: Optional[str] = None
