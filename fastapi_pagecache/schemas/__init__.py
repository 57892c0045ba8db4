"""Pydantic schemas for paged result caching."""

from .pagination import (
    CacheType,
    Failure,
    FetchRequest,
    Items,
    LinkRelationSet,
    NavBar,
    NavBarEntry,
    PageWindow,
    PaginationMetadata,
    PaginationState,
)
from .requests import InitializeTargetRequest

__all__ = [
    "CacheType",
    "Failure",
    "FetchRequest",
    "InitializeTargetRequest",
    "Items",
    "LinkRelationSet",
    "NavBar",
    "NavBarEntry",
    "PageWindow",
    "PaginationMetadata",
    "PaginationState",
]
