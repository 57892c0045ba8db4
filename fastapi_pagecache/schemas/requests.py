"""Request bodies accepted by the page cache router."""

from typing import Any, List, Optional

from pydantic import BaseModel, Field

from .pagination import CacheType


class InitializeTargetRequest(BaseModel):
    """First page of a rendering target plus its pagination inputs.

    Either ``total_items`` or ``link_header`` describes the result set size.
    """

    target_id: str = Field(min_length=1)
    cache_type: CacheType = CacheType.GENERIC
    items: List[Any] = Field(default_factory=list)
    heading: Optional[Any] = None
    total_items: Optional[int] = Field(default=None, ge=0)
    items_per_page: Optional[int] = Field(default=None, gt=0)
    link_header: Optional[str] = None
