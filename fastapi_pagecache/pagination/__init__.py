"""Page window planning and page caching."""

from .base import CacheStrategy, is_heading_marker
from .cache import PageCache
from .strategies import GenericStrategy, ListingStrategy, TabularStrategy, get_strategy
from .window import build_nav_bar, plan_window

__all__ = [
    "CacheStrategy",
    "GenericStrategy",
    "ListingStrategy",
    "PageCache",
    "TabularStrategy",
    "build_nav_bar",
    "get_strategy",
    "is_heading_marker",
    "plan_window",
]
