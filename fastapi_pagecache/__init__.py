"""Client-side page caching for server-paginated result sets."""

from .controllers import PaginationController, PaginationRegistry
from .pagination import PageCache, build_nav_bar, plan_window
from .renderers import PageRenderer, RecordingRenderer
from .routers import PageCacheRouter
from .utils import LinkRelationParser, parse_link_header

__all__ = [
    "LinkRelationParser",
    "PageCache",
    "PageCacheRouter",
    "PageRenderer",
    "PaginationController",
    "PaginationRegistry",
    "RecordingRenderer",
    "build_nav_bar",
    "parse_link_header",
    "plan_window",
]
