"""Core document and error helpers."""

from .document import PageDocumentBuilder
from .errors import PageCacheError, PageErrorBuilder, TargetExistsError, TargetNotFoundError

__all__ = [
    "PageCacheError",
    "PageDocumentBuilder",
    "PageErrorBuilder",
    "TargetExistsError",
    "TargetNotFoundError",
]
