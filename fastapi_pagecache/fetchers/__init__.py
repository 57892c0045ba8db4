"""Fetch collaborators for pages missing from the cache."""

from .base import PageFetcher
from .http import HTTPPageFetcher

__all__ = ["HTTPPageFetcher", "PageFetcher"]
