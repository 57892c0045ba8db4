"""Routers for pagination registries."""

from .base import PageCacheRouter

__all__ = ["PageCacheRouter"]
