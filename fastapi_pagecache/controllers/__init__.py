"""Pagination controllers and their per-target registry."""

from .base import ControllerStatus, PaginationController
from .registry import PaginationRegistry

__all__ = ["ControllerStatus", "PaginationController", "PaginationRegistry"]
