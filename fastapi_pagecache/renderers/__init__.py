"""Render callback contract for rendering targets."""

from .base import PageRenderer, RecordingRenderer, RenderSnapshot

__all__ = ["PageRenderer", "RecordingRenderer", "RenderSnapshot"]
