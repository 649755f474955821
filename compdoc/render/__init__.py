"""Renderers for component documentation."""

from .markdown import DocRenderer, style_fence_language

__all__ = ["DocRenderer", "style_fence_language"]
