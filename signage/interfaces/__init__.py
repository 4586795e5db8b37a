"""Renderer interfaces package."""

from .renderer import LogRenderer, Renderer, format_view

__all__ = ["LogRenderer", "Renderer", "format_view"]
