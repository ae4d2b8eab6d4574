"""Coaching guide generation and rendering service."""

from .guide_renderer import RenderOptions, render_body, render_document

__all__ = ["RenderOptions", "render_body", "render_document"]
