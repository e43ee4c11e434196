"""Viewport rendering."""

from .viewport_renderer import ViewportRenderer, BoundaryLookup

__all__ = ['ViewportRenderer', 'BoundaryLookup']
