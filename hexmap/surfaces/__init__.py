"""Map surface implementations."""

from .memory_surface import InMemoryMapSurface, InMemoryDrawLayer, viewport_for_view

__all__ = ['InMemoryMapSurface', 'InMemoryDrawLayer', 'viewport_for_view']
