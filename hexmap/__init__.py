"""
Hexagon choropleth layer package.

This package reprojects polygon features, reduces them to representative
points, aggregates those points into zoom-dependent H3 cells and renders
the occupied cells that fall inside the visible map viewport.
"""

__version__ = "1.0.0"
__description__ = "Zoom-adaptive H3 hexagon layer for polygon features"

# Note: Modules should be imported explicitly when needed to avoid
# loading h3/pyproj on import.

__all__ = [
    '__version__',
    '__description__',
]
