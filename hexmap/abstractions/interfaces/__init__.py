"""Collaborator interfaces - pure abstractions with no dependencies."""

from .map_surface import IMapSurface, IDrawLayer, ViewListener
from .grid_index import IGridIndex
from .reprojector import IReprojector
from .feature_source import IFeatureSource

__all__ = [
    'IMapSurface', 'IDrawLayer', 'ViewListener',
    'IGridIndex', 'IReprojector', 'IFeatureSource',
]
