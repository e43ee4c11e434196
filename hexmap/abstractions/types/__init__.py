"""Type definitions shared across hexmap packages."""

from .layer_types import (
    LatLng, HexCell, CellColorMap,
    RepresentativePoint, RawFeature, PolygonStyle, DrawCommand
)
from .bounds_types import ViewportBounds

__all__ = [
    'LatLng', 'HexCell', 'CellColorMap',
    'RepresentativePoint', 'RawFeature', 'PolygonStyle', 'DrawCommand',
    'ViewportBounds',
]
