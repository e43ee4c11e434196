# hexmap/abstractions/types/bounds_types.py
"""Geographic bounds type definitions."""

from dataclasses import dataclass
from typing import Iterable, Tuple
from shapely.geometry import Polygon, box

from .layer_types import LatLng


@dataclass(frozen=True)
class ViewportBounds:
    """Rectangle in geographic degrees as reported by the map surface."""
    south: float
    west: float
    north: float
    east: float

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """Shapely-ordered bounds: minx, miny, maxx, maxy."""
        return (self.west, self.south, self.east, self.north)

    @property
    def polygon(self) -> Polygon:
        """Get bounds as polygon (x = lng, y = lat)."""
        return box(*self.bounds)

    @classmethod
    def from_vertices(cls, vertices: Iterable[LatLng]) -> 'ViewportBounds':
        """Bounding box of a sequence of (lat, lng) vertices."""
        lats, lngs = zip(*vertices)
        return cls(south=min(lats), west=min(lngs), north=max(lats), east=max(lngs))

    def contains(self, lat: float, lng: float) -> bool:
        """Check if point is within bounds (edges included)."""
        return self.south <= lat <= self.north and self.west <= lng <= self.east

    def intersects(self, other: 'ViewportBounds') -> bool:
        """Check if two rectangles overlap; touching edges count."""
        return self.polygon.intersects(other.polygon)
