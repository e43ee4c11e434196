"""Projected to geographic coordinate conversion using pyproj."""

from functools import lru_cache
from typing import List, Optional, Sequence
import numpy as np
import pyproj

from ..abstractions.interfaces import IReprojector
from ..abstractions.types import LatLng
from ..config import config


@lru_cache(maxsize=16)
def _get_transformer(source_crs: str, target_crs: str) -> pyproj.Transformer:
    """Cached transformer; always_xy keeps (x, y) = (lng, lat) on both sides."""
    return pyproj.Transformer.from_crs(source_crs, target_crs, always_xy=True)


def reproject(x: float, y: float, source_crs: str, target_crs: str) -> LatLng:
    """
    Convert a projected coordinate to (lat, lng).

    pyproj works in (lng, lat) order; the swap happens here so callers only
    ever see (lat, lng). Input must be finite.

    Args:
        x: Easting in source CRS units
        y: Northing in source CRS units
        source_crs: Source CRS identifier, e.g. "EPSG:3857"
        target_crs: Geographic target CRS identifier, e.g. "EPSG:4326"

    Returns:
        (lat, lng) in degrees
    """
    lng, lat = _get_transformer(source_crs, target_crs).transform(x, y)
    return (float(lat), float(lng))


class PyprojReprojector(IReprojector):
    """Reprojector bound to a fixed source/target CRS pair."""

    def __init__(self,
                 source_crs: Optional[str] = None,
                 target_crs: Optional[str] = None):
        self.source_crs = source_crs or config.get('projection.source_crs', 'EPSG:3857')
        self.target_crs = target_crs or config.get('projection.target_crs', 'EPSG:4326')
        self._transformer = _get_transformer(self.source_crs, self.target_crs)

    def reproject(self, x: float, y: float) -> LatLng:
        return reproject(x, y, self.source_crs, self.target_crs)

    def reproject_ring(self, ring: Sequence[Sequence[float]]) -> List[LatLng]:
        """Vectorised reprojection of a whole ring of (x, y[, z]) vertices."""
        coords = np.asarray([vertex[:2] for vertex in ring], dtype=np.float64)
        lngs, lats = self._transformer.transform(coords[:, 0], coords[:, 1])
        return [(float(lat), float(lng)) for lat, lng in zip(lats, lngs)]

    def __repr__(self) -> str:
        return f"PyprojReprojector({self.source_crs!r} -> {self.target_crs!r})"
