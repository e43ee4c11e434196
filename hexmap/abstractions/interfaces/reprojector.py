# hexmap/abstractions/interfaces/reprojector.py
"""Coordinate reprojection interface - NO IMPLEMENTATIONS!"""

from abc import ABC, abstractmethod
from typing import List, Sequence

from ..types import LatLng


class IReprojector(ABC):
    """Projected (x, y) to geographic coordinates for a fixed CRS pair."""

    @abstractmethod
    def reproject(self, x: float, y: float) -> LatLng:
        """Return (lat, lng) in degrees."""
        pass

    @abstractmethod
    def reproject_ring(self, ring: Sequence[Sequence[float]]) -> List[LatLng]:
        """Reproject every (x, y) vertex of a ring to (lat, lng)."""
        pass
