# hexmap/abstractions/interfaces/grid_index.py
"""Hexagonal grid index interface - NO IMPLEMENTATIONS!"""

from abc import ABC, abstractmethod
from typing import List, Tuple

from ..types import HexCell


class IGridIndex(ABC):
    """Point-to-cell indexing on a global hexagonal grid."""

    @abstractmethod
    def cell_for_point(self, lat: float, lng: float, resolution: int) -> HexCell:
        """Cell containing the point at ``resolution``."""
        pass

    @abstractmethod
    def boundary_for_cell(self, cell: HexCell) -> List[Tuple[float, float]]:
        """Cell boundary as (lng, lat) pairs, GeoJSON order."""
        pass
