"""Hexagonal grid index implementation using H3."""

from typing import List, Tuple
import h3  # type: ignore

from ..abstractions.interfaces import IGridIndex
from ..exceptions import HexMapError


class H3GridIndex(IGridIndex):
    """
    Grid index backed by Uber's H3 library (v4 API).

    Cells are H3 index strings. Boundaries are returned open (the first
    vertex is not repeated) in (lng, lat) order.
    """

    def cell_for_point(self, lat: float, lng: float, resolution: int) -> str:
        return h3.latlng_to_cell(lat, lng, resolution)

    def boundary_for_cell(self, cell: str) -> List[Tuple[float, float]]:
        if not h3.is_valid_cell(cell):
            raise HexMapError(f"Invalid H3 cell: {cell}")

        # h3 v4 returns (lat, lng) tuples
        return [(lng, lat) for lat, lng in h3.cell_to_boundary(cell)]
