"""Bucket representative points into hexagonal grid cells."""

from typing import Sequence

from ..abstractions.interfaces import IGridIndex
from ..abstractions.types import CellColorMap, RepresentativePoint


def aggregate(points: Sequence[RepresentativePoint],
              resolution: int,
              grid_index: IGridIndex) -> CellColorMap:
    """
    Map every occupied cell at ``resolution`` to a single colour.

    Points are visited in input order and the first point to reach a cell
    decides its colour; later points in the same cell never overwrite it.
    The result therefore depends on the order of the input points, which
    follows the order of the source features.
    """
    cell_colors: CellColorMap = {}
    for point in points:
        cell = grid_index.cell_for_point(point.lat, point.lng, resolution)
        if cell not in cell_colors:
            cell_colors[cell] = point.color
    return cell_colors
