"""Hexagonal grid systems: resolution selection, indexing, aggregation."""

from .resolution_selector import (
    ResolutionSelector,
    resolution_for_zoom,
    ZOOM_RESOLUTION_STEPS,
    MAX_RESOLUTION
)
from .h3_index import H3GridIndex
from .cell_aggregator import aggregate

__all__ = [
    'ResolutionSelector',
    'resolution_for_zoom',
    'ZOOM_RESOLUTION_STEPS',
    'MAX_RESOLUTION',
    'H3GridIndex',
    'aggregate',
]
