"""Cull occupied cells to the viewport and turn them into draw commands."""

from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..abstractions.interfaces import IDrawLayer
from ..abstractions.types import (
    CellColorMap, DrawCommand, HexCell, PolygonStyle, ViewportBounds
)
from ..config import config
from ..infrastructure.logging import get_logger

logger = get_logger(__name__)

# cell -> boundary as (lng, lat) pairs
BoundaryLookup = Callable[[HexCell], Sequence[Tuple[float, float]]]


class ViewportRenderer:
    """Stateless renderer: each call recomputes the full set of commands."""

    def __init__(self, style: Optional[Mapping[str, Any]] = None):
        self.style = dict(style) if style is not None else dict(config.get('style', {}))

    def render(self,
               cell_colors: CellColorMap,
               viewport_bounds: ViewportBounds,
               boundary_lookup: BoundaryLookup) -> List[DrawCommand]:
        """
        One draw command per cell whose bounding box meets the viewport.

        Boundaries come in (lng, lat) order and are converted to (lat, lng).
        Bounding boxes that only touch the viewport edge still count as
        intersecting. Command order is not meaningful.
        """
        commands: List[DrawCommand] = []
        culled = 0

        for cell, color in cell_colors.items():
            vertices = tuple((lat, lng) for lng, lat in boundary_lookup(cell))
            if not vertices:
                continue

            if not ViewportBounds.from_vertices(vertices).intersects(viewport_bounds):
                culled += 1
                continue

            commands.append(DrawCommand(
                cell=cell,
                vertices=vertices,
                style=PolygonStyle.from_config(color, self.style)
            ))

        logger.debug(
            f"Rendered {len(commands)} cells, culled {culled}",
            extra={'context': {'cells': len(cell_colors),
                               'drawn': len(commands),
                               'culled': culled}}
        )
        return commands

    @staticmethod
    def apply(commands: Iterable[DrawCommand], layer: IDrawLayer) -> int:
        """Replace the layer contents with ``commands``; returns polygons drawn."""
        layer.clear()
        drawn = 0
        for command in commands:
            layer.add_polygon(list(command.vertices), command.style)
            drawn += 1
        return drawn
